"""Line-by-line reading from file descriptors, plus small character, string, buffer and output helpers."""

__version__ = "0.1.0"