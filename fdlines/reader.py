"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFF_SIZE = 32


def _open_max() -> int:
    try:
        limit = os.sysconf("SC_OPEN_MAX")
    except (AttributeError, ValueError, OSError):
        limit = -1
    return limit if limit > 0 else 10240


OPEN_MAX = _open_max()


class LineReader:
    """Read lines from a file descriptor in chunks of buffer_size bytes.

    Lines are returned without their newline; a final line that lacks one is
    still returned. Read errors are raised as OSError.
    """

    def __init__(self, fd: int, buffer_size: int = BUFF_SIZE) -> None:
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"expected an int file descriptor, got {type(fd).__name__}")
        if fd < 0 or fd > OPEN_MAX:
            raise ValueError(f"file descriptor {fd} is out of range")
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        line, _, rest = bytes(self._pending).partition(b"\n")
        self._pending = bytearray(rest)
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of fd, keeping unread data between calls per descriptor.

    Returns None at the end of input.
    """
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd)
        _readers[fd] = reader
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line