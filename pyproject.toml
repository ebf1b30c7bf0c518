[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdlines"
version = "0.1.0"
description = "Line-by-line reading from file descriptors, with small string, character, byte-buffer and output helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["lines", "file descriptor", "reader", "strings", "bytes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fdlines = "fdlines.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fdlines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
