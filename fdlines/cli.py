"""Print every line of a file, coloured blue."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from fdlines.reader import LineReader

_BLUE = "\033[34m"
_RESET = "\033[0m"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print each line of the file named by the first argument in blue.

    A missing argument or an unreadable file prints nothing.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        fd = os.open(args[0], os.O_RDONLY)
    except OSError:
        return 0
    try:
        reader = LineReader(fd)
        while True:
            try:
                line = reader.read_line()
            except OSError:
                break
            if line is None:
                break
            sys.stdout.write(f"{_BLUE}{line}{_RESET}\n")
    finally:
        os.close(fd)
    return 0


if __name__ == "__main__":
    sys.exit(main())