# fdlines

Read a file descriptor one line at a time, without the trailing newline.
The package also carries small helpers for characters, text strings, byte
buffers and writing to text streams.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Reading lines

```python
import os
from fdlines.reader import LineReader, get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd):
    print(line)
os.close(fd)
```

`LineReader(fd, buffer_size=32)` reads `buffer_size` bytes at a time with
`os.read`. `read_line()` returns the next line as a string (decoded as UTF-8,
undecodable bytes kept through `surrogateescape`), or `None` once the
descriptor is exhausted. A last line without a closing newline is still
returned. Iterating over a reader yields every remaining line. Read errors
propagate as `OSError`.

The constructor raises `TypeError` when `fd` is not an int, and `ValueError`
for a negative or out-of-range descriptor or a buffer size below 1.

`get_next_line(fd)` returns the next line of `fd`, keeping one reader per
descriptor between calls, so reads from different descriptors can be
interleaved. Once it returns `None` the buffered state for that descriptor
is dropped.

## Command line

```
fdlines FILE
```

prints each line of `FILE` in blue (ANSI colour codes), one per output line.
With no argument, or when the file cannot be opened, it prints nothing. It
always exits with status 0.

## Helpers

- `fdlines.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`. Each takes a character code or a
  one-character string; the case functions return the same kind they were
  given and only touch ASCII letters.
- `fdlines.memory`: `fill`, `zero`, `copy`, `copy_until`, `move`,
  `find_byte`, `compare` on `bytearray` and `bytes` buffers. A byte count
  that is negative or larger than a buffer raises `ValueError`.
- `fdlines.strings`: `atoi`, `itoa`, `split`, `trim`, `capitalize`,
  `compare`, `ncompare`, `equal`, `nequal`, `find`, `nfind`, `find_char`,
  `rfind_char`, `lcat`, `reverse`, `substring` on `str` values. Searches
  return an index or `None`; comparisons return 0 or the code difference at
  the first mismatch.
- `fdlines.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`,
  `print_words`, each writing to the given stream, or to standard output
  when none is given.