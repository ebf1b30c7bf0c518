"""String helpers: numeric conversion, splitting, trimming, searching and comparing."""

from __future__ import annotations

from itertools import pairwise
from typing import List, Optional, Tuple

from fdlines.chars import to_lower, to_upper

_ATOI_SPACE = "\t\v\f\r \n"
_TRIM_SPACE = " \t\n"


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _single_char(name: str, c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{name} must be a single character, got {c!r}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is honoured, and digits are
    read until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_ATOI_SPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits += ch
    value = int(digits) if digits else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split text on the character sep, dropping empty pieces."""
    _single_char("separator", sep)
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Remove spaces, tabs and newlines from both ends of text."""
    return text.strip(_TRIM_SPACE)


def _is_word_break(ch: str) -> bool:
    return 32 <= ord(ch) <= 47


def capitalize(text: str) -> str:
    """Lower-case text, then upper-case its first letter and every letter that
    follows a space or punctuation character (codes 32 to 47) after the first
    position."""
    lowered = [to_lower(ch) for ch in text]
    if not lowered:
        return ""
    result = [to_upper(lowered[0])]
    if len(lowered) > 1:
        result.append(lowered[1])
        result.extend(
            to_upper(after) if _is_word_break(before) else after
            for before, after in pairwise(lowered[1:])
        )
    return "".join(result)


def compare(s1: str, s2: str) -> int:
    """Return 0 when equal, else the code difference at the first mismatch.

    A string that is a proper prefix of the other compares as smaller.
    """
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) > len(s2):
        return ord(s1[len(s2)])
    if len(s2) > len(s1):
        return -ord(s2[len(s1)])
    return 0


def ncompare(s1: str, s2: str, n: int) -> int:
    """Like compare, but looks at no more than the first n characters."""
    _check_non_negative("n", n)
    return compare(s1[:n], s2[:n])


def equal(s1: Optional[str], s2: Optional[str]) -> bool:
    """True when both strings are given and identical."""
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def nequal(s1: Optional[str], s2: Optional[str], n: int) -> bool:
    """True when both strings are given and agree on their first n characters."""
    if s1 is None or s2 is None:
        return False
    return ncompare(s1, s2, n) == 0


def find(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of needle, 0 for an empty needle, else None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def nfind(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like find, but the match must lie wholly within the first length characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def find_char(text: str, c: str) -> Optional[int]:
    """Index of the first c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char("character", c)
    index = text.find(c)
    if index >= 0:
        return index
    return len(text) if c == "\0" else None


def rfind_char(text: str, c: str) -> Optional[int]:
    """Index of the last c in text, or None.

    Searching for the NUL character finds the end of the string.
    """
    _single_char("character", c)
    if c == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def lcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting string and the length the full concatenation would
    have had; when dest already fills the buffer it is left unchanged and the
    length reported is size plus the length of src.
    """
    _check_non_negative("size", size)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def reverse(text: str) -> str:
    """Return text reversed."""
    return text[::-1]


def substring(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        raise ValueError(f"start {start} is past the end of a string of length {len(text)}")
    return text[start:start + length]