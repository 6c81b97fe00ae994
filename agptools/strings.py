"""String helpers: replacement, case-insensitive search, tokenising and parsing."""

from __future__ import annotations

import re
from typing import IO, Iterable, Optional, Sequence

INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_RANGE = re.compile(r"\[([0-9]+),([0-9]+|inf)\)\\\[([0-9]+),([0-9]+|inf)\)")


def strrpl(text: str, old: str, new: str) -> str:
    """Return ``text`` with every occurrence of ``old`` replaced by ``new``."""
    if not old:
        raise ValueError("the text to replace must not be empty")
    return text.replace(old, new)


def strprintf(fmt: str, *args) -> str:
    """Format ``args`` with a printf-style format string."""
    return fmt % args if args else fmt


def stristr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first case-insensitive match of ``needle``, or None."""
    if not needle:
        return 0
    needle_upper = [c.upper() for c in needle]
    for start in range(len(haystack) - len(needle) + 1):
        window = haystack[start:start + len(needle)]
        if all(a.upper() == b for a, b in zip(window, needle_upper)):
            return start
    return None


def stricmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Case-insensitive comparison: negative, zero or positive like ``strcmp``."""
    if s1 is None:
        return 0 if s2 is None else -(ord(s2[0]) if s2 else 0)
    if s2 is None:
        return ord(s1[0]) if s1 else 0
    for i in range(max(len(s1), len(s2)) + 1):
        c1 = ord(s1[i].lower()) if i < len(s1) else 0
        c2 = ord(s2[i].lower()) if i < len(s2) else 0
        if c1 != c2:
            return c1 - c2
        if c1 == 0:
            break
    return 0


def num2str(value) -> str:
    """Text form of a number, with six significant digits for floats."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def str2num(text: str, kind: type = float):
    """Parse the leading number of ``text`` as ``kind``; zero if there is none."""
    pattern = _INT_PREFIX if kind is int else _FLOAT_PREFIX
    match = pattern.match(text)
    if match is None:
        return kind(0)
    return kind(match.group(1))


def list2str(items: Iterable[str]) -> str:
    """Render strings as ``{"a", "b"}``."""
    return "{" + ", ".join(f'"{item}"' for item in items) + "}"


def fgetstr(stream: IO[str], n: int) -> Optional[str]:
    """Read at most ``n - 1`` characters of a line, without line terminators.

    Returns None at end of stream.
    """
    if n <= 1:
        raise ValueError("n must be greater than 1")
    line = stream.readline(n - 1)
    if not line:
        return None
    for terminator in ("\r", "\n"):
        idx = line.rfind(terminator)
        if idx >= 0:
            line = line[:idx]
    return line


def singlespaces(text: str, no_begin_space: bool = True, no_end_space: bool = True) -> str:
    """Collapse runs of spaces, optionally dropping a leading and a trailing one."""
    result = re.sub(" {2,}", " ", text)
    if no_begin_space and result.startswith(" "):
        result = result[1:]
    if no_end_space and result.endswith(" "):
        result = result[:-1]
    return result


def clcr(text: str) -> str:
    """Remove newline and carriage-return characters."""
    return text.replace("\n", "").replace("\r", "")


def split(text: str, delim: str) -> list[str]:
    """Split on ``delim``, keeping empty tokens."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    return text.split(delim)


def has_ending(full: str, ending: str) -> bool:
    return full.endswith(ending)


def cls(text: str) -> str:
    """Remove tabs, spaces, newlines and carriage returns."""
    return text.translate({ord(c): None for c in "\t \n\r"})


def shorten(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, ending with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max(max_length - 3, 0)] + "..."


def padding(text: str, fixed_dim: int, fill: str = " ") -> str:
    """Pad ``text`` on the right up to ``fixed_dim`` characters."""
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return text.ljust(fixed_dim, fill)


def str2numlist(text: str, kind: type = float, delim: str = ",") -> list:
    """Parse a ``delim``-separated list of numbers."""
    return [str2num(token, kind) for token in split(text, delim)]


def numlist2str(values: Sequence, delim: str = ",") -> str:
    """Join numbers with ``delim``."""
    return delim.join(num2str(v) for v in values)


def parse_range(text: str) -> tuple[int, int, int, int]:
    """Parse ``[a,b)\\[c,d)``; ``inf`` stands for the largest 32-bit int."""
    match = _RANGE.fullmatch(text)
    if match is None:
        raise ValueError(f'"{text}" does not match string pattern [a,b)\\[c,d)')
    a, b, c, d = (INT_MAX if g == "inf" else int(g) for g in match.groups())
    return a, b, c, d