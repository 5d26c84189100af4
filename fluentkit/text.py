"""Offset arithmetic for editable text.

Offsets into a text are Python string indices (code points). Input-method
interfaces speak UTF-16 code units, so conversions in both directions are
provided. Cursor movement steps over extended grapheme clusters.
"""

from __future__ import annotations

from collections.abc import Iterator

import regex

__all__ = [
    "offset_to_utf16",
    "offset_from_utf16",
    "range_to_utf16",
    "range_from_utf16",
    "previous_boundary",
    "next_boundary",
    "is_word_char",
    "word_range",
]

_GRAPHEME = regex.compile(r"\X")


def _check_offset(offset: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must not be negative: {offset!r}")


def offset_to_utf16(text: str, offset: int) -> int:
    """Convert a string index to a UTF-16 offset, saturating at the end."""
    _check_offset(offset)
    return len(text[:offset].encode("utf-16-le", "surrogatepass")) // 2


def offset_from_utf16(text: str, offset: int) -> int:
    """Convert a UTF-16 offset to a string index.

    An offset that falls inside a surrogate pair moves past that character;
    an offset beyond the end saturates at the length of the text.
    """
    _check_offset(offset)
    units = 0
    for index, char in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


def range_to_utf16(text: str, start: int, end: int) -> tuple[int, int]:
    """Convert a range of string indices to a UTF-16 range."""
    return offset_to_utf16(text, start), offset_to_utf16(text, end)


def range_from_utf16(text: str, start: int, end: int) -> tuple[int, int]:
    """Convert a UTF-16 range to a range of string indices."""
    return offset_from_utf16(text, start), offset_from_utf16(text, end)


def _grapheme_starts(text: str) -> Iterator[int]:
    for match in _GRAPHEME.finditer(text):
        yield match.start()


def previous_boundary(text: str, offset: int) -> int:
    """The start of the last grapheme cluster that begins before ``offset``."""
    _check_offset(offset)
    starts = [start for start in _grapheme_starts(text) if start < offset]
    return starts[-1] if starts else 0


def next_boundary(text: str, offset: int) -> int:
    """The start of the first grapheme cluster that begins after ``offset``."""
    _check_offset(offset)
    return next(
        (start for start in _grapheme_starts(text) if start > offset), len(text)
    )


def is_word_char(char: str) -> bool:
    """True for letters, digits and the underscore."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char.isalnum() or char == "_"


def word_range(text: str, offset: int) -> tuple[int, int]:
    """The range of the run of word characters around ``offset``."""
    _check_offset(offset)
    if offset > len(text):
        raise ValueError(f"offset {offset} is past the end of the text")
    start = offset
    while start > 0 and is_word_char(text[start - 1]):
        start -= 1
    end = offset
    while end < len(text) and is_word_char(text[end]):
        end += 1
    return start, end