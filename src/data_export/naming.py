"""
naming.py
File name derivation for export segments.

A pattern such as ``"export-%Misc.FileNumber%"`` is resolved in four steps:

1. the file number placeholder is replaced with the segment index as a
   5-digit zero-padded decimal,
2. characters that are illegal in a file name are removed,
3. the result is truncated (see ``truncate``),
4. the extension is appended verbatim.
"""

from __future__ import annotations

import re

from data_export.core.exceptions import InvalidSegmentIndexError

FILE_NUMBER_PLACEHOLDER = "%Misc.FileNumber%"
FILE_NUMBER_WIDTH = 5

# Union of what Windows and POSIX refuse in a single path component.
INVALID_FILE_NAME_CHARS = '<>:"/\\|?*' + "".join(chr(c) for c in range(32))

_INVALID_RE = re.compile("[" + re.escape(INVALID_FILE_NAME_CHARS) + "]")


def format_file_number(file_index: int) -> str:
    """Return ``file_index`` as a zero-padded decimal, e.g. ``3 -> "00003"``."""
    if isinstance(file_index, bool) or not isinstance(file_index, int):
        raise InvalidSegmentIndexError(
            f"Segment index must be an integer, got {type(file_index).__name__}"
        )
    if file_index < 0:
        raise InvalidSegmentIndexError(f"Segment index must not be negative: {file_index}")

    return f"{file_index:0{FILE_NUMBER_WIDTH}d}"


def sanitize_file_name(name: str, replacement: str = "") -> str:
    """
    Remove (or replace) every character that is illegal in a file name.

    Sanitizing an already sanitized name returns it unchanged.
    """
    if _INVALID_RE.search(replacement):
        raise ValueError(f"Replacement contains illegal file name characters: {replacement!r}")

    return _INVALID_RE.sub(replacement, name)


def truncate(value: str, max_length: int) -> str:
    """
    Shorten ``value`` so that it never exceeds ``max_length`` characters.

    A value that already fits is returned unchanged. Longer values are cut to
    ``max_length - 1`` characters, e.g. ``truncate("export-00003", 10)`` gives
    ``"export-00"``. A non-positive limit disables truncation.
    """
    if max_length <= 0 or len(value) <= max_length:
        return value

    return value[: max(max_length - 1, 0)]


def resolve_file_name(
    pattern: str,
    file_index: int,
    extension: str = "",
    max_length: int = 0,
) -> str:
    """Resolve ``pattern`` for the segment at ``file_index``."""
    base = pattern.replace(FILE_NUMBER_PLACEHOLDER, format_file_number(file_index))
    base = truncate(sanitize_file_name(base), max_length)

    return f"{base}{extension or ''}"
