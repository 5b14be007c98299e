#!/usr/bin/env python3
"""
lines.py
-------------------
Classify single timeline lines by fixed-precedence prefix rules.

Precedence (first match wins):
    1. comment          trimmed line starts with ``//``
    2. blank            trimmed line is empty
    3. page break       line is exactly ``_-_-_break_-_-_``
    4. header field     ``title:``, ``description:``, ``dateFormat:``
                        (only while the page accepts header fields)
    5. tag              trimmed line starts with ``#``
    6. group start      trimmed line starts with ``group ``
    7. section start    trimmed line starts with ``section``
    8. collection end   trimmed line starts with ``endSection`` or ``endGroup``
    9. event            line contains a colon
   10. malformed        anything else
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum

# --- Local imports ---
from markwhen.utils.txt import COMMENT_PREFIX, KEY_VALUE_SEPARATOR


PAGE_BREAK = "_-_-_break_-_-_"

TAG_PREFIX = "#"
HEADER_PREFIXES = ("title:", "description:", "dateFormat:")
GROUP_START = "group "
SECTION_START = "section"
COLLECTION_ENDS = ("endSection", "endGroup")


class LineKind(str, Enum):
    COMMENT = "comment"
    BLANK = "blank"
    PAGE_BREAK = "page_break"
    HEADER_FIELD = "header_field"
    TAG = "tag"
    GROUP_START = "group_start"
    SECTION_START = "section_start"
    COLLECTION_END = "collection_end"
    EVENT = "event"
    MALFORMED = "malformed"

    @property
    def is_ignored(self) -> bool:
        return self in (LineKind.COMMENT, LineKind.BLANK)


def classify_line(line: str, header_open: bool) -> LineKind:
    """
    Classify a raw line.

    Header prefixes are matched against the raw line, so an indented
    ``title:`` is not a header field.

    Args:
        line: Raw line without its terminator
        header_open: Whether the current page still accepts header fields

    Returns:
        The LineKind of the first matching rule
    """
    trimmed = line.strip()

    if trimmed.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if not trimmed:
        return LineKind.BLANK
    if line == PAGE_BREAK:
        return LineKind.PAGE_BREAK
    if header_open and line.startswith(HEADER_PREFIXES):
        return LineKind.HEADER_FIELD
    if trimmed.startswith(TAG_PREFIX):
        return LineKind.TAG
    if trimmed.startswith(GROUP_START):
        return LineKind.GROUP_START
    if trimmed.startswith(SECTION_START):
        return LineKind.SECTION_START
    if trimmed.startswith(COLLECTION_ENDS):
        return LineKind.COLLECTION_END
    if KEY_VALUE_SEPARATOR in line:
        return LineKind.EVENT
    return LineKind.MALFORMED


def marker_title(line: str, kind: LineKind) -> str:
    """Text after a group/section keyword, trimmed."""
    trimmed = line.strip()
    keyword = GROUP_START if kind is LineKind.GROUP_START else SECTION_START
    return trimmed[len(keyword):].strip()


def is_indented(line: str) -> bool:
    return bool(line) and line[0].isspace()
