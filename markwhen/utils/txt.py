"""
txt.py
-------------------
Text helpers shared by the markwhen parser.

Covers the small string operations every line handler needs (key/value
splitting, trailing comment removal) and reading timeline files from disk.
"""
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple

# --- Third-party library imports ---
from ftfy import fix_text  # type: ignore


KEY_VALUE_SEPARATOR = ":"
COMMENT_PREFIX = "//"


# ----- Key/value -----
def split_key_value(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a line on its first colon.

    Returns:
        (key, value), both trimmed, or None when the line has no colon

    Examples:
        >>> split_key_value("title: Road map: 2024")
        ('title', 'Road map: 2024')
        >>> split_key_value("no separator") is None
        True
    """
    key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
    if not sep:
        return None
    return key.strip(), value.strip()


def strip_comment(text: str) -> str:
    """
    Drop a trailing ``//`` comment and surrounding whitespace.

    Examples:
        >>> strip_comment("#fff // accent")
        '#fff'
    """
    head, sep, _ = text.partition(COMMENT_PREFIX)
    return head.strip() if sep else text


# ----- Files -----
def read_markwhen_lines(path: Path) -> List[str]:
    """
    Read a timeline file as a list of lines.

    The text is decoded as UTF-8 and passed through ftfy to repair
    mojibake left by editors or exports before splitting.
    """
    text = Path(path).read_text(encoding="utf-8")
    return fix_text(text, uncurl_quotes=False).splitlines()
