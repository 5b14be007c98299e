"""
Timeline parsing engine.

Components, leaf-first:
- lines: classify a single line
- header: title/description/dateFormat fields
- dates: date-range keys to (from, to) moments
- collection_stack: open collection and its transitions
- builder: the forward pass composing the above
"""

from .builder import DocumentBuilder, parse_file, parse_lines, parse_text
from .dates import DateStrategy, resolve_range
from .lines import LineKind, classify_line

__all__ = [
    "DocumentBuilder",
    "parse_file",
    "parse_lines",
    "parse_text",
    "DateStrategy",
    "resolve_range",
    "LineKind",
    "classify_line",
]
