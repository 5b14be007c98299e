#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the markwhen project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions while parsing and exporting timelines.

Exception Hierarchy:
    Exception (built-in)
    └── MarkwhenError - Base for all project errors
        ├── ParseError - Base for all timeline parsing failures
        │   ├── MalformedLineError - Line matches no construct
        │   ├── UnknownDateFormatError - dateFormat alias not recognized
        │   ├── DateRangeParseError - Every date strategy failed
        │   └── MalformedTagError - Tag definition without a color
        └── ExportError - Serialization or output failures

Every parse error is fatal: the first one aborts the scan and no partial
document is returned.

Usage:
    from markwhen.core.exceptions import ParseError, ExportError

    try:
        document = parse_file(path)
    except ParseError as e:
        logger.error(f"Invalid timeline: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional, Sequence


class MarkwhenError(Exception):
    """
    Base exception for all markwhen errors.

    Catch this to handle any failure raised by the package, or catch
    specific subclasses for more granular error handling.
    """

    pass


class ParseError(MarkwhenError):
    """
    Base exception for timeline parsing failures.

    Components raise these without positional context; the document
    builder attaches the offending line through ``at_line`` before the
    error leaves the parser.

    Attributes:
        message: Error description
        line_number: 1-based line number, once known
        line: Raw offending line, once known
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def at_line(self, line_number: int, line: str) -> ParseError:
        """Attach position information and return self for re-raising."""
        self.line_number = line_number
        self.line = line
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message} ({self.line!r})"


class MalformedLineError(ParseError):
    """
    Exception for lines that match no known construct.

    Raised when a line is not a comment, blank, page break, header field,
    tag, collection marker, and carries no colon to make it an event.

    Examples:
        >>> raise MalformedLineError("expected '<date range>: <body>'")
    """

    pass


class UnknownDateFormatError(ParseError):
    """
    Exception for unrecognized ``dateFormat`` aliases.

    Never silently defaulted: an unknown alias rejects the whole input.

    Attributes:
        alias: The offending alias text

    Examples:
        >>> raise UnknownDateFormatError("yyyy.MM.dd")
    """

    def __init__(self, alias: str) -> None:
        super().__init__(f"unknown dateFormat: {alias}")
        self.alias = alias


class DateRangeParseError(ParseError):
    """
    Exception for event date ranges no strategy could resolve.

    Attributes:
        key: The range key (text before the first colon)
        attempted: Date patterns tried, in order
        reason: Failure message from the primary attempt

    Examples:
        >>> raise DateRangeParseError("13/13/2023", ["%m/%d/%Y", "%Y-%d-%m"], "...")
    """

    def __init__(self, key: str, attempted: Sequence[str], reason: str) -> None:
        super().__init__(
            f"cannot parse date range {key.strip()!r} "
            f"(tried {', '.join(attempted)}): {reason}"
        )
        self.key = key
        self.attempted = list(attempted)
        self.reason = reason


class MalformedTagError(ParseError):
    """
    Exception for tag definitions that cannot be split into name and color.

    Examples:
        >>> raise MalformedTagError("tag definition needs '#<name>: <color>'")
    """

    pass


class ExportError(MarkwhenError):
    """
    Exception for document export failures.

    Raised when writing a parsed document to JSON or YAML fails:
    - Unsupported output format
    - Output file already exists without --force
    - File writing errors

    Examples:
        >>> raise ExportError("Unsupported export format: toml")
        >>> raise ExportError("Output exists: out/plan.json")
    """

    pass
