#!/usr/bin/env python3
"""
builder.py
-------------------
Single forward pass that turns timeline lines into a ``Document``.

Each line is classified, then dispatched through a handler table:

    comment / blank   skipped
    page break        page closed; next page inherits its date format
    header field      written into the current page header
    tag               upserted into the document-wide registry
    group / section   collection transitions
    event             date range resolved, event appended
    malformed         MalformedLineError

The header phase of a page lasts until its first event line or collection
marker; tag definitions, comments and blank lines keep it open. A page
break re-opens it for the next page.

Any ParseError aborts the pass with the line number attached; no partial
document is returned.

Programmatic API:
    from markwhen.parser.builder import parse_text, parse_file
    document = parse_text("title: Plan\\n01/01/2024: Kickoff\\n")
    document = parse_file(Path("plan.mw"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List

# --- Local imports ---
from markwhen.core.exceptions import MalformedLineError, MalformedTagError, ParseError
from markwhen.dataclasses.timeline import (
    CollectionKind,
    Document,
    Event,
    Header,
    Page,
)
from markwhen.parser.collection_stack import CollectionStack
from markwhen.parser.dates import resolve_range
from markwhen.parser.header import apply_header_field
from markwhen.parser.lines import (
    TAG_PREFIX,
    LineKind,
    classify_line,
    is_indented,
    marker_title,
)
from markwhen.utils.txt import read_markwhen_lines, split_key_value, strip_comment


logger = logging.getLogger(__name__)


class DocumentBuilder:
    """
    Accumulates pages, collections and tags over one parse.

    Usage:
        builder = DocumentBuilder()
        for line in lines:
            builder.feed(line)
        document = builder.build()

    A builder produces exactly one document; feeding after ``build`` is an
    error.
    """

    def __init__(self) -> None:
        self._pages: List[Page] = []
        self._header = Header()
        self._collections = CollectionStack()
        self._tags: Dict[str, str] = {}
        self._header_open = True
        self._line_number = 0
        self._built = False

        self._handlers: Dict[LineKind, Callable[[str], None]] = {
            LineKind.COMMENT: self._skip,
            LineKind.BLANK: self._skip,
            LineKind.PAGE_BREAK: self._on_page_break,
            LineKind.HEADER_FIELD: self._on_header_field,
            LineKind.TAG: self._on_tag,
            LineKind.GROUP_START: self._on_group_start,
            LineKind.SECTION_START: self._on_section_start,
            LineKind.COLLECTION_END: self._on_collection_end,
            LineKind.EVENT: self._on_event,
            LineKind.MALFORMED: self._on_malformed,
        }

    @property
    def header_open(self) -> bool:
        return self._header_open

    # ---- Driving ----
    def feed(self, line: str) -> None:
        """
        Consume one line.

        Raises:
            ParseError: With the line number and raw line attached
        """
        if self._built:
            raise RuntimeError("DocumentBuilder already built its document")

        line = line.rstrip("\r\n")
        self._line_number += 1
        kind = classify_line(line, self._header_open)

        try:
            self._handlers[kind](line)
        except ParseError as e:
            raise e.at_line(self._line_number, line)

    def build(self) -> Document:
        """Close the last page and return the finished document."""
        if self._built:
            raise RuntimeError("DocumentBuilder already built its document")
        self._built = True

        self._close_page()
        logger.debug(
            f"Parsed {self._line_number} lines into {len(self._pages)} pages, "
            f"{len(self._tags)} tags"
        )
        return Document(pages=tuple(self._pages), tags=dict(self._tags))

    # ---- Page handling ----
    def _close_page(self) -> None:
        collections = self._collections.flush()
        self._pages.append(Page(header=self._header, collections=collections))

    def _on_page_break(self, line: str) -> None:
        inherited = self._header.date_format
        self._close_page()

        self._header = Header(date_format=inherited)
        self._collections = CollectionStack()
        self._header_open = True

    def _on_header_field(self, line: str) -> None:
        self._header = apply_header_field(self._header, line)

    # ---- Tags ----
    def _on_tag(self, line: str) -> None:
        pair = split_key_value(line.strip())
        if pair is None:
            raise MalformedTagError("tag definition needs '#<name>: <color>'")

        key, value = pair
        name = key[len(TAG_PREFIX):].strip()
        if not name:
            raise MalformedTagError("tag definition has an empty name")

        color = strip_comment(value)
        if name in self._tags and self._tags[name] != color:
            logger.debug(f"Tag {name!r} redefined: {self._tags[name]} -> {color}")
        self._tags[name] = color

    # ---- Collections ----
    def _on_group_start(self, line: str) -> None:
        self._header_open = False
        self._collections.start(
            CollectionKind.GROUP,
            title=marker_title(line, LineKind.GROUP_START),
            collapsed=is_indented(line),
        )

    def _on_section_start(self, line: str) -> None:
        self._header_open = False
        self._collections.start(
            CollectionKind.SECTION,
            title=marker_title(line, LineKind.SECTION_START),
        )

    def _on_collection_end(self, line: str) -> None:
        self._header_open = False
        self._collections.end()

    # ---- Events ----
    def _on_event(self, line: str) -> None:
        self._header_open = False
        key, _, body = line.partition(":")
        start, end = resolve_range(key, self._header.date_format)
        self._collections.add_event(Event(start=start, end=end, body=body.strip()))

    # ---- Ignored / rejected ----
    def _skip(self, line: str) -> None:
        pass

    def _on_malformed(self, line: str) -> None:
        raise MalformedLineError("expected '<date range>: <description>'")


def parse_lines(lines: Iterable[str]) -> Document:
    """
    Parse an ordered sequence of lines into a Document.

    Raises:
        ParseError: On the first invalid line
    """
    builder = DocumentBuilder()
    for line in lines:
        builder.feed(line)
    return builder.build()


def parse_text(text: str) -> Document:
    """Parse a whole timeline held in memory."""
    return parse_lines(text.splitlines())


def parse_file(path: Path) -> Document:
    """
    Read and parse a timeline file.

    Raises:
        OSError, UnicodeDecodeError: If the file cannot be read
        ParseError: On the first invalid line
    """
    path = Path(path)
    logger.debug(f"Reading file: {path}")
    try:
        lines = read_markwhen_lines(path)
    except (OSError, UnicodeDecodeError):
        logger.error(f"Cannot read input file: {path}")
        raise

    document = parse_lines(lines)
    logger.info(f"Parsed {len(document.pages)} pages from {path.name}")
    return document
