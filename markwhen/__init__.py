"""
markwhen
===============================

Parse Markwhen timeline markup into structured documents.

A timeline is plain text: optional header fields, tag definitions, dated
event lines, and group/section blocks, split into pages by a break line.
The parser makes one forward pass and returns an immutable Document of
pages, collections and events plus a document-wide tag registry.

Main Components:
    - parser: Line classification, header fields, date ranges, collections
    - dataclasses: Immutable document model
    - pipeline: JSON/YAML export and the command-line interface
    - core: Logging, exceptions, paths, CLI helpers

Example Usage:
    >>> from markwhen import parse_text
    >>> doc = parse_text("title: Plan\\n01/15/2024: Kickoff")
    >>> doc.pages[0].collections[0].events[0].body
    'Kickoff'
"""

__version__ = "0.1.0"

from markwhen.core.exceptions import MarkwhenError, ParseError
from markwhen.dataclasses.timeline import Document
from markwhen.parser.builder import parse_file, parse_lines, parse_text

__all__ = [
    "Document",
    "MarkwhenError",
    "ParseError",
    "parse_file",
    "parse_lines",
    "parse_text",
]
