#!/usr/bin/env python3
"""
header.py
-------------------
Parse ``title:``, ``description:`` and ``dateFormat:`` header lines.

Title and description values are stored verbatim (a ``//`` inside them is
content, not a comment). Date format aliases resolve through
``DATE_FORMAT_ALIASES``; an unknown alias is fatal.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import replace
from typing import Tuple

# --- Local imports ---
from markwhen.core.exceptions import MalformedLineError, UnknownDateFormatError
from markwhen.dataclasses.timeline import DATE_FORMAT_ALIASES, DateFormat, Header
from markwhen.utils.txt import split_key_value


logger = logging.getLogger(__name__)


def parse_header_field(line: str) -> Tuple[str, str]:
    """
    Split a header line into trimmed key and value.

    Raises:
        MalformedLineError: If the line has no colon
    """
    pair = split_key_value(line)
    if pair is None:
        raise MalformedLineError("header field without ':'")
    return pair


def resolve_date_format(alias: str) -> DateFormat:
    """
    Look up a ``dateFormat`` alias.

    Raises:
        UnknownDateFormatError: If the alias is not in the alias table
    """
    try:
        return DATE_FORMAT_ALIASES[alias.strip()]
    except KeyError:
        raise UnknownDateFormatError(alias.strip()) from None


def apply_header_field(header: Header, line: str) -> Header:
    """
    Return a copy of ``header`` with the field on ``line`` set.

    Args:
        header: Current page header
        line: Raw header line (``title:``, ``description:`` or ``dateFormat:``)

    Returns:
        Updated Header

    Raises:
        MalformedLineError: If the key is not a header field
        UnknownDateFormatError: If a dateFormat alias is not recognized
    """
    key, value = parse_header_field(line)

    if key == "title":
        return replace(header, title=value)
    if key == "description":
        return replace(header, description=value)
    if key == "dateFormat":
        date_format = resolve_date_format(value)
        logger.debug(f"Page date format set to {date_format.value} ({value})")
        return replace(header, date_format=date_format)

    raise MalformedLineError(f"unknown header field: {key}")
