#!/usr/bin/env python3
"""
timeline.py
-------------------

Defines the immutable document model produced by the markwhen parser.

A Document holds:
- an ordered tuple of Pages, each with one Header and ordered Collections
- one document-wide tag registry (tag name -> color)

Event boundaries are Moments: either a Concrete timestamp or the NOW
sentinel. NOW is a distinct type, so it never compares equal to a parsed
date, including dates that land on a zero timestamp.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Tuple, Union


# ----- Date formats -----
class DateFormat(str, Enum):
    """
    Calendar patterns a page may declare through ``dateFormat:``.

    - US: month/day/year (default)
    - EU: day/month/year
    """

    US = "%m/%d/%Y"
    EU = "%d/%m/%Y"

    @classmethod
    def choices(cls) -> List[str]:
        return [fmt.value for fmt in cls]


DEFAULT_DATE_FORMAT = DateFormat.US

DATE_FORMAT_ALIASES: Dict[str, DateFormat] = {
    "MM/dd/yy": DateFormat.US,
    "d/M/y": DateFormat.EU,
}
"""Aliases accepted in ``dateFormat:`` header lines."""

EXTENDED_DATE_FORMAT = "%Y-%d-%m"
"""Fixed compact year-day-month fallback pattern, tried after the page format."""


# ----- Moments -----
@dataclass(frozen=True)
class Concrete:
    """A parsed calendar timestamp."""

    value: datetime

    def plus_days(self, days: int) -> Concrete:
        return Concrete(self.value + timedelta(days=days))

    def isoformat(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class Now:
    """The ``now`` sentinel; not a calendar date."""

    def plus_days(self, days: int) -> Now:
        return self

    def isoformat(self) -> str:
        return "now"


NOW = Now()

Moment = Union[Concrete, Now]


# ----- Document model -----
class CollectionKind(str, Enum):
    """
    Kinds of event collections.

    - FREE: implicit run of events with no explicit wrapper
    - GROUP: opened by ``group <title>``
    - SECTION: opened by ``section <title>``
    """

    FREE = "free"
    GROUP = "group"
    SECTION = "section"


@dataclass(frozen=True)
class Header:
    """
    Page header fields.

    Attributes:
        title (str): Page title, stored verbatim.
        description (str): Page description, stored verbatim.
        date_format (DateFormat): Pattern used for this page's event dates.
    """

    title: str = ""
    description: str = ""
    date_format: DateFormat = DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class Event:
    """
    A single dated timeline entry.

    ``start``/``end`` are the range's ``from``/``to``; no ordering between
    them is enforced.
    """

    start: Moment
    end: Moment
    body: str


@dataclass(frozen=True)
class Collection:
    """
    Ordered events under one wrapper.

    Attributes:
        kind (CollectionKind): Free run, group or section.
        collapsed (bool): Display hint; only set for indented groups.
        title (str): Text following the opening marker.
        events (Tuple[Event, ...]): Events in source order.
    """

    kind: CollectionKind
    collapsed: bool = False
    title: str = ""
    events: Tuple[Event, ...] = ()


@dataclass(frozen=True)
class Page:
    header: Header = field(default_factory=Header)
    collections: Tuple[Collection, ...] = ()


@dataclass(frozen=True)
class Document:
    """
    Result of one parse.

    Attributes:
        pages (Tuple[Page, ...]): Pages in source order; never empty.
        tags (Dict[str, str]): Document-wide tag name -> color registry.
    """

    pages: Tuple[Page, ...]
    tags: Dict[str, str] = field(default_factory=dict)
