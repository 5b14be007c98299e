"""Immutable document model for parsed timelines."""

from .timeline import (
    DATE_FORMAT_ALIASES,
    NOW,
    Collection,
    CollectionKind,
    Concrete,
    DateFormat,
    Document,
    Event,
    Header,
    Moment,
    Now,
    Page,
)

__all__ = [
    "DATE_FORMAT_ALIASES",
    "NOW",
    "Collection",
    "CollectionKind",
    "Concrete",
    "DateFormat",
    "Document",
    "Event",
    "Header",
    "Moment",
    "Now",
    "Page",
]
