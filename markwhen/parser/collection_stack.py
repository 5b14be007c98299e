#!/usr/bin/env python3
"""
collection_stack.py
-------------------
Lifecycle of the collection currently receiving events on a page.

Exactly one collection is open at any time. It starts as an empty free
run and changes only through three transitions:

    start(kind)  open collection closed unless it is an empty free run;
                 group/section opened
    end()        group/section closed even when empty; free run opened
    flush()      open collection closed unless it is an empty free run

Closed collections are frozen into ``Collection`` values in page order.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

# --- Local imports ---
from markwhen.dataclasses.timeline import Collection, CollectionKind, Event


logger = logging.getLogger(__name__)


class CollectionState(str, Enum):
    FREE_RUN = "free_run"
    IN_GROUP = "in_group"
    IN_SECTION = "in_section"


_STATE_BY_KIND = {
    CollectionKind.FREE: CollectionState.FREE_RUN,
    CollectionKind.GROUP: CollectionState.IN_GROUP,
    CollectionKind.SECTION: CollectionState.IN_SECTION,
}


@dataclass
class _OpenCollection:
    kind: CollectionKind
    collapsed: bool = False
    title: str = ""
    events: List[Event] = field(default_factory=list)

    @property
    def is_empty_free_run(self) -> bool:
        return self.kind is CollectionKind.FREE and not self.events

    def freeze(self) -> Collection:
        return Collection(
            kind=self.kind,
            collapsed=self.collapsed,
            title=self.title,
            events=tuple(self.events),
        )


class CollectionStack:
    """
    Owns the open collection and the closed collections of one page.

    Attributes:
        closed: Collections finalized so far, in page order
    """

    def __init__(self) -> None:
        self.closed: List[Collection] = []
        self._current = _OpenCollection(CollectionKind.FREE)

    @property
    def state(self) -> CollectionState:
        return _STATE_BY_KIND[self._current.kind]

    @property
    def current_kind(self) -> CollectionKind:
        return self._current.kind

    def add_event(self, event: Event) -> None:
        self._current.events.append(event)

    def start(
        self, kind: CollectionKind, title: str = "", collapsed: bool = False
    ) -> None:
        """
        Open a group or section.

        The open collection is closed first, the same way ``end`` closes
        it: a group or section still open is kept with its events, and
        only an empty free run is dropped.

        Args:
            kind: CollectionKind.GROUP or CollectionKind.SECTION
            title: Marker title
            collapsed: Only honored for groups
        """
        if kind is CollectionKind.FREE:
            raise ValueError("free runs are opened implicitly")

        if not self._current.is_empty_free_run:
            self._close()

        self._current = _OpenCollection(
            kind=kind,
            collapsed=collapsed and kind is CollectionKind.GROUP,
            title=title,
        )
        logger.debug(f"Opened {kind.value} {title!r}")

    def end(self) -> None:
        """
        Close the open group or section, even if empty, and open a free run.

        A stray end marker over an empty free run closes nothing.
        """
        if not self._current.is_empty_free_run:
            self._close()
        self._current = _OpenCollection(CollectionKind.FREE)

    def flush(self) -> Tuple[Collection, ...]:
        """
        Close the page: keep the open collection unless it is an empty
        free run, and return every closed collection.
        """
        if not self._current.is_empty_free_run:
            self._close()
        self._current = _OpenCollection(CollectionKind.FREE)
        return tuple(self.closed)

    def _close(self) -> None:
        collection = self._current.freeze()
        self.closed.append(collection)
        logger.debug(
            f"Closed {collection.kind.value} collection with {len(collection.events)} events"
        )
