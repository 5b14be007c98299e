"""
test_collection_stack.py
------------------------
Unit tests for markwhen.parser.collection_stack.

Tests the start/end/flush transitions of the open collection.
"""
import pytest

from markwhen.dataclasses.timeline import NOW, Collection, CollectionKind, Event
from markwhen.parser.collection_stack import CollectionStack, CollectionState


@pytest.fixture
def stack():
    return CollectionStack()


@pytest.fixture
def event():
    return Event(start=NOW, end=NOW, body="ongoing")


class TestInitialState:
    """A new stack holds an empty free run."""

    def test_starts_as_free_run(self, stack):
        assert stack.state is CollectionState.FREE_RUN
        assert stack.current_kind is CollectionKind.FREE
        assert stack.closed == []

    def test_flush_discards_empty_free_run(self, stack):
        assert stack.flush() == ()


class TestStart:
    """Opening groups and sections."""

    def test_empty_free_run_is_dropped(self, stack):
        stack.start(CollectionKind.GROUP, "Backend")
        assert stack.closed == []
        assert stack.state is CollectionState.IN_GROUP

    def test_free_run_with_events_is_closed(self, stack, event):
        stack.add_event(event)
        stack.start(CollectionKind.SECTION, "Delivery")
        assert stack.closed == [Collection(kind=CollectionKind.FREE, events=(event,))]
        assert stack.state is CollectionState.IN_SECTION

    def test_collapsed_group(self, stack):
        stack.start(CollectionKind.GROUP, "Notes", collapsed=True)
        stack.end()
        assert stack.closed[0].collapsed is True

    def test_sections_are_never_collapsed(self, stack):
        stack.start(CollectionKind.SECTION, "Delivery", collapsed=True)
        stack.end()
        assert stack.closed[0].collapsed is False

    def test_open_group_is_closed_by_new_marker(self, stack, event):
        stack.start(CollectionKind.GROUP, "First")
        stack.add_event(event)
        stack.start(CollectionKind.GROUP, "Second")
        stack.end()
        assert [c.title for c in stack.closed] == ["First", "Second"]
        assert stack.closed[0].events == (event,)

    def test_open_section_is_closed_by_group_marker(self, stack, event):
        stack.start(CollectionKind.SECTION, "S")
        stack.add_event(event)
        stack.start(CollectionKind.GROUP, "G")
        assert stack.closed == [
            Collection(kind=CollectionKind.SECTION, title="S", events=(event,))
        ]
        assert stack.state is CollectionState.IN_GROUP

    def test_empty_open_group_is_kept_when_replaced(self, stack):
        stack.start(CollectionKind.GROUP, "Empty")
        stack.start(CollectionKind.SECTION, "Next")
        assert stack.closed == [Collection(kind=CollectionKind.GROUP, title="Empty")]

    def test_free_kind_rejected(self, stack):
        with pytest.raises(ValueError):
            stack.start(CollectionKind.FREE)


class TestEnd:
    """Closing markers."""

    def test_empty_group_is_kept(self, stack):
        stack.start(CollectionKind.GROUP, "potato")
        stack.end()
        assert stack.closed == [Collection(kind=CollectionKind.GROUP, title="potato")]
        assert stack.state is CollectionState.FREE_RUN

    def test_stray_end_does_not_keep_empty_free_run(self, stack):
        stack.end()
        assert stack.closed == []

    def test_stray_end_closes_free_run_with_events(self, stack, event):
        stack.add_event(event)
        stack.end()
        assert stack.closed == [Collection(kind=CollectionKind.FREE, events=(event,))]

    def test_events_after_end_start_new_free_run(self, stack, event):
        stack.start(CollectionKind.SECTION, "S")
        stack.end()
        stack.add_event(event)
        collections = stack.flush()
        assert [c.kind for c in collections] == [CollectionKind.SECTION, CollectionKind.FREE]
        assert collections[1].events == (event,)


class TestFlush:
    """Page break or end of input."""

    def test_open_group_is_kept_even_if_empty(self, stack):
        stack.start(CollectionKind.GROUP, "unfinished")
        collections = stack.flush()
        assert collections == (Collection(kind=CollectionKind.GROUP, title="unfinished"),)

    def test_free_run_with_events_is_kept(self, stack, event):
        stack.add_event(event)
        assert stack.flush() == (Collection(kind=CollectionKind.FREE, events=(event,)),)

    def test_closed_collections_are_frozen(self, stack, event):
        stack.add_event(event)
        collection = stack.flush()[0]
        assert isinstance(collection.events, tuple)
