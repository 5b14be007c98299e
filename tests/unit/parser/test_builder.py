"""
test_builder.py
---------------
Unit tests for markwhen.parser.builder.

Tests full parses: headers, pages, tags, collections, events and the
fail-fast error path.
"""
import pytest

from markwhen.core.exceptions import (
    DateRangeParseError,
    MalformedLineError,
    MalformedTagError,
    ParseError,
    UnknownDateFormatError,
)
from markwhen.dataclasses.timeline import (
    NOW,
    Collection,
    CollectionKind,
    Concrete,
    DateFormat,
    Document,
    Event,
    Header,
    Page,
)
from markwhen.parser.builder import DocumentBuilder, parse_file, parse_lines, parse_text


class TestHeaders:
    """Header fields on a single page."""

    def test_parses_title(self):
        document = parse_text("title: This is a title")
        assert document == Document(
            pages=(Page(header=Header(title="This is a title"), collections=()),),
            tags={},
        )

    def test_parses_description(self):
        document = parse_text("description: This is a description")
        assert document.pages[0].header.description == "This is a description"
        assert document.pages[0].header.date_format is DateFormat.US

    def test_header_only_page_has_no_collections(self):
        document = parse_text("title: T\ndescription: D\ndateFormat: d/M/y\n")
        assert document.pages[0].collections == ()

    def test_empty_input_yields_one_default_page(self):
        assert parse_text("") == Document(pages=(Page(),), tags={})

    def test_unknown_date_format_aborts(self):
        with pytest.raises(UnknownDateFormatError) as exc_info:
            parse_text("title: T\ndateFormat: yyyy\n01/01/2023: never parsed")
        assert exc_info.value.line_number == 2
        assert exc_info.value.alias == "yyyy"


class TestHeaderPhase:
    """Where header fields stop being accepted."""

    def test_tags_keep_header_open(self):
        document = parse_text("#Launch: red\ntitle: After tag")
        assert document.pages[0].header.title == "After tag"

    def test_comments_and_blanks_keep_header_open(self):
        document = parse_text("// intro\n\ntitle: Plan")
        assert document.pages[0].header.title == "Plan"

    def test_event_closes_header(self):
        with pytest.raises(DateRangeParseError) as exc_info:
            parse_text("01/01/2023: Start\ntitle: Too late")
        assert exc_info.value.line_number == 2

    def test_group_closes_header(self):
        builder = DocumentBuilder()
        builder.feed("group Backend")
        assert builder.header_open is False

    def test_page_break_reopens_header(self):
        document = parse_text("01/01/2023: Start\n_-_-_break_-_-_\ntitle: Page two")
        assert document.pages[1].header.title == "Page two"


class TestEvents:
    """Event lines and free runs."""

    def test_eu_date_example(self, eu_timeline_text, utc):
        document = parse_text(eu_timeline_text)

        assert len(document.pages) == 1
        page = document.pages[0]
        assert page.header == Header(date_format=DateFormat.EU)
        assert page.collections == (
            Collection(
                kind=CollectionKind.FREE,
                events=(
                    Event(Concrete(utc(2023, 1, 1)), Concrete(utc(2023, 1, 14)), "Phase 1 #Exploratory"),
                    Event(Concrete(utc(2023, 1, 15)), Concrete(utc(2023, 1, 31)), "Phase 2 #Implementation"),
                    Event(Concrete(utc(2023, 3, 7)), Concrete(utc(2023, 3, 10)), "Phase 4 - kickoff! #Launch"),
                ),
            ),
        )

    def test_titled_eu_scenario(self, utc):
        document = parse_text("title: T\ndateFormat: d/M/y\n01/01/2023 - 14/01/2023: Phase 1\n")
        page = document.pages[0]
        assert page.header == Header(title="T", date_format=DateFormat.EU)
        assert page.collections[0].kind is CollectionKind.FREE
        assert page.collections[0].events == (
            Event(Concrete(utc(2023, 1, 1)), Concrete(utc(2023, 1, 14)), "Phase 1"),
        )

    def test_body_keeps_colons_verbatim(self):
        event = parse_text("01/02/2023: Meeting: room 4 - bring notes").pages[0].collections[0].events[0]
        assert event.body == "Meeting: room 4 - bring notes"

    def test_now_event(self, utc):
        event = parse_text("01/02/2023 - now: Ongoing").pages[0].collections[0].events[0]
        assert event.start == Concrete(utc(2023, 1, 2))
        assert event.end is NOW

    def test_fallback_format_event(self, utc):
        event = parse_text("2023-14-01/2023-20-01: Sprint").pages[0].collections[0].events[0]
        assert event.start == Concrete(utc(2023, 1, 14))
        assert event.end == Concrete(utc(2023, 1, 20))

    def test_crlf_lines(self):
        document = parse_lines(["title: Windows\r\n", "01/02/2023: Event\r\n"])
        assert document.pages[0].header.title == "Windows"
        assert document.pages[0].collections[0].events[0].body == "Event"


class TestCollections:
    """Groups and sections."""

    def test_handles_groups(self):
        document = parse_text("group potato\nendGroup\n")
        assert document == Document(
            pages=(
                Page(
                    header=Header(),
                    collections=(Collection(kind=CollectionKind.GROUP, title="potato"),),
                ),
            ),
            tags={},
        )

    def test_indented_group_is_collapsed(self):
        document = parse_text("  group Notes\n01/01/2023: a\nendGroup")
        assert document.pages[0].collections[0].collapsed is True

    def test_either_end_keyword_closes(self):
        document = parse_text("group G\nendSection\nsection S\nendGroup")
        kinds = [c.kind for c in document.pages[0].collections]
        assert kinds == [CollectionKind.GROUP, CollectionKind.SECTION]

    def test_free_run_split_around_section(self):
        text = "\n".join(
            [
                "01/01/2023: before",
                "section Middle",
                "01/02/2023: inside",
                "endSection",
                "01/03/2023: after",
            ]
        )
        collections = parse_text(text).pages[0].collections
        assert [(c.kind, [e.body for e in c.events]) for c in collections] == [
            (CollectionKind.FREE, ["before"]),
            (CollectionKind.SECTION, ["inside"]),
            (CollectionKind.FREE, ["after"]),
        ]

    def test_marker_inside_open_section_keeps_both(self, utc):
        text = "section S\n01/01/2023: a\ngroup G\n01/02/2023: b\nendGroup"
        collections = parse_text(text).pages[0].collections
        assert [c.title for c in collections] == ["S", "G"]
        assert [e.body for e in collections[0].events] == ["a"]
        assert collections[0].events[0].start == Concrete(utc(2023, 1, 1))
        assert [e.body for e in collections[1].events] == ["b"]

    def test_unclosed_group_kept_at_end_of_input(self):
        collections = parse_text("group Open").pages[0].collections
        assert collections == (Collection(kind=CollectionKind.GROUP, title="Open"),)


class TestPages:
    """Page breaks."""

    def test_works_with_multiple_pages(self, two_page_titles_text):
        document = parse_text(two_page_titles_text)
        assert document.pages == (
            Page(header=Header(title="This is a title for page 1")),
            Page(header=Header(title="This is a title for page 2")),
        )

    @pytest.mark.parametrize("breaks", [0, 1, 3])
    def test_n_breaks_yield_n_plus_one_pages(self, breaks):
        text = "\n".join(["_-_-_break_-_-_"] * breaks)
        assert len(parse_text(text).pages) == breaks + 1

    def test_date_format_inherited(self, utc):
        text = "dateFormat: d/M/y\n_-_-_break_-_-_\n03/04/2023: April third"
        document = parse_text(text)
        assert document.pages[1].header.date_format is DateFormat.EU
        assert document.pages[1].collections[0].events[0].start == Concrete(utc(2023, 4, 3))

    def test_date_format_override_on_next_page(self):
        text = "dateFormat: d/M/y\n_-_-_break_-_-_\ndateFormat: MM/dd/yy\n_-_-_break_-_-_"
        formats = [p.header.date_format for p in parse_text(text).pages]
        assert formats == [DateFormat.EU, DateFormat.US, DateFormat.US]

    def test_title_not_inherited(self):
        document = parse_text("title: First\n_-_-_break_-_-_")
        assert document.pages[1].header.title == ""

    def test_open_group_closed_by_page_break(self):
        document = parse_text("group G\n01/01/2023: a\n_-_-_break_-_-_\n01/02/2023: b")
        assert document.pages[0].collections[0].kind is CollectionKind.GROUP
        assert document.pages[1].collections[0].kind is CollectionKind.FREE


class TestTags:
    """Document-wide tag registry."""

    def test_tag_definition(self):
        assert parse_text("#Launch: red").tags == {"Launch": "red"}

    def test_trailing_comment_stripped(self):
        assert parse_text("#Exploratory: #e0f2fe // light blue").tags == {"Exploratory": "#e0f2fe"}

    def test_indented_tag(self):
        assert parse_text("   #Ops: green").tags == {"Ops": "green"}

    def test_tags_shared_across_pages_last_wins(self):
        text = "#A: red\n#B: blue\n_-_-_break_-_-_\n#A: green"
        assert parse_text(text).tags == {"A": "green", "B": "blue"}

    def test_tag_without_colon(self):
        with pytest.raises(MalformedTagError) as exc_info:
            parse_text("title: T\n#Launch")
        assert exc_info.value.line_number == 2

    def test_tag_with_empty_name(self):
        with pytest.raises(MalformedTagError):
            parse_text("#: red")


class TestErrors:
    """Fail-fast behavior."""

    def test_malformed_line(self):
        with pytest.raises(MalformedLineError) as exc_info:
            parse_text("01/01/2023: ok\nno separator here")
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "no separator here"
        assert "line 2" in str(exc_info.value)

    def test_bad_date_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_text("tomorrow: party")

    def test_builder_single_use(self):
        builder = DocumentBuilder()
        builder.build()
        with pytest.raises(RuntimeError):
            builder.feed("01/01/2023: late")
        with pytest.raises(RuntimeError):
            builder.build()


class TestParseFile:
    """Reading timelines from disk."""

    def test_eu_phases_file(self, timelines_dir):
        document = parse_file(timelines_dir / "eu_phases.mw")
        page = document.pages[0]
        assert page.header.title == "Launch plan"
        assert [c.kind for c in page.collections] == [CollectionKind.FREE, CollectionKind.SECTION]
        assert page.collections[1].title == "Delivery"
        assert document.tags == {"Exploratory": "#e0f2fe", "Launch": "red"}

    def test_multi_page_file(self, timelines_dir, utc):
        document = parse_file(timelines_dir / "multi_page.mw")
        assert [p.header.title for p in document.pages] == ["Roadmap", "Retrospective"]
        assert document.pages[1].header.date_format is DateFormat.EU

        notes = document.pages[1].collections[0]
        assert notes.collapsed is True
        assert notes.events[0].start == Concrete(utc(2024, 3, 15))
        assert notes.events[1] == Event(Concrete(utc(2024, 3, 20)), NOW, "Follow-ups")
        assert document.tags == {"Infra": "blue"}

    def test_invalid_file(self, timelines_dir):
        with pytest.raises(MalformedLineError) as exc_info:
            parse_file(timelines_dir / "invalid.mw")
        assert exc_info.value.line_number == 3

    def test_missing_file(self, tmp_dir):
        with pytest.raises(OSError):
            parse_file(tmp_dir / "missing.mw")
