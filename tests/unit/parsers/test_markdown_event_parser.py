#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the Markdown event parser.

Tests cover:
- Headings, paragraphs and inline formatting
- Lists (tight, loose, nested)
- Code blocks and block quotes
- HTML passthrough
- Footnotes and tables (plugins on and off)
- Well-formedness of the event stream
- Input loading and options

"""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from md2jira.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    FootnoteDefinition,
    FootnoteReference,
    HardLineBreak,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    RawMarkup,
    SoftLineBreak,
    Start,
    Strong,
    Table,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)
from md2jira.exceptions import FileNotFoundError as Md2JiraFileNotFoundError
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.markdown import MarkdownEventParser, markdown_to_events


def parse(text: str, **options) -> list:
    return list(MarkdownEventParser(MarkdownParserOptions(**options)).parse(text))


def text_of(events) -> str:
    return "".join(e.content for e in events if isinstance(e, Text))


def tags_of(events, tag_type) -> list:
    return [e.tag for e in events if isinstance(e, Start) and isinstance(e.tag, tag_type)]


def assert_balanced(events) -> None:
    """Assert every Start is closed by an End of the same tag, properly nested."""
    stack = []
    for event in events:
        if isinstance(event, Start):
            stack.append(event.tag)
        elif isinstance(event, End):
            assert stack, f"Unmatched {event}"
            assert stack.pop() == event.tag
    assert not stack


@pytest.mark.unit
class TestMarkdownBlocks:
    """Tests for block-level constructs."""

    def test_heading(self) -> None:
        """Test an ATX heading."""
        assert parse("# Hello") == [Start(Heading(level=1)), Text("Hello"), End(Heading(level=1))]

    def test_heading_levels(self) -> None:
        """Test levels are carried over."""
        events = parse("### Three")
        assert tags_of(events, Heading) == [Heading(level=3)]

    def test_paragraph(self) -> None:
        """Test a paragraph wraps its text."""
        events = parse("Just text.")
        assert events[0] == Start(Paragraph())
        assert events[-1] == End(Paragraph())
        assert text_of(events) == "Just text."

    def test_soft_break(self) -> None:
        """Test a newline within a paragraph is a soft break."""
        events = parse("one\ntwo")
        assert SoftLineBreak() in events
        assert HardLineBreak() not in events

    def test_hard_break(self) -> None:
        """Test a backslash line ending is a hard break."""
        events = parse("one\\\ntwo")
        assert HardLineBreak() in events

    def test_fenced_code_block_with_language(self) -> None:
        """Test the info string's first word is the language."""
        events = parse("```python extra\nprint(1)\n```")
        assert events == [Start(CodeBlock(language="python")), Text("print(1)\n"), End(CodeBlock(language="python"))]

    def test_fenced_code_block_without_language(self) -> None:
        """Test a fence with no info string."""
        events = parse("```\nx = 1\n```")
        assert tags_of(events, CodeBlock) == [CodeBlock(language=None)]
        assert text_of(events) == "x = 1\n"

    def test_block_quote(self) -> None:
        """Test a block quote wraps its paragraphs."""
        events = parse("> Paragraph 1.\n>\n> Paragraph 2.")
        assert events[0] == Start(BlockQuote())
        assert events[-1] == End(BlockQuote())
        assert len(tags_of(events, Paragraph)) == 2

    def test_thematic_break(self) -> None:
        """Test a rule is a start/end pair."""
        assert parse("---") == [Start(ThematicBreak()), End(ThematicBreak())]

    def test_block_html(self) -> None:
        """Test block HTML becomes raw markup in its own paragraph."""
        events = parse("<div>hi</div>")
        assert events == [Start(Paragraph()), RawMarkup("<div>hi</div>"), End(Paragraph())]


@pytest.mark.unit
class TestMarkdownLists:
    """Tests for lists."""

    def test_tight_unordered_list(self) -> None:
        """Test tight items carry bare text with no paragraphs."""
        events = parse("- a\n- b")
        assert events == [
            Start(List(ordered=False)),
            Start(ListItem()),
            Text("a"),
            End(ListItem()),
            Start(ListItem()),
            Text("b"),
            End(ListItem()),
            End(List(ordered=False)),
        ]

    def test_ordered_list(self) -> None:
        """Test numbered lists are ordered."""
        events = parse("1. one\n2. two")
        assert tags_of(events, List) == [List(ordered=True)]
        assert len(tags_of(events, ListItem)) == 2

    def test_loose_list_has_paragraphs(self) -> None:
        """Test items separated by blank lines contain paragraphs."""
        events = parse("- a\n\n- b")
        assert len(tags_of(events, Paragraph)) == 2

    def test_nested_list(self) -> None:
        """Test a nested list opens inside the outer item."""
        events = parse("- outer\n  1. inner")
        assert tags_of(events, List) == [List(ordered=False), List(ordered=True)]
        assert_balanced(events)


@pytest.mark.unit
class TestMarkdownInline:
    """Tests for inline constructs."""

    def test_emphasis_and_strong(self) -> None:
        """Test emphasis and strong tags."""
        events = parse("*em* and **strong**")
        assert tags_of(events, Emphasis) == [Emphasis()]
        assert tags_of(events, Strong) == [Strong()]

    def test_codespan(self) -> None:
        """Test inline code."""
        events = parse("has `some code`.")
        start = events.index(Start(Code()))
        assert events[start + 1] == Text("some code")
        assert events[start + 2] == End(Code())

    def test_link(self) -> None:
        """Test links carry destination and title."""
        events = parse('[has a link](https://example.com "Title")')
        assert tags_of(events, Link) == [Link(destination="https://example.com", title="Title")]
        assert text_of(events) == "has a link"

    def test_image(self) -> None:
        """Test images carry destination; alt text is inside."""
        events = parse("![An image](https://example.com)")
        assert tags_of(events, Image) == [Image(destination="https://example.com")]
        assert text_of(events) == "An image"

    def test_inline_html(self) -> None:
        """Test inline HTML becomes raw markup."""
        events = parse("a <b>bold</b> c")
        assert RawMarkup("<b>") in events
        assert RawMarkup("</b>") in events


@pytest.mark.unit
class TestMarkdownExtensions:
    """Tests for footnotes and tables."""

    def test_footnotes_off_by_default(self) -> None:
        """Test footnote syntax stays text without the plugin."""
        events = parse("Note[^1].")
        assert not [e for e in events if isinstance(e, FootnoteReference)]
        assert "[^1]" in text_of(events)

    def test_footnotes_on(self) -> None:
        """Test footnote references and definitions are parsed."""
        events = parse("Note[^a].\n\n[^a]: The note.", parse_footnotes=True)
        references = [e for e in events if isinstance(e, FootnoteReference)]
        assert len(references) == 1
        definitions = tags_of(events, FootnoteDefinition)
        assert len(definitions) == 1
        assert "The note." in text_of(events)
        assert_balanced(events)

    def test_tables_off_by_default(self) -> None:
        """Test pipe tables stay paragraph text without the plugin."""
        events = parse("| a | b |\n| --- | --- |\n| 1 | 2 |")
        assert not tags_of(events, Table)
        assert "| a | b |" in text_of(events)

    def test_tables_on(self) -> None:
        """Test tables are bracketed by table events around pipe text."""
        events = parse("| a | b |\n| --- | --- |\n| 1 | 2 |", parse_tables=True)
        assert tags_of(events, Table) == [Table()]
        assert tags_of(events, TableHead) == [TableHead()]
        assert len(tags_of(events, TableRow)) == 1
        assert len(tags_of(events, TableCell)) == 4
        assert text_of(events) == "| a | b || --- | --- || 1 | 2 |"
        assert_balanced(events)

    def test_table_alignment_delimiters(self) -> None:
        """Test column alignment is kept in the delimiter row."""
        events = parse("| a | b | c |\n| :-- | :-: | --: |\n| 1 | 2 | 3 |", parse_tables=True)
        assert Text("| :--- | :---: | ---: |") in events


@pytest.mark.unit
class TestMarkdownStream:
    """Tests for stream-level properties and input handling."""

    def test_empty_document(self) -> None:
        """Test no input gives no events."""
        assert parse("") == []

    def test_stream_is_balanced(self) -> None:
        """Test a mixed document yields a well-formed stream."""
        doc = "# T\n\n> q\n\n- a\n  - b\n\n```\nc\n```\n\n[l](u) ![i](p)"
        assert_balanced(parse(doc))

    def test_parse_returns_iterator(self) -> None:
        """Test events are produced lazily."""
        result = MarkdownEventParser().parse("# x")
        assert next(iter(result)) == Start(Heading(level=1))

    def test_parse_bytes(self) -> None:
        """Test raw bytes are decoded."""
        events = list(MarkdownEventParser().parse("# Café".encode("utf-8")))
        assert text_of(events) == "Café"

    def test_parse_binary_stream(self) -> None:
        """Test binary file-like input."""
        events = list(MarkdownEventParser().parse(BytesIO(b"# Stream")))
        assert text_of(events) == "Stream"

    def test_parse_text_stream(self) -> None:
        """Test text file-like input."""
        events = list(MarkdownEventParser().parse(StringIO("# Stream")))
        assert text_of(events) == "Stream"

    def test_parse_path(self, tmp_path: Path) -> None:
        """Test reading from a Path."""
        source = tmp_path / "doc.md"
        source.write_text("# From file", encoding="utf-8")
        events = list(MarkdownEventParser().parse(source))
        assert text_of(events) == "From file"

    def test_parse_path_string(self, tmp_path: Path) -> None:
        """Test a string naming an existing file is read as that file."""
        source = tmp_path / "doc.md"
        source.write_text("# From file", encoding="utf-8")
        events = list(MarkdownEventParser().parse(str(source)))
        assert text_of(events) == "From file"

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        """Test a missing Path raises the library's FileNotFoundError."""
        with pytest.raises(Md2JiraFileNotFoundError):
            MarkdownEventParser().parse(tmp_path / "missing.md")

    def test_invalid_options_type(self) -> None:
        """Test renderer options are rejected by the parser."""
        with pytest.raises(InvalidOptionsError):
            MarkdownEventParser(JiraRendererOptions())  # type: ignore[arg-type]

    def test_markdown_to_events_helper(self) -> None:
        """Test the convenience function returns a list."""
        events = markdown_to_events("# Hello\n\nWorld")
        assert isinstance(events, list)
        assert len(events) == 6
