#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/markdown.py
"""Markdown to event stream parser.

This module turns Markdown documents into the flat Start/End/leaf event
stream consumed by the JIRA renderer, using the mistune parser in token mode.
The token tree is walked depth first; every container token becomes a
``Start``/``End`` pair around the events of its children.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from md2jira.constants import DEPS_MARKDOWN
from md2jira.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
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
    Tag,
    Text,
    ThematicBreak,
)
from md2jira.exceptions import Md2JiraError, ParsingError
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import BaseParser, ParserInput
from md2jira.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

Token = dict[str, Any]

_TABLE_DELIMITERS = {
    None: "---",
    "left": ":---",
    "right": "---:",
    "center": ":---:",
}


class MarkdownEventParser(BaseParser):
    r"""Convert Markdown to an event stream.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownEventParser()
        >>> list(parser.parse("# Hello"))
        [Start(tag=Heading(level=1)), Text(content='Hello'), End(tag=Heading(level=1))]

    With footnotes:

        >>> parser = MarkdownEventParser(MarkdownParserOptions(parse_footnotes=True))
        >>> events = list(parser.parse("Text[^1]\n\n[^1]: Note"))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Iterator[Event]:
        """Parse Markdown input into an event stream.

        The document is tokenized eagerly, so parse failures surface here;
        events are produced lazily as the returned iterator is consumed.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown input to parse. Can be:
            - File path (str or Path)
            - File-like object
            - Raw markdown bytes
            - Markdown string

        Returns
        -------
        Iterator[Event]
            Events in document order

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)
        tokens = self._tokenize(markdown_content)
        return self._iter_tokens(tokens)

    def _create_markdown(self) -> Any:
        import mistune

        plugins = []
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")

        # We'll walk the tokens ourselves
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        markdown.block.max_nested_level = self.options.max_nesting_level
        return markdown

    def _tokenize(self, markdown_content: str) -> list[Token]:
        markdown = self._create_markdown()
        try:
            with debug_timer(logger, "Parsing (markdown)"):
                tokens, _state = markdown.parse(markdown_content)
        except Md2JiraError:
            raise
        except Exception as e:
            raise ParsingError(
                f"Failed to parse Markdown: {e}", parsing_stage="tokenizing", original_error=e
            ) from e

        if not isinstance(tokens, list):
            raise ParsingError(
                f"Unexpected mistune output of type {type(tokens).__name__}", parsing_stage="tokenizing"
            )
        logger.debug("Tokenized Markdown into %d top-level tokens", len(tokens))
        return tokens

    # Token walking

    def _iter_tokens(self, tokens: list[Token]) -> Iterator[Event]:
        for token in tokens:
            yield from self._iter_token(token)

    def _iter_token(self, token: Token) -> Iterator[Event]:
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[Token], Iterator[Event]]] = {
            # Block-level tokens
            "heading": self._handle_heading,
            "paragraph": self._handle_paragraph,
            "block_text": self._iter_children,
            "block_code": self._handle_block_code,
            "block_quote": self._handle_block_quote,
            "list": self._handle_list,
            "list_item": self._handle_list_item,
            "task_list_item": self._handle_list_item,
            "thematic_break": self._handle_thematic_break,
            "block_html": self._handle_block_html,
            "blank_line": self._handle_blank_line,
            "footnotes": self._iter_children,
            "footnote_item": self._handle_footnote_item,
            "table": self._handle_table,
            # Inline tokens
            "text": self._handle_text,
            "emphasis": self._handle_emphasis,
            "strong": self._handle_strong,
            "codespan": self._handle_codespan,
            "link": self._handle_link,
            "image": self._handle_image,
            "linebreak": self._handle_linebreak,
            "softbreak": self._handle_softbreak,
            "inline_html": self._handle_inline_html,
            "footnote_ref": self._handle_footnote_ref,
        }

        handler = handler_map.get(token_type)
        if handler is None:
            logger.debug("Unhandled mistune token type %r, emitting its content", token_type)
            return self._iter_content(token)
        return handler(token)

    def _iter_children(self, token: Token) -> Iterator[Event]:
        children = token.get("children")
        if isinstance(children, list):
            yield from self._iter_tokens(children)

    def _iter_content(self, token: Token) -> Iterator[Event]:
        """Emit children if present, otherwise the raw or unparsed text."""
        if isinstance(token.get("children"), list):
            yield from self._iter_children(token)
            return
        raw = token.get("raw") or token.get("text")
        if raw:
            yield Text(raw)

    def _wrap(self, tag: Tag, token: Token) -> Iterator[Event]:
        yield Start(tag)
        yield from self._iter_content(token)
        yield End(tag)

    @staticmethod
    def _attrs(token: Token) -> dict[str, Any]:
        attrs = token.get("attrs", {})
        return attrs if isinstance(attrs, dict) else {}

    # Block handlers

    def _handle_heading(self, token: Token) -> Iterator[Event]:
        level = self._attrs(token).get("level", 1)
        return self._wrap(Heading(level=level), token)

    def _handle_paragraph(self, token: Token) -> Iterator[Event]:
        return self._wrap(Paragraph(), token)

    def _handle_block_code(self, token: Token) -> Iterator[Event]:
        """Handle fenced and indented code blocks.

        Only the first word of the info string names the language.
        """
        info = self._attrs(token).get("info") or ""
        words = info.split()
        tag = CodeBlock(language=words[0] if words else None)

        yield Start(tag)
        raw = token.get("raw", "")
        if raw:
            yield Text(raw)
        yield End(tag)

    def _handle_block_quote(self, token: Token) -> Iterator[Event]:
        return self._wrap(BlockQuote(), token)

    def _handle_list(self, token: Token) -> Iterator[Event]:
        ordered = bool(self._attrs(token).get("ordered", False))
        return self._wrap(List(ordered=ordered), token)

    def _handle_list_item(self, token: Token) -> Iterator[Event]:
        return self._wrap(ListItem(), token)

    def _handle_thematic_break(self, token: Token) -> Iterator[Event]:
        tag = ThematicBreak()
        yield Start(tag)
        yield End(tag)

    def _handle_block_html(self, token: Token) -> Iterator[Event]:
        """Pass block HTML through as its own paragraph of raw markup."""
        raw = token.get("raw", "").rstrip("\n")
        if not raw:
            return
        tag = Paragraph()
        yield Start(tag)
        yield RawMarkup(raw)
        yield End(tag)

    def _handle_blank_line(self, token: Token) -> Iterator[Event]:
        return iter(())

    def _handle_footnote_item(self, token: Token) -> Iterator[Event]:
        key = self._attrs(token).get("key", "")
        return self._wrap(FootnoteDefinition(label=str(key)), token)

    def _handle_table(self, token: Token) -> Iterator[Event]:
        """Bracket a table's pipe-table source text with table events.

        The table sits inside a paragraph so that the blocks around it keep
        their blank-line separation.
        """
        paragraph = Paragraph()
        table = Table()
        yield Start(paragraph)
        yield Start(table)

        first_row = True
        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                cells = section.get("children", [])
                head = TableHead()
                yield Start(head)
                yield from self._iter_table_cells(cells)
                yield End(head)
                yield SoftLineBreak()
                yield Text(self._delimiter_row(cells))
                first_row = False
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    if not first_row:
                        yield SoftLineBreak()
                    first_row = False
                    row = TableRow()
                    yield Start(row)
                    yield from self._iter_table_cells(row_token.get("children", []))
                    yield End(row)
            else:
                logger.debug("Unhandled table section %r", section_type)

        yield End(table)
        yield End(paragraph)

    def _iter_table_cells(self, cells: list[Token]) -> Iterator[Event]:
        yield Text("|")
        for cell_token in cells:
            yield Text(" ")
            yield from self._wrap(TableCell(), cell_token)
            yield Text(" |")

    def _delimiter_row(self, cells: list[Token]) -> str:
        delimiters = [_TABLE_DELIMITERS.get(self._attrs(cell).get("align"), "---") for cell in cells]
        return "| " + " | ".join(delimiters) + " |"

    # Inline handlers

    def _handle_text(self, token: Token) -> Iterator[Event]:
        raw = token.get("raw", "")
        if raw:
            yield Text(raw)

    def _handle_emphasis(self, token: Token) -> Iterator[Event]:
        return self._wrap(Emphasis(), token)

    def _handle_strong(self, token: Token) -> Iterator[Event]:
        return self._wrap(Strong(), token)

    def _handle_codespan(self, token: Token) -> Iterator[Event]:
        return self._wrap(Code(), token)

    def _handle_link(self, token: Token) -> Iterator[Event]:
        attrs = self._attrs(token)
        return self._wrap(Link(destination=attrs.get("url", ""), title=attrs.get("title") or ""), token)

    def _handle_image(self, token: Token) -> Iterator[Event]:
        # Alt text is in children, not attrs
        attrs = self._attrs(token)
        return self._wrap(Image(destination=attrs.get("url", ""), title=attrs.get("title") or ""), token)

    def _handle_linebreak(self, token: Token) -> Iterator[Event]:
        if self._attrs(token).get("soft", False):
            yield SoftLineBreak()
        else:
            yield HardLineBreak()

    def _handle_softbreak(self, token: Token) -> Iterator[Event]:
        yield SoftLineBreak()

    def _handle_inline_html(self, token: Token) -> Iterator[Event]:
        raw = token.get("raw", "")
        if raw:
            yield RawMarkup(raw)

    def _handle_footnote_ref(self, token: Token) -> Iterator[Event]:
        label = token.get("raw") or self._attrs(token).get("label", "")
        yield FootnoteReference(label=str(label))


def markdown_to_events(markdown_content: str, options: MarkdownParserOptions | None = None) -> list[Event]:
    r"""Convert a Markdown string to a list of events.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    list of Event
        Events in document order

    Examples
    --------
    >>> events = markdown_to_events("# Hello\n\nWorld")
    >>> len(events)
    6

    """
    parser = MarkdownEventParser(options)
    return list(parser.parse(markdown_content))
