#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/jira.py
"""JIRA wiki markup rendering from document events.

This module provides the JiraRenderer class which turns a stream of Markdown
events into Atlassian JIRA wiki markup. Block spacing goes through a
DeferredNewlineWriter so that a block only *asks* for the separation it
needs and the next block decides whether the newlines get written.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from md2jira.constants import (
    JIRA_CODE_BLOCK,
    JIRA_CODE_BLOCK_WITH_LANGUAGE,
    JIRA_EMPHASIS,
    JIRA_HEADING,
    JIRA_IMAGE,
    JIRA_INLINE_CODE_CLOSE,
    JIRA_INLINE_CODE_OPEN,
    JIRA_LINK_CLOSE,
    JIRA_LINK_OPEN,
    JIRA_ORDERED_BULLET,
    JIRA_QUOTE,
    JIRA_RULE,
    JIRA_STRONG,
    JIRA_UNORDERED_BULLET,
)
from md2jira.events import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    Event,
    EventVisitor,
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
from md2jira.exceptions import RenderingError, UnknownEventError
from md2jira.options.jira import JiraRendererOptions
from md2jira.renderers.base import BaseRenderer
from md2jira.renderers.writer import DeferredNewlineWriter
from md2jira.utils.io_utils import OutputDestination

logger = logging.getLogger(__name__)


@dataclass
class JiraRenderState:
    """Mutable state for a single render call.

    Parameters
    ----------
    writer : DeferredNewlineWriter
        Output buffer and pending newline count
    in_image : bool
        True between the start and end of an image. Text inside an image is
        its alt text, which JIRA image markup has no place for.
    list_stack : list of bool
        One entry per open list, innermost last; True for ordered lists
    footnote_definition_count : int
        Number given to the next footnote definition
    footnote_reference_count : int
        Number given to the next footnote reference

    """

    writer: DeferredNewlineWriter = field(default_factory=DeferredNewlineWriter)
    in_image: bool = False
    list_stack: list[bool] = field(default_factory=list)
    footnote_definition_count: int = 0
    footnote_reference_count: int = 0


class JiraRenderer(EventVisitor, BaseRenderer):
    """Render document events to JIRA wiki markup.

    Parameters
    ----------
    options : JiraRendererOptions or None, default = None
        JIRA rendering options

    Examples
    --------
    Basic usage:

        >>> from md2jira.events import End, Heading, Start, Text
        >>> renderer = JiraRenderer()
        >>> title = Heading(level=1)
        >>> renderer.render_to_string([Start(title), Text("Title"), End(title)])
        'h1. Title'

    """

    def __init__(self, options: JiraRendererOptions | None = None):
        """Initialize the JIRA renderer with options."""
        BaseRenderer._validate_options_type(options, JiraRendererOptions, "jira")
        options = options or JiraRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JiraRendererOptions = options
        self._state = self._new_state()

    def _new_state(self) -> JiraRenderState:
        start = self.options.footnote_start_index
        return JiraRenderState(footnote_definition_count=start, footnote_reference_count=start)

    @property
    def _writer(self) -> DeferredNewlineWriter:
        return self._state.writer

    def render_to_string(self, events: Iterable[Event]) -> str:
        """Render an event stream to a JIRA markup string.

        Parameters
        ----------
        events : Iterable[Event]
            Well-formed event stream, in document order. Generators are
            consumed once.

        Returns
        -------
        str
            JIRA markup, without leading or trailing newlines

        Raises
        ------
        UnknownEventError
            If the stream contains something that is not an event, or a
            start/end event whose tag is not a known tag. Nothing rendered
            before the failure is returned.

        """
        self._state = self._new_state()

        count = 0
        for position, event in enumerate(events):
            self._dispatch(event, position)
            count += 1

        result = self._writer.getvalue()
        logger.debug("Rendered %d events to %d characters of JIRA markup", count, len(result))
        return result

    def render(self, events: Iterable[Event], output: OutputDestination) -> None:
        """Render an event stream and write the markup to ``output``.

        Parameters
        ----------
        events : Iterable[Event]
            Event stream to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        jira_text = self.render_to_string(events)
        self.write_text_output(jira_text, output)

    def _dispatch(self, event: object, position: int) -> None:
        if not isinstance(event, Event):
            raise UnknownEventError(event, position=position)
        if isinstance(event, (Start, End)) and not isinstance(event.tag, Tag):
            raise UnknownEventError(event, position=position)
        event.accept(self)

    def _format_footnote(self, template: str, index: int) -> str:
        try:
            return template.format(index=index)
        except (KeyError, IndexError, ValueError) as e:
            raise RenderingError(
                f"Invalid footnote format {template!r}: {e}", rendering_stage="footnote", original_error=e
            ) from e

    # Leaf events

    def visit_text(self, event: Text) -> None:
        """Append text verbatim unless it is image alt text."""
        if not self._state.in_image:
            self._writer.append(event.content)

    def visit_raw_markup(self, event: RawMarkup) -> None:
        """Append embedded HTML verbatim unless inside an image."""
        if not self._state.in_image:
            self._writer.append(event.content)

    def visit_hard_line_break(self, event: HardLineBreak) -> None:
        """Render a hard break as a blank line."""
        self._writer.request_blank_line()

    def visit_soft_line_break(self, event: SoftLineBreak) -> None:
        """Render a soft break as a newline."""
        self._writer.request_single_break()

    def visit_footnote_reference(self, event: FootnoteReference) -> None:
        """Render a footnote reference as a numbered marker.

        Labels are ignored; references are numbered in order of appearance.
        """
        state = self._state
        self._writer.append(
            self._format_footnote(self.options.footnote_reference_format, state.footnote_reference_count)
        )
        state.footnote_reference_count += 1

    # Containers

    def start_block_quote(self, tag: BlockQuote) -> None:
        self._writer.append(JIRA_QUOTE)
        self._writer.request_single_break()

    def end_block_quote(self, tag: BlockQuote) -> None:
        self._writer.close_line()
        self._writer.append(JIRA_QUOTE)
        self._writer.request_blank_line()

    def start_code(self, tag: Code) -> None:
        self._writer.append(JIRA_INLINE_CODE_OPEN)

    def end_code(self, tag: Code) -> None:
        self._writer.append(JIRA_INLINE_CODE_CLOSE)

    def start_code_block(self, tag: CodeBlock) -> None:
        """Open a code block, naming the language when there is one."""
        if tag.language:
            self._writer.append(JIRA_CODE_BLOCK_WITH_LANGUAGE.format(language=tag.language))
        else:
            self._writer.append(JIRA_CODE_BLOCK)
        self._writer.request_single_break()

    def end_code_block(self, tag: CodeBlock) -> None:
        self._writer.close_line()
        self._writer.append(JIRA_CODE_BLOCK)
        self._writer.request_blank_line()

    def start_emphasis(self, tag: Emphasis) -> None:
        self._writer.append(JIRA_EMPHASIS)

    def end_emphasis(self, tag: Emphasis) -> None:
        self._writer.append(JIRA_EMPHASIS)

    def start_strong(self, tag: Strong) -> None:
        self._writer.append(JIRA_STRONG)

    def end_strong(self, tag: Strong) -> None:
        self._writer.append(JIRA_STRONG)

    def start_heading(self, tag: Heading) -> None:
        self._writer.append(JIRA_HEADING.format(level=tag.level))

    def end_heading(self, tag: Heading) -> None:
        self._writer.request_blank_line()

    def start_image(self, tag: Image) -> None:
        """Render the image and start suppressing its alt text.

        JIRA image markup carries only the destination; the title is dropped.
        """
        self._writer.append(JIRA_IMAGE.format(destination=tag.destination))
        self._state.in_image = True

    def end_image(self, tag: Image) -> None:
        self._state.in_image = False

    def start_link(self, tag: Link) -> None:
        self._writer.append(JIRA_LINK_OPEN)

    def end_link(self, tag: Link) -> None:
        self._writer.append(JIRA_LINK_CLOSE.format(destination=tag.destination))

    def start_list(self, tag: List) -> None:
        """Open a list; a nested list starts on its own line."""
        if self._state.list_stack:
            self._writer.request_single_break()
        self._state.list_stack.append(tag.ordered)

    def end_list(self, tag: List) -> None:
        stack = self._state.list_stack
        if stack:
            stack.pop()
        if stack:
            self._writer.request_single_break()
        else:
            self._writer.request_blank_line()

    def start_list_item(self, tag: ListItem) -> None:
        """Write the bullet prefix for the current nesting.

        JIRA nests lists by repeating bullets, one per level, so an ordered
        list inside a bulleted one gives ``*# ``. An item outside any list
        gets no prefix.
        """
        stack = self._state.list_stack
        if not stack:
            return
        bullets = "".join(JIRA_ORDERED_BULLET if ordered else JIRA_UNORDERED_BULLET for ordered in stack)
        self._writer.append(bullets + " ")

    def end_list_item(self, tag: ListItem) -> None:
        # Cancels the blank line left by a trailing code block, quote or heading
        self._writer.close_line()

    def start_paragraph(self, tag: Paragraph) -> None:
        pass

    def end_paragraph(self, tag: Paragraph) -> None:
        # A blank line would end the JIRA list
        if self._state.list_stack:
            self._writer.request_single_break()
        else:
            self._writer.request_blank_line()

    def start_thematic_break(self, tag: ThematicBreak) -> None:
        self._writer.append(JIRA_RULE)
        self._writer.request_blank_line()

    def end_thematic_break(self, tag: ThematicBreak) -> None:
        pass

    def start_footnote_definition(self, tag: FootnoteDefinition) -> None:
        """Write the numbered marker that introduces a footnote body."""
        state = self._state
        self._writer.append(
            self._format_footnote(self.options.footnote_definition_format, state.footnote_definition_count)
        )
        state.footnote_definition_count += 1

    def end_footnote_definition(self, tag: FootnoteDefinition) -> None:
        pass

    # Tables pass through as their source text

    def start_table(self, tag: Table) -> None:
        pass

    def end_table(self, tag: Table) -> None:
        pass

    def start_table_head(self, tag: TableHead) -> None:
        pass

    def end_table_head(self, tag: TableHead) -> None:
        pass

    def start_table_row(self, tag: TableRow) -> None:
        pass

    def end_table_row(self, tag: TableRow) -> None:
        pass

    def start_table_cell(self, tag: TableCell) -> None:
        pass

    def end_table_cell(self, tag: TableCell) -> None:
        pass


def events_to_jira(events: Iterable[Event], options: JiraRendererOptions | None = None) -> str:
    """Render an event stream to JIRA markup in one step.

    Parameters
    ----------
    events : Iterable[Event]
        Events to render
    options : JiraRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        JIRA markup

    """
    return JiraRenderer(options).render_to_string(events)
