#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/events.py
"""Document events consumed by the JIRA renderer.

This module defines the closed set of events produced by the Markdown event
source and consumed, in order and exactly once, by the renderer. Instead of
a tree, a document is a flat stream where block and inline constructs are
bracketed by ``Start``/``End`` pairs and text arrives as leaf events.

Event Set
---------
Bracketing events carry a :class:`Tag`:
    - Start, End

Leaf events:
    - Text, RawMarkup
    - HardLineBreak, SoftLineBreak
    - FootnoteReference

Tags
----
Block-level tags:
    - BlockQuote, CodeBlock, Heading, List, ListItem, Paragraph
    - ThematicBreak, FootnoteDefinition
    - Table, TableHead, TableRow, TableCell

Inline tags:
    - Code, Emphasis, Strong, Link, Image

Every event implements ``accept(visitor)`` and every tag implements
``open(visitor)`` and ``close(visitor)``, dispatching to the matching method
of an :class:`EventVisitor`. Because ``EventVisitor`` declares every method
abstract, a visitor that forgets a construct cannot be instantiated.

Examples
--------
The event stream for ``# Title``:

    >>> from md2jira.events import End, Heading, Start, Text
    >>> events = [Start(Heading(level=1)), Text("Title"), End(Heading(level=1))]

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

# =============================================================================
# Tags
# =============================================================================


class Tag(ABC):
    """Base class for all construct kinds that can be opened and closed."""

    @abstractmethod
    def open(self, visitor: EventVisitor) -> Any:
        """Dispatch the start of this construct to ``visitor``."""

    @abstractmethod
    def close(self, visitor: EventVisitor) -> Any:
        """Dispatch the end of this construct to ``visitor``."""


@dataclass(frozen=True)
class BlockQuote(Tag):
    """Block quote container."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_block_quote(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_block_quote(self)


@dataclass(frozen=True)
class Code(Tag):
    """Inline code span."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_code(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_code(self)


@dataclass(frozen=True)
class CodeBlock(Tag):
    """Fenced or indented code block.

    Parameters
    ----------
    language : str or None, default = None
        Info string language, if the block declared one

    """

    language: Optional[str] = None

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_code_block(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_code_block(self)


@dataclass(frozen=True)
class Emphasis(Tag):
    """Emphasized (italic) inline content."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_emphasis(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_emphasis(self)


@dataclass(frozen=True)
class Strong(Tag):
    """Strong (bold) inline content."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_strong(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_strong(self)


@dataclass(frozen=True)
class Heading(Tag):
    """Heading (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)

    """

    level: int

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_heading(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_heading(self)


@dataclass(frozen=True)
class Image(Tag):
    """Embedded image.

    The image's alternative text arrives as ``Text`` events between the
    ``Start`` and ``End`` of this tag.

    Parameters
    ----------
    destination : str
        Image source URL
    title : str, default = ''
        Optional image title

    """

    destination: str
    title: str = ""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_image(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_image(self)


@dataclass(frozen=True)
class Link(Tag):
    """Hyperlink around inline content.

    Parameters
    ----------
    destination : str
        Link target URL
    title : str, default = ''
        Optional link title

    """

    destination: str
    title: str = ""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_link(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_link(self)


@dataclass(frozen=True)
class ListItem(Tag):
    """A single item of the innermost open list."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_list_item(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_list_item(self)


@dataclass(frozen=True)
class List(Tag):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        True for numbered lists, False for bulleted lists

    """

    ordered: bool = False

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_list(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_list(self)


@dataclass(frozen=True)
class Paragraph(Tag):
    """Paragraph of inline content."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_paragraph(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_paragraph(self)


@dataclass(frozen=True)
class ThematicBreak(Tag):
    """Horizontal rule."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_thematic_break(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_thematic_break(self)


@dataclass(frozen=True)
class FootnoteDefinition(Tag):
    """Footnote body.

    Parameters
    ----------
    label : str
        Label chosen in the source; not used for numbering

    """

    label: str

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_footnote_definition(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_footnote_definition(self)


@dataclass(frozen=True)
class Table(Tag):
    """Table container. Cell content arrives as source text."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_table(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_table(self)


@dataclass(frozen=True)
class TableHead(Tag):
    """Header section of a table."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_table_head(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_table_head(self)


@dataclass(frozen=True)
class TableRow(Tag):
    """Body row of a table."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_table_row(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_table_row(self)


@dataclass(frozen=True)
class TableCell(Tag):
    """Single table cell."""

    def open(self, visitor: EventVisitor) -> Any:
        return visitor.start_table_cell(self)

    def close(self, visitor: EventVisitor) -> Any:
        return visitor.end_table_cell(self)


# =============================================================================
# Events
# =============================================================================


class Event(ABC):
    """Base class for all events in a document stream."""

    @abstractmethod
    def accept(self, visitor: EventVisitor) -> Any:
        """Accept a visitor for processing this event.

        Parameters
        ----------
        visitor : EventVisitor
            Visitor that handles the event

        Returns
        -------
        Any
            Result from the matching visitor method

        """


@dataclass(frozen=True)
class Start(Event):
    """Opens the construct described by ``tag``."""

    tag: Tag

    def accept(self, visitor: EventVisitor) -> Any:
        return self.tag.open(visitor)


@dataclass(frozen=True)
class End(Event):
    """Closes the construct described by ``tag``."""

    tag: Tag

    def accept(self, visitor: EventVisitor) -> Any:
        return self.tag.close(visitor)


@dataclass(frozen=True)
class Text(Event):
    """Plain text leaf."""

    content: str

    def accept(self, visitor: EventVisitor) -> Any:
        return visitor.visit_text(self)


@dataclass(frozen=True)
class RawMarkup(Event):
    """Verbatim embedded markup (HTML) leaf."""

    content: str

    def accept(self, visitor: EventVisitor) -> Any:
        return visitor.visit_raw_markup(self)


@dataclass(frozen=True)
class HardLineBreak(Event):
    """Hard line break inside inline content."""

    def accept(self, visitor: EventVisitor) -> Any:
        return visitor.visit_hard_line_break(self)


@dataclass(frozen=True)
class SoftLineBreak(Event):
    """Soft line break (a newline in the source paragraph)."""

    def accept(self, visitor: EventVisitor) -> Any:
        return visitor.visit_soft_line_break(self)


@dataclass(frozen=True)
class FootnoteReference(Event):
    """Inline reference to a footnote.

    Parameters
    ----------
    label : str
        Label chosen in the source; not used for numbering

    """

    label: str

    def accept(self, visitor: EventVisitor) -> Any:
        return visitor.visit_footnote_reference(self)


# =============================================================================
# Visitor
# =============================================================================


class EventVisitor(ABC):
    """Abstract base class for event stream consumers.

    Subclasses must implement a ``visit_*`` method for every leaf event and a
    ``start_*``/``end_*`` pair for every tag. Events dispatch themselves with
    ``event.accept(visitor)``.

    Examples
    --------
    Feeding a stream to a visitor:

        >>> for event in events:
        ...     event.accept(visitor)

    """

    # Leaf events

    @abstractmethod
    def visit_text(self, event: Text) -> Any:
        """Handle a Text event."""

    @abstractmethod
    def visit_raw_markup(self, event: RawMarkup) -> Any:
        """Handle a RawMarkup event."""

    @abstractmethod
    def visit_hard_line_break(self, event: HardLineBreak) -> Any:
        """Handle a HardLineBreak event."""

    @abstractmethod
    def visit_soft_line_break(self, event: SoftLineBreak) -> Any:
        """Handle a SoftLineBreak event."""

    @abstractmethod
    def visit_footnote_reference(self, event: FootnoteReference) -> Any:
        """Handle a FootnoteReference event."""

    # Tags

    @abstractmethod
    def start_block_quote(self, tag: BlockQuote) -> Any:
        """Handle the start of a block quote."""

    @abstractmethod
    def end_block_quote(self, tag: BlockQuote) -> Any:
        """Handle the end of a block quote."""

    @abstractmethod
    def start_code(self, tag: Code) -> Any:
        """Handle the start of an inline code span."""

    @abstractmethod
    def end_code(self, tag: Code) -> Any:
        """Handle the end of an inline code span."""

    @abstractmethod
    def start_code_block(self, tag: CodeBlock) -> Any:
        """Handle the start of a code block."""

    @abstractmethod
    def end_code_block(self, tag: CodeBlock) -> Any:
        """Handle the end of a code block."""

    @abstractmethod
    def start_emphasis(self, tag: Emphasis) -> Any:
        """Handle the start of emphasis."""

    @abstractmethod
    def end_emphasis(self, tag: Emphasis) -> Any:
        """Handle the end of emphasis."""

    @abstractmethod
    def start_strong(self, tag: Strong) -> Any:
        """Handle the start of strong text."""

    @abstractmethod
    def end_strong(self, tag: Strong) -> Any:
        """Handle the end of strong text."""

    @abstractmethod
    def start_heading(self, tag: Heading) -> Any:
        """Handle the start of a heading."""

    @abstractmethod
    def end_heading(self, tag: Heading) -> Any:
        """Handle the end of a heading."""

    @abstractmethod
    def start_image(self, tag: Image) -> Any:
        """Handle the start of an image."""

    @abstractmethod
    def end_image(self, tag: Image) -> Any:
        """Handle the end of an image."""

    @abstractmethod
    def start_link(self, tag: Link) -> Any:
        """Handle the start of a link."""

    @abstractmethod
    def end_link(self, tag: Link) -> Any:
        """Handle the end of a link."""

    @abstractmethod
    def start_list_item(self, tag: ListItem) -> Any:
        """Handle the start of a list item."""

    @abstractmethod
    def end_list_item(self, tag: ListItem) -> Any:
        """Handle the end of a list item."""

    @abstractmethod
    def start_list(self, tag: List) -> Any:
        """Handle the start of a list."""

    @abstractmethod
    def end_list(self, tag: List) -> Any:
        """Handle the end of a list."""

    @abstractmethod
    def start_paragraph(self, tag: Paragraph) -> Any:
        """Handle the start of a paragraph."""

    @abstractmethod
    def end_paragraph(self, tag: Paragraph) -> Any:
        """Handle the end of a paragraph."""

    @abstractmethod
    def start_thematic_break(self, tag: ThematicBreak) -> Any:
        """Handle the start of a thematic break."""

    @abstractmethod
    def end_thematic_break(self, tag: ThematicBreak) -> Any:
        """Handle the end of a thematic break."""

    @abstractmethod
    def start_footnote_definition(self, tag: FootnoteDefinition) -> Any:
        """Handle the start of a footnote definition."""

    @abstractmethod
    def end_footnote_definition(self, tag: FootnoteDefinition) -> Any:
        """Handle the end of a footnote definition."""

    @abstractmethod
    def start_table(self, tag: Table) -> Any:
        """Handle the start of a table."""

    @abstractmethod
    def end_table(self, tag: Table) -> Any:
        """Handle the end of a table."""

    @abstractmethod
    def start_table_head(self, tag: TableHead) -> Any:
        """Handle the start of a table head."""

    @abstractmethod
    def end_table_head(self, tag: TableHead) -> Any:
        """Handle the end of a table head."""

    @abstractmethod
    def start_table_row(self, tag: TableRow) -> Any:
        """Handle the start of a table row."""

    @abstractmethod
    def end_table_row(self, tag: TableRow) -> Any:
        """Handle the end of a table row."""

    @abstractmethod
    def start_table_cell(self, tag: TableCell) -> Any:
        """Handle the start of a table cell."""

    @abstractmethod
    def end_table_cell(self, tag: TableCell) -> Any:
        """Handle the end of a table cell."""


__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Emphasis",
    "End",
    "Event",
    "EventVisitor",
    "FootnoteDefinition",
    "FootnoteReference",
    "HardLineBreak",
    "Heading",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Paragraph",
    "RawMarkup",
    "SoftLineBreak",
    "Start",
    "Strong",
    "Table",
    "TableCell",
    "TableHead",
    "TableRow",
    "Tag",
    "Text",
    "ThematicBreak",
]
