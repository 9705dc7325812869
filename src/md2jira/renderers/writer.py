#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/writer.py
"""Output buffer with deferred newlines.

Block handlers declare how much vertical space they want *before* they know
whether more content follows. The writer records that intent as a count of
pending newlines (0, 1 or 2) and only writes them when the next piece of
content arrives. A request that is never followed by content leaves no
trailing whitespace, and back-to-back requests never stack up into more than
one blank line.

"""

from __future__ import annotations

NO_BREAK = 0
SINGLE_BREAK = 1
BLANK_LINE = 2


class DeferredNewlineWriter:
    """Append-only text buffer that materializes newlines lazily.

    Examples
    --------
        >>> writer = DeferredNewlineWriter()
        >>> writer.append("h1. Title")
        >>> writer.request_blank_line()
        >>> writer.getvalue()
        'h1. Title'
        >>> writer.append("Body")
        >>> writer.getvalue()
        'h1. Title\\n\\nBody'

    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._pending: int = NO_BREAK
        self._ends_with_newline: bool = False

    @property
    def pending_newlines(self) -> int:
        """Newlines owed before the next content (0, 1 or 2)."""
        return self._pending

    @property
    def ends_with_newline(self) -> bool:
        """Whether the written text currently ends in a newline."""
        return self._ends_with_newline

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def append(self, text: str) -> None:
        """Write pending newlines, then ``text``.

        Empty text writes nothing and keeps pending newlines owed. Newlines
        owed while nothing has been written yet are dropped.

        Parameters
        ----------
        text : str
            Content to append verbatim

        """
        if not text:
            return

        if self._pending and self._parts:
            if not self._ends_with_newline:
                self._parts.append("\n")
            if self._pending > SINGLE_BREAK:
                self._parts.append("\n" * (self._pending - 1))
        self._pending = NO_BREAK

        self._parts.append(text)
        self._ends_with_newline = text.endswith("\n")

    def request_single_break(self) -> None:
        """Ask for the next content to start on a new line.

        Never downgrades a pending blank line.
        """
        self._pending = max(self._pending, SINGLE_BREAK)

    def request_blank_line(self) -> None:
        """Ask for one blank line before the next content."""
        self._pending = BLANK_LINE

    def close_line(self) -> None:
        """Ask for the next content directly on the following line.

        Unlike :meth:`request_single_break` this cancels a pending blank
        line. Closing markers such as ``{quote}`` must sit right under the
        last line of the content they close.
        """
        self._pending = SINGLE_BREAK

    def getvalue(self) -> str:
        """Return everything written so far, without pending newlines."""
        return "".join(self._parts)
