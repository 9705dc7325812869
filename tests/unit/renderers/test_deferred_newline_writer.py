#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the deferred-newline writer.

Tests cover:
- Appending with no pending newlines
- Single breaks and blank lines
- Coalescing of repeated requests
- Buffers that already end in a newline
- Leading and trailing newline suppression
- close_line cancelling a blank line

"""

import pytest

from md2jira.renderers.writer import DeferredNewlineWriter


@pytest.mark.unit
class TestDeferredNewlineWriterBasics:
    """Tests for plain appends."""

    def test_empty_writer(self) -> None:
        """Test a fresh writer has no content and nothing pending."""
        writer = DeferredNewlineWriter()
        assert writer.getvalue() == ""
        assert writer.pending_newlines == 0
        assert len(writer) == 0

    def test_append_concatenates(self) -> None:
        """Test appends without requests are joined directly."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.append("b")
        assert writer.getvalue() == "ab"
        assert len(writer) == 2

    def test_empty_append_is_noop(self) -> None:
        """Test appending an empty string keeps pending newlines owed."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        writer.append("")
        assert writer.pending_newlines == 2
        assert writer.getvalue() == "a"
        writer.append("b")
        assert writer.getvalue() == "a\n\nb"


@pytest.mark.unit
class TestDeferredNewlineWriterRequests:
    """Tests for newline requests."""

    def test_single_break(self) -> None:
        """Test a single break puts the next content on a new line."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_single_break()
        writer.append("b")
        assert writer.getvalue() == "a\nb"

    def test_blank_line(self) -> None:
        """Test a blank line request separates content by an empty line."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        writer.append("b")
        assert writer.getvalue() == "a\n\nb"

    def test_requests_are_not_written_eagerly(self) -> None:
        """Test pending newlines never appear without following content."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        assert writer.getvalue() == "a"
        assert writer.pending_newlines == 2

    def test_repeated_blank_lines_coalesce(self) -> None:
        """Test several blank line requests yield one blank line."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        writer.request_blank_line()
        writer.request_blank_line()
        writer.append("b")
        assert writer.getvalue() == "a\n\nb"

    def test_single_break_does_not_downgrade_blank_line(self) -> None:
        """Test a single break after a blank line request keeps the blank line."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        writer.request_single_break()
        assert writer.pending_newlines == 2
        writer.append("b")
        assert writer.getvalue() == "a\n\nb"

    def test_blank_line_upgrades_single_break(self) -> None:
        """Test a blank line request after a single break wins."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_single_break()
        writer.request_blank_line()
        writer.append("b")
        assert writer.getvalue() == "a\n\nb"

    def test_close_line_cancels_blank_line(self) -> None:
        """Test close_line leaves exactly one newline pending."""
        writer = DeferredNewlineWriter()
        writer.append("Paragraph 1.")
        writer.request_blank_line()
        writer.close_line()
        assert writer.pending_newlines == 1
        writer.append("{quote}")
        assert writer.getvalue() == "Paragraph 1.\n{quote}"

    def test_pending_reset_after_append(self) -> None:
        """Test pending newlines are consumed by the next append."""
        writer = DeferredNewlineWriter()
        writer.append("a")
        writer.request_blank_line()
        writer.append("b")
        assert writer.pending_newlines == 0
        writer.append("c")
        assert writer.getvalue() == "a\n\nbc"


@pytest.mark.unit
class TestDeferredNewlineWriterEdges:
    """Tests for buffer edges."""

    def test_no_leading_newlines(self) -> None:
        """Test requests made before any content are dropped."""
        writer = DeferredNewlineWriter()
        writer.request_blank_line()
        writer.append("a")
        assert writer.getvalue() == "a"

    def test_buffer_ending_in_newline_single_break(self) -> None:
        """Test a single break adds nothing after a trailing newline."""
        writer = DeferredNewlineWriter()
        writer.append("code\n")
        assert writer.ends_with_newline
        writer.request_single_break()
        writer.append("{code}")
        assert writer.getvalue() == "code\n{code}"

    def test_buffer_ending_in_newline_blank_line(self) -> None:
        """Test a blank line after a trailing newline adds one more newline."""
        writer = DeferredNewlineWriter()
        writer.append("code\n")
        writer.request_blank_line()
        writer.append("next")
        assert writer.getvalue() == "code\n\nnext"

    def test_ends_with_newline_tracks_last_append(self) -> None:
        """Test ends_with_newline reflects only the most recent text."""
        writer = DeferredNewlineWriter()
        writer.append("a\n")
        writer.append("b")
        assert not writer.ends_with_newline
