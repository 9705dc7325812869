#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the exception hierarchy."""

import pytest

from md2jira.events import Text
from md2jira.exceptions import (
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    Md2JiraError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnknownEventError,
    ValidationError,
)
from md2jira.options import JiraRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for class relationships."""

    @pytest.mark.parametrize(
        "exception_class",
        [ValidationError, FileError, ParsingError, RenderingError, DependencyError],
    )
    def test_all_derive_from_base(self, exception_class) -> None:
        """Test every library error can be caught as Md2JiraError."""
        assert issubclass(exception_class, Md2JiraError)

    def test_specialisations(self) -> None:
        """Test the narrower classes."""
        assert issubclass(InvalidOptionsError, ValidationError)
        assert issubclass(FileNotFoundError, FileError)
        assert issubclass(FileAccessError, FileError)
        assert issubclass(UnknownEventError, RenderingError)
        assert issubclass(OutputWriteError, RenderingError)


@pytest.mark.unit
class TestExceptionMessages:
    """Tests for generated messages and attributes."""

    def test_original_error_kept(self) -> None:
        """Test the wrapped exception is available."""
        cause = ValueError("bad")
        error = ParsingError("Failed", parsing_stage="tokenizing", original_error=cause)
        assert error.original_error is cause
        assert error.parsing_stage == "tokenizing"
        assert str(error) == "Failed"

    def test_unknown_event_message(self) -> None:
        """Test the offending event and position are reported."""
        error = UnknownEventError("junk", position=4)
        assert error.event == "junk"
        assert error.position == 4
        assert "position 4" in str(error)
        assert error.rendering_stage == "dispatch"

    def test_invalid_options_message(self) -> None:
        """Test both class names are mentioned."""
        error = InvalidOptionsError("jira", JiraRendererOptions, MarkdownParserOptions)
        assert "JiraRendererOptions" in str(error)
        assert "MarkdownParserOptions" in str(error)
        assert error.parameter_name == "options"

    def test_file_not_found_message(self) -> None:
        """Test the default message names the path."""
        error = FileNotFoundError("missing.md")
        assert error.file_path == "missing.md"
        assert "missing.md" in str(error)

    def test_output_write_error(self) -> None:
        """Test the write stage and path are recorded."""
        error = OutputWriteError("out.jira")
        assert error.rendering_stage == "file_write"
        assert error.file_path == "out.jira"

    def test_dependency_error_install_hint(self) -> None:
        """Test a pip command is suggested for missing packages."""
        error = DependencyError("markdown", missing_packages=[("mistune", ">=3.0.0")])
        assert "mistune>=3.0.0" in str(error)
        assert "pip install" in str(error)

    def test_dependency_error_version_mismatch(self) -> None:
        """Test version mismatches are described."""
        error = DependencyError("markdown", missing_packages=[], version_mismatches=[("mistune", ">=3.0.0", "2.0.5")])
        assert "2.0.5" in str(error)

    def test_unknown_event_accepts_events(self) -> None:
        """Test any object, including events, can be reported."""
        error = UnknownEventError(Text("x"))
        assert "Text" in str(error)
