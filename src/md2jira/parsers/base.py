#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/parsers/base.py
"""Base classes for event sources.

This module defines the abstract base class that parsers inherit from. A
parser reads a source document and yields the event stream consumed by the
renderers.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterator, Union

from md2jira.events import Event
from md2jira.exceptions import FileAccessError, InvalidOptionsError
from md2jira.exceptions import FileNotFoundError as Md2JiraFileNotFoundError
from md2jira.options.base import BaseParserOptions
from md2jira.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]

# Linux caps path components at 255 characters; longer strings are content
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for event sources.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle all supported input types:
    - str: File path to read, or the document text itself
    - Path: File path to read
    - IO[bytes] or IO[str]: File-like object
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Iterator[Event]:
        """Parse the input and yield events in document order.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Document to parse

        Returns
        -------
        Iterator[Event]
            Well-formed event stream

        Raises
        ------
        ParsingError
            If the document cannot be parsed
        DependencyError
            If required dependencies are not installed

        """
        pass

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            with open(path, "rb") as f:
                return read_text_with_encoding_detection(f.read())
        except FileNotFoundError as e:
            raise Md2JiraFileNotFoundError(str(path), original_error=e) from e
        except IsADirectoryError as e:
            raise FileAccessError(str(path), message=f"Input path is a directory: {path}", original_error=e) from e
        except OSError as e:
            raise FileAccessError(str(path), original_error=e) from e

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load content from various input types with encoding detection.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Input data to load. A short single-line string naming an
            existing file is read as that file; any other string is the
            document text.

        Returns
        -------
        str
            Document text

        Raises
        ------
        FileNotFoundError
            If a Path does not exist
        FileAccessError
            If a file cannot be read

        """
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        elif isinstance(input_data, Path):
            return BaseParser._read_file(input_data)
        elif isinstance(input_data, str):
            if len(input_data) <= _MAX_PATH_LENGTH and input_data and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        logger.debug("Reading input from file: %s", path)
                        return BaseParser._read_file(path)
                except OSError:
                    # Invalid path - treat as content
                    pass
            return input_data
        else:
            # File-like object; stdin cannot seek
            seekable = getattr(input_data, "seekable", None)
            if callable(seekable) and seekable():
                input_data.seek(0)
            return normalize_stream_to_text(input_data)
