#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/renderers/base.py
"""Base classes for event renderers.

This module defines the abstract base class that event renderers inherit
from. The BaseRenderer provides a consistent interface for turning an event
stream into an output markup.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from md2jira.events import Event
from md2jira.exceptions import InvalidOptionsError
from md2jira.options.base import BaseRendererOptions
from md2jira.utils.io_utils import OutputDestination, write_content


class BaseRenderer(ABC):
    """Abstract base class for event renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render_to_string(self, events):
        ...         return "".join(e.content for e in events if isinstance(e, Text))
        ...
        ...     def render(self, events, output):
        ...         self.write_text_output(self.render_to_string(events), output)

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, events: Iterable[Event], output: OutputDestination) -> None:
        """Render the event stream and write it to ``output``.

        Parameters
        ----------
        events : Iterable[Event]
            Events to render, in document order
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    def render_to_string(self, events: Iterable[Event]) -> str:
        """Render the event stream to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputDestination) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output file cannot be written
        TypeError
            If output type is not supported

        """
        write_content(text, output)
