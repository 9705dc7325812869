"""The major exported API functions for Markdown to JIRA conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2jira/api.py
import logging
from typing import Any, Iterable, Optional, TypeVar

from md2jira.events import Event
from md2jira.exceptions import ValidationError
from md2jira.options.base import BaseParserOptions, BaseRendererOptions
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions
from md2jira.parsers.base import ParserInput
from md2jira.parsers.markdown import MarkdownEventParser
from md2jira.renderers.jira import JiraRenderer
from md2jira.utils.decorators import debug_timer
from md2jira.utils.io_utils import OutputDestination, write_content

logger = logging.getLogger(__name__)

# TypeVar for generic options creation
OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)


def _split_kwargs_for_parser_and_renderer(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer based on their field names.

    Raises
    ------
    ValidationError
        If a kwarg names no parser or renderer option

    """
    parser_fields = MarkdownParserOptions.field_names()
    renderer_fields = JiraRendererOptions.field_names()

    parser_kwargs: dict[str, Any] = {}
    renderer_kwargs: dict[str, Any] = {}
    unmatched: list[str] = []

    for k, v in kwargs.items():
        if k in parser_fields:
            parser_kwargs[k] = v
        elif k in renderer_fields:
            renderer_kwargs[k] = v
        else:
            unmatched.append(k)

    if unmatched:
        raise ValidationError(
            f"Unknown option(s): {', '.join(sorted(unmatched))}",
            parameter_name=unmatched[0],
            parameter_value=kwargs[unmatched[0]],
        )

    return parser_kwargs, renderer_kwargs


def _merge_options(base: Optional[OptionsT], options_class: type[OptionsT], overrides: dict[str, Any]) -> OptionsT:
    """Apply keyword overrides on top of an options object (or the defaults).

    Raises
    ------
    ValidationError
        If ``base`` has the wrong type or an override is out of range

    """
    if base is not None and not isinstance(base, options_class):
        raise ValidationError(
            f"Expected {options_class.__name__}, got {type(base).__name__}",
            parameter_name=options_class.__name__,
            parameter_value=base,
        )

    if not overrides:
        return base if base is not None else options_class()

    logger.debug("Applying %s overrides: %s", options_class.__name__, sorted(overrides))
    try:
        if base is None:
            return options_class(**overrides)
        return base.create_updated(**overrides)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid {options_class.__name__}: {e}", original_error=e) from e


def parse_markdown(
    source: ParserInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> list[Event]:
    """Parse Markdown into a list of events.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to a Markdown file, raw bytes, or a stream
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options
    **kwargs
        Individual parser options (e.g. ``parse_footnotes=True``); these
        override fields of ``parser_options``

    Returns
    -------
    list of Event
        Events in document order

    Raises
    ------
    ValidationError
        If an option is unknown or invalid
    ParsingError
        If the Markdown cannot be parsed
    DependencyError
        If mistune is not installed

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    if renderer_kwargs:
        raise ValidationError(
            f"Renderer option(s) not accepted by parse_markdown: {', '.join(sorted(renderer_kwargs))}"
        )
    options = _merge_options(parser_options, MarkdownParserOptions, parser_kwargs)

    with debug_timer(logger, "Event parsing (markdown)"):
        return list(MarkdownEventParser(options).parse(source))


def render_events(
    events: Iterable[Event],
    *,
    renderer_options: Optional[JiraRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Render an event stream to JIRA markup.

    Parameters
    ----------
    events : Iterable[Event]
        Well-formed event stream
    renderer_options : JiraRendererOptions, optional
        Pre-configured renderer options
    **kwargs
        Individual renderer options (e.g. ``footnote_start_index=1``)

    Returns
    -------
    str
        JIRA markup

    Raises
    ------
    ValidationError
        If an option is unknown or invalid
    UnknownEventError
        If the stream contains an unrecognized event

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    if parser_kwargs:
        raise ValidationError(f"Parser option(s) not accepted by render_events: {', '.join(sorted(parser_kwargs))}")
    options = _merge_options(renderer_options, JiraRendererOptions, renderer_kwargs)

    with debug_timer(logger, "Rendering (jira)"):
        return JiraRenderer(options).render_to_string(events)


def to_jira(
    source: ParserInput,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[JiraRendererOptions] = None,
    output: Optional[OutputDestination] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Convert Markdown to JIRA wiki markup.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, a path to a Markdown file, raw bytes, or a stream
    parser_options : MarkdownParserOptions, optional
        Pre-configured parser options
    renderer_options : JiraRendererOptions, optional
        Pre-configured renderer options
    output : str, Path, IO[bytes], IO[str], optional
        Where to write the markup. When given, nothing is returned.
    **kwargs
        Individual options. Kwargs are split between parser and renderer by
        field name and override the matching options object.

    Returns
    -------
    str or None
        JIRA markup, or None when ``output`` is given

    Examples
    --------
    >>> to_jira("# Title One")
    'h1. Title One'
    >>> to_jira("Text[^a]\\n\\n[^a]: Note", parse_footnotes=True, footnote_start_index=1)
    'Text[1]\\n\\n[1] Note'

    """
    parser_kwargs, renderer_kwargs = _split_kwargs_for_parser_and_renderer(kwargs)
    final_parser_options = _merge_options(parser_options, MarkdownParserOptions, parser_kwargs)
    final_renderer_options = _merge_options(renderer_options, JiraRendererOptions, renderer_kwargs)

    parser = MarkdownEventParser(final_parser_options)
    renderer = JiraRenderer(final_renderer_options)

    with debug_timer(logger, "Conversion (markdown -> jira)"):
        jira_text = renderer.render_to_string(parser.parse(source))

    if output is not None:
        write_content(jira_text, output)
        return None
    return jira_text


__all__ = ["parse_markdown", "render_events", "to_jira"]
