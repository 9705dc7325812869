"""md2jira - Convert Markdown to Atlassian JIRA wiki markup.

md2jira parses CommonMark with mistune into a flat stream of document events
and renders that stream as JIRA markup: ``h1.`` headings, ``{quote}`` and
``{code}`` blocks, ``{{monospace}}``, ``#``/``*`` lists, ``[text|url]`` links
and ``!url!`` images. Blocks are separated the way JIRA expects, with no
leading or trailing whitespace in the result.

Requirements
------------
- Python 3.10+
- mistune 3 for Markdown parsing

Examples
--------
Convert a string:

    >>> from md2jira import to_jira
    >>> to_jira("# Title One\\n\\nSome *emphasized* text.")
    'h1. Title One\\n\\nSome _emphasized_ text.'

Work with the event stream directly:

    >>> from md2jira import parse_markdown, render_events
    >>> events = parse_markdown("1. one\\n2. two")
    >>> render_events(events)
    '# one\\n# two'

See Also
--------
md2jira.events : Event and tag definitions
md2jira.renderers.jira : The JIRA renderer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2jira requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2jira.api import parse_markdown, render_events, to_jira
from md2jira.exceptions import (
    DependencyError,
    Md2JiraError,
    ParsingError,
    RenderingError,
    UnknownEventError,
    ValidationError,
)
from md2jira.options import JiraRendererOptions, MarkdownParserOptions
from md2jira.parsers import MarkdownEventParser
from md2jira.renderers import JiraRenderer

__all__ = [
    "__version__",
    "to_jira",
    "parse_markdown",
    "render_events",
    "JiraRenderer",
    "MarkdownEventParser",
    "JiraRendererOptions",
    "MarkdownParserOptions",
    "Md2JiraError",
    "DependencyError",
    "ParsingError",
    "RenderingError",
    "UnknownEventError",
    "ValidationError",
]
