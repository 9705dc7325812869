#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn source documents into event streams."""

from md2jira.parsers.base import BaseParser
from md2jira.parsers.markdown import MarkdownEventParser, markdown_to_events

__all__ = ["BaseParser", "MarkdownEventParser", "markdown_to_events"]
