#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines the options class for turning Markdown text into the
event stream consumed by the JIRA renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import DEFAULT_MAX_NESTING_LEVEL, DEFAULT_PARSE_FOOTNOTES, DEFAULT_PARSE_TABLES
from md2jira.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-event parsing.

    Parameters
    ----------
    parse_footnotes : bool, default False
        Recognize ``[^label]`` references and ``[^label]: text`` definitions.
        When False, footnote syntax passes through as plain text.
    parse_tables : bool, default False
        Recognize GFM pipe tables. When False, a table is an ordinary
        paragraph and passes through line by line. When True, the table is
        bracketed by table events around its pipe-table source text.
    max_nesting_level : int, default 6
        Maximum depth of nested block containers (lists and quotes).

    Examples
    --------
    Enable footnotes:
        >>> options = MarkdownParserOptions(parse_footnotes=True)
        >>> parser = MarkdownEventParser(options)

    """

    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "cli_name": "footnotes"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse GFM pipe tables into table events", "cli_name": "tables"},
    )
    max_nesting_level: int = field(
        default=DEFAULT_MAX_NESTING_LEVEL,
        metadata={"help": "Maximum nesting depth of lists and quotes", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option types and numeric ranges.

        Raises
        ------
        ValueError
            If a flag is not a boolean or max_nesting_level is not a
            positive integer.

        """
        super().__post_init__()
        for name in ("parse_footnotes", "parse_tables"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean, got {getattr(self, name)!r}")
        if isinstance(self.max_nesting_level, bool) or not isinstance(self.max_nesting_level, int):
            raise ValueError(f"max_nesting_level must be an integer, got {self.max_nesting_level!r}")
        if self.max_nesting_level <= 0:
            raise ValueError(f"max_nesting_level must be positive, got {self.max_nesting_level}")
