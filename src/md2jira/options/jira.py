#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2jira/options/jira.py
"""Configuration options for JIRA markup rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2jira.constants import (
    DEFAULT_FOOTNOTE_DEFINITION_FORMAT,
    DEFAULT_FOOTNOTE_REFERENCE_FORMAT,
    DEFAULT_FOOTNOTE_START_INDEX,
)
from md2jira.options.base import BaseRendererOptions


@dataclass(frozen=True)
class JiraRendererOptions(BaseRendererOptions):
    """Configuration options for event-to-JIRA rendering.

    JIRA markup has no footnote syntax, so footnotes are rendered as plain
    bracketed markers. References and definitions are numbered by two
    independent counters in order of appearance; the labels chosen in the
    source are ignored.

    Parameters
    ----------
    footnote_start_index : int, default 0
        Number given to the first footnote reference and the first footnote
        definition.
    footnote_reference_format : str, default "[{index}]"
        Format string for footnote references. Must contain ``{index}``.
    footnote_definition_format : str, default "[{index}] "
        Format string emitted at the start of a footnote definition. Must
        contain ``{index}``.

    Examples
    --------
    One-based footnotes:
        >>> options = JiraRendererOptions(footnote_start_index=1)
        >>> renderer = JiraRenderer(options)

    """

    footnote_start_index: int = field(
        default=DEFAULT_FOOTNOTE_START_INDEX,
        metadata={"help": "Number of the first footnote", "cli_name": "footnote-start", "type": int},
    )
    footnote_reference_format: str = field(
        default=DEFAULT_FOOTNOTE_REFERENCE_FORMAT,
        metadata={"help": "Format of footnote references, must contain {index}"},
    )
    footnote_definition_format: str = field(
        default=DEFAULT_FOOTNOTE_DEFINITION_FORMAT,
        metadata={"help": "Format of footnote definition markers, must contain {index}"},
    )

    def __post_init__(self) -> None:
        """Validate footnote numbering options.

        Raises
        ------
        ValueError
            If the start index is not a non-negative integer, or a format is
            not a string containing ``{index}``.

        """
        super().__post_init__()
        if isinstance(self.footnote_start_index, bool) or not isinstance(self.footnote_start_index, int):
            raise ValueError(f"footnote_start_index must be an integer, got {self.footnote_start_index!r}")
        if self.footnote_start_index < 0:
            raise ValueError(f"footnote_start_index must be non-negative, got {self.footnote_start_index}")
        for name in ("footnote_reference_format", "footnote_definition_format"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
            if "{index}" not in value:
                raise ValueError(f"{name} must contain '{{index}}', got {value!r}")
