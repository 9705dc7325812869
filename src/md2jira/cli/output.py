"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2jira/cli/output.py
import argparse
import sys
from typing import IO, Optional

from md2jira.exceptions import DependencyError

# Named groups become the styles "jira.<name>"
JIRA_HIGHLIGHTS = [
    r"(?m)(?P<heading>^h[1-6]\. .*$)",
    r"(?P<block>\{(?:quote|code(?::[^}\n]*)?)\})",
    r"(?P<monospace>\{\{.*?\}\})",
    r"(?P<link>\[[^\]|\n]*\|[^\]\n]*\])",
    r"(?P<image>![^!\s]+!)",
    r"(?m)(?P<bullet>^[#*]+ )",
    r"(?m)(?P<rule>^----$)",
]

JIRA_STYLES = {
    "jira.heading": "bold cyan",
    "jira.block": "magenta",
    "jira.monospace": "green",
    "jira.link": "underline blue",
    "jira.image": "yellow",
    "jira.bullet": "bold yellow",
    "jira.rule": "dim",
}


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: Optional[IO[str]] = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND either --force-rich is set OR stdout is a TTY
    - AND Rich library is available

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                converter_name="rich-output",
                missing_packages=[("rich", "")],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install md2jira[rich]",
            )
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def print_rich_output(text: str) -> bool:
    """Print JIRA markup to the terminal with its markers highlighted.

    Falls back to plain output with a warning when rich is missing.

    Returns
    -------
    bool
        True if rich rendered the text

    """
    try:
        from rich.console import Console
        from rich.highlighter import RegexHighlighter
        from rich.theme import Theme
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install md2jira[rich]", file=sys.stderr)
        sys.stdout.write(text)
        return False

    class JiraHighlighter(RegexHighlighter):
        """Highlight JIRA wiki markup constructs."""

        base_style = "jira."
        highlights = JIRA_HIGHLIGHTS

    console = Console(theme=Theme(JIRA_STYLES), highlighter=JiraHighlighter())
    console.print(text, markup=False, emoji=False, soft_wrap=True)
    return True
