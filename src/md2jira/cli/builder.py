#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Argument parser construction and option mapping for the md2jira CLI.

Option arguments are generated from the fields of the options dataclasses.
Each field's ``help`` metadata becomes the argument help; ``cli_name``
overrides the flag name, which otherwise is the field name in kebab case.

"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import MISSING, Field, fields
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Dict, Iterator, Type

from md2jira.cli.custom_actions import TrackingStoreAction, TrackingStoreTrueAction, env_key_for
from md2jira.constants import CONFIG_ENV_VAR
from md2jira.exceptions import (
    DependencyError,
    FileError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2jira.options.base import BaseParserOptions, BaseRendererOptions
from md2jira.options.jira import JiraRendererOptions
from md2jira.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

OPTIONS_CLASSES: Dict[str, Type[Any]] = {
    "Markdown parsing options": MarkdownParserOptions,
    "JIRA rendering options": JiraRendererOptions,
}


def snake_to_kebab(name: str) -> str:
    """Convert a field name to a CLI flag name (``parse_tables`` -> ``parse-tables``)."""
    return name.replace("_", "-")


def iter_option_fields(options_class: Type[Any]) -> Iterator[tuple[Field, str, str]]:
    """Yield ``(field, cli_name, dest)`` for each option field of a class."""
    for field in fields(options_class):
        cli_name = field.metadata.get("cli_name", snake_to_kebab(field.name))
        yield field, cli_name, cli_name.replace("-", "_")


def add_options_class_arguments(
    parser: argparse.ArgumentParser, options_class: Type[Any], group_name: str
) -> argparse._ArgumentGroup:
    """Add one argument per options field to a new argument group.

    Fields with a False boolean default become flags. Other fields take a
    value converted with the ``type`` metadata (``str`` when absent). No
    argparse default is set from the dataclass, so fields that were not given
    stay None and the options class default (or the config file) applies.
    """
    group = parser.add_argument_group(group_name)
    for field, cli_name, dest in iter_option_fields(options_class):
        help_text = field.metadata.get("help", "")
        if field.default is not MISSING:
            help_text = f"{help_text} (default: {field.default!r})"

        if isinstance(field.default, bool) and field.default is False:
            group.add_argument(f"--{cli_name}", dest=dest, action=TrackingStoreTrueAction, help=help_text)
        else:
            group.add_argument(
                f"--{cli_name}",
                dest=dest,
                action=TrackingStoreAction,
                type=field.metadata.get("type", str),
                default=None,
                metavar=cli_name.split("-")[-1].upper(),
                help=help_text,
            )
    return group


def get_version() -> str:
    """Get the version of the installed md2jira distribution."""
    try:
        return version("md2jira")
    except PackageNotFoundError:
        from md2jira import __version__

        return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2jira",
        description="Convert Markdown (CommonMark) to Atlassian JIRA wiki markup.",
        epilog="Option defaults can also be set with MD2JIRA_<OPTION> environment variables "
        "(e.g. MD2JIRA_FOOTNOTES=true) or a configuration file.",
    )

    parser.add_argument("input", nargs="?", default="-", help="Markdown file to convert; '-' or omitted for stdin")
    parser.add_argument(
        "--out", "-o", action=TrackingStoreAction, type=str, metavar="PATH", help="Write output to a file"
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help=f"Configuration file (JSON, TOML or YAML). Defaults to {CONFIG_ENV_VAR}, then a discovered "
        ".md2jira.* file or [tool.md2jira] in pyproject.toml from the current directory upward.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        dest="no_config",
        help=f"Disable loading of configuration files, including {CONFIG_ENV_VAR}.",
    )

    parser.add_argument(
        "--rich", action=TrackingStoreTrueAction, help="Highlight output with rich when writing to a terminal"
    )
    parser.add_argument(
        "--force-rich", action=TrackingStoreTrueAction, help="Use rich highlighting even when stdout is not a TTY"
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamped logging and per-stage timing information",
    )
    parser.add_argument("--version", "-V", action="version", version=f"md2jira {get_version()}")

    for group_name, options_class in OPTIONS_CLASSES.items():
        add_options_class_arguments(parser, options_class, group_name)

    return parser


def _was_given(parsed_args: argparse.Namespace, dest: str) -> bool:
    """Whether a value came from the command line or the environment."""
    return dest in getattr(parsed_args, "_provided_args", set()) or env_key_for(dest) in os.environ


def _normalize_config(config: Dict[str, Any]) -> Dict[str, tuple[Type[Any], str, Any]]:
    """Map config keys onto ``(options_class, field_name, value)``.

    Keys may be field names or CLI names. Unknown keys are logged and ignored.
    """
    aliases: Dict[str, tuple[Type[Any], str]] = {}
    for options_class in OPTIONS_CLASSES.values():
        for field, _cli_name, dest in iter_option_fields(options_class):
            aliases[field.name] = (options_class, field.name)
            aliases[dest] = (options_class, field.name)

    normalized: Dict[str, tuple[Type[Any], str, Any]] = {}
    for key, value in config.items():
        alias = aliases.get(str(key).replace("-", "_"))
        if alias is None:
            logger.warning("Ignoring unknown configuration key: %s", key)
            continue
        options_class, field_name = alias
        normalized[field_name] = (options_class, field_name, value)
    return normalized


def build_options(
    parsed_args: argparse.Namespace, config: Dict[str, Any] | None = None
) -> tuple[MarkdownParserOptions, JiraRendererOptions]:
    """Build parser and renderer options from arguments, environment and config.

    Precedence, highest first: command line, environment, config file,
    built-in defaults.

    Raises
    ------
    ValidationError
        If a resulting option value is rejected by its options class

    """
    values: Dict[Type[Any], Dict[str, Any]] = {cls: {} for cls in OPTIONS_CLASSES.values()}

    for options_class, field_name, value in _normalize_config(config or {}).values():
        values[options_class][field_name] = value

    for options_class in OPTIONS_CLASSES.values():
        for field, _cli_name, dest in iter_option_fields(options_class):
            if _was_given(parsed_args, dest) and getattr(parsed_args, dest, None) is not None:
                values[options_class][field.name] = getattr(parsed_args, dest)

    built: Dict[Type[Any], BaseParserOptions | BaseRendererOptions] = {}
    for options_class, kwargs in values.items():
        logger.debug("%s from CLI/env/config: %s", options_class.__name__, kwargs)
        try:
            built[options_class] = options_class(**kwargs)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid option value: {e}", original_error=e) from e

    parser_options = built[MarkdownParserOptions]
    renderer_options = built[JiraRendererOptions]
    assert isinstance(parser_options, MarkdownParserOptions)
    assert isinstance(renderer_options, JiraRendererOptions)
    return parser_options, renderer_options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    # OutputWriteError is a RenderingError but concerns the file system
    if isinstance(exception, RenderingError):
        return EXIT_FILE_ERROR if isinstance(exception, OutputWriteError) else EXIT_RENDERING_ERROR

    return EXIT_ERROR
