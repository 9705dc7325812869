"""Command-line interface for md2jira.

Reads Markdown from a file or stdin, converts it to JIRA wiki markup, and
writes the result to stdout or a file. Output on stdout has no trailing
newline added, so it can be piped straight into other tools.

Environment Variable Support
----------------------------
Options support environment variable defaults using the pattern
MD2JIRA_<OPTION_NAME>, where option names are converted to uppercase with
hyphens replaced by underscores. CLI arguments always override environment
variables, and environment variables override configuration files.

Examples
--------
Convert from stdin::

    $ md2jira < README.md

Convert a file into another file::

    $ md2jira notes.md --out notes.jira

Number footnotes from one::

    $ md2jira notes.md --footnotes --footnote-start 1

Use environment variables for defaults::

    $ export MD2JIRA_FOOTNOTES=true
    $ md2jira notes.md

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import IO, Union

from md2jira.api import to_jira
from md2jira.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    build_options,
    create_parser,
    get_exit_code_for_exception,
)
from md2jira.cli.config import load_config_with_priority
from md2jira.cli.output import print_rich_output, should_use_rich_output
from md2jira.constants import CONFIG_ENV_VAR
from md2jira.exceptions import Md2JiraError
from md2jira.logging_utils import configure_logging
from md2jira.utils.io_utils import write_content

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _resolve_input(input_arg: str) -> Union[Path, IO[str]]:
    if input_arg == "-":
        return sys.stdin
    return Path(input_arg)


def _emit_output(jira_text: str, parsed_args: argparse.Namespace) -> None:
    if parsed_args.out:
        write_content(jira_text, Path(parsed_args.out))
        logger.info("Wrote JIRA markup to %s", parsed_args.out)
    elif should_use_rich_output(parsed_args):
        print_rich_output(jira_text)
    else:
        sys.stdout.write(jira_text)
        sys.stdout.flush()


def main(args: list[str] | None = None) -> int:
    """Run the md2jira command line and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    config: dict = {}
    if not parsed_args.no_config:
        try:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    try:
        parser_options, renderer_options = build_options(parsed_args, config)
        source = _resolve_input(parsed_args.input)
        jira_text = to_jira(source, parser_options=parser_options, renderer_options=renderer_options)
        assert jira_text is not None
        _emit_output(jira_text, parsed_args)
    except Md2JiraError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: Unexpected failure: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
