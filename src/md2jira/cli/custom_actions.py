"""Custom argparse actions for CLI argument handling.

These actions record which arguments were given on the command line and read
their defaults from ``MD2JIRA_<DEST>`` environment variables.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from md2jira.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

TRUTHY_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable that supplies a default for ``dest``."""
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def _mark_provided(namespace: argparse.Namespace, dest: str) -> None:
    if not hasattr(namespace, "_provided_args"):
        namespace._provided_args = set()
    namespace._provided_args.add(dest)


class TrackingStoreAction(argparse.Action):
    """Store action that tracks whether an argument was explicitly provided.

    Also supports environment variable defaults using the pattern
    MD2JIRA_DEST_NAME.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        """Initialize the action, taking the default from the environment if set."""
        env_key = env_key_for(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the value and mark it as explicitly provided."""
        setattr(namespace, self.dest, values)
        _mark_provided(namespace, self.dest)


class TrackingStoreTrueAction(argparse.Action):
    """store_true action that tracks whether the flag was explicitly provided.

    Also supports environment variable defaults using the pattern
    MD2JIRA_DEST_NAME.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        """Initialize the action, taking the default from the environment if set."""
        env_value = os.environ.get(env_key_for(dest))
        if env_value is not None:
            default = env_value.lower() in TRUTHY_VALUES

        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True and mark as explicitly provided."""
        setattr(namespace, self.dest, True)
        _mark_provided(namespace, self.dest)
