#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/io_utils.py
"""I/O utilities for handling output destinations."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2jira.exceptions import OutputWriteError

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    """Guess whether a file-like object expects bytes."""
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, (StringIO, io.TextIOBase)):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: OutputDestination) -> None:
    """Write rendered markup to a path or a file-like object.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes] or IO[str]
        Output destination. Paths are written as UTF-8. Binary streams
        receive UTF-8 bytes; text streams receive the string unchanged.

    Raises
    ------
    OutputWriteError
        If the file at the given path cannot be written
    TypeError
        If output type is not supported

    Examples
    --------
    Write to a text buffer:
        >>> buffer = StringIO()
        >>> write_content("h1. Title", buffer)
        >>> buffer.getvalue()
        'h1. Title'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["OutputDestination", "write_content"]
