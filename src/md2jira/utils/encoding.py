#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2jira/utils/encoding.py
"""Character encoding detection for Markdown input.

Markdown arrives as bytes when it is read from a file, a binary stream or
stdin's buffer. This module decodes it with chardet-based detection and a
list of fallback encodings.
"""

from __future__ import annotations

import logging
from typing import IO

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "utf-8-sig", "latin-1"]


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if chardet is not installed, the
        detection fails, or the confidence is below threshold

    """
    try:
        import chardet
    except ImportError:
        logger.debug("chardet not available for encoding detection")
        return None

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | None = None,
    use_chardet: bool = True,
) -> str:
    """Decode binary data as text with automatic encoding detection.

    Strategies, in order:
    1. Strict UTF-8 (a byte order mark is dropped)
    2. chardet-based detection (if enabled and available)
    3. Fallback encodings in order
    4. UTF-8 with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] | None, default None
        Encodings to try in order. Defaults to utf-8, utf-8-sig, latin-1.
    use_chardet : bool, default True
        Whether to attempt chardet-based detection first

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"# Title")
    '# Title'

    """
    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    # Pure ASCII decodes identically everywhere
    if data.isascii():
        return data.decode("ascii")

    # chardet misjudges short UTF-8 samples as Latin encodings
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, detecting encoding")

    if use_chardet:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        logger.debug(f"Successfully decoded with encoding: {encoding}")
        return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str], fallback_encodings: list[str] | None = None) -> str:
    """Read a binary or text stream to the end and return its text.

    Parameters
    ----------
    stream : IO[bytes] or IO[str]
        File-like object to read from
    fallback_encodings : list[str] or None, optional
        Encodings to try for binary streams when detection fails

    Returns
    -------
    str
        Decoded text content from the stream

    Raises
    ------
    TypeError
        If stream.read() returns something other than bytes or str

    """
    content = stream.read()

    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content, fallback_encodings=fallback_encodings)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
