#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlatex/utils/io_utils.py
"""I/O utilities for loading Markdown input and writing LaTeX output.

This module centralizes handling of the input sources accepted by the parser
(file paths, raw text, bytes, file-like objects) and the output destinations
accepted by the renderer (file paths or file-like objects).

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

import chardet

from mdlatex.constants import (
    DEFAULT_CHARDET_CONFIDENCE_THRESHOLD,
    DEFAULT_CHARDET_SAMPLE_SIZE,
    DEFAULT_INPUT_ENCODINGS,
    DEFAULT_OUTPUT_ENCODING,
    MAX_PATH_PROBE_LENGTH,
    UTF8_INPUT_ENCODING,
)

logger = logging.getLogger(__name__)

InputSource = Union[str, Path, IO[bytes], IO[str], bytes]
OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def detect_encoding(
    data: bytes,
    sample_size: int = DEFAULT_CHARDET_SAMPLE_SIZE,
    confidence_threshold: float = DEFAULT_CHARDET_CONFIDENCE_THRESHOLD,
) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes given to chardet
    confidence_threshold : float, default 0.7
        Minimum confidence (0.0-1.0) required to trust the detection

    Returns
    -------
    str or None
        Detected encoding name, or None if chardet found nothing or is not
        confident enough

    """
    result = chardet.detect(data[:sample_size])

    encoding = result.get("encoding")
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None

    return encoding


def decode_text(data: bytes, fallback_encodings: list[str] | None = None, use_chardet: bool = True) -> str:
    """Decode Markdown bytes with automatic encoding detection.

    Strategies, in order:

    1. Strict UTF-8 (a byte order mark is stripped)
    2. chardet detection, if enabled and confident
    3. Fallback encodings in order
    4. UTF-8 with undecodable bytes replaced

    UTF-8 goes first because short UTF-8 samples are often misdetected as a
    single-byte Latin encoding.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list[str] or None, default None
        Encodings to try in order. If None, uses ``['cp1252', 'latin-1']``
    use_chardet : bool, default True
        Whether to run chardet before the fallback encodings

    Returns
    -------
    str
        Decoded text

    Examples
    --------
        >>> decode_text("café".encode("utf-8"))
        'café'
        >>> decode_text("“quoted”".encode("cp1252"), use_chardet=False)
        '“quoted”'

    """
    try:
        return data.decode(UTF8_INPUT_ENCODING)
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8")

    if use_chardet:
        detected = detect_encoding(data)
        if detected:
            try:
                return data.decode(detected)
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"Detected encoding {detected} failed, trying fallbacks")

    for encoding in fallback_encodings or DEFAULT_INPUT_ENCODINGS:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Could not decode input as {encoding}")
            continue

    return data.decode("utf-8", errors="replace")


def read_text_content(input_data: InputSource) -> str:
    """Load text from the supported input types.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], IO[str], or bytes
        Input to load. A short single-line ``str`` naming an existing file
        is read from disk; any other ``str`` is treated as the content itself.

    Returns
    -------
    str
        Text content

    """
    if isinstance(input_data, bytes):
        return decode_text(input_data)

    if isinstance(input_data, Path):
        return decode_text(input_data.read_bytes())

    if isinstance(input_data, str):
        # Linux limits path components to 255 characters and Path.exists()
        # raises OSError on very long strings
        if len(input_data) <= MAX_PATH_PROBE_LENGTH and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return decode_text(path.read_bytes())
            except OSError:
                pass
        return input_data

    data = input_data.read()
    if isinstance(data, bytes):
        return decode_text(data)
    return data


def write_content(content: Union[str, bytes], output: OutputDestination) -> None:
    """Write content to a file path or file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write. Text is encoded as UTF-8 for binary destinations.
    output : str, Path, IO[bytes], or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If the output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("\\\\section{Intro}\\n", buffer)
        >>> buffer.getvalue()
        b'\\\\section{Intro}\\n'

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        if isinstance(content, str):
            output_path.write_text(content, encoding=DEFAULT_OUTPUT_ENCODING)
        else:
            output_path.write_bytes(content)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        binary_output = cast(IO[bytes], output)
        binary_output.write(content.encode(DEFAULT_OUTPUT_ENCODING) if isinstance(content, str) else content)
    else:
        text_output = cast(IO[str], output)
        text_output.write(content.decode(DEFAULT_OUTPUT_ENCODING) if isinstance(content, bytes) else content)


__all__ = ["decode_text", "detect_encoding", "read_text_content", "write_content"]
