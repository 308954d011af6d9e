#!/usr/bin/env python3
"""
Base64 Codec - Input/Output
Reads the codec input and writes its output.

Input sources, in order of precedence: literal text, a file, stdin.
Output goes to a file when one is configured, otherwise to stdout.
Every OSError is re-raised as InputReadError or OutputWriteError.
"""

import logging
import os
import sys
from typing import BinaryIO, Optional

from .exceptions import InputReadError, OutputWriteError
from .models import CodecConfig

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


def read_stream(stream: BinaryIO) -> bytes:
    """Read ``stream`` to EOF in CHUNK_SIZE pieces."""
    data = bytearray()
    while chunk := stream.read(CHUNK_SIZE):
        data.extend(chunk)
    return bytes(data)


def read_input(config: CodecConfig, stdin: Optional[BinaryIO] = None) -> bytes:
    """Load the input bytes selected by ``config``

    Args:
        config: codec configuration
        stdin: binary stream used when no text or file is configured,
            defaults to sys.stdin.buffer

    Raises:
        InputReadError: the file or stream could not be read
    """
    if config.text is not None:
        logger.debug("reading input from argument")
        # undecodable argv bytes arrive as surrogates; fsencode restores them
        return os.fsencode(config.text)

    if config.input_file:
        logger.debug("reading input from %s", config.input_file)
        try:
            with open(config.input_file, "rb") as f:
                return read_stream(f)
        except OSError as e:
            raise InputReadError(
                f"cannot read {config.input_file}: {e.strerror or e}",
                source=config.input_file,
            ) from e

    logger.debug("reading input from stdin")
    stream = stdin if stdin is not None else sys.stdin.buffer
    try:
        return read_stream(stream)
    except OSError as e:
        raise InputReadError(f"cannot read stdin: {e.strerror or e}", source="<stdin>") from e


def write_output(config: CodecConfig, data: bytes, stdout: Optional[BinaryIO] = None) -> None:
    """Write ``data`` to the destination selected by ``config``

    Raises:
        OutputWriteError: the file or stream could not be written
    """
    if config.output_file:
        logger.debug("writing %d bytes to %s", len(data), config.output_file)
        try:
            with open(config.output_file, "wb") as f:
                f.write(data)
        except OSError as e:
            raise OutputWriteError(
                f"cannot write {config.output_file}: {e.strerror or e}",
                destination=config.output_file,
            ) from e
        return

    stream = stdout if stdout is not None else sys.stdout.buffer
    try:
        stream.write(data)
        stream.flush()
    except OSError as e:
        raise OutputWriteError(f"cannot write stdout: {e.strerror or e}", destination="<stdout>") from e
