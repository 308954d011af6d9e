#!/usr/bin/env python3
"""
Base64 Codec - Encoder and Decoder
Standard Base64 (RFC 4648 section 4) over byte buffers.

Usage:
    >>> encode(b"ABCD")
    b'QUJDRA=='
    >>> decode(b"QUJDRA==")
    b'ABCD'

``decode`` is lenient by default: bytes outside the alphabet count as index 0
and a short final group is filled with index 0. Pass ``strict=True`` to get a
``MalformedInputError`` instead.
"""

import logging
from typing import List

from .alphabet import FORWARD, PADDING, REVERSE, is_alphabet
from .exceptions import MalformedInputError
from .models import CodecMode, CodecResult, MalformedByte

logger = logging.getLogger(__name__)

ENCODE_GROUP = 3
DECODE_GROUP = 4
MAX_PADDING = 2

# characters emitted for a group of n input bytes: ceil(8n / 6)
_ENCODED_LENGTH = {1: 2, 2: 3, 3: 4}


# ============================================================================
# Encoder
# ============================================================================

def encode(data: bytes) -> bytes:
    """Encode ``data`` to Base64 text (ASCII bytes). Never fails."""
    data = bytes(data)
    encoded = bytearray()

    for start in range(0, len(data), ENCODE_GROUP):
        group = data[start:start + ENCODE_GROUP]
        buf = group + b"\x00" * (ENCODE_GROUP - len(group))
        merged = (buf[0] << 16) | (buf[1] << 8) | buf[2]
        sextets = (
            (merged >> 18) & 63,
            (merged >> 12) & 63,
            (merged >> 6) & 63,
            merged & 63,
        )
        for i in range(_ENCODED_LENGTH[len(group)]):
            encoded.append(FORWARD[sextets[i]])

    padding = (DECODE_GROUP - len(encoded) % DECODE_GROUP) % DECODE_GROUP
    encoded.extend(bytes([PADDING]) * padding)
    return bytes(encoded)


# ============================================================================
# Decoder
# ============================================================================

def count_padding(encoded: bytes) -> int:
    """Length of the trailing run of ``=`` in ``encoded``."""
    encoded = bytes(encoded)
    return len(encoded) - len(encoded.rstrip(b"="))


def find_malformed(encoded: bytes) -> List[MalformedByte]:
    """List the bytes that are neither alphabet characters nor trailing padding."""
    encoded = bytes(encoded)
    end = len(encoded) - count_padding(encoded)
    return [
        MalformedByte(position=pos, value=value)
        for pos, value in enumerate(encoded[:end])
        if not is_alphabet(value)
    ]


def check_strict(encoded: bytes) -> None:
    """Raise MalformedInputError unless ``encoded`` is canonical Base64."""
    encoded = bytes(encoded)
    if len(encoded) % DECODE_GROUP:
        raise MalformedInputError(
            f"length {len(encoded)} is not a multiple of {DECODE_GROUP}",
            position=len(encoded) - len(encoded) % DECODE_GROUP,
        )

    padding = count_padding(encoded)
    if padding > MAX_PADDING:
        raise MalformedInputError(
            f"{padding} padding characters, at most {MAX_PADDING} allowed",
            position=len(encoded) - padding,
            value=PADDING,
        )

    malformed = find_malformed(encoded)
    if malformed:
        first = malformed[0]
        raise MalformedInputError(
            f"invalid character {first.describe()}",
            position=first.position,
            value=first.value,
        )


def decode(encoded: bytes, strict: bool = False) -> bytes:
    """Decode Base64 text back to bytes.

    Args:
        encoded: Base64 text as bytes
        strict: reject malformed input instead of decoding it leniently

    Returns:
        The decoded bytes

    Raises:
        MalformedInputError: only when ``strict`` is set
    """
    encoded = bytes(encoded)
    if strict:
        check_strict(encoded)

    decoded = bytearray()
    for start in range(0, len(encoded), DECODE_GROUP):
        group = encoded[start:start + DECODE_GROUP]
        idx = [REVERSE[b] for b in group] + [0] * (DECODE_GROUP - len(group))
        merged = (idx[0] << 18) | (idx[1] << 12) | (idx[2] << 6) | idx[3]
        decoded.append((merged >> 16) & 255)
        decoded.append((merged >> 8) & 255)
        decoded.append(merged & 255)

    # padded positions decoded to zero bytes; drop one per '='
    keep = max(len(decoded) - count_padding(encoded), 0)
    return bytes(decoded[:keep])


# ============================================================================
# Dispatch
# ============================================================================

def transform(mode: CodecMode, data: bytes, strict: bool = False) -> CodecResult:
    """Run the encoder or decoder selected by ``mode``."""
    data = bytes(data)
    malformed_count = 0

    if mode is CodecMode.ENCODE:
        output = encode(data)
    else:
        output = decode(data, strict=strict)
        if not strict:
            malformed_count = len(find_malformed(data))

    logger.debug(
        "%s: %d bytes -> %d bytes", mode.value, len(data), len(output)
    )
    return CodecResult(
        mode=mode,
        data=output,
        input_size=len(data),
        output_size=len(output),
        malformed_count=malformed_count,
    )
