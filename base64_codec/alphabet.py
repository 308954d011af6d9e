#!/usr/bin/env python3
"""
Base64 Codec - Alphabet Table
Standard Base64 alphabet (RFC 4648 section 4) and its inverse.

Both tables are built once at import time and never mutated:

- ``FORWARD``: ``bytes`` of length 64, index -> character byte
- ``REVERSE``: ``tuple`` of length 256, byte value -> index

Bytes outside the alphabet (including the padding character) map to 0 in
``REVERSE``. The lenient decoder depends on this.
"""

from typing import Tuple, Union

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING = ord("=")

Char = Union[int, str, bytes]


def _build_reverse(forward: bytes) -> Tuple[int, ...]:
    table = [0] * 256
    for index, char in enumerate(forward):
        table[char] = index
    return tuple(table)


def _build_membership(forward: bytes) -> Tuple[bool, ...]:
    table = [False] * 256
    for char in forward:
        table[char] = True
    return tuple(table)


FORWARD: bytes = ALPHABET.encode("ascii")
REVERSE: Tuple[int, ...] = _build_reverse(FORWARD)
_MEMBERS: Tuple[bool, ...] = _build_membership(FORWARD)


def _as_byte(char: Char) -> int:
    if isinstance(char, int):
        return char
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char[0] if isinstance(char, bytes) else ord(char)


def forward(index: int) -> int:
    """Return the alphabet byte for a 6-bit index (0..63).

    Raises:
        ValueError: index outside 0..63
    """
    if not 0 <= index < 64:
        raise ValueError(f"index out of range 0..63: {index}")
    return FORWARD[index]


def reverse(char: Char) -> int:
    """Return the 6-bit index of ``char``.

    Characters outside the alphabet, padding included, resolve to 0 instead
    of failing.
    """
    value = _as_byte(char)
    if 0 <= value < 256:
        return REVERSE[value]
    return 0


def is_alphabet(char: Char) -> bool:
    """True if ``char`` is one of the 64 alphabet characters."""
    value = _as_byte(char)
    return 0 <= value < 256 and _MEMBERS[value]
