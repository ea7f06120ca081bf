"""Hex encoding at the input/output boundary."""
from __future__ import annotations

import binascii
import string

from .errors import HexDecodeError

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_hex(text: str) -> bytes:
    """Decode an unprefixed, even-length hex string.

    Unlike ``bytes.fromhex`` this rejects embedded whitespace, so every
    character must be a hex digit.
    """
    if len(text) % 2:
        raise HexDecodeError("odd number of hex digits")
    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise HexDecodeError(f"invalid hex character {char!r} at position {position}", position)
    return binascii.unhexlify(text)


def encode_hex(data: bytes | memoryview) -> str:
    return binascii.hexlify(data).decode("ascii")


def strip_hex_prefix(text: str) -> str:
    text = text.strip()
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text
