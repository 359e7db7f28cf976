"""Per-byte hexadecimal (base16) codec.

Unlike the radix codec, each byte maps to exactly two digits, so leading zero
bytes survive the round trip.
"""

from __future__ import annotations

from basexxx.bridge import from_bytes, to_bytes
from basexxx.config import Config
from basexxx.errors import InvalidCharacterError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def encode_hex(text: str) -> str:
    """Two uppercase hex digits per UTF-8 byte of ``text``."""

    return to_bytes(text).hex().upper()


def decode_hex_bytes(text: str) -> bytes:
    """Decode hex digits to bytes.

    Whitespace is ignored and case does not matter. Digits are consumed two at
    a time; a trailing lone digit is read as a byte of its own (``"414"`` ->
    ``b"A\\x04"``).
    """

    data = "".join(text.split())
    for pos, ch in enumerate(data):
        if ch not in _HEX_DIGITS:
            raise InvalidCharacterError(ch, pos, "Base16")
    return bytes(int(data[i:i + 2], 16) for i in range(0, len(data), 2))


def decode_hex(text: str, *, errors: str = Config.DECODE_ERRORS) -> str:
    """Decode hex digits and return the UTF-8 text they carry."""

    return from_bytes(decode_hex_bytes(text), errors=errors)
