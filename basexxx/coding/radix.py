"""Arbitrary-radix encoding through a big-integer intermediate.

The byte buffer is read as one big-endian unsigned integer, which is then
re-rendered in the digits of an `Alphabet` of any size >= 2. Python integers
are unbounded, so no overflow condition exists; cost grows quadratically with
input length because every step divides the whole integer.

Leading zero bytes
------------------
By default leading 0x00 bytes carry no numeric value and are lost: every
all-zero buffer encodes to the single symbol ``alphabet.zero`` and decodes to
an empty buffer. Pass ``preserve_leading_zeros=True`` to emit one
``alphabet.zero`` per leading zero byte (the Base58 convention), which makes
the round trip exact for every buffer. Both sides must agree on the flag.

Examples
--------
>>> from basexxx.alphabet import BASE16, BASE62
>>> encode("A", BASE16)
'41'
>>> decode("41", BASE16)
'A'
>>> decode(encode("hello", BASE62), BASE62)
'hello'
"""

from __future__ import annotations

from basexxx.alphabet import Alphabet
from basexxx.bridge import from_bytes, to_bytes
from basexxx.config import Config


def bytes_to_int(data: bytes) -> int:
    """Interpret ``data`` as a big-endian unsigned integer (empty -> 0)."""

    return int.from_bytes(data, "big")


def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian byte representation of ``value`` (0 -> b"")."""

    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value == 0:
        return b""
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def encode_int(value: int, alphabet: Alphabet) -> str:
    """Render ``value`` in ``alphabet``, most significant symbol first."""

    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")
    if value == 0:
        return alphabet.zero

    base = alphabet.size
    digits: list[int] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.reverse()
    return alphabet.from_indices(digits)


def decode_int(text: str, alphabet: Alphabet, *, offset: int = 0) -> int:
    """Accumulate the integer value of ``text`` read in ``alphabet``.

    ``offset`` is added to reported error positions when ``text`` is a slice
    of a larger input.

    Raises
    ------
    InvalidCharacterError
        On the first symbol that is not in ``alphabet``.
    """

    base = alphabet.size
    value = 0
    for digit in alphabet.to_indices(text, offset):
        value = value * base + digit
    return value


def _count_leading(seq: bytes | str, unit: int | str) -> int:
    n = 0
    for item in seq:
        if item != unit:
            break
        n += 1
    return n


def encode_bytes(data: bytes, alphabet: Alphabet, *, preserve_leading_zeros: bool = False) -> str:
    """Encode a byte buffer; empty input gives an empty string."""

    if not data:
        return ""

    if not preserve_leading_zeros:
        return encode_int(bytes_to_int(data), alphabet)

    zeros = _count_leading(data, 0)
    rest = data[zeros:]
    body = encode_int(bytes_to_int(rest), alphabet) if rest else ""
    return alphabet.zero * zeros + body


def decode_bytes(text: str, alphabet: Alphabet, *, preserve_leading_zeros: bool = False) -> bytes:
    """Decode ``text`` back to a byte buffer; empty input gives b""."""

    if not text:
        return b""

    if not preserve_leading_zeros:
        return int_to_bytes(decode_int(text, alphabet))

    zeros = _count_leading(text, alphabet.zero)
    value = decode_int(text[zeros:], alphabet, offset=zeros)
    return b"\x00" * zeros + int_to_bytes(value)


def encode(text: str, alphabet: Alphabet, *, preserve_leading_zeros: bool = False) -> str:
    """Encode the UTF-8 bytes of ``text`` in ``alphabet``."""

    if not text:
        return ""
    return encode_bytes(to_bytes(text), alphabet, preserve_leading_zeros=preserve_leading_zeros)


def decode(
    text: str,
    alphabet: Alphabet,
    *,
    errors: str = Config.DECODE_ERRORS,
    preserve_leading_zeros: bool = False,
) -> str:
    """Decode ``text`` from ``alphabet`` and return the UTF-8 text it carries.

    Raises `InvalidCharacterError` for symbols outside the alphabet and
    `MalformedTextError` if the bytes are not valid UTF-8 (unless
    ``errors="replace"``).
    """

    if not text:
        return ""
    data = decode_bytes(text, alphabet, preserve_leading_zeros=preserve_leading_zeros)
    return from_bytes(data, errors=errors)
