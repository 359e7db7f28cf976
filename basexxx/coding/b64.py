"""Standard Base64 codec backed by the :mod:`base64` module."""

from __future__ import annotations

import base64
import binascii
import string

from basexxx.bridge import from_bytes, to_bytes
from basexxx.config import Config
from basexxx.errors import InvalidCharacterError, MalformedEncodingError

_B64_SYMBOLS = frozenset(string.ascii_letters + string.digits + "+/=")


def encode_b64(text: str) -> str:
    """Base64 (RFC 4648, padded) of the UTF-8 bytes of ``text``."""

    return base64.b64encode(to_bytes(text)).decode("ascii")


def decode_b64_bytes(text: str) -> bytes:
    """Decode padded Base64; whitespace is ignored.

    Raises `InvalidCharacterError` for symbols outside the Base64 alphabet and
    `MalformedEncodingError` for bad length or padding.
    """

    data = "".join(text.split())
    for pos, ch in enumerate(data):
        if ch not in _B64_SYMBOLS:
            raise InvalidCharacterError(ch, pos, "Base64")
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise MalformedEncodingError(f"Invalid Base64 input: {exc}") from exc


def decode_b64(text: str, *, errors: str = Config.DECODE_ERRORS) -> str:
    """Decode Base64 and return the UTF-8 text it carries."""

    return from_bytes(decode_b64_bytes(text), errors=errors)
