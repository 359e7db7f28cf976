"""Conversion between text and its UTF-8 byte representation.

Every codec goes through these two helpers, so the text encoding and the
policy for undecodable bytes are decided in exactly one place. Radix decoding
can produce arbitrary byte patterns, hence ``from_bytes`` raises by default
and only substitutes U+FFFD when ``errors="replace"`` is requested.

Examples
--------
>>> to_bytes("Man")
b'Man'
>>> from_bytes(b"\\xe4\\xb8\\x80")
'一'
"""

from __future__ import annotations

from basexxx.config import Config, SUPPORTED_ERROR_POLICIES
from basexxx.errors import MalformedTextError


def to_bytes(text: str) -> bytes:
    """Return the UTF-8 encoding of ``text``.

    Raises
    ------
    MalformedTextError
        If ``text`` contains code points UTF-8 cannot represent (lone
        surrogates).
    """

    try:
        return text.encode(Config.TEXT_ENCODING)
    except UnicodeEncodeError as exc:
        raise MalformedTextError(exc.reason, exc.start, exc.end) from exc


def from_bytes(data: bytes, errors: str = Config.DECODE_ERRORS) -> str:
    """Decode ``data`` as UTF-8.

    Parameters
    ----------
    data:
        Byte buffer to decode.
    errors:
        ``"strict"`` raises :class:`MalformedTextError` on invalid sequences;
        ``"replace"`` substitutes U+FFFD for each invalid sequence.
    """

    if errors not in SUPPORTED_ERROR_POLICIES:
        options = ", ".join(SUPPORTED_ERROR_POLICIES)
        raise ValueError(f"Unknown error policy: {errors!r}. Available: {options}")
    try:
        return data.decode(Config.TEXT_ENCODING, errors=errors)
    except UnicodeDecodeError as exc:
        raise MalformedTextError(exc.reason, exc.start, exc.end) from exc
