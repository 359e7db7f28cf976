"""Typed errors raised by the codecs.

Every codec function either returns a complete result or raises one of these;
no partial output is ever returned. All errors derive from ``ValueError`` so
callers that only care about "bad input" can catch that.
"""

from __future__ import annotations

from typing import Sequence


class CodecError(ValueError):
    """Base class for all encoding/decoding failures."""


class InvalidCharacterError(CodecError):
    """An input symbol is not part of the active alphabet or digit range.

    Parameters
    ----------
    symbol:
        The offending character.
    position:
        Zero-based offset of ``symbol`` in the (whitespace-stripped) input,
        or ``None`` when the position is not meaningful.
    codec:
        Optional alphabet/codec name used in the message.
    """

    def __init__(self, symbol: str, position: int | None = None, codec: str | None = None) -> None:
        self.symbol = symbol
        self.position = position
        self.codec = codec
        where = f" at position {position}" if position is not None else ""
        target = f" for {codec}" if codec else " for current base"
        super().__init__(f"Invalid character {symbol!r}{where}{target}.")


class MalformedTextError(CodecError):
    """A byte buffer is not valid UTF-8 (or text cannot be encoded as UTF-8)."""

    def __init__(self, reason: str, start: int | None = None, end: int | None = None) -> None:
        self.reason = reason
        self.start = start
        self.end = end
        span = f" (bytes {start}..{end})" if start is not None else ""
        super().__init__(f"Malformed text{span}: {reason}")


class MalformedEncodingError(CodecError):
    """Encoded input is built from valid symbols but is structurally invalid."""


class UnknownCodecError(CodecError):
    """No codec is registered under the requested name."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = tuple(available)
        options = ", ".join(sorted(self.available))
        super().__init__(f"Unknown codec: {name!r}. Available: {options}")
