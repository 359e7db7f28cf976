"""Codec registry and type-name dispatch.

Maps codec names (``"base62"``, ``"base85"``, ...) to immutable `CodecSpec`
entries and exposes `convert`, which picks the codec for a name and a mode.
Failures are raised as `CodecError` subclasses; a failed conversion never
yields a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable
import logging

from basexxx.alphabet import (
    Alphabet,
    BASE10,
    BASE16,
    BASE26,
    BASE36,
    BASE52,
    BASE62,
    BASE94,
    CJK_1,
    CJK_2,
)
from basexxx.coding import ascii85, b64, hexadecimal, radix
from basexxx.config import Config, SUPPORTED_MODES
from basexxx.errors import UnknownCodecError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodecSpec:
    """Immutable codec specification.

    Fields
    ------
    name:
        Canonical codec identifier (e.g., "base62").
    description:
        Short human-readable description.
    encoder:
        ``encoder(text, **options) -> str``.
    decoder:
        ``decoder(text, *, errors, **options) -> str``.
    alphabet:
        Digit alphabet for radix codecs; None for block/byte codecs whose
        symbol set is fixed by the algorithm.
    radix:
        Number of symbols in the encoded representation.
    case_insensitive:
        Upper-case decode input before decoding.
    supports_leading_zeros:
        Accepts the ``preserve_leading_zeros`` option.
    supports_wrap:
        Accepts the ``wrap`` option (Ascii85 framing).
    """

    name: str
    description: str
    encoder: Callable[..., str]
    decoder: Callable[..., str]
    alphabet: Alphabet | None
    radix: int
    case_insensitive: bool = False
    supports_leading_zeros: bool = False
    supports_wrap: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return metadata suitable for JSON serialization."""

        return {
            "name": self.name,
            "description": self.description,
            "radix": self.radix,
            "alphabet_name": self.alphabet.name if self.alphabet else None,
            "bits_per_symbol": self.alphabet.log2_size if self.alphabet else None,
            "case_insensitive": self.case_insensitive,
        }


def _radix_spec(name: str, alphabet: Alphabet, description: str, *, case_insensitive: bool = False) -> CodecSpec:
    return CodecSpec(
        name=name,
        description=description,
        encoder=partial(radix.encode, alphabet=alphabet),
        decoder=partial(radix.decode, alphabet=alphabet),
        alphabet=alphabet,
        radix=alphabet.size,
        case_insensitive=case_insensitive,
        supports_leading_zeros=True,
    )


CODEC_REGISTRY: dict[str, CodecSpec] = {
    spec.name: spec
    for spec in (
        _radix_spec("base10", BASE10, "Decimal digits (big-integer)"),
        CodecSpec(
            name="base16",
            description="Hexadecimal, two digits per byte",
            encoder=hexadecimal.encode_hex,
            decoder=hexadecimal.decode_hex,
            alphabet=BASE16,
            radix=16,
            case_insensitive=True,
        ),
        _radix_spec("base26", BASE26, "Upper-case letters (big-integer)", case_insensitive=True),
        _radix_spec("base36", BASE36, "Digits and upper-case letters (big-integer)", case_insensitive=True),
        _radix_spec("base52", BASE52, "Upper- and lower-case letters (big-integer)"),
        _radix_spec("base62", BASE62, "Digits and letters (big-integer)"),
        CodecSpec(
            name="base64",
            description="Standard Base64 (RFC 4648)",
            encoder=b64.encode_b64,
            decoder=b64.decode_b64,
            alphabet=None,
            radix=64,
        ),
        CodecSpec(
            name="base85",
            description="Ascii85 with <~ ~> framing and z zero groups",
            encoder=ascii85.encode85,
            decoder=ascii85.decode85,
            alphabet=None,
            radix=85,
            supports_wrap=True,
        ),
        _radix_spec("base94", BASE94, "Printable ASCII (big-integer)"),
        _radix_spec("chinese1", CJK_1, "CJK Unified Ideographs + U+3007 (big-integer)"),
        _radix_spec("chinese2", CJK_2, "CJK Unified Ideographs + Extension A + U+3007 (big-integer)"),
    )
}


def get_codec(name: str) -> CodecSpec:
    """Return the `CodecSpec` registered under ``name`` (case-insensitive)."""

    try:
        return CODEC_REGISTRY[name.lower()]
    except KeyError:
        raise UnknownCodecError(name, CODEC_REGISTRY.keys()) from None


def list_codecs() -> list[CodecSpec]:
    """Return all registered codecs in registration order."""

    return list(CODEC_REGISTRY.values())


def convert(
    codec: str,
    mode: str,
    text: str,
    *,
    errors: str = Config.DECODE_ERRORS,
    preserve_leading_zeros: bool = False,
    wrap: bool = True,
) -> str:
    """Encode or decode ``text`` with the codec registered as ``codec``.

    Parameters
    ----------
    codec:
        Registered codec name, e.g. "base62".
    mode:
        "encode" or "decode".
    errors:
        UTF-8 error policy applied when decoding ("strict" or "replace").
    preserve_leading_zeros:
        Radix codecs only: keep leading zero bytes (ignored elsewhere).
    wrap:
        Ascii85 only: emit ``<~``/``~>`` framing when encoding.
    """

    if mode not in SUPPORTED_MODES:
        options = ", ".join(SUPPORTED_MODES)
        raise ValueError(f"Unknown mode: {mode!r}. Available: {options}")
    spec = get_codec(codec)
    if not text:
        return ""

    options: dict[str, Any] = {}
    if spec.supports_leading_zeros:
        options["preserve_leading_zeros"] = preserve_leading_zeros
    elif preserve_leading_zeros:
        _LOGGER.debug("%s ignores preserve_leading_zeros", spec.name)

    _LOGGER.debug("%s %s: %d input chars", mode, spec.name, len(text))
    if mode == "encode":
        if spec.supports_wrap:
            options["wrap"] = wrap
        return spec.encoder(text, **options)

    if spec.case_insensitive:
        text = text.upper()
    return spec.decoder(text, errors=errors, **options)
