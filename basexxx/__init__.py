"""
basexxx: convert text to and from base-N representations.

Implements arbitrary-radix encoding over a big-integer intermediate (any
alphabet of two or more symbols) and Ascii85 block encoding, plus hex and
Base64 codecs and a name-based dispatcher.
"""

__all__ = [
    "Alphabet",
    "get_alphabet_by_name",
    "Config",
    "get_config",
    "__version__",
    # Errors
    "CodecError",
    "InvalidCharacterError",
    "MalformedTextError",
    "MalformedEncodingError",
    "UnknownCodecError",
    # Byte/text bridge
    "to_bytes",
    "from_bytes",
    # Codecs (lazy-imported via __getattr__)
    "encode",
    "decode",
    "encode85",
    "decode85",
    # Dispatch (lazy-imported via __getattr__)
    "convert",
    "get_codec",
    "list_codecs",
]

__version__ = "0.1.0"

from typing import Any

from basexxx.alphabet import Alphabet, get_alphabet_by_name
from basexxx.bridge import from_bytes, to_bytes
from basexxx.config import Config, get_config
from basexxx.errors import (
    CodecError,
    InvalidCharacterError,
    MalformedEncodingError,
    MalformedTextError,
    UnknownCodecError,
)


def __getattr__(name: str) -> Any:  # lazy attribute access to keep codec modules out of package import
    if name == "encode":
        from basexxx.coding.radix import encode as _enc

        return _enc
    if name == "decode":
        from basexxx.coding.radix import decode as _dec

        return _dec
    if name == "encode85":
        from basexxx.coding.ascii85 import encode85 as _e85

        return _e85
    if name == "decode85":
        from basexxx.coding.ascii85 import decode85 as _d85

        return _d85
    if name == "convert":
        from basexxx.registry import convert as _cv

        return _cv
    if name == "get_codec":
        from basexxx.registry import get_codec as _gc

        return _gc
    if name == "list_codecs":
        from basexxx.registry import list_codecs as _lc

        return _lc
    raise AttributeError(f"module 'basexxx' has no attribute {name!r}")
