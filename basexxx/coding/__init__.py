"""Codecs between text and its encoded representations.

Public API:
- radix: encode, decode (arbitrary alphabet, big-integer intermediate)
- ascii85: encode85, decode85 (4 bytes <-> 5 symbols, ``z`` shortcut)
- hexadecimal: encode_hex, decode_hex
- b64: encode_b64, decode_b64
"""

from __future__ import annotations

from basexxx.coding.radix import (
    encode,
    decode,
    encode_bytes,
    decode_bytes,
    encode_int,
    decode_int,
    bytes_to_int,
    int_to_bytes,
)
from basexxx.coding.ascii85 import encode85, decode85, encode85_bytes, decode85_bytes
from basexxx.coding.hexadecimal import encode_hex, decode_hex
from basexxx.coding.b64 import encode_b64, decode_b64

__all__ = [
    "encode",
    "decode",
    "encode_bytes",
    "decode_bytes",
    "encode_int",
    "decode_int",
    "bytes_to_int",
    "int_to_bytes",
    "encode85",
    "decode85",
    "encode85_bytes",
    "decode85_bytes",
    "encode_hex",
    "decode_hex",
    "encode_b64",
    "decode_b64",
]
