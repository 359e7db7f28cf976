"""Ascii85 (Base85) block encoding.

Each 4-byte group is read as a big-endian 32-bit value and written as five
base-85 digits, digit ``d`` rendered as ``chr(d + 33)`` (``!`` .. ``u``). An
all-zero group is abbreviated to ``z``. Input that is not a multiple of 4
bytes is right-padded with zero bytes, and the same number of characters is
trimmed from the output; the decoder pads with ``u`` and trims bytes to
invert this. Output is framed as ``<~ ... ~>``.

Examples
--------
>>> encode85("Man ")
'<~9jqo^~>'
>>> encode85_bytes(b"\\x00\\x00\\x00\\x00")
'<~z~>'
>>> decode85("<~9jqo^~>")
'Man '
"""

from __future__ import annotations

from basexxx.bridge import from_bytes, to_bytes
from basexxx.config import Config
from basexxx.errors import InvalidCharacterError, MalformedEncodingError

GROUP_BYTES = 4
GROUP_CHARS = 5
RADIX = 85
OFFSET = 33  # "!"
MAX_DIGIT_CHAR = chr(OFFSET + RADIX - 1)  # "u"
ZERO_GROUP = "z"
MAX_GROUP_VALUE = 0xFFFFFFFF


def _encode_group(value: int) -> str:
    chars = [""] * GROUP_CHARS
    for i in range(GROUP_CHARS - 1, -1, -1):
        value, digit = divmod(value, RADIX)
        chars[i] = chr(digit + OFFSET)
    return "".join(chars)


def encode85_bytes(data: bytes, *, wrap: bool = True, wrap_empty: bool = False) -> str:
    """Encode ``data`` as Ascii85.

    Parameters
    ----------
    data:
        Byte buffer to encode.
    wrap:
        Frame the result in ``<~`` / ``~>``.
    wrap_empty:
        Empty input gives ``""`` unless this is set, in which case it gives
        the framed empty body ``<~~>`` (only when ``wrap`` is also set).

    Notes
    -----
    When padding was applied, the final group is always written in full (never
    as ``z``) so that trimming ``pad`` characters stays exact.
    """

    if not data and not (wrap and wrap_empty):
        return ""

    pad = -len(data) % GROUP_BYTES
    padded = data + b"\x00" * pad
    last = len(padded) - GROUP_BYTES

    parts: list[str] = []
    for i in range(0, len(padded), GROUP_BYTES):
        value = int.from_bytes(padded[i:i + GROUP_BYTES], "big")
        if value == 0 and not (pad and i == last):
            parts.append(ZERO_GROUP)
        else:
            parts.append(_encode_group(value))

    result = "".join(parts)
    if pad:
        result = result[:-pad]

    if not wrap:
        return result
    return f"{Config.ASCII85_PREFIX}{result}{Config.ASCII85_SUFFIX}"


def _strip_frame(text: str) -> str:
    data = text.strip()
    data = data.removeprefix(Config.ASCII85_PREFIX)
    data = data.removesuffix(Config.ASCII85_SUFFIX)
    return "".join(data.split())


def decode85_bytes(text: str) -> bytes:
    """Decode Ascii85 ``text`` (framing and whitespace optional) to bytes.

    Raises
    ------
    InvalidCharacterError
        For a symbol outside ``!`` .. ``u`` other than ``z``. The position is
        counted in the input with framing and whitespace removed.
    MalformedEncodingError
        If a 5-symbol group encodes a value above 2**32 - 1.
    """

    data = _strip_frame(text)
    if not data:
        return b""

    for pos, ch in enumerate(data):
        if ch != ZERO_GROUP and not (OFFSET <= ord(ch) <= OFFSET + RADIX - 1):
            raise InvalidCharacterError(ch, pos, "Ascii85")

    data = data.replace(ZERO_GROUP, "!" * GROUP_CHARS)

    pad = -len(data) % GROUP_CHARS
    data += MAX_DIGIT_CHAR * pad

    out = bytearray()
    for i in range(0, len(data), GROUP_CHARS):
        value = 0
        for ch in data[i:i + GROUP_CHARS]:
            value = value * RADIX + (ord(ch) - OFFSET)
        if value > MAX_GROUP_VALUE:
            raise MalformedEncodingError(
                f"Ascii85 group {i // GROUP_CHARS} ({data[i:i + GROUP_CHARS]!r}) exceeds 32 bits"
            )
        out += value.to_bytes(GROUP_BYTES, "big")

    if pad:
        del out[-pad:]
    return bytes(out)


def encode85(text: str, *, wrap: bool = True, wrap_empty: bool = False) -> str:
    """Encode the UTF-8 bytes of ``text`` as Ascii85."""

    return encode85_bytes(to_bytes(text), wrap=wrap, wrap_empty=wrap_empty)


def decode85(text: str, *, errors: str = Config.DECODE_ERRORS) -> str:
    """Decode Ascii85 ``text`` and return the UTF-8 text it carries."""

    return from_bytes(decode85_bytes(text), errors=errors)
