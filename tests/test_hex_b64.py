import pytest

from basexxx.coding.b64 import decode_b64, decode_b64_bytes, encode_b64
from basexxx.coding.hexadecimal import decode_hex, decode_hex_bytes, encode_hex
from basexxx.errors import InvalidCharacterError, MalformedEncodingError


def test_hex_encode():
    assert encode_hex("A") == "41"
    assert encode_hex("é") == "C3A9"
    assert encode_hex("") == ""


def test_hex_keeps_leading_nul():
    assert encode_hex("\x00A") == "0041"
    assert decode_hex("0041") == "\x00A"


def test_hex_decode_case_and_whitespace():
    assert decode_hex("c3a9") == "é"
    assert decode_hex("48 65 6c 6c 6f") == "Hello"


def test_hex_trailing_single_digit():
    """A trailing lone digit is read as a byte of its own."""

    assert decode_hex_bytes("414") == b"A\x04"


def test_hex_invalid_character():
    with pytest.raises(InvalidCharacterError) as exc:
        decode_hex("4G")
    assert exc.value.symbol == "G"
    assert exc.value.position == 1


def test_b64_vectors():
    assert encode_b64("Man") == "TWFu"
    assert encode_b64("Ma") == "TWE="
    assert decode_b64("TWFu") == "Man"
    assert decode_b64("TW\nE=") == "Ma"


def test_b64_utf8_roundtrip():
    for text in ["héllo", "一二三", "\U0001F600"]:
        assert decode_b64(encode_b64(text)) == text


def test_b64_invalid_character():
    with pytest.raises(InvalidCharacterError) as exc:
        decode_b64("TW@u")
    assert exc.value.position == 2


def test_b64_bad_padding():
    with pytest.raises(MalformedEncodingError):
        decode_b64_bytes("TWF")
