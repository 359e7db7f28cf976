import pytest

from basexxx.alphabet import BASE62
from basexxx.errors import CodecError, InvalidCharacterError, UnknownCodecError
from basexxx.registry import CODEC_REGISTRY, CodecSpec, convert, get_codec, list_codecs

EXPECTED = {
    "base10",
    "base16",
    "base26",
    "base36",
    "base52",
    "base62",
    "base64",
    "base85",
    "base94",
    "chinese1",
    "chinese2",
}


def test_registry_contents():
    assert set(CODEC_REGISTRY) == EXPECTED
    assert [s.name for s in list_codecs()] == list(CODEC_REGISTRY)


def test_get_codec_case_insensitive():
    spec = get_codec("BASE62")
    assert isinstance(spec, CodecSpec)
    assert spec.alphabet is BASE62
    assert spec.radix == 62


def test_unknown_codec():
    with pytest.raises(UnknownCodecError) as exc:
        get_codec("base63")
    assert "base62" in exc.value.available
    assert isinstance(exc.value, CodecError)


def test_unknown_mode():
    with pytest.raises(ValueError, match="Unknown mode"):
        convert("base62", "reverse", "A")


def test_empty_text_short_circuits():
    for name in EXPECTED:
        assert convert(name, "encode", "") == ""
        assert convert(name, "decode", "") == ""


def test_roundtrip_every_codec():
    text = "Hello, 世界!"
    for name in EXPECTED:
        assert convert(name, "decode", convert(name, "encode", text)) == text


def test_convert_vectors():
    assert convert("base16", "encode", "A") == "41"
    assert convert("base62", "encode", "A") == "13"
    assert convert("base85", "encode", "Man ") == "<~9jqo^~>"
    assert convert("base85", "encode", "Man ", wrap=False) == "9jqo^"
    assert convert("base64", "encode", "Man") == "TWFu"


def test_case_insensitive_decode():
    assert convert("base26", "decode", "cn") == "A"
    assert convert("base36", "decode", "1t") == "A"
    assert convert("base16", "decode", "c3a9") == "é"


def test_case_sensitive_decode():
    with pytest.raises(InvalidCharacterError):
        convert("base62", "decode", "1-")


def test_preserve_leading_zeros_option():
    assert convert("base10", "encode", "\x00A") == "65"
    assert convert("base10", "encode", "\x00A", preserve_leading_zeros=True) == "065"
    assert convert("base10", "decode", "065", preserve_leading_zeros=True) == "\x00A"
    # Non-radix codecs ignore the flag
    assert convert("base64", "encode", "\x00A", preserve_leading_zeros=True) == "AEE="


def test_errors_policy_passed_through():
    assert convert("base16", "decode", "FF", errors="replace") == "�"


def test_to_dict():
    d = get_codec("base16").to_dict()
    assert d["radix"] == 16
    assert d["bits_per_symbol"] == 4.0
    assert get_codec("base85").to_dict()["alphabet_name"] is None
