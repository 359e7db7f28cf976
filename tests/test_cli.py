from pathlib import Path
import json

import pytest
from click.testing import CliRunner

from basexxx import __version__
from basexxx.cli import cli


@pytest.fixture()
def cli_runner() -> CliRunner:
    return CliRunner()


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_encode_argument(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "A", "--codec", "base16"])
    assert result.exit_code == 0
    assert result.output.strip() == "41"


def test_encode_default_codec(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "A"])
    assert result.exit_code == 0
    assert result.output.strip() == "13"


def test_encode_stdin(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "--codec", "base85"], input="Man \n")
    assert result.exit_code == 0
    assert result.output.strip() == "<~9jqo^~>"


def test_encode_no_wrap(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "Man ", "--codec", "base85", "--no-wrap"])
    assert result.exit_code == 0
    assert result.output.strip() == "9jqo^"


def test_decode_argument(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["decode", "<~9jqo^~>", "--codec", "base85"])
    assert result.exit_code == 0
    assert result.output.rstrip("\n") == "Man "


def test_roundtrip_files(cli_runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("héllo wörld", encoding="utf-8")
    enc = tmp_path / "out" / "enc.txt"
    r1 = cli_runner.invoke(cli, ["encode", "--codec", "chinese2", "--input", str(src), "--output", str(enc)])
    assert r1.exit_code == 0
    assert enc.exists()
    dec = tmp_path / "dec.txt"
    r2 = cli_runner.invoke(cli, ["decode", "--codec", "chinese2", "--input", str(enc), "--output", str(dec)])
    assert r2.exit_code == 0
    assert dec.read_text(encoding="utf-8") == "héllo wörld"


def test_text_and_input_conflict(cli_runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_text("x", encoding="utf-8")
    result = cli_runner.invoke(cli, ["encode", "y", "--input", str(src)])
    assert result.exit_code != 0


def test_decode_invalid_character(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["decode", "4G", "--codec", "base16"])
    assert result.exit_code == 1
    assert "Invalid character" in result.output


def test_decode_malformed_text_and_replace(cli_runner: CliRunner):
    strict = cli_runner.invoke(cli, ["decode", "FF", "--codec", "base16"])
    assert strict.exit_code == 1
    assert "Malformed text" in strict.output
    lenient = cli_runner.invoke(cli, ["decode", "FF", "--codec", "base16", "--errors", "replace"])
    assert lenient.exit_code == 0
    assert "�" in lenient.output


def test_preserve_zeros_flag(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "\x00A", "--codec", "base10", "--preserve-zeros"])
    assert result.exit_code == 0
    assert result.output.strip() == "065"


def test_unknown_codec_rejected(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["encode", "A", "--codec", "base63"])
    assert result.exit_code != 0


def test_codecs_table(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["codecs"])
    assert result.exit_code == 0
    assert "base85" in result.output
    assert "chinese2" in result.output


def test_codecs_json(cli_runner: CliRunner):
    result = cli_runner.invoke(cli, ["codecs", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    names = [d["name"] for d in data]
    assert "base62" in names


def test_file_roundtrip_keeps_crlf_and_final_newline(cli_runner: CliRunner, tmp_path: Path):
    """File input is not newline-translated or trimmed on encode."""

    original = b"line1\r\nline2\n"
    src = tmp_path / "in.txt"
    src.write_bytes(original)
    enc = tmp_path / "enc.txt"
    dec = tmp_path / "dec.txt"
    r1 = cli_runner.invoke(cli, ["encode", "-c", "base85", "-i", str(src), "-o", str(enc)])
    assert r1.exit_code == 0
    r2 = cli_runner.invoke(cli, ["decode", "-c", "base85", "-i", str(enc), "-o", str(dec)])
    assert r2.exit_code == 0
    assert dec.read_bytes() == original


def test_decode_file_with_trailing_newline(cli_runner: CliRunner, tmp_path: Path):
    enc = tmp_path / "enc.txt"
    enc.write_bytes(b"<~9jqo^~>\n")
    result = cli_runner.invoke(cli, ["decode", "-c", "base85", "-i", str(enc)])
    assert result.exit_code == 0
    assert result.output.rstrip("\n") == "Man "


def test_encode_non_utf8_input_file(cli_runner: CliRunner, tmp_path: Path):
    src = tmp_path / "in.bin"
    src.write_bytes(b"\xff\xfe")
    result = cli_runner.invoke(cli, ["encode", "-c", "base85", "-i", str(src)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Malformed text" in result.output
