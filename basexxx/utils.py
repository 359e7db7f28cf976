"""Shared helpers for reading command input and writing command output."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from basexxx.bridge import from_bytes


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)


def read_text_input(
    text: Optional[str],
    input_path: Optional[Path],
    *,
    strip_file_newline: bool = False,
) -> str:
    """Return the text to convert.

    Precedence: the positional ``text`` argument, then ``input_path``, then
    standard input.

    Files are read as bytes and decoded strictly as UTF-8 without newline
    translation, so ``\\r\\n`` and a final newline survive; undecodable bytes
    raise `MalformedTextError`. A single trailing newline is dropped from
    stdin (``echo hi | basexxx encode`` encodes ``hi``) and, when
    ``strip_file_newline`` is set, from files.
    """

    if text is not None and input_path is not None:
        raise click.UsageError("Pass TEXT or --input, not both.")
    if text is not None:
        return text
    if input_path is not None:
        data = from_bytes(input_path.read_bytes())
        return data.removesuffix("\n") if strip_file_newline else data
    with click.open_file("-", "r", encoding="utf-8") as f:
        data = f.read()
    return data.removesuffix("\n")


def write_text_output(result: str, output_path: Optional[Path]) -> None:
    """Write ``result`` to ``output_path`` (UTF-8, no newline translation) or echo it to stdout."""

    if output_path is None:
        click.echo(result)
        return
    ensure_dir(output_path.parent)
    output_path.write_text(result, encoding="utf-8", newline="")
    click.echo(f"Saved: {output_path}", err=True)
