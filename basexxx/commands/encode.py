"""CLI command for encoding text with a registered codec.

Examples
--------
  basexxx encode "hello" --codec base62
  basexxx encode --codec base85 --input notes.txt --output notes.a85
  echo hi | basexxx encode --codec chinese1
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from basexxx.config import Config
from basexxx.errors import CodecError, MalformedTextError
from basexxx.registry import CODEC_REGISTRY, convert
from basexxx.utils import read_text_input, write_text_output


@click.command(name="encode")
@click.argument("text", required=False)
@click.option(
    "codec",
    "--codec",
    "-c",
    type=click.Choice(list(CODEC_REGISTRY), case_sensitive=False),
    default=Config.DEFAULT_CODEC,
    show_default=True,
    help="Codec to encode with",
)
@click.option(
    "input_path",
    "--input",
    "-i",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
    help="Read UTF-8 text from this file instead of TEXT/stdin",
)
@click.option(
    "output_path",
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write the result to this file instead of stdout",
)
@click.option(
    "preserve_zeros",
    "--preserve-zeros",
    is_flag=True,
    help="Radix codecs: keep leading NUL bytes (one zero digit each)",
)
@click.option(
    "no_wrap",
    "--no-wrap",
    is_flag=True,
    help="base85: omit the <~ ~> delimiters",
)
def encode(
    text: Optional[str],
    codec: str,
    input_path: Optional[Path],
    output_path: Optional[Path],
    preserve_zeros: bool,
    no_wrap: bool,
) -> None:
    """Encode TEXT (or --input / stdin) with the chosen codec."""

    try:
        source = read_text_input(text, input_path)
        result = convert(
            codec,
            "encode",
            source,
            preserve_leading_zeros=preserve_zeros,
            wrap=not no_wrap,
        )
        write_text_output(result, output_path)
    except click.ClickException:
        raise
    except MalformedTextError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        click.secho("Hint: --input must be a UTF-8 text file.", fg="yellow", err=True)
        raise SystemExit(1)
    except CodecError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
