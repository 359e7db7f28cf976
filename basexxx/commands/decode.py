"""CLI command for decoding text with a registered codec.

Examples
--------
  basexxx decode 48656C6C6F --codec base16
  basexxx decode "<~9jqo^~>" --codec base85
  basexxx decode --codec base10 --errors replace --input blob.txt
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from basexxx.config import Config, SUPPORTED_ERROR_POLICIES
from basexxx.errors import CodecError, InvalidCharacterError, MalformedTextError
from basexxx.registry import CODEC_REGISTRY, convert
from basexxx.utils import read_text_input, write_text_output


@click.command(name="decode")
@click.argument("text", required=False)
@click.option(
    "codec",
    "--codec",
    "-c",
    type=click.Choice(list(CODEC_REGISTRY), case_sensitive=False),
    default=Config.DEFAULT_CODEC,
    show_default=True,
    help="Codec to decode with",
)
@click.option(
    "input_path",
    "--input",
    "-i",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=False,
    help="Read encoded text from this file instead of TEXT/stdin",
)
@click.option(
    "output_path",
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write the decoded text to this file instead of stdout",
)
@click.option(
    "errors",
    "--errors",
    type=click.Choice(SUPPORTED_ERROR_POLICIES, case_sensitive=False),
    default=Config.DECODE_ERRORS,
    show_default=True,
    help="How to handle bytes that are not valid UTF-8",
)
@click.option(
    "preserve_zeros",
    "--preserve-zeros",
    is_flag=True,
    help="Radix codecs: restore leading NUL bytes from leading zero digits",
)
def decode(
    text: Optional[str],
    codec: str,
    input_path: Optional[Path],
    output_path: Optional[Path],
    errors: str,
    preserve_zeros: bool,
) -> None:
    """Decode TEXT (or --input / stdin) with the chosen codec."""

    try:
        source = read_text_input(text, input_path, strip_file_newline=True)
        result = convert(
            codec,
            "decode",
            source,
            errors=errors.lower(),
            preserve_leading_zeros=preserve_zeros,
        )
        write_text_output(result, output_path)
    except click.ClickException:
        raise
    except InvalidCharacterError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        click.secho(f"Hint: check that the input was produced by '{codec}'.", fg="yellow", err=True)
        raise SystemExit(1)
    except MalformedTextError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        click.secho("Hint: use --errors replace to substitute U+FFFD.", fg="yellow", err=True)
        raise SystemExit(1)
    except CodecError as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        raise SystemExit(1)
