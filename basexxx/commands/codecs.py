"""CLI command listing the registered codecs."""

from __future__ import annotations

import json

import click

from basexxx.registry import list_codecs


@click.command(name="codecs")
@click.option(
    "fmt",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
def codecs(fmt: str) -> None:
    """List available codecs with their radix and bits per symbol."""

    specs = list_codecs()
    if fmt.lower() == "json":
        click.echo(json.dumps([s.to_dict() for s in specs], indent=2, ensure_ascii=False))
        return

    click.echo(f"{'codec':<10} {'radix':>6} {'bits/sym':>9}  description")
    for s in specs:
        bits = f"{s.alphabet.log2_size:.3f}" if s.alphabet else "-"
        click.echo(f"{s.name:<10} {s.radix:>6} {bits:>9}  {s.description}")
