"""CLI command describing the model of a text without encoding it."""

from __future__ import annotations

import click

from arithcode.commands.common import fail, make_coder, normalize_option, order_option, prepare_text
from arithcode.config import Config
from arithcode.errors import CodingError
from arithcode.model import entropy, information_bits, precision_headroom
from arithcode.report import format_probabilities, format_segments


@click.command(name="inspect")
@click.argument("text", type=str)
@order_option
@normalize_option
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "markdown", "csv"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format for the printed tables",
)
def inspect(text: str, order_name: str, normalize: bool, output_format: str) -> None:
    """Print probabilities, segments, entropy and precision headroom for TEXT."""

    try:
        text = prepare_text(text, normalize)
        coder = make_coder(order_name)
        probabilities = coder.model(text)
        table = coder.table(text)
        fmt = output_format.lower()

        click.echo("Probabilities")
        click.echo(format_probabilities(probabilities, fmt))
        click.echo("\nSegments")
        click.echo(format_segments(table, fmt))

        bits = information_bits(probabilities, text)
        click.echo(f"\nEntropy: {entropy(probabilities):.4f} bits/symbol")
        click.echo(f"Information: {bits:.2f} bits")
        headroom = precision_headroom(probabilities, text)
        if headroom < 0:
            click.secho(f"Precision headroom: {headroom:.2f} bits (text will not round-trip)", fg="yellow")
        elif bits > Config.SAFE_PRECISION_BITS:
            click.secho(f"Precision headroom: {headroom:.2f} bits (close to the precision limit)", fg="yellow")
        else:
            click.echo(f"Precision headroom: {headroom:.2f} bits")
    except CodingError as e:
        fail(f"Inspection failed: {e}")
