"""CLI command encoding and decoding the built-in sample texts.

Examples
--------
  arithcode demo
  arithcode demo --order codepoint
"""

from __future__ import annotations

import click

from arithcode.commands.common import fail, make_coder, order_option
from arithcode.config import Config
from arithcode.errors import CodingError
from arithcode.report import format_history, format_probabilities, format_segments


@click.command(name="demo")
@order_option
def demo(order_name: str) -> None:
    """Encode and decode the sample texts, printing every intermediate step."""

    try:
        coder = make_coder(order_name)
        for text in Config.SAMPLE_TEXTS:
            click.echo("-" * 20 + " TEXT ENCODE+DECODE " + "-" * 20)
            click.echo(f"Text to encode: {text}\n")

            probabilities, table, result = coder.encode_detailed(text)
            click.echo("Appearance probabilities")
            click.echo(format_probabilities(probabilities))
            click.echo("\nSegments")
            click.echo(format_segments(table))
            click.echo("\nBoundaries")
            click.echo(format_history(result.history))

            message = coder.to_message(text, probabilities, result)
            decoded = coder.decode(message)
            click.echo(f"\nFinal encoded value: {result.value!r}")
            click.echo(f"Decoded text: {decoded}\n")
    except CodingError as e:
        fail(f"Demo failed: {e}")
