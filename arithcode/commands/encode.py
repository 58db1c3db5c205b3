"""CLI command encoding a text into a single fraction.

Examples
--------
  arithcode encode "ІНФОРМАЦІЯ"
  arithcode encode "hello world" --order codepoint --output hello.json
  arithcode encode "AAB" --format json
"""

from __future__ import annotations

from pathlib import Path
import json

import click

from arithcode.commands.common import fail, make_coder, normalize_option, order_option, prepare_text
from arithcode.errors import CodingError
from arithcode.report import format_history, format_probabilities, format_segments


@click.command(name="encode")
@click.argument("text", type=str)
@order_option
@normalize_option
@click.option(
    "output",
    "--output",
    type=click.Path(path_type=Path),
    required=False,
    help="Write the encoded message (value, length, model) as JSON to this path",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "json", "markdown", "csv"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format for the printed tables",
)
@click.option("force", "--force", is_flag=True, help="Overwrite --output if it exists")
@click.option(
    "strict",
    "--strict",
    is_flag=True,
    help="Fail instead of warning when the text exceeds double precision",
)
def encode(
    text: str,
    order_name: str,
    normalize: bool,
    output: Path | None,
    output_format: str,
    force: bool,
    strict: bool,
) -> None:
    """Encode TEXT and print the model, the narrowing history and the value."""

    try:
        text = prepare_text(text, normalize)
        if output is not None and output.exists() and not force:
            raise click.ClickException(f"{output} exists; use --force to overwrite")

        coder = make_coder(order_name, strict=strict)
        probabilities, table, result = coder.encode_detailed(text)
        message = coder.to_message(text, probabilities, result)

        fmt = output_format.lower()
        if fmt == "json":
            payload = message.to_dict()
            payload["segments"] = table.to_list()
            payload["history"] = [iv.to_dict() for iv in result.history]
            payload["information_bits"] = result.information_bits
            click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            click.echo("Probabilities")
            click.echo(format_probabilities(probabilities, fmt))
            click.echo("\nSegments")
            click.echo(format_segments(table, fmt))
            click.echo("\nBoundaries")
            click.echo(format_history(result.history, fmt))
            click.echo(f"\nFinal encoded value: {result.value!r}")
            click.echo(f"Length: {result.length}")
            click.echo(f"Information: {result.information_bits:.2f} bits")

        if output is not None:
            message.save(output)
            click.echo(f"Saved message to {output}", err=(fmt == "json"))
    except CodingError as e:
        fail(f"Encoding failed: {e}")
    except OSError as e:
        fail(f"Could not write message: {e}")
