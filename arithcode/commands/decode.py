"""CLI command decoding a message written by ``arithcode encode --output``.

Examples
--------
  arithcode decode hello.json
  arithcode decode hello.json --no-verify
"""

from __future__ import annotations

from pathlib import Path

import click

from arithcode.commands.common import fail
from arithcode.errors import CodingError, MessageIntegrityError
from arithcode.message import EncodedMessage


@click.command(name="decode")
@click.argument("path", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option(
    "verify",
    "--verify/--no-verify",
    default=True,
    show_default=True,
    help="Check the decoded text against the stored checksum",
)
def decode(path: Path, verify: bool) -> None:
    """Decode the message stored at PATH and print the text."""

    try:
        message = EncodedMessage.load(path)
        click.echo(message.decode(verify=verify))
    except MessageIntegrityError as e:
        fail(str(e), hint="Hint: re-encode with --strict to detect messages that exceed double precision.")
    except CodingError as e:
        fail(f"Decoding failed: {e}")
    except OSError as e:
        fail(f"Could not read message: {e}")
