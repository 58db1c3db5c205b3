"""Options and helpers shared by the subcommands."""

from __future__ import annotations

from typing import Any, Callable

import click

from arithcode.alphabet import normalize_text
from arithcode.coder import ArithmeticCoder
from arithcode.config import Config
from arithcode.ordering import get_order


def order_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "order_name",
        "--order",
        type=str,
        default=Config.DEFAULT_ORDER,
        show_default=True,
        help="Symbol order: 'codepoint', 'locale[:NAME]' or an alphabet name (Ukrainian-66, English-52)",
    )(func)


def normalize_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "normalize",
        "--normalize/--no-normalize",
        default=True,
        show_default=True,
        help="Apply Unicode NFC normalization to the input text",
    )(func)


def make_coder(order_name: str, *, strict: bool = False) -> ArithmeticCoder:
    return ArithmeticCoder(order=get_order(order_name), strict=strict)


def prepare_text(text: str, normalize: bool) -> str:
    if normalize:
        text = normalize_text(text)
    if not text:
        raise click.ClickException("Text must be non-empty.")
    return text


def fail(message: str, hint: str | None = None) -> None:
    """Print ``message`` (and an optional hint) to stderr and exit with status 1."""

    click.secho(message, fg="red", err=True)
    if hint:
        click.secho(hint, fg="yellow", err=True)
    raise SystemExit(1)
