"""Text formatting of probabilities, segments and interval histories.

Used by the CLI to print intermediate structures. Tables can be rendered as
aligned ASCII, Markdown or CSV.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from arithcode.coding.arithmetic import Interval
from arithcode.model import Probability
from arithcode.segments import Segment


FORMATS: tuple[str, ...] = ("table", "markdown", "csv")


def _display_symbol(symbol: str) -> str:
    if symbol == " ":
        return "' '"
    if not symbol.isprintable():
        return repr(symbol)
    return symbol


def format_table_ascii(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    widths = [max(len(h), *(len(r[i]) for r in rows)) if rows else len(h) for i, h in enumerate(headers)]

    def fmt_row(cols: Sequence[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(headers), sep]
    lines.extend(fmt_row(r) for r in rows)
    return "\n".join(lines)


def format_table_markdown(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    lines = ["| " + " | ".join(headers) + " |"]
    lines.append("| " + " | ".join(["---"] * len(headers)) + " |")
    for r in rows:
        lines.append("| " + " | ".join(r) + " |")
    return "\n".join(lines)


def format_table_csv(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    out_lines = [",".join(headers)]
    for r in rows:
        out_lines.append(",".join('"' + c.replace('"', '""') + '"' if ("," in c or '"' in c) else c for c in r))
    return "\n".join(out_lines)


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]], output_format: str = "table") -> str:
    """Render rows in one of `FORMATS`."""

    fmt = output_format.lower()
    if fmt == "markdown":
        return format_table_markdown(headers, rows)
    if fmt == "csv":
        return format_table_csv(headers, rows)
    if fmt != "table":
        raise ValueError(f"Unknown table format: {output_format!r}. Available: {', '.join(FORMATS)}")
    return format_table_ascii(headers, rows)


def format_probabilities(probabilities: Iterable[Probability], output_format: str = "table") -> str:
    rows = [[_display_symbol(p.symbol), repr(p.value)] for p in probabilities]
    return render_table(["Symbol", "Probability"], rows, output_format)


def format_segments(segments: Iterable[Segment], output_format: str = "table") -> str:
    rows = [[_display_symbol(s.symbol), repr(s.bottom), repr(s.top)] for s in segments]
    return render_table(["Symbol", "Bottom", "Top"], rows, output_format)


def format_history(history: Iterable[Interval], output_format: str = "table") -> str:
    rows = [
        [str(i), _display_symbol(iv.symbol), repr(iv.bottom), repr(iv.top)]
        for i, iv in enumerate(history, start=1)
    ]
    return render_table(["Step", "Symbol", "Bottom", "Top"], rows, output_format)


__all__ = [
    "FORMATS",
    "render_table",
    "format_table_ascii",
    "format_table_markdown",
    "format_table_csv",
    "format_probabilities",
    "format_segments",
    "format_history",
]
