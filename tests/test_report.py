import csv
import io

import pytest

from arithcode.coding import encode
from arithcode.model import Probability, build_probabilities
from arithcode.ordering import CodepointOrder
from arithcode.report import (
    format_history,
    format_probabilities,
    format_segments,
    render_table,
)
from arithcode.segments import build_segment_table


@pytest.fixture
def parts():
    probs = build_probabilities("AAB", CodepointOrder())
    table = build_segment_table(probs)
    return probs, table, encode(table, "AAB")


def test_format_probabilities_ascii(parts):
    probs, _, _ = parts
    out = format_probabilities(probs)
    lines = out.splitlines()
    assert lines[0].startswith("Symbol")
    assert set(lines[1]) <= {"-", "+"}
    assert len(lines) == 4
    assert repr(probs[0].value) in out


def test_format_segments_markdown(parts):
    _, table, _ = parts
    out = format_segments(table, "markdown")
    assert out.splitlines()[0] == "| Symbol | Bottom | Top |"
    assert "| --- | --- | --- |" in out
    assert "| B |" in out


def test_format_history_csv(parts):
    _, _, result = parts
    out = format_history(result.history, "csv")
    lines = out.splitlines()
    assert lines[0] == "Step,Symbol,Bottom,Top"
    assert lines[3].startswith("3,B,")


def test_space_and_control_symbols_are_visible():
    probs = build_probabilities("a \n", CodepointOrder())
    out = format_probabilities(probs)
    assert "' '" in out
    assert "'\\n'" in out


def test_csv_quotes_commas():
    assert render_table(["a"], [["x,y"]], "csv").splitlines()[1] == '"x,y"'
    assert render_table(["a"], [['say "hi"']], "csv").splitlines()[1] == '"say ""hi"""'

    out = format_probabilities([Probability('"', 0.5), Probability(",", 0.5)], "csv")
    rows = list(csv.reader(io.StringIO(out)))
    assert rows == [["Symbol", "Probability"], ['"', "0.5"], [",", "0.5"]]


def test_unknown_format():
    with pytest.raises(ValueError):
        render_table(["a"], [["b"]], "html")
