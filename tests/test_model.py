import math

import pytest

from arithcode.alphabet import UKRAINIAN_ALPHABET
from arithcode.errors import InvalidInputError, SymbolNotFoundError
from arithcode.model import (
    Probability,
    build_probabilities,
    entropy,
    information_bits,
    precision_headroom,
    probability_map,
)
from arithcode.ordering import AlphabetOrder, CodepointOrder


@pytest.fixture
def order():
    return CodepointOrder()


def test_scenario_aab(order):
    probs = build_probabilities("AAB", order)
    assert [p.symbol for p in probs] == ["A", "B"]
    assert probs[0].value == pytest.approx(0.666667, abs=1e-6)
    assert probs[1].value == pytest.approx(0.333333, abs=1e-6)


def test_single_symbol(order):
    probs = build_probabilities("CCC", order)
    assert probs == (Probability("C", 1.0),)


def test_emission_follows_order_not_text(order):
    """Order is canonical, not first occurrence and not frequency."""

    probs = build_probabilities("zzzya", order)
    assert [p.symbol for p in probs] == ["a", "y", "z"]


def test_ukrainian_order():
    probs = build_probabilities("ІНФОРМАЦІЯ", AlphabetOrder(UKRAINIAN_ALPHABET))
    assert [p.symbol for p in probs] == ["А", "І", "М", "Н", "О", "Р", "Ф", "Ц", "Я"]
    assert probability_map(probs)["І"] == pytest.approx(0.2)


def test_shares_are_accumulated(order):
    """Ten shares of 0.1 sum by repeated addition, not count / N."""

    probs = build_probabilities("x" * 10, order)
    expected = 0.0
    for _ in range(10):
        expected += 0.1
    assert probs[0].value == expected


@pytest.mark.parametrize("text", ["hello world", "abracadabra", "ІНФОРМАЦІЯ", "😀a😀b"])
def test_normalization(order, text):
    probs = build_probabilities(text, order)
    assert math.fsum(p.value for p in probs) == pytest.approx(1.0, abs=1e-9)
    assert len({p.symbol for p in probs}) == len(probs) == len(set(text))


def test_code_points_are_symbols(order):
    """Non-BMP characters are single symbols."""

    probs = build_probabilities("😀😀a", order)
    assert probability_map(probs) == pytest.approx({"a": 1 / 3, "😀": 2 / 3})


def test_determinism(order):
    assert build_probabilities("mississippi", order) == build_probabilities("mississippi", order)


def test_empty_text_error(order):
    with pytest.raises(InvalidInputError):
        build_probabilities("", order)


def test_non_string_error(order):
    with pytest.raises(InvalidInputError):
        build_probabilities(["a", "b"], order)  # type: ignore[arg-type]


def test_entropy():
    probs = build_probabilities("abcd", CodepointOrder())
    assert entropy(probs) == pytest.approx(2.0)
    assert entropy(build_probabilities("aaa", CodepointOrder())) == pytest.approx(0.0)
    with pytest.raises(InvalidInputError):
        entropy(())


def test_information_bits(order):
    probs = build_probabilities("AAB", order)
    assert information_bits(probs, "AAB") == pytest.approx(2 * math.log2(1.5) + math.log2(3))
    with pytest.raises(SymbolNotFoundError):
        information_bits(probs, "ABC")


def test_precision_headroom(order):
    probs = build_probabilities("abcd", order)
    assert precision_headroom(probs, "abcd") == pytest.approx(44.0)
    long_text = "abcdefghijklmnopqrstuvwxyz" * 2
    assert precision_headroom(build_probabilities(long_text, order), long_text) < 0
