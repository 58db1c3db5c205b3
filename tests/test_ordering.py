import locale

import pytest

from arithcode.alphabet import ENGLISH_ALPHABET, UKRAINIAN_ALPHABET
from arithcode.errors import InvalidInputError
from arithcode.ordering import (
    AlphabetOrder,
    CodepointOrder,
    LocaleOrder,
    OrderProvider,
    canonical_sort,
    get_order,
)


class CaseFoldingOrder:
    """Synthetic order that treats upper- and lowercase as equal."""

    name = "casefold"

    def compare(self, a: str, b: str) -> int:
        x, y = a.lower(), b.lower()
        return (x > y) - (x < y)


class ReverseOrder:
    name = "reverse"

    def compare(self, a: str, b: str) -> int:
        return (a < b) - (a > b)


def test_codepoint_order():
    order = CodepointOrder()
    assert order.compare("A", "B") < 0
    assert order.compare("b", "a") > 0
    assert order.compare("x", "x") == 0


def test_alphabet_order_follows_alphabet_not_codepoints():
    """In code points 'І' (U+0406) sorts before 'А' (U+0410); in Ukrainian it does not."""

    order = AlphabetOrder(UKRAINIAN_ALPHABET)
    assert CodepointOrder().compare("І", "А") < 0
    assert order.compare("І", "А") > 0
    assert order.compare("Ґ", "Д") < 0
    assert order.name == "Ukrainian-66"


def test_alphabet_order_puts_non_members_first():
    order = AlphabetOrder(UKRAINIAN_ALPHABET)
    assert order.compare("_", "А") < 0
    assert order.compare("1", "_") < 0
    assert canonical_sort(list("Я_А1"), order) == ["1", "_", "А", "Я"]


def test_canonical_sort_breaks_ties_by_codepoint():
    """Symbols an order reports as equal stay distinct and sort deterministically."""

    order = CaseFoldingOrder()
    assert canonical_sort(["b", "a", "B", "A"], order) == ["A", "a", "B", "b"]
    assert canonical_sort(["a", "A"], order) == canonical_sort(["A", "a"], order)


def test_custom_orders_satisfy_protocol():
    assert isinstance(ReverseOrder(), OrderProvider)
    assert isinstance(CodepointOrder(), OrderProvider)
    assert canonical_sort("abc", ReverseOrder()) == ["c", "b", "a"]


def test_locale_order_without_locale_uses_current_collation():
    order = LocaleOrder()
    assert order.name == "locale"
    assert order.compare("a", "a") == 0
    assert order.compare("a", "b") == -order.compare("b", "a")


def test_locale_order_unknown_locale(monkeypatch):
    def _raise(category, name):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(locale, "setlocale", _raise)
    with pytest.raises(InvalidInputError):
        LocaleOrder("xx_XX.UTF-8")


def test_get_order():
    assert isinstance(get_order("codepoint"), CodepointOrder)
    assert isinstance(get_order("locale"), LocaleOrder)
    order = get_order("English-52")
    assert isinstance(order, AlphabetOrder)
    assert order.alphabet is ENGLISH_ALPHABET
    with pytest.raises(InvalidInputError):
        get_order("nope")
