"""Pluggable total orders over single-character symbols.

The probability model never decides on its own which order symbols appear
in. It asks an `OrderProvider`, a strategy exposing
``compare(a, b) -> int`` with the usual negative / zero / positive
convention. Any locale-aware or synthetic order can be substituted.

Provided strategies
-------------------
- `CodepointOrder`: Unicode code point order.
- `AlphabetOrder`: rank within an `Alphabet`; symbols outside the alphabet
  sort first, by code point.
- `LocaleOrder`: ``locale.strcoll`` under the ``LC_COLLATE`` category.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, Protocol, runtime_checkable
import locale
import logging

from arithcode.alphabet import Alphabet, get_alphabet_by_name
from arithcode.errors import InvalidInputError


_LOGGER = logging.getLogger(__name__)


@runtime_checkable
class OrderProvider(Protocol):
    """Strategy comparing two one-character strings."""

    @property
    def name(self) -> str:  # pragma: no cover - protocol
        ...

    def compare(self, a: str, b: str) -> int:  # pragma: no cover - protocol
        ...


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


@dataclass(frozen=True)
class CodepointOrder:
    """Order symbols by Unicode code point."""

    name: str = "codepoint"

    def compare(self, a: str, b: str) -> int:
        return _cmp(ord(a), ord(b))


@dataclass(frozen=True)
class AlphabetOrder:
    """Order symbols by their position in ``alphabet``.

    Non-members (digits, punctuation, letters of other scripts) rank ahead
    of every alphabet symbol and are ordered among themselves by code point.
    """

    alphabet: Alphabet

    @property
    def name(self) -> str:
        return self.alphabet.name

    def _rank(self, ch: str) -> tuple[int, int]:
        idx = self.alphabet.index_of(ch)
        if idx is None:
            return (0, ord(ch))
        return (1, idx)

    def compare(self, a: str, b: str) -> int:
        return _cmp(self._rank(a), self._rank(b))


@dataclass(frozen=True)
class LocaleOrder:
    """Collate symbols with the C library's ``strcoll``.

    Parameters
    ----------
    locale_name:
        Optional ``LC_COLLATE`` locale (e.g. "uk_UA.UTF-8") installed when
        the order is created. ``None`` keeps whatever the process uses.

    Notes
    -----
    ``setlocale`` changes process-wide state, so two `LocaleOrder` objects
    with different locales cannot be used side by side.
    """

    locale_name: str | None = None

    def __post_init__(self) -> None:
        if self.locale_name is None:
            return
        try:
            locale.setlocale(locale.LC_COLLATE, self.locale_name)
        except locale.Error as exc:
            raise InvalidInputError(f"Locale {self.locale_name!r} is not available: {exc}") from exc
        _LOGGER.debug("LC_COLLATE set to %s", self.locale_name)

    @property
    def name(self) -> str:
        return f"locale:{self.locale_name}" if self.locale_name else "locale"

    def compare(self, a: str, b: str) -> int:
        return _cmp(locale.strcoll(a, b), 0)


def canonical_sort(symbols: Iterable[str], order: OrderProvider) -> list[str]:
    """Return ``symbols`` sorted by ``order``.

    Symbols the order reports as equal are kept apart and ranked by code
    point, so the result never depends on input order.
    """

    def _compare(a: str, b: str) -> int:
        return order.compare(a, b) or _cmp(ord(a), ord(b))

    return sorted(symbols, key=cmp_to_key(_compare))


def get_order(name: str) -> OrderProvider:
    """Return an order by name: "codepoint", "locale[:NAME]" or an alphabet name."""

    if name == "codepoint":
        return CodepointOrder()
    if name == "locale":
        return LocaleOrder()
    if name.startswith("locale:"):
        return LocaleOrder(name.split(":", 1)[1])
    try:
        return AlphabetOrder(get_alphabet_by_name(name))
    except ValueError as exc:
        raise InvalidInputError(
            f"Unknown order: {name!r}. Use 'codepoint', 'locale[:NAME]' or an alphabet name."
        ) from exc


__all__ = [
    "OrderProvider",
    "CodepointOrder",
    "AlphabetOrder",
    "LocaleOrder",
    "canonical_sort",
    "get_order",
]
