"""Per-message probability model over a canonically ordered alphabet.

Every occurrence of a symbol contributes ``1/N`` to its probability, where
``N`` is the number of code points in the message. The shares are summed by
repeated floating-point addition, so two implementations following the same
recipe produce bit-identical models. Entries are emitted in the order given
by an `OrderProvider`, never by frequency or first occurrence, which lets a
receiver holding the same order rebuild the same segment table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence
import logging

import numpy as np

from arithcode.config import Config
from arithcode.errors import InvalidInputError, SymbolNotFoundError
from arithcode.ordering import OrderProvider, canonical_sort


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Probability:
    """Probability mass assigned to one symbol."""

    symbol: str
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "value": self.value}


def build_probabilities(text: str, order: OrderProvider) -> tuple[Probability, ...]:
    """Return one `Probability` per distinct symbol of ``text``.

    Parameters
    ----------
    text:
        Message to model. Each code point is one symbol.
    order:
        Total order fixing the emission order of the entries.

    Raises
    ------
    InvalidInputError
        If ``text`` is empty or not a string.
    """

    if not isinstance(text, str):
        raise InvalidInputError(f"Text must be a str, got {type(text).__name__}")
    if not text:
        raise InvalidInputError("Text must be non-empty to build a probability model.")

    share = 1.0 / len(text)
    totals: dict[str, float] = {}
    for ch in text:
        totals[ch] = totals.get(ch, 0.0) + share

    ordered = canonical_sort(totals.keys(), order)
    _LOGGER.debug("Built model: %d symbols, %d distinct, order=%s", len(text), len(ordered), order.name)
    return tuple(Probability(ch, totals[ch]) for ch in ordered)


def probability_map(probabilities: Iterable[Probability]) -> dict[str, float]:
    """Return ``{symbol: value}`` for ``probabilities``."""

    return {p.symbol: p.value for p in probabilities}


def entropy(probabilities: Sequence[Probability]) -> float:
    """Return the Shannon entropy of the distribution in bits/symbol."""

    if not probabilities:
        raise InvalidInputError("Cannot compute entropy of an empty distribution.")
    values = np.array([p.value for p in probabilities], dtype=np.float64)
    values = values[values > 0]
    return float(-(values * np.log2(values)).sum())


def information_bits(probabilities: Sequence[Probability], text: str) -> float:
    """Return the ideal codelength of ``text`` in bits, ``sum(-log2 p(c))``.

    This is also how many bits of the coder's fraction the final interval
    occupies, so comparing it with the mantissa width of a double tells
    whether ``text`` can round-trip.
    """

    probs = probability_map(probabilities)
    total = 0.0
    for position, ch in enumerate(text):
        p = probs.get(ch)
        if p is None:
            raise SymbolNotFoundError(ch, position)
        total += -float(np.log2(p))
    return total


def precision_headroom(probabilities: Sequence[Probability], text: str) -> float:
    """Mantissa bits left after coding ``text``; negative means it will not round-trip."""

    return Config.PRECISION_BITS - information_bits(probabilities, text)


__all__ = [
    "Probability",
    "build_probabilities",
    "probability_map",
    "entropy",
    "information_bits",
    "precision_headroom",
]
