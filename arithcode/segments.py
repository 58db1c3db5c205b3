"""Cumulative segment table partitioning [0, 1).

Each symbol owns the half-open range ``[bottom, top)`` whose width is its
probability. Segments follow the order of the probability list and are
contiguous: the top of one segment is, bit for bit, the bottom of the next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence
import logging
import math

from arithcode.config import Config
from arithcode.errors import InvalidInputError, SymbolNotFoundError
from arithcode.model import Probability


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    """A symbol's sub-range of [0, 1)."""

    symbol: str
    bottom: float
    top: float

    @property
    def width(self) -> float:
        return self.top - self.bottom

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "bottom": self.bottom, "top": self.top}


class SegmentTable:
    """Immutable ordered collection of segments with lookup by symbol.

    Use `build_segment_table` to derive a validated table from a
    probability list. The constructor only rejects duplicate symbols.
    """

    __slots__ = ("_segments", "_index")

    def __init__(self, segments: Iterable[Segment]) -> None:
        self._segments: tuple[Segment, ...] = tuple(segments)
        self._index: dict[str, Segment] = {}
        for seg in self._segments:
            if seg.symbol in self._index:
                raise InvalidInputError(f"Duplicate symbol {seg.symbol!r} in segment table")
            self._index[seg.symbol] = seg

    # Sequence protocol --------------------------------------------------------
    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __getitem__(self, i: int) -> Segment:
        return self._segments[i]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SegmentTable):
            return NotImplemented
        return self._segments == other._segments

    def __hash__(self) -> int:
        return hash(self._segments)

    def __repr__(self) -> str:
        return f"SegmentTable({list(self._segments)!r})"

    # Lookup -------------------------------------------------------------------
    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._segments

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(seg.symbol for seg in self._segments)

    def find(self, symbol: str, position: int | None = None) -> tuple[float, float]:
        """Return ``(bottom, top)`` for ``symbol``.

        Raises
        ------
        SymbolNotFoundError
            If the table has no segment for ``symbol``.
        """

        seg = self._index.get(symbol)
        if seg is None:
            raise SymbolNotFoundError(symbol, position)
        return seg.bottom, seg.top

    def is_partition(self, tolerance: float = Config.TOLERANCE) -> bool:
        """True if segments are contiguous and span [0, 1) within ``tolerance``."""

        if not self._segments:
            return False
        if abs(self._segments[0].bottom) > tolerance:
            return False
        for prev, nxt in zip(self._segments, self._segments[1:]):
            if abs(prev.top - nxt.bottom) > tolerance:
                return False
        return abs(self._segments[-1].top - 1.0) <= tolerance

    def to_list(self) -> list[dict[str, Any]]:
        return [seg.to_dict() for seg in self._segments]


def build_segment_table(
    probabilities: Sequence[Probability],
    *,
    tolerance: float = Config.TOLERANCE,
) -> SegmentTable:
    """Lay ``probabilities`` end to end starting from 0.

    Raises
    ------
    InvalidInputError
        If the list is empty, repeats a symbol, holds a value outside (0, 1 + tolerance],
        or does not sum to 1 within ``tolerance``.
    """

    if not probabilities:
        raise InvalidInputError("Probability list must be non-empty.")

    segments: list[Segment] = []
    seen: set[str] = set()
    running = 0.0
    for p in probabilities:
        if not isinstance(p.symbol, str) or len(p.symbol) != 1:
            raise InvalidInputError(f"Symbols must be single characters, got {p.symbol!r}")
        if p.symbol in seen:
            raise InvalidInputError(f"Duplicate symbol {p.symbol!r} in probability list")
        if not math.isfinite(p.value) or not (0.0 < p.value <= 1.0 + tolerance):
            raise InvalidInputError(f"Probability for {p.symbol!r} must be in (0, 1 + {tolerance}], got {p.value!r}")
        seen.add(p.symbol)
        bottom = running
        running = bottom + p.value
        segments.append(Segment(p.symbol, bottom, running))

    if abs(running - 1.0) > tolerance:
        raise InvalidInputError(f"Probabilities sum to {running!r}, expected 1 (tolerance {tolerance})")

    _LOGGER.debug("Built segment table with %d segments", len(segments))
    return SegmentTable(segments)


__all__ = ["Segment", "SegmentTable", "build_segment_table"]
