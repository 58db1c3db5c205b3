"""Interval-narrowing encoder and decoder over a `SegmentTable`.

Classic arithmetic coding with a single double-precision interval and no
renormalization. Each symbol shrinks the working interval to the slice its
segment occupies; the bottom of the last interval is the encoded value.

Precision
---------
The interval width shrinks by roughly the symbol's probability at every
step. Once the message carries more information than the 52 mantissa bits
of a double, neighbouring intervals collapse onto the same floats and the
value no longer decodes to the original text. `encode` logs a warning when
that budget is exceeded; it does not fail.

References
----------
- Witten, Neal, and Cleary (1987): Arithmetic coding for data compression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging
import math

import numpy as np

from arithcode.config import Config
from arithcode.errors import DecodeNoMatchingSegmentError, InvalidInputError
from arithcode.segments import SegmentTable


_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Interval:
    """Working range after coding ``symbol``."""

    symbol: str
    bottom: float
    top: float

    @property
    def width(self) -> float:
        return self.top - self.bottom

    def to_dict(self) -> dict[str, Any]:
        return {"symbol": self.symbol, "bottom": self.bottom, "top": self.top}


@dataclass(frozen=True)
class EncodeResult:
    """Narrowing history and final value of one `encode` call.

    ``information_bits`` is ``sum(-log2(segment width))`` over the text,
    i.e. how much of the double's mantissa the message consumed.
    """

    history: tuple[Interval, ...]
    value: float
    information_bits: float

    @property
    def length(self) -> int:
        return len(self.history)

    @property
    def within_precision(self) -> bool:
        return self.information_bits <= Config.PRECISION_BITS


def encode(table: SegmentTable, text: str) -> EncodeResult:
    """Encode ``text`` into a single value in [0, 1).

    Raises
    ------
    InvalidInputError
        If ``text`` is empty.
    SymbolNotFoundError
        If ``text`` holds a symbol with no segment in ``table``.
    """

    if not text:
        raise InvalidInputError("Text must be non-empty for encoding.")

    bot, top = 0.0, 1.0
    bits = 0.0
    history: list[Interval] = []
    for position, ch in enumerate(text):
        width = top - bot
        seg_bot, seg_top = table.find(ch, position)
        new_bot = bot + width * seg_bot
        new_top = bot + width * seg_top
        history.append(Interval(ch, new_bot, new_top))
        bot, top = new_bot, new_top
        bits += -float(np.log2(seg_top - seg_bot))

    if bits > Config.PRECISION_BITS:
        _LOGGER.warning(
            "Message of %d symbols needs %.1f bits, more than the %d-bit mantissa; "
            "the encoded value will not decode reliably",
            len(text),
            bits,
            Config.PRECISION_BITS,
        )
    _LOGGER.debug("Encoded %d symbols -> %r (%.2f bits)", len(text), bot, bits)
    return EncodeResult(history=tuple(history), value=bot, information_bits=bits)


def decode(table: SegmentTable, value: float, length: int) -> str:
    """Rebuild ``length`` symbols from ``value``.

    At every position the segments are scanned in table order and the first
    one whose narrowed range ``[lo, hi)`` contains ``value`` wins. If none
    does and ``value`` sits exactly on the upper bound of the last segment's
    narrowed range, that segment is chosen (its upper bound is inclusive).

    Raises
    ------
    InvalidInputError
        If ``length`` is negative or ``value`` is outside [0, 1].
    DecodeNoMatchingSegmentError
        If no segment's range contains ``value`` at some position.
    """

    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise InvalidInputError(f"Length must be a non-negative integer, got {length!r}")
    if not isinstance(value, (int, float)) or math.isnan(value) or not (0.0 <= value <= 1.0):
        raise InvalidInputError(f"Encoded value must be within [0, 1], got {value!r}")
    if len(table) == 0:
        raise InvalidInputError("Segment table must be non-empty for decoding.")

    lo, hi = 0.0, 1.0
    out: list[str] = []
    for position in range(length):
        width = hi - lo
        chosen: tuple[str, float, float] | None = None
        for seg in table:
            cand_lo = lo + width * seg.bottom
            cand_hi = lo + width * seg.top
            if cand_lo <= value < cand_hi:
                chosen = (seg.symbol, cand_lo, cand_hi)
                break

        if chosen is None:
            last = table[-1]
            cand_lo = lo + width * last.bottom
            cand_hi = lo + width * last.top
            if not (cand_lo <= value == cand_hi):
                raise DecodeNoMatchingSegmentError(position, value, lo, hi)
            _LOGGER.warning(
                "Value %r lies on the upper bound at position %d; using last segment %r",
                value,
                position,
                last.symbol,
            )
            chosen = (last.symbol, cand_lo, cand_hi)

        symbol, lo, hi = chosen
        out.append(symbol)

    _LOGGER.debug("Decoded %d symbols from %r", length, value)
    return "".join(out)


__all__ = ["Interval", "EncodeResult", "encode", "decode"]
