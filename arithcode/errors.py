"""Exception types raised by the arithmetic coding pipeline.

All errors derive from :class:`CodingError` and additionally from the
built-in exception a caller would naturally expect (``ValueError`` for bad
input, ``LookupError`` for a missing symbol), so existing ``except
ValueError`` handlers keep working.
"""

from __future__ import annotations


class CodingError(Exception):
    """Base class for every error raised by ``arithcode``."""


class InvalidInputError(CodingError, ValueError):
    """Empty text, empty alphabet, or a malformed probability list."""


class SymbolNotFoundError(CodingError, LookupError):
    """A symbol has no segment in the table used for encoding.

    Parameters
    ----------
    symbol:
        The offending symbol.
    position:
        Index of the symbol in the text being encoded, if known.
    """

    def __init__(self, symbol: str, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"No segment for symbol {symbol!r}{where}")

    def __str__(self) -> str:
        return self.args[0]


class DecodeNoMatchingSegmentError(CodingError, ValueError):
    """No segment's narrowed range contains the encoded value."""

    def __init__(self, position: int, value: float, low: float, high: float) -> None:
        self.position = position
        self.value = value
        self.low = low
        self.high = high
        super().__init__(
            f"No segment contains value {value!r} at position {position} "
            f"(current interval [{low!r}, {high!r}))"
        )


class MessageIntegrityError(CodingError, ValueError):
    """Decoded text does not match the checksum stored with the message."""


__all__ = [
    "CodingError",
    "InvalidInputError",
    "SymbolNotFoundError",
    "DecodeNoMatchingSegmentError",
    "MessageIntegrityError",
]
