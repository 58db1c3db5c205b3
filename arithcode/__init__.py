"""
arithcode: classic arithmetic coding of a text into a single fraction.

Builds a per-message probability model over a canonically ordered alphabet,
lays it out as a segment table on [0, 1), and narrows an interval symbol by
symbol to encode; decoding replays the narrowing from the final value.
"""

__all__ = [
    "Alphabet",
    "UKRAINIAN_ALPHABET",
    "ENGLISH_ALPHABET",
    "Config",
    "__version__",
    # Errors
    "CodingError",
    "InvalidInputError",
    "SymbolNotFoundError",
    "DecodeNoMatchingSegmentError",
    "MessageIntegrityError",
    # Orders
    "OrderProvider",
    "CodepointOrder",
    "AlphabetOrder",
    "LocaleOrder",
    "get_order",
    # Core (lazy-imported via __getattr__)
    "Probability",
    "build_probabilities",
    "Segment",
    "SegmentTable",
    "build_segment_table",
    "Interval",
    "EncodeResult",
    "encode",
    "decode",
    "EncodedMessage",
    "ArithmeticCoder",
]

__version__ = "0.1.0"

from typing import Any

from arithcode.alphabet import Alphabet, ENGLISH_ALPHABET, UKRAINIAN_ALPHABET
from arithcode.config import Config
from arithcode.errors import (
    CodingError,
    DecodeNoMatchingSegmentError,
    InvalidInputError,
    MessageIntegrityError,
    SymbolNotFoundError,
)
from arithcode.ordering import (
    AlphabetOrder,
    CodepointOrder,
    LocaleOrder,
    OrderProvider,
    get_order,
)


def __getattr__(name: str) -> Any:  # lazy attribute access to keep numpy out of import time
    if name in {"Probability", "build_probabilities"}:
        from arithcode import model as _model

        return getattr(_model, name)
    if name in {"Segment", "SegmentTable", "build_segment_table"}:
        from arithcode import segments as _segments

        return getattr(_segments, name)
    if name in {"Interval", "EncodeResult", "encode", "decode"}:
        from arithcode.coding import arithmetic as _arith

        return getattr(_arith, name)
    if name == "EncodedMessage":
        from arithcode.message import EncodedMessage as _EM

        return _EM
    if name == "ArithmeticCoder":
        from arithcode.coder import ArithmeticCoder as _AC

        return _AC
    raise AttributeError(f"module 'arithcode' has no attribute {name!r}")
