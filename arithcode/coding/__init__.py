"""Arithmetic encoding and decoding over a segment table.

Public API:
- encode
- decode
- Interval
- EncodeResult
"""

from __future__ import annotations

from arithcode.coding.arithmetic import (
    EncodeResult,
    Interval,
    decode,
    encode,
)

__all__ = [
    "EncodeResult",
    "Interval",
    "decode",
    "encode",
]
