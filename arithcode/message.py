"""Self-contained encoded message: value, length and probability model.

The encoded value alone cannot be decoded; the receiver also needs the
symbol count and the distribution, in canonical order. `EncodedMessage`
bundles them and serializes to a small JSON document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Self
import json
import logging

from arithcode.coding.arithmetic import decode
from arithcode.config import Config
from arithcode.errors import InvalidInputError, MessageIntegrityError
from arithcode.model import Probability
from arithcode.segments import SegmentTable, build_segment_table
from arithcode.utils import ensure_dir, sha256_text


_LOGGER = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class EncodedMessage:
    """Everything needed to decode a message.

    Parameters
    ----------
    value:
        Encoded fraction in [0, 1).
    length:
        Number of symbols in the original text.
    probabilities:
        Model in canonical order, exactly as used by the encoder.
    order_name:
        Name of the order that produced ``probabilities`` (informational).
    text_sha256:
        Optional checksum of the original text, verified by `decode`.
    """

    value: float
    length: int
    probabilities: tuple[Probability, ...]
    order_name: str = ""
    text_sha256: str | None = None
    created_at: str = field(default_factory=_utc_now)

    def segment_table(self, tolerance: float = Config.TOLERANCE) -> SegmentTable:
        return build_segment_table(self.probabilities, tolerance=tolerance)

    def decode(self, *, verify: bool = True) -> str:
        """Decode the message, checking ``text_sha256`` when present."""

        text = decode(self.segment_table(), self.value, self.length)
        if verify and self.text_sha256 is not None and sha256_text(text) != self.text_sha256:
            raise MessageIntegrityError(
                "Decoded text does not match the stored checksum; "
                "the message may exceed the coder's precision"
            )
        return text

    # Serialization ------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        return {
            "format": Config.MESSAGE_FORMAT,
            "version": Config.MESSAGE_VERSION,
            "value": self.value,
            "length": self.length,
            "order": self.order_name,
            "probabilities": [p.to_dict() for p in self.probabilities],
            "text_sha256": self.text_sha256,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Rebuild a message from `to_dict` output.

        Raises
        ------
        InvalidInputError
            If required keys are missing or have the wrong type.
        """

        if not isinstance(data, dict):
            raise InvalidInputError("Encoded message must be a JSON object.")
        fmt = data.get("format", Config.MESSAGE_FORMAT)
        if fmt != Config.MESSAGE_FORMAT:
            raise InvalidInputError(f"Unsupported message format: {fmt!r}")
        version = data.get("version", Config.MESSAGE_VERSION)
        if version != Config.MESSAGE_VERSION:
            raise InvalidInputError(f"Unsupported message version: {version!r}")

        try:
            value = data["value"]
            length = data["length"]
            raw_probs = data["probabilities"]
        except KeyError as exc:
            raise InvalidInputError(f"Encoded message is missing key {exc.args[0]!r}") from exc

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(f"'value' must be a number, got {value!r}")
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise InvalidInputError(f"'length' must be a non-negative integer, got {length!r}")
        if not isinstance(raw_probs, list):
            raise InvalidInputError("'probabilities' must be a list")

        probabilities: list[Probability] = []
        for item in raw_probs:
            if not isinstance(item, dict) or not isinstance(item.get("symbol"), str):
                raise InvalidInputError(f"Malformed probability entry: {item!r}")
            p_value = item.get("value")
            if isinstance(p_value, bool) or not isinstance(p_value, (int, float)):
                raise InvalidInputError(f"Malformed probability entry: {item!r}")
            probabilities.append(Probability(item["symbol"], float(p_value)))

        checksum = data.get("text_sha256")
        return cls(
            value=float(value),
            length=length,
            probabilities=tuple(probabilities),
            order_name=str(data.get("order") or ""),
            text_sha256=checksum if isinstance(checksum, str) else None,
            created_at=str(data.get("created_at") or _utc_now()),
        )

    def save(self, path: Path) -> None:
        """Write the message to ``path`` as UTF-8 JSON."""

        ensure_dir(path.parent)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        _LOGGER.info("Saved encoded message to %s", path)

    @classmethod
    def load(cls, path: Path) -> Self:
        """Read a message written by `save`."""

        with path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidInputError(f"{path} is not valid JSON: {exc}") from exc
        return cls.from_dict(data)


__all__ = ["EncodedMessage"]
