"""High-level coder tying order, model, table and messages together."""

from __future__ import annotations

from dataclasses import dataclass, field

from arithcode.coding.arithmetic import EncodeResult, encode
from arithcode.config import Config
from arithcode.errors import InvalidInputError
from arithcode.message import EncodedMessage
from arithcode.model import Probability, build_probabilities
from arithcode.ordering import OrderProvider, get_order
from arithcode.segments import SegmentTable, build_segment_table
from arithcode.utils import sha256_text


def _default_order() -> OrderProvider:
    return get_order(Config.DEFAULT_ORDER)


@dataclass
class ArithmeticCoder:
    """Encode texts into `EncodedMessage` objects and back.

    Parameters
    ----------
    order:
        Symbol order used to build the per-message model.
    tolerance:
        Allowed deviation of the probability sum from 1.
    strict:
        If True, refuse to encode messages whose information content exceeds
        the mantissa of a double instead of only logging a warning.
    """

    order: OrderProvider = field(default_factory=_default_order)
    tolerance: float = Config.TOLERANCE
    strict: bool = False

    def model(self, text: str) -> tuple[Probability, ...]:
        return build_probabilities(text, self.order)

    def table(self, text: str) -> SegmentTable:
        return build_segment_table(self.model(text), tolerance=self.tolerance)

    def encode_detailed(self, text: str) -> tuple[tuple[Probability, ...], SegmentTable, EncodeResult]:
        """Return the model, the table and the full encode result for ``text``."""

        probabilities = self.model(text)
        table = build_segment_table(probabilities, tolerance=self.tolerance)
        result = encode(table, text)
        if self.strict and not result.within_precision:
            raise InvalidInputError(
                f"Message needs {result.information_bits:.1f} bits; "
                f"at most {Config.PRECISION_BITS} fit in a double"
            )
        return probabilities, table, result

    def encode(self, text: str) -> EncodedMessage:
        probabilities, _, result = self.encode_detailed(text)
        return self.to_message(text, probabilities, result)

    def to_message(
        self,
        text: str,
        probabilities: tuple[Probability, ...],
        result: EncodeResult,
    ) -> EncodedMessage:
        """Package an encode result for transmission."""

        return EncodedMessage(
            value=result.value,
            length=result.length,
            probabilities=probabilities,
            order_name=self.order.name,
            text_sha256=sha256_text(text),
        )

    def decode(self, message: EncodedMessage, *, verify: bool = True) -> str:
        return message.decode(verify=verify)


__all__ = ["ArithmeticCoder"]
