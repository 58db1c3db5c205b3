"""Alphabet definitions used to fix a canonical symbol order.

An `Alphabet` is an ordered tuple of symbols. Its only job in the coding
pipeline is to rank symbols so that the probability model emits them in a
reproducible order, independent of where they first occur in a message.
Upper- and lowercase forms of a letter are adjacent, lowercase first, the
way most dictionary collations arrange them.

Examples
--------
>>> from arithcode.alphabet import UKRAINIAN_ALPHABET
>>> UKRAINIAN_ALPHABET.size
66
>>> UKRAINIAN_ALPHABET.index_of("Ґ") < UKRAINIAN_ALPHABET.index_of("Д")
True
"""

from __future__ import annotations

from dataclasses import dataclass, field
import unicodedata as _ud


@dataclass(frozen=True)
class Alphabet:
    """A finite ordered symbol set.

    Parameters
    ----------
    symbols:
        Immutable ordered collection of single-character symbols.
    name:
        Human-friendly name, e.g., "Ukrainian-66".
    """

    symbols: tuple[str, ...]
    name: str
    _ranks: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ranks: dict[str, int] = {}
        for i, ch in enumerate(self.symbols):
            if len(ch) != 1:
                raise ValueError(f"Alphabet symbols must be single characters, got {ch!r}")
            if ch in ranks:
                raise ValueError(f"Duplicate symbol {ch!r} in alphabet {self.name!r}")
            ranks[ch] = i
        object.__setattr__(self, "_ranks", ranks)

    @property
    def size(self) -> int:
        """Number of symbols M in the alphabet."""

        return len(self.symbols)

    def index_of(self, char: str) -> int | None:
        """Position of `char` in `symbols`, or None for non-members."""

        return self._ranks.get(char)


def normalize_text(text: str) -> str:
    """Apply Unicode NFC normalization.

    Composed forms matter here: "Ї" typed as "І" plus a combining diaeresis
    would otherwise count as two symbols.
    """

    if not text:
        return ""
    return _ud.normalize("NFC", text)


def _with_case(lowercase: str) -> tuple[str, ...]:
    out: list[str] = []
    for ch in lowercase:
        out.append(ch)
        out.append(ch.upper())
    return tuple(out)


# Predefined alphabets
UKRAINIAN_ALPHABET = Alphabet(
    symbols=_with_case("абвгґдеєжзиіїйклмнопрстуфхцчшщьюя"),
    name="Ukrainian-66",
)

ENGLISH_ALPHABET = Alphabet(
    symbols=_with_case("abcdefghijklmnopqrstuvwxyz"),
    name="English-52",
)


def get_alphabet_by_name(name: str) -> Alphabet:
    """Return a predefined `Alphabet` by its `name`.

    Raises a `ValueError` with available options if the name is unknown.
    """

    registry: dict[str, Alphabet] = {
        UKRAINIAN_ALPHABET.name: UKRAINIAN_ALPHABET,
        ENGLISH_ALPHABET.name: ENGLISH_ALPHABET,
    }

    try:
        return registry[name]
    except KeyError as exc:
        options = ", ".join(sorted(registry.keys()))
        raise ValueError(f"Unknown alphabet name: {name!r}. Available: {options}") from exc
