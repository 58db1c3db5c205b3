import unicodedata as ud

import pytest

from arithcode.alphabet import (
    Alphabet,
    ENGLISH_ALPHABET,
    UKRAINIAN_ALPHABET,
    get_alphabet_by_name,
    normalize_text,
)


def test_ukrainian_alphabet_size():
    """Ukrainian alphabet has 33 letters in two cases = 66 symbols."""

    assert UKRAINIAN_ALPHABET.size == 66


def test_english_alphabet_size():
    assert ENGLISH_ALPHABET.size == 52


def test_ukrainian_letter_order():
    """Ґ follows Г, І follows И, and lowercase precedes uppercase."""

    idx = UKRAINIAN_ALPHABET.index_of
    assert idx("г") < idx("Г") < idx("ґ") < idx("Ґ") < idx("д")
    assert idx("и") < idx("і") < idx("ї") < idx("й")
    assert idx("я") == UKRAINIAN_ALPHABET.size - 2


def test_index_of_non_member():
    assert UKRAINIAN_ALPHABET.index_of("_") is None
    assert ENGLISH_ALPHABET.index_of("ж") is None


def test_index_of_member():
    assert ENGLISH_ALPHABET.index_of("a") == 0
    assert ENGLISH_ALPHABET.index_of("A") == 1
    assert ENGLISH_ALPHABET.index_of("1") is None


def test_duplicate_symbols_rejected():
    with pytest.raises(ValueError):
        Alphabet(symbols=("a", "b", "a"), name="Broken-3")


def test_multi_character_symbol_rejected():
    with pytest.raises(ValueError):
        Alphabet(symbols=("ab",), name="Broken-1")


def test_normalize_unicode_nfc():
    """NFC normalization should turn І + combining diaeresis into Ї."""

    decomposed = "\u0406\u0308"
    assert normalize_text(decomposed) == "\u0407"
    assert normalize_text(decomposed) == ud.normalize("NFC", decomposed)
    assert normalize_text("") == ""


def test_get_alphabet_by_name():
    assert get_alphabet_by_name("Ukrainian-66") is UKRAINIAN_ALPHABET
    with pytest.raises(ValueError, match="Available"):
        get_alphabet_by_name("Klingon-1")
