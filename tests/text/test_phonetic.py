import pytest

from shellbox.text.phonetic import NATO_ALPHABET, SPACE_WORD, spell


def test_spell_letters_digits_and_spaces():
    assert spell("ab 1") == ["Alfa", "Bravo", SPACE_WORD, "One"]


def test_spell_is_case_insensitive():
    assert spell("Zz") == ["Zulu", "Zulu"]


def test_unknown_characters_pass_through():
    assert spell("a-9!") == ["Alfa", "-", "Niner", "!"]


def test_table_covers_alphabet_and_digits():
    assert len(NATO_ALPHABET) == 36
    assert NATO_ALPHABET["X"] == "X-ray"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        NATO_ALPHABET["A"] = "Apple"


def test_custom_table_can_be_injected():
    assert spell("ab", table={"A": "Able", "B": "Baker"}) == ["Able", "Baker"]
