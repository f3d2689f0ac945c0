"""Tests for WordValidator."""

import pytest

from wurdle.services.word_validator import WordValidator


@pytest.fixture
def validator() -> WordValidator:
    return WordValidator()


class TestWellFormed:
    def test_five_uppercase_letters(self, validator: WordValidator):
        assert validator.is_well_formed("CRANE")

    def test_lowercase_is_normalized(self, validator: WordValidator):
        assert validator.is_well_formed("crane")
        assert validator.is_well_formed("CrAnE")

    @pytest.mark.parametrize("text", ["", "CRAN", "CRANES", "CR4NE", "CRA E", "CRÄNE"])
    def test_rejects_bad_shape(self, validator: WordValidator, text: str):
        assert not validator.is_well_formed(text)

    def test_rejects_non_strings(self, validator: WordValidator):
        assert not validator.is_well_formed(None)
        assert not validator.is_well_formed(12345)

    def test_custom_length(self):
        assert WordValidator(word_length=3).is_well_formed("CAT")
        assert not WordValidator(word_length=3).is_well_formed("CRANE")

    @pytest.mark.parametrize("length", [0, -1, 2.5, True, False])
    def test_invalid_word_length_rejected(self, length):
        with pytest.raises(ValueError, match="positive integer"):
            WordValidator(word_length=length)


class TestAcceptedWord:
    def test_membership_is_case_insensitive(self, validator: WordValidator):
        dictionary = {"CRANE", "SPEED"}
        assert validator.is_accepted_word("crane", dictionary)
        assert validator.is_accepted_word("SPEED", dictionary)

    def test_missing_word(self, validator: WordValidator):
        assert not validator.is_accepted_word("ABCDE", {"CRANE"})

    def test_empty_dictionary(self, validator: WordValidator):
        assert not validator.is_accepted_word("CRANE", frozenset())


class TestNormalize:
    def test_strips_non_letters_and_uppercases(self):
        assert WordValidator.normalize("c-r a1n!e") == "CRANE"

    def test_non_string_gives_empty(self):
        assert WordValidator.normalize(None) == ""
