"""
Word Validator

Decides whether a candidate string is an acceptable guess, independent of
how the game is going.
"""

from typing import AbstractSet

from ..config.game_settings import ALPHABET, WORD_LENGTH


class WordValidator:
    """
    Stateless guess checks for a fixed word length.

    The accepted-word dictionary is always passed in by the caller; the
    validator never owns a word list.
    """

    def __init__(self, word_length: int = WORD_LENGTH):
        if isinstance(word_length, bool) or not isinstance(word_length, int) or word_length <= 0:
            raise ValueError(f"word_length must be a positive integer, got {word_length!r}")
        self.word_length = word_length

    @staticmethod
    def normalize(text: str) -> str:
        """Uppercase `text` and drop every character outside A-Z."""
        if not isinstance(text, str):
            return ""
        return "".join(char for char in text.upper() if char in ALPHABET)

    def is_well_formed(self, text: str) -> bool:
        """True iff `text` has exactly word_length letters, all A-Z (case-insensitive)."""
        if not isinstance(text, str):
            return False
        normalized = text.upper()
        return len(normalized) == self.word_length and all(char in ALPHABET for char in normalized)

    def is_accepted_word(self, text: str, dictionary: AbstractSet[str]) -> bool:
        """True iff the uppercased `text` is in `dictionary`."""
        if not isinstance(text, str):
            return False
        return text.upper() in dictionary
