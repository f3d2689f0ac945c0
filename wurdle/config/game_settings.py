"""
Game Configuration Constants Module

Game rules and the word database. Both the target words and the accepted
guesses are read from wordles.json; the engine itself never touches the file.
"""

import json
import os
import string
from typing import FrozenSet, Final, Iterable, List, Optional

WORD_LENGTH: Final[int] = 5
"""Number of letters in the target word and in every guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

ALPHABET: Final[str] = string.ascii_uppercase

DEFAULT_WORD_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def load_word_list(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a word list from a JSON array file.

    Args:
        path: JSON file to read, defaults to the bundled wordles.json
        word_length: Length every word must have

    Returns:
        List[str]: Uppercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or a word is invalid
    """
    json_file_path = path or DEFAULT_WORD_FILE

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    uppercase_words = [str(word).strip().upper() for word in word_list]
    validate_word_list_integrity(uppercase_words, word_length)
    return uppercase_words


def load_dictionary(path: Optional[str] = None, word_length: int = WORD_LENGTH) -> FrozenSet[str]:
    """Accepted-guess set handed to the validator."""
    return frozenset(load_word_list(path, word_length))


def validate_word_list_integrity(words: Iterable[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly word_length characters
    2. Character validation: Only A-Z allowed
    3. Uniqueness validation: No duplicate entries

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    words = list(words)
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if any(char not in ALPHABET for char in word):
            raise ValueError(f"Word at index {index} '{word}' contains characters outside A-Z")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True
