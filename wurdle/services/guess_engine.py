"""
Guess Engine

Contains the core game logic: in-progress text handling, guess submission,
letter evaluation and the render-ready grid.
"""

import logging
from collections import Counter
from typing import AbstractSet, Dict, List, Optional, Tuple

from ..config.game_settings import ALPHABET, MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import (
    ErrorKind, GameState, GameStatus, Guess, LetterStatus, SubmitResult
)
from .word_validator import WordValidator

logger = logging.getLogger(__name__)

# Keyboard colouring keeps the best status seen for each letter
_KEYBOARD_PRIORITY = {
    LetterStatus.UNFILLED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


def score(guess_text: str, target_word: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are resolved first so that repeated letters in the guess
    are never credited more often than the target contains them.
    """
    if len(guess_text) != len(target_word):
        raise ValueError("Guess and target must have the same length")

    statuses: List[Optional[LetterStatus]] = [None] * len(target_word)
    remaining = Counter(target_word)

    # First pass: exact position matches
    for i, (guess_char, target_char) in enumerate(zip(guess_text, target_word)):
        if guess_char == target_char:
            statuses[i] = LetterStatus.CORRECT
            remaining[guess_char] -= 1

    # Second pass: misplaced letters, left to right, while occurrences remain
    for i, guess_char in enumerate(guess_text):
        if statuses[i] is not None:
            continue
        if remaining[guess_char] > 0:
            statuses[i] = LetterStatus.PRESENT
            remaining[guess_char] -= 1
        else:
            statuses[i] = LetterStatus.ABSENT

    return statuses  # type: ignore[return-value]


class GuessEngine:
    """
    State machine for a single game.

    This class handles:
    - Replacing the typed, not yet submitted text on every keystroke
    - Validating and scoring submitted guesses
    - Win/loss detection
    - Deriving the display grid and keyboard colours from current state

    Passing no dictionary puts the engine in open mode: any well-formed word
    may be submitted.
    """

    def __init__(self,
                 target_word: str,
                 dictionary: Optional[AbstractSet[str]] = None,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS,
                 validator: Optional[WordValidator] = None):
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts <= 0:
            raise ValueError(f"max_attempts must be a positive integer, got {max_attempts!r}")

        self.validator = validator or WordValidator(word_length)
        if self.validator.word_length != word_length:
            raise ValueError("Validator word length does not match the engine's")

        if not self.validator.is_well_formed(target_word):
            raise ValueError(f"Target word must be {word_length} letters A-Z")

        if dictionary is not None and target_word.upper() not in dictionary:
            raise ValueError(f"Target word {target_word.upper()} is not in the word list")

        self.word_length = word_length
        self.max_attempts = max_attempts
        self.dictionary = frozenset(dictionary) if dictionary is not None else None
        self._state = GameState(target_word=target_word.upper())

    @property
    def open_mode(self) -> bool:
        return self.dictionary is None

    @property
    def target_word(self) -> str:
        return self._state.target_word

    @property
    def in_progress_text(self) -> str:
        return self._state.in_progress_text

    @property
    def history(self) -> Tuple[Guess, ...]:
        return tuple(self._state.history)

    @property
    def attempts_used(self) -> int:
        return len(self._state.history)

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - self.attempts_used

    def get_status(self) -> GameStatus:
        return self._state.status

    def set_in_progress_text(self, text: str) -> None:
        """
        Replaces the in-progress text with `text`.

        Non-letters are dropped, the rest is uppercased and cut to the word
        length. Ignored once the game is decided.
        """
        if self._state.status != GameStatus.IN_PROGRESS:
            return
        self._state.in_progress_text = self.validator.normalize(text)[:self.word_length]

    def submit_guess(self) -> SubmitResult:
        """
        Scores the in-progress text as the next guess.

        Returns:
            SubmitResult carrying the new Guess, or the ErrorKind explaining
            why nothing changed
        """
        state = self._state

        if state.status != GameStatus.IN_PROGRESS:
            return SubmitResult.failure(ErrorKind.GAME_ALREADY_OVER)

        guess_text = state.in_progress_text
        if not self.validator.is_well_formed(guess_text):
            return SubmitResult.failure(ErrorKind.TOO_SHORT)

        if self.dictionary is not None and not self.validator.is_accepted_word(guess_text, self.dictionary):
            return SubmitResult.failure(ErrorKind.NOT_IN_DICTIONARY)

        guess = Guess.scored(guess_text, score(guess_text, state.target_word))
        state.history.append(guess)
        state.in_progress_text = ""

        # Win check precedes the attempts check
        if guess.is_all_correct:
            state.status = GameStatus.WON
        elif len(state.history) >= self.max_attempts:
            state.status = GameStatus.LOST

        logger.debug("Guess %d/%d %s -> %s", len(state.history), self.max_attempts,
                     guess_text, state.status.value)
        return SubmitResult.success(guess)

    def get_display_grid(self) -> List[Guess]:
        """
        Returns max_attempts rows: submitted guesses, then the row being
        typed (while the game is on), then blank rows.
        """
        state = self._state
        grid = list(state.history)
        if state.status == GameStatus.IN_PROGRESS and len(grid) < self.max_attempts:
            grid.append(Guess.in_progress(state.in_progress_text, self.word_length))
        while len(grid) < self.max_attempts:
            grid.append(Guess.blank(self.word_length))
        return grid

    def get_letter_statuses(self) -> Dict[str, LetterStatus]:
        """Best status seen so far for every letter A-Z."""
        letter_status = {letter: LetterStatus.UNFILLED for letter in ALPHABET}
        for guess in self._state.history:
            for cell in guess:
                if _KEYBOARD_PRIORITY[cell.status] > _KEYBOARD_PRIORITY[letter_status[cell.letter]]:
                    letter_status[cell.letter] = cell.status
        return letter_status
