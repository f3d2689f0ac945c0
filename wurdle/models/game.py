"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

BLANK: str = " "
"""Letter value of a cell that has nothing typed in it."""


class LetterStatus(Enum):
    """Feedback state of a single grid cell."""
    UNFILLED = "UNFILLED"
    IN_PROGRESS = "IN_PROGRESS"
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def is_judgment(self) -> bool:
        """True for the statuses only a submitted guess can carry."""
        return self in (LetterStatus.ABSENT, LetterStatus.PRESENT, LetterStatus.CORRECT)


class GameStatus(Enum):
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


class ErrorKind(Enum):
    """Reasons a submission can be refused. None of them alter game state."""
    TOO_SHORT = "TooShortError"
    NOT_IN_DICTIONARY = "NotInDictionaryError"
    GAME_ALREADY_OVER = "GameAlreadyOverError"

    @property
    def message(self) -> str:
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES = {
    ErrorKind.TOO_SHORT: "Not enough letters",
    ErrorKind.NOT_IN_DICTIONARY: "Word not in word list",
    ErrorKind.GAME_ALREADY_OVER: "Game is already over",
}


@dataclass(frozen=True)
class ScoredLetter:
    letter: str
    status: LetterStatus

    @property
    def is_blank(self) -> bool:
        return self.letter == BLANK


@dataclass(frozen=True)
class Guess:
    """
    One row of the grid.

    Submitted guesses are stored in the game history and never change;
    unsubmitted ones are rebuilt from the typed text whenever the grid is read.
    """
    letters: Tuple[ScoredLetter, ...]
    submitted: bool = False

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> ScoredLetter:
        return self.letters[index]

    def __iter__(self):
        return iter(self.letters)

    @property
    def word(self) -> str:
        return "".join(cell.letter for cell in self.letters).rstrip()

    @property
    def is_all_correct(self) -> bool:
        return all(cell.status == LetterStatus.CORRECT for cell in self.letters)

    @classmethod
    def scored(cls, word: str, statuses: List[LetterStatus]) -> "Guess":
        if len(word) != len(statuses):
            raise ValueError("Every letter of a submitted guess needs a status")
        if not all(status.is_judgment for status in statuses):
            raise ValueError("Submitted guesses can only hold ABSENT, PRESENT or CORRECT")
        return cls(tuple(ScoredLetter(letter, status) for letter, status in zip(word, statuses)), True)

    @classmethod
    def in_progress(cls, text: str, word_length: int) -> "Guess":
        cells = [ScoredLetter(letter, LetterStatus.IN_PROGRESS) for letter in text[:word_length]]
        cells += [ScoredLetter(BLANK, LetterStatus.UNFILLED)] * (word_length - len(cells))
        return cls(tuple(cells))

    @classmethod
    def blank(cls, word_length: int) -> "Guess":
        return cls.in_progress("", word_length)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """Letter/status pairs with the status as a string for JSON serialization."""
        return [(cell.letter, cell.status.value) for cell in self.letters]


@dataclass
class GameState:
    """Mutable state owned by a single GuessEngine."""
    target_word: str
    history: List[Guess] = field(default_factory=list)
    in_progress_text: str = ""
    status: GameStatus = GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a submission: the scored guess on success, the error kind otherwise."""
    ok: bool
    guess: Optional[Guess] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, guess: Guess) -> "SubmitResult":
        return cls(ok=True, guess=guess)

    @classmethod
    def failure(cls, error: ErrorKind) -> "SubmitResult":
        return cls(ok=False, error=error)


@dataclass
class GameStateView:
    """Client-facing game state representation."""
    game_id: str
    status: str
    word_length: int
    max_attempts: int
    attempts_used: int
    in_progress_text: str
    grid: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    open_mode: bool
    answer: Optional[str] = None  # Only included when game is over
