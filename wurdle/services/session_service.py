"""
Session Service

Keeps one GuessEngine per game session and picks target words.
"""

import random
import threading
import uuid
from typing import AbstractSet, Dict, List, Optional, Sequence, Tuple

from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import GameStateView, GameStatus, SubmitResult
from .guess_engine import GuessEngine


class GameNotFoundError(KeyError):
    """Raised when a game id does not belong to an active session."""


class SessionService:
    """
    In-memory game session registry.

    This class handles:
    - Game session management with unique game IDs
    - Target word selection without exposing answers to clients
    - Forwarding text updates and submissions to each session's engine
    """

    def __init__(self,
                 target_words: Sequence[str],
                 dictionary: Optional[AbstractSet[str]] = None,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS,
                 rng: Optional[random.Random] = None):
        if not target_words:
            raise ValueError("At least one target word is required")
        self.target_words: List[str] = [word.upper() for word in target_words]
        self.dictionary = dictionary
        self.word_length = word_length
        self.max_attempts = max_attempts
        self.games: Dict[str, GuessEngine] = {}  # Store active games by game_id
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    def create_new_game(self, target_word: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            target_word: Word to play against, randomly chosen when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If target_word is not a valid word for this service
        """
        if target_word is None:
            target_word = self._rng.choice(self.target_words)

        engine = GuessEngine(
            target_word,
            dictionary=self.dictionary,
            word_length=self.word_length,
            max_attempts=self.max_attempts,
        )
        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = engine
        return game_id

    def get_engine(self, game_id: str) -> GuessEngine:
        with self._lock:
            engine = self.games.get(game_id)
        if engine is None:
            raise GameNotFoundError(game_id)
        return engine

    def set_text(self, game_id: str, text: str) -> GameStateView:
        engine = self.get_engine(game_id)
        with self._lock:
            engine.set_in_progress_text(text)
            return self._build_view(game_id, engine)

    def submit(self, game_id: str) -> Tuple[SubmitResult, GameStateView]:
        """Submits the typed text and returns the result with the state right after it."""
        engine = self.get_engine(game_id)
        with self._lock:
            return engine.submit_guess(), self._build_view(game_id, engine)

    def get_game_state(self, game_id: str) -> GameStateView:
        """
        Returns the current game state for a session (without revealing the
        answer until the game is over).
        """
        engine = self.get_engine(game_id)
        with self._lock:
            return self._build_view(game_id, engine)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def _build_view(self, game_id: str, engine: GuessEngine) -> GameStateView:
        status = engine.get_status()
        return GameStateView(
            game_id=game_id,
            status=status.value,
            word_length=engine.word_length,
            max_attempts=engine.max_attempts,
            attempts_used=engine.attempts_used,
            in_progress_text=engine.in_progress_text,
            grid=[row.to_pairs() for row in engine.get_display_grid()],
            letter_status={letter: s.value for letter, s in engine.get_letter_statuses().items()},
            open_mode=engine.open_mode,
            answer=engine.target_word if status != GameStatus.IN_PROGRESS else None,
        )


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service(target_words: Sequence[str],
                               dictionary: Optional[AbstractSet[str]] = None,
                               word_length: int = WORD_LENGTH,
                               max_attempts: int = MAX_ATTEMPTS) -> SessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = SessionService(target_words, dictionary, word_length, max_attempts)
    return _session_service
