"""
Services Package

Contains all business logic and service classes.
"""

from .guess_engine import GuessEngine, score
from .session_service import (
    GameNotFoundError, SessionService, get_session_service, initialize_session_service
)
from .word_validator import WordValidator

__all__ = [
    'GuessEngine', 'score', 'WordValidator',
    'GameNotFoundError', 'SessionService', 'get_session_service', 'initialize_session_service'
]
