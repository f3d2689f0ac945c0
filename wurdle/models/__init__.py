"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    BLANK,
    ErrorKind,
    GameState,
    GameStateView,
    GameStatus,
    Guess,
    LetterStatus,
    ScoredLetter,
    SubmitResult,
)

__all__ = [
    'BLANK', 'ErrorKind', 'GameState', 'GameStateView', 'GameStatus',
    'Guess', 'LetterStatus', 'ScoredLetter', 'SubmitResult'
]
