"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Alert, Cell, GameSession, GameSnapshot, GameStatus, Grid, LetterStatus, RowCommitted
)

__all__ = [
    'Alert', 'Cell', 'GameSession', 'GameSnapshot', 'GameStatus', 'Grid',
    'LetterStatus', 'RowCommitted'
]
