"""
Data Models Package

Contains all data models, action variants and the error taxonomy used
throughout the application.
"""

from .game import GameState, GameStatus, TurnInput, TurnRecord, TwistAvailability
from .actions import (
    ActionType, LetterTwistType, Add, Drop, Swap, LetterTwist, WordTwist, Split, Merge,
    parse_action, parse_actions
)
from . import errors

__all__ = [
    'GameState', 'GameStatus', 'TurnInput', 'TurnRecord', 'TwistAvailability',
    'ActionType', 'LetterTwistType', 'Add', 'Drop', 'Swap',
    'LetterTwist', 'WordTwist', 'Split', 'Merge', 'parse_action', 'parse_actions',
    'errors'
]
