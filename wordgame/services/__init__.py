"""
Services Package

Contains the turn resolution engine and the collaborators it depends on.
"""

from .action_simulator import ActionSimulator, simulate
from .dictionary_validator import DictionaryValidator, WordCheck, WordStatus
from .game_service import GameService, get_game_service, initialize_game_service
from .game_state_machine import FailurePolicy, GameStateMachine, words_match
from .game_store import InMemoryGameStateStore, MongoGameStateStore
from .profanity_filter import ProfanityFilter
from .turn_resolver import GameLocks, TurnResolver
from .twist_ledger import TwistLedger

__all__ = [
    'ActionSimulator', 'simulate',
    'DictionaryValidator', 'WordCheck', 'WordStatus',
    'GameService', 'get_game_service', 'initialize_game_service',
    'FailurePolicy', 'GameStateMachine', 'words_match',
    'InMemoryGameStateStore', 'MongoGameStateStore',
    'ProfanityFilter',
    'GameLocks', 'TurnResolver',
    'TwistLedger'
]
