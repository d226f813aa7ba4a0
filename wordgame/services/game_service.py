"""
Game Service

Entry point for game operations used by the HTTP and WebSocket layers:
starting games, reading them, submitting turns and forfeiting.
"""

import random
import uuid
from typing import Any, List, Optional

from ..config import Config, default_twist_budgets, load_block_list, load_word_list
from ..models.errors import GameNotFound
from ..models.game import GameState, GameStatus
from ..utils.game_logger import game_logger
from .dictionary_validator import DictionaryValidator
from .game_state_machine import FailurePolicy, GameStateMachine
from .game_store import InMemoryGameStateStore, MongoGameStateStore
from .profanity_filter import ProfanityFilter
from .turn_resolver import TurnResolver
from .twist_ledger import TwistLedger


class GameService:
    """
    Core game service.

    This class handles:
    - Game creation with a random start/target pair from the word list
    - Game lookup by id
    - Turn submission through the TurnResolver
    - Explicit forfeiture
    """

    def __init__(self, word_list: List[str], store, dictionary, profanity_filter: ProfanityFilter,
                 config_class=Config, rng: Optional[random.Random] = None):
        if len(word_list) < 2:
            raise ValueError('Insufficient words in the list to select start and target.')
        self.word_list = list(word_list)
        self.store = store
        self.config = config_class
        self.rng = rng or random.Random()
        self.resolver = TurnResolver(
            store=store,
            dictionary=dictionary,
            profanity_filter=profanity_filter,
            state_machine=GameStateMachine(FailurePolicy.from_config(config_class)),
            persistence_retries=config_class.PERSISTENCE_RETRIES,
        )

    def select_random_words(self):
        """Pick two different words: (start_word, target_word)."""
        start_word, target_word = self.rng.sample(self.word_list, 2)
        return start_word, target_word

    def create_new_game(self) -> GameState:
        """
        Creates and persists a new single-player game.

        Returns:
            GameState: The initial state (turn 1, active)
        """
        start_word, target_word = self.select_random_words()
        ledger = TwistLedger.from_budgets(default_twist_budgets(self.config))

        state = GameState(
            game_id=str(uuid.uuid4()),
            player_ids=[self.config.PLAYER_ID],
            target_words=[target_word],
            current_words=[start_word],
            turn_number=1,
            game_status=GameStatus.ACTIVE,
            available_twists=ledger.snapshot(),
            history=[],
        )
        self.store.upsert(state)
        game_logger.logger.info(f"Created game {state.game_id}: {start_word} -> {target_word}")
        return state

    def get_game(self, game_id: str) -> GameState:
        state = self.store.get(game_id)
        if state is None:
            raise GameNotFound(game_id)
        return state

    def submit_turn(self, game_id: str, payload: Any) -> GameState:
        return self.resolver.resolve_turn(game_id, payload)

    def forfeit_game(self, game_id: str) -> GameState:
        return self.resolver.forfeit(game_id)

    def close(self) -> None:
        self.store.close()


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def build_store(config_class=Config):
    """MongoDB when MONGO_URI is configured, in-memory otherwise."""
    if config_class.MONGO_URI:
        return MongoGameStateStore(config_class.MONGO_URI, config_class.DB_NAME, config_class.GAMES_COLLECTION)
    game_logger.logger.warning("MONGO_URI not set - games are kept in memory only")
    return InMemoryGameStateStore()


def initialize_game_service(config_class=Config, store=None, dictionary=None,
                            profanity_filter: Optional[ProfanityFilter] = None,
                            word_list: Optional[List[str]] = None,
                            rng: Optional[random.Random] = None) -> GameService:
    """
    Initialize the global game service instance.

    Collaborators not passed in are built from configuration. A missing or
    unreadable block list degrades to an empty filter; a bad word list is fatal.
    """
    global _game_service

    if word_list is None:
        word_list = load_word_list(config_class.WORD_LIST_FILE)
        game_logger.logger.info(f"Loaded {len(word_list)} words.")

    if profanity_filter is None:
        try:
            profanity_filter = ProfanityFilter(load_block_list(config_class.BLOCK_LIST_FILE))
            game_logger.logger.info(f"Loaded {len(profanity_filter)} words into profanity filter.")
        except OSError as e:
            game_logger.logger.error(f"Could not load profanity block list: {e}")
            profanity_filter = ProfanityFilter()

    _game_service = GameService(
        word_list=word_list,
        store=store if store is not None else build_store(config_class),
        dictionary=dictionary if dictionary is not None else DictionaryValidator.from_config(config_class),
        profanity_filter=profanity_filter,
        config_class=config_class,
        rng=rng,
    )
    return _game_service
