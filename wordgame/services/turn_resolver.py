"""
Turn Resolver

Runs one turn through the full commit pipeline:

    load -> require active -> validate shape -> simulate -> reconcile
    -> dictionary check -> profanity check -> build candidate
    -> evaluate status -> persist

Any failure before persistence leaves the stored game untouched. Turns for
the same game are serialized by a sharded lock; the store's version check
covers writers in other processes.
"""

import threading
import zlib
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from ..models.actions import parse_actions
from ..models.errors import (
    GameNotActive, GameNotFound, InvalidWord, PersistenceError, ProfanityDetected,
    SimulationMismatch, ValidatorUnavailable
)
from ..models.game import GameState, TurnInput, TurnRecord
from ..utils.game_logger import game_logger
from .action_simulator import ActionSimulator
from .dictionary_validator import WordStatus
from .game_state_machine import GameStateMachine
from .twist_ledger import TwistLedger

T = TypeVar('T')


class GameLocks:
    """Fixed pool of locks; a game always maps to the same shard."""

    def __init__(self, shards: int = 64):
        self._locks = [threading.Lock() for _ in range(shards)]

    def for_game(self, game_id: str) -> threading.Lock:
        # crc32 is stable across processes, unlike hash()
        return self._locks[zlib.crc32(game_id.encode('utf-8')) % len(self._locks)]


class TurnResolver:
    """
    Orchestrates turn resolution against a store and its validators.

    Args:
        store: Object with get(game_id) and upsert(state, expected_version)
        dictionary: Object with check_words(words) -> list of WordCheck
        profanity_filter: ProfanityFilter
        state_machine: GameStateMachine (default policy when omitted)
        persistence_retries: Extra store attempts after a PersistenceError
    """

    def __init__(self, store, dictionary, profanity_filter, state_machine: Optional[GameStateMachine] = None,
                 persistence_retries: int = 1, locks: Optional[GameLocks] = None):
        self.store = store
        self.dictionary = dictionary
        self.profanity_filter = profanity_filter
        self.state_machine = state_machine or GameStateMachine()
        self.persistence_retries = persistence_retries
        self.simulator = ActionSimulator()
        self.locks = locks or GameLocks()

    def _with_retries(self, operation: Callable[[], T], description: str) -> T:
        """Run a store call, retrying PersistenceError up to persistence_retries times."""
        attempt = 0
        while True:
            try:
                return operation()
            except PersistenceError:
                if attempt >= self.persistence_retries:
                    raise
                attempt += 1
                game_logger.logger.warning(f"Retrying {description} (attempt {attempt + 1})")

    def _load_active(self, game_id: str) -> GameState:
        state = self._with_retries(lambda: self.store.get(game_id), f"load of game {game_id}")
        if state is None:
            raise GameNotFound(game_id)
        if not state.is_active:
            raise GameNotActive(game_id, state.game_status.value)
        return state

    def _validate_words(self, words: Sequence[str]) -> None:
        checks = self.dictionary.check_words(list(words))

        # The first definite rejection in board order wins over an outage
        unavailable = None
        for check in checks:
            if check.status == WordStatus.INVALID:
                raise InvalidWord(check.word, check.reason)
            if check.status == WordStatus.UNAVAILABLE and unavailable is None:
                unavailable = check
        if unavailable is not None:
            raise ValidatorUnavailable(unavailable.word, unavailable.reason)

        profane = self.profanity_filter.first_blocked(words)
        if profane is not None:
            raise ProfanityDetected(profane)

    def _persist(self, candidate: GameState, expected_version: int) -> None:
        self._with_retries(
            lambda: self.store.upsert(candidate, expected_version=expected_version),
            f"save for game {candidate.game_id}",
        )

    def resolve_turn(self, game_id: str, payload: Any) -> GameState:
        """
        Resolve and commit one turn.

        Args:
            game_id: Game to play
            payload: {"actions": [...], "finalWords": [...]} or a TurnInput

        Returns:
            The committed GameState

        Raises:
            TurnError: Any subclass from models.errors; nothing is written
                unless the call returns normally
        """
        with self.locks.for_game(game_id):
            state = self._load_active(game_id)

            turn = payload if isinstance(payload, TurnInput) else TurnInput.from_payload(payload)

            ledger = TwistLedger(state.available_twists)
            actions = parse_actions(turn.actions)
            simulated: List[str] = self.simulator.simulate(state.current_words, actions, ledger)

            if simulated != list(turn.final_words):
                game_logger.logger.warning(
                    f"Simulation mismatch in game {game_id}: simulated {simulated}, claimed {list(turn.final_words)}"
                )
                raise SimulationMismatch(simulated, turn.final_words)

            self._validate_words(turn.final_words)

            candidate = state.evolve(
                current_words=list(turn.final_words),
                turn_number=state.turn_number + 1,
                available_twists=ledger.snapshot(),
                history=state.history + [
                    TurnRecord(
                        turn_number=state.turn_number,
                        actions=tuple(action.to_dict() for action in actions),
                        final_words=turn.final_words,
                    )
                ],
                version=state.version + 1,
            )
            candidate.game_status = self.state_machine.evaluate(candidate)

            self._persist(candidate, expected_version=state.version)

        game_logger.logger.info(
            f"Turn {state.turn_number} committed for game {game_id}: {candidate.current_words} "
            f"({candidate.game_status.value})"
        )
        return candidate

    def forfeit(self, game_id: str) -> GameState:
        """Move an active game to failed without playing a turn."""
        with self.locks.for_game(game_id):
            state = self._load_active(game_id)
            candidate = state.evolve(
                game_status=self.state_machine.forfeit(state),
                version=state.version + 1,
            )
            self._persist(candidate, expected_version=state.version)

        game_logger.logger.info(f"Game {game_id} forfeited on turn {state.turn_number}")
        return candidate
