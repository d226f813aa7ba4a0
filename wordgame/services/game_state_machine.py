"""
Game State Machine

Allowed status transitions and the rules that trigger them:

    active -> completed   board matches the targets (case-insensitive multiset)
    active -> failed      explicit forfeit, or the configured turn cap is reached

completed and failed are terminal.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Sequence

from ..models.errors import InvalidTransition
from ..models.game import GameState, GameStatus

TRANSITIONS: Dict[GameStatus, FrozenSet[GameStatus]] = {
    GameStatus.ACTIVE: frozenset({GameStatus.ACTIVE, GameStatus.COMPLETED, GameStatus.FAILED}),
    GameStatus.COMPLETED: frozenset(),
    GameStatus.FAILED: frozenset(),
}


def words_match(current_words: Sequence[str], target_words: Sequence[str]) -> bool:
    """Order-independent, case-insensitive comparison of two boards."""
    return Counter(w.lower() for w in current_words) == Counter(w.lower() for w in target_words)


@dataclass(frozen=True)
class FailurePolicy:
    """When a game is lost. max_turns of None (or 0) disables the turn cap."""
    max_turns: Optional[int] = None

    @classmethod
    def from_config(cls, config_class) -> 'FailurePolicy':
        return cls(max_turns=config_class.MAX_TURNS or None)


class GameStateMachine:

    def __init__(self, policy: Optional[FailurePolicy] = None):
        self.policy = policy or FailurePolicy()

    @staticmethod
    def transition(current: GameStatus, target: GameStatus) -> GameStatus:
        if target not in TRANSITIONS[current]:
            raise InvalidTransition(f"Cannot move a game from {current.value} to {target.value}")
        return target

    def evaluate(self, candidate: GameState) -> GameStatus:
        """
        Status for a state that has just had a turn applied.

        A win takes precedence over the turn cap.
        """
        if words_match(candidate.current_words, candidate.target_words):
            return self.transition(candidate.game_status, GameStatus.COMPLETED)

        turns_taken = candidate.turn_number - 1
        if self.policy.max_turns and turns_taken >= self.policy.max_turns:
            return self.transition(candidate.game_status, GameStatus.FAILED)

        return self.transition(candidate.game_status, GameStatus.ACTIVE)

    def forfeit(self, state: GameState) -> GameStatus:
        return self.transition(state.game_status, GameStatus.FAILED)
