"""
Game Data Models

Contains all game-related data structures and enums, plus their
camelCase document form used on the wire and in MongoDB.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import InvalidInput


class GameStatus(str, Enum):
    """Lifecycle status of a game. Non-active statuses are terminal."""
    ACTIVE = "active"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class TwistAvailability:
    """Remaining budget for one twist type (uses_left None = unlimited)."""
    twist_id: str
    name: str
    uses_left: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'twistId': self.twist_id, 'name': self.name, 'usesLeft': self.uses_left}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TwistAvailability':
        return cls(
            twist_id=data['twistId'],
            name=data.get('name', data['twistId']),
            uses_left=data.get('usesLeft'),
        )


@dataclass(frozen=True)
class TurnRecord:
    """One accepted turn in the append-only history."""
    turn_number: int
    actions: Tuple[Dict[str, Any], ...]
    final_words: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'turnNumber': self.turn_number,
            'actions': list(self.actions),
            'finalWords': list(self.final_words),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TurnRecord':
        return cls(
            turn_number=data['turnNumber'],
            actions=tuple(data.get('actions', [])),
            final_words=tuple(data.get('finalWords', [])),
        )


@dataclass
class GameState:
    """Authoritative record for one game."""
    game_id: str
    player_ids: List[str]
    target_words: List[str]
    current_words: List[str]
    turn_number: int = 1
    game_status: GameStatus = GameStatus.ACTIVE
    available_twists: List[TwistAvailability] = field(default_factory=list)
    history: List[TurnRecord] = field(default_factory=list)
    version: int = 0

    @property
    def is_active(self) -> bool:
        return self.game_status == GameStatus.ACTIVE

    def evolve(self, **changes) -> 'GameState':
        """Return a copy with the given fields replaced; list fields are copied."""
        candidate = replace(self, **changes)
        candidate.player_ids = list(candidate.player_ids)
        candidate.target_words = list(candidate.target_words)
        candidate.current_words = list(candidate.current_words)
        candidate.available_twists = list(candidate.available_twists)
        candidate.history = list(candidate.history)
        return candidate

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the camelCase document stored and returned to clients."""
        return {
            'gameId': self.game_id,
            'playerIds': list(self.player_ids),
            'targetWords': list(self.target_words),
            'currentWords': list(self.current_words),
            'turnNumber': self.turn_number,
            'gameStatus': self.game_status.value,
            'availableTwists': [twist.to_dict() for twist in self.available_twists],
            'history': [record.to_dict() for record in self.history],
            'version': self.version,
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'GameState':
        # Early documents stored the target list under "targetWord"
        target_words = document.get('targetWords', document.get('targetWord', []))
        return cls(
            game_id=document['gameId'],
            player_ids=list(document.get('playerIds', [])),
            target_words=list(target_words),
            current_words=list(document.get('currentWords', [])),
            turn_number=document.get('turnNumber', 1),
            game_status=GameStatus(document.get('gameStatus', GameStatus.ACTIVE.value)),
            available_twists=[TwistAvailability.from_dict(t) for t in document.get('availableTwists', [])],
            history=[TurnRecord.from_dict(r) for r in document.get('history', [])],
            version=document.get('version', 0),
        )


@dataclass(frozen=True)
class TurnInput:
    """The client's claim for one turn: raw actions plus the final board."""
    actions: Tuple[Dict[str, Any], ...]
    final_words: Tuple[str, ...]

    @classmethod
    def from_payload(cls, payload: Any) -> 'TurnInput':
        """
        Structurally validate a request body.

        Raises:
            InvalidInput: If actions is not a list or finalWords is not a
                non-empty list of strings
        """
        if not isinstance(payload, dict):
            raise InvalidInput()

        actions = payload.get('actions')
        final_words = payload.get('finalWords')

        if not isinstance(actions, list) or not isinstance(final_words, list) or not final_words:
            raise InvalidInput()
        if not all(isinstance(word, str) for word in final_words):
            raise InvalidInput('finalWords must contain only strings.')

        return cls(actions=tuple(actions), final_words=tuple(final_words))
