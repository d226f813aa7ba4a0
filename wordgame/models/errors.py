"""
Turn Errors

Exception taxonomy for turn resolution. Every rejection carries a
machine-readable code, the HTTP status the API answers with, a
human-readable message and, where one exists, the offending word.
"""

from typing import Any, Dict, Optional


class TurnError(Exception):
    """Base class for every structured game/turn rejection."""

    error_code = 'TURN_ERROR'
    status_code = 400
    retryable = False

    def __init__(self, message: str, offending_word: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.offending_word = offending_word

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as the `errorMessage` payload of a turn response."""
        payload = {
            'errorCode': self.error_code,
            'message': self.message,
        }
        if self.offending_word is not None:
            payload['offendingWord'] = self.offending_word
        return payload


class GameNotFound(TurnError):
    error_code = 'GAME_NOT_FOUND'
    status_code = 404

    def __init__(self, game_id: str):
        super().__init__(f"Game with ID {game_id} not found.")
        self.game_id = game_id


class GameNotActive(TurnError):
    error_code = 'GAME_NOT_ACTIVE'

    def __init__(self, game_id: str, status: str):
        super().__init__(f"Game {game_id} is already {status}.")
        self.game_id = game_id
        self.status = status


class InvalidInput(TurnError):
    error_code = 'INVALID_INPUT'

    def __init__(self, message: str = 'Invalid turn input structure.'):
        super().__init__(message)


class IndexOutOfRange(TurnError):
    error_code = 'INDEX_OUT_OF_RANGE'

    def __init__(self, action_index: int, word_index: int, word_count: int):
        super().__init__(
            f"Action {action_index}: word index {word_index} is out of range "
            f"for {word_count} word(s)."
        )
        self.action_index = action_index
        self.word_index = word_index
        self.word_count = word_count


class InvalidAction(TurnError):
    error_code = 'INVALID_ACTION'

    def __init__(self, action_index: int, reason: str):
        super().__init__(f"Action {action_index}: {reason}")
        self.action_index = action_index
        self.reason = reason


class TwistExhausted(TurnError):
    error_code = 'TWIST_EXHAUSTED'

    def __init__(self, twist_id: str, action_index: Optional[int] = None):
        prefix = f"Action {action_index}: " if action_index is not None else ''
        super().__init__(f"{prefix}No {twist_id} twists left for this game.")
        self.twist_id = twist_id
        self.action_index = action_index


class SimulationMismatch(TurnError):
    error_code = 'SIMULATION_MISMATCH'

    def __init__(self, simulated, claimed):
        super().__init__(
            f"Submitted actions produce {list(simulated)}, not the claimed {list(claimed)}."
        )
        self.simulated = list(simulated)
        self.claimed = list(claimed)


class InvalidWord(TurnError):
    error_code = 'INVALID_WORD'

    def __init__(self, word: str, reason: Optional[str] = None):
        super().__init__(reason or f'Word "{word}" is not a real word.', offending_word=word)
        self.word = word
        self.reason = reason


class ProfanityDetected(TurnError):
    error_code = 'PROFANITY_DETECTED'

    def __init__(self, word: str):
        super().__init__(
            f'Profanity detected. The word "{word}" is not allowed.', offending_word=word
        )
        self.word = word


class ValidatorUnavailable(TurnError):
    error_code = 'VALIDATOR_UNAVAILABLE'
    status_code = 503
    retryable = True

    def __init__(self, word: Optional[str] = None, reason: Optional[str] = None):
        message = reason or 'Dictionary validation is temporarily unavailable. Please retry.'
        super().__init__(message, offending_word=word)


class PersistenceError(TurnError):
    error_code = 'PERSISTENCE_ERROR'
    status_code = 503
    retryable = True

    def __init__(self, message: str = 'Database error while saving game state.'):
        super().__init__(message)


class StaleStateConflict(TurnError):
    error_code = 'STALE_STATE'
    status_code = 409
    retryable = True

    def __init__(self, game_id: str):
        super().__init__(
            f"Game {game_id} was updated by another turn. Reload the game and retry."
        )
        self.game_id = game_id


class InvalidTransition(ValueError):
    """Raised when code asks the state machine for a transition it does not allow."""
