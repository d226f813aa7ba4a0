"""
Action Simulator

Deterministic replay of a turn's actions against the board. Actions are
applied in submission order, each one on the result of the previous one.
simulate never performs I/O and never mutates its inputs, so the same
(words, actions, ledger state) always yields the same board.
"""

from typing import Callable, Dict, List, Sequence

from ..models.actions import (
    ActionType, Add, Drop, LetterTwist, LetterTwistDetail, Merge, PlayerAction, Split, Swap, WordTwist
)
from ..models.errors import IndexOutOfRange, InvalidAction
from .twist_ledger import TwistLedger


def _check_word_index(action_index: int, word_index: int, words: Sequence[str]) -> None:
    if not 0 <= word_index < len(words):
        raise IndexOutOfRange(action_index, word_index, len(words))


def _apply_letter(word: str, twist: LetterTwistDetail, action_index: int) -> str:
    if isinstance(twist, Add):
        if not 0 <= twist.position <= len(word):
            raise InvalidAction(action_index, f"ADD position {twist.position} outside 0..{len(word)} for '{word}'.")
        return word[:twist.position] + twist.letter + word[twist.position:]

    if not 0 <= twist.position < len(word):
        raise InvalidAction(
            action_index, f"{twist.kind.value} position {twist.position} outside 0..{len(word) - 1} for '{word}'."
        )

    if isinstance(twist, Drop):
        if len(word) == 1:
            raise InvalidAction(action_index, f"DROP would leave '{word}' empty.")
        return word[:twist.position] + word[twist.position + 1:]

    actual = word[twist.position]
    if actual != twist.from_letter:
        raise InvalidAction(
            action_index,
            f"SWAP expected '{twist.from_letter}' at position {twist.position} of '{word}', found '{actual}'."
        )
    return word[:twist.position] + twist.to_letter + word[twist.position + 1:]


def _letter_twist(words: List[str], action: LetterTwist, action_index: int) -> List[str]:
    _check_word_index(action_index, action.target_word_index, words)
    word = words[action.target_word_index]
    for twist in action.twists:
        word = _apply_letter(word, twist, action_index)
    result = list(words)
    result[action.target_word_index] = word
    return result


def _word_twist(words: List[str], action: WordTwist, action_index: int) -> List[str]:
    # The synonym/antonym relation itself is not verified here
    _check_word_index(action_index, action.target_word_index, words)
    result = list(words)
    result[action.target_word_index] = action.replacement
    return result


def _split(words: List[str], action: Split, action_index: int) -> List[str]:
    _check_word_index(action_index, action.target_word_index, words)
    word = words[action.target_word_index]
    if not 0 < action.split_index < len(word):
        raise InvalidAction(
            action_index, f"split index {action.split_index} must fall strictly inside '{word}' (1..{len(word) - 1})."
        )
    index = action.target_word_index
    return words[:index] + [word[:action.split_index], word[action.split_index:]] + words[index + 1:]


def _merge(words: List[str], action: Merge, action_index: int) -> List[str]:
    indices = action.merge_indices
    for word_index in indices:
        _check_word_index(action_index, word_index, words)
    if len(indices) < 2:
        raise InvalidAction(action_index, "MERGE needs at least two word indices.")
    if len(set(indices)) != len(indices):
        raise InvalidAction(action_index, f"MERGE indices {list(indices)} contain duplicates.")

    merged = ''.join(words[i] for i in indices)
    anchor = min(indices)
    dropped = set(indices) - {anchor}
    result = []
    for position, word in enumerate(words):
        if position == anchor:
            result.append(merged)
        elif position not in dropped:
            result.append(word)
    return result


class ActionSimulator:
    """Replays PlayerAction variants through a closed handler table."""

    _handlers: Dict[ActionType, Callable[[List[str], PlayerAction, int], List[str]]] = {
        ActionType.LETTER_TWIST: _letter_twist,
        ActionType.WORD_TWIST: _word_twist,
        ActionType.SPLIT: _split,
        ActionType.MERGE: _merge,
    }

    def simulate(self, words: Sequence[str], actions: Sequence[PlayerAction], ledger: TwistLedger) -> List[str]:
        """
        Apply actions in order and return the resulting board.

        The ledger is charged once per accepted action, after the action's
        preconditions hold and before the next action runs.

        Raises:
            IndexOutOfRange: If an action references a word that does not exist
            InvalidAction: If an action's preconditions do not hold
            TwistExhausted: If an action's twist type has no uses left
        """
        board = list(words)
        for action_index, action in enumerate(actions):
            handler = self._handlers.get(action.action_type)
            if handler is None:
                raise InvalidAction(action_index, f"unsupported action type {action.action_type!r}.")
            next_board = handler(board, action, action_index)
            ledger.consume(action.action_type.value, action_index)
            board = next_board
        return board


def simulate(words: Sequence[str], actions: Sequence[PlayerAction], ledger: TwistLedger) -> List[str]:
    """Module-level shortcut for ActionSimulator().simulate."""
    return ActionSimulator().simulate(words, actions, ledger)
