"""
Player Action Models

Closed set of edit actions a turn may contain. Each variant is a frozen
dataclass tagged by its ActionType; the simulator dispatches on the tag.
parse_action turns the client's JSON shape into one of these variants and
to_dict gives back the canonical shape recorded in history.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple, Union

from .errors import InvalidAction


class ActionType(str, Enum):
    """Twist categories. The value doubles as the twist id in the ledger."""
    LETTER_TWIST = "LETTER_TWIST"
    WORD_TWIST = "WORD_TWIST"
    SPLIT = "SPLIT"
    MERGE = "MERGE"


class LetterTwistType(str, Enum):
    ADD = "ADD"
    DROP = "DROP"
    SWAP = "SWAP"


@dataclass(frozen=True)
class Add:
    letter: str
    position: int
    kind = LetterTwistType.ADD

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.kind.value, 'position': self.position, 'letter': self.letter}


@dataclass(frozen=True)
class Drop:
    position: int
    kind = LetterTwistType.DROP

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.kind.value, 'position': self.position}


@dataclass(frozen=True)
class Swap:
    position: int
    from_letter: str
    to_letter: str
    kind = LetterTwistType.SWAP

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.kind.value, 'position': self.position, 'from': self.from_letter, 'to': self.to_letter}


LetterTwistDetail = Union[Add, Drop, Swap]


@dataclass(frozen=True)
class LetterTwist:
    target_word_index: int
    twists: Tuple[LetterTwistDetail, ...]
    action_type = ActionType.LETTER_TWIST

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.action_type.value,
            'targetWordIndex': self.target_word_index,
            'details': {'twists': [twist.to_dict() for twist in self.twists]},
        }


@dataclass(frozen=True)
class WordTwist:
    target_word_index: int
    replacement: str
    action_type = ActionType.WORD_TWIST

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.action_type.value,
            'targetWordIndex': self.target_word_index,
            'details': {'targetSynonymAntonym': self.replacement},
        }


@dataclass(frozen=True)
class Split:
    target_word_index: int
    split_index: int
    action_type = ActionType.SPLIT

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.action_type.value,
            'targetWordIndex': self.target_word_index,
            'details': {'splitIndex': self.split_index},
        }


@dataclass(frozen=True)
class Merge:
    merge_indices: Tuple[int, ...]
    action_type = ActionType.MERGE

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.action_type.value, 'details': {'mergeIndices': list(self.merge_indices)}}


PlayerAction = Union[LetterTwist, WordTwist, Split, Merge]


def _require_int(value: Any, field_name: str, action_index: int) -> int:
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidAction(action_index, f"'{field_name}' must be an integer.")
    return value


def _require_letter(value: Any, field_name: str, action_index: int) -> str:
    if not isinstance(value, str) or len(value) != 1 or not value.isalpha():
        raise InvalidAction(action_index, f"'{field_name}' must be a single letter.")
    return value


def _parse_letter_twist(raw: Any, action_index: int) -> LetterTwistDetail:
    if not isinstance(raw, dict):
        raise InvalidAction(action_index, "letter twist must be an object.")

    try:
        kind = LetterTwistType(raw.get('type'))
    except ValueError:
        raise InvalidAction(action_index, f"unknown letter twist type {raw.get('type')!r}.")

    position = _require_int(raw.get('position'), 'position', action_index)

    if kind == LetterTwistType.ADD:
        return Add(letter=_require_letter(raw.get('letter'), 'letter', action_index), position=position)
    if kind == LetterTwistType.DROP:
        return Drop(position=position)
    return Swap(
        position=position,
        from_letter=_require_letter(raw.get('from'), 'from', action_index),
        to_letter=_require_letter(raw.get('to'), 'to', action_index),
    )


def parse_action(raw: Any, action_index: int) -> PlayerAction:
    """
    Parse one client action into its variant.

    Args:
        raw: The JSON object sent by the client
        action_index: Position of the action in the turn, used in errors

    Raises:
        InvalidAction: On an unknown type or a missing/mistyped field
    """
    if not isinstance(raw, dict):
        raise InvalidAction(action_index, "action must be an object.")

    try:
        action_type = ActionType(raw.get('type'))
    except ValueError:
        raise InvalidAction(action_index, f"unknown action type {raw.get('type')!r}.")

    details = raw.get('details') or {}
    if not isinstance(details, dict):
        raise InvalidAction(action_index, "'details' must be an object.")

    if action_type == ActionType.MERGE:
        indices = details.get('mergeIndices')
        if not isinstance(indices, list):
            raise InvalidAction(action_index, "'mergeIndices' must be a list of word indices.")
        return Merge(merge_indices=tuple(_require_int(i, 'mergeIndices', action_index) for i in indices))

    target = _require_int(raw.get('targetWordIndex'), 'targetWordIndex', action_index)

    if action_type == ActionType.LETTER_TWIST:
        # Either a list of twists or a single twist given inline
        raw_twists = details['twists'] if 'twists' in details else [details]
        if not isinstance(raw_twists, list) or not raw_twists:
            raise InvalidAction(action_index, "'twists' must be a non-empty list.")
        return LetterTwist(
            target_word_index=target,
            twists=tuple(_parse_letter_twist(t, action_index) for t in raw_twists),
        )

    if action_type == ActionType.WORD_TWIST:
        replacement = details.get('targetSynonymAntonym')
        if not isinstance(replacement, str) or not replacement.strip():
            raise InvalidAction(action_index, "'targetSynonymAntonym' must be a non-empty word.")
        return WordTwist(target_word_index=target, replacement=replacement)

    return Split(
        target_word_index=target,
        split_index=_require_int(details.get('splitIndex'), 'splitIndex', action_index),
    )


def parse_actions(raw_actions: Sequence[Dict[str, Any]]) -> List[PlayerAction]:
    """Parse a turn's action list, preserving order."""
    return [parse_action(raw, index) for index, raw in enumerate(raw_actions)]
