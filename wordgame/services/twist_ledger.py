"""
Twist Ledger

Per-turn working copy of a game's twist budgets. The simulator consumes
from it while replaying actions; the resolver persists its snapshot only
when the whole turn commits.
"""

from typing import Dict, Iterable, List, Optional

from ..config.game_settings import TWIST_NAMES
from ..models.errors import TwistExhausted
from ..models.game import TwistAvailability


class TwistLedger:
    """Remaining uses per twist id. None means unlimited."""

    def __init__(self, availability: Iterable[TwistAvailability] = ()):
        self._order: List[str] = []
        self._names: Dict[str, str] = {}
        self._uses_left: Dict[str, Optional[int]] = {}
        for twist in availability:
            if twist.twist_id not in self._uses_left:
                self._order.append(twist.twist_id)
            self._names[twist.twist_id] = twist.name
            self._uses_left[twist.twist_id] = twist.uses_left

    @classmethod
    def from_budgets(cls, budgets: Dict[str, Optional[int]]) -> 'TwistLedger':
        """Build a fresh ledger from {twist_id: uses} (used for new games)."""
        return cls(
            TwistAvailability(twist_id=twist_id, name=TWIST_NAMES.get(twist_id, twist_id), uses_left=uses)
            for twist_id, uses in budgets.items()
        )

    def remaining(self, twist_id: str) -> Optional[int]:
        # Twist types the game does not list are not budgeted
        return self._uses_left.get(twist_id)

    def consume(self, twist_id: str, action_index: Optional[int] = None) -> None:
        """
        Spend one use of a twist.

        Raises:
            TwistExhausted: If the twist has no uses left
        """
        uses_left = self.remaining(twist_id)
        if uses_left is None:
            return
        if uses_left <= 0:
            raise TwistExhausted(twist_id, action_index)
        self._uses_left[twist_id] = uses_left - 1

    def snapshot(self) -> List[TwistAvailability]:
        return [
            TwistAvailability(twist_id=twist_id, name=self._names[twist_id], uses_left=self._uses_left[twist_id])
            for twist_id in self._order
        ]
