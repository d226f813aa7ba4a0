"""
Profanity Filter

Case-insensitive exact-token block list, loaded once at startup.
"""

from typing import Iterable, Optional, Sequence


class ProfanityFilter:

    def __init__(self, blocked_words: Iterable[str] = ()):
        self._blocked = frozenset(word.strip().lower() for word in blocked_words if word.strip())

    def __len__(self) -> int:
        return len(self._blocked)

    def is_blocked(self, word: str) -> bool:
        return word.lower() in self._blocked

    def first_blocked(self, words: Sequence[str]) -> Optional[str]:
        """Return the first blocked word in board order, or None."""
        for word in words:
            if self.is_blocked(word):
                return word
        return None
