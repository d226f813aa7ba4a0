"""
Game Configuration Constants Module

This module defines the game content settings: the starting/target word
list, the profanity block list and the catalogue of twist types with their
default per-game budgets. The lists are read once at startup and shared
read-only afterwards.
"""

import os
from typing import Dict, Final, List, Optional, Set

CONFIG_DIR: Final[str] = os.path.dirname(os.path.abspath(__file__))

DEFAULT_WORD_LIST_FILE: Final[str] = os.path.join(CONFIG_DIR, 'words.txt')
DEFAULT_BLOCK_LIST_FILE: Final[str] = os.path.join(CONFIG_DIR, 'block.txt')

TWIST_NAMES: Final[Dict[str, str]] = {
    'LETTER_TWIST': 'Letter Twist',
    'WORD_TWIST': 'Word Twist',
    'SPLIT': 'Split',
    'MERGE': 'Merge',
}
"""
Display names for every twist type, keyed by twist id.
Type: Final[Dict[str, str]] - order is the order shown to clients
"""


def _read_lines(file_path: str) -> List[str]:
    with open(file_path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f.read().splitlines() if line.strip()]


def load_word_list(file_path: Optional[str] = None) -> List[str]:
    """
    Load the start/target word list, one word per line.

    Args:
        file_path: Path to the word list, defaults to the bundled words.txt

    Returns:
        List[str]: Words in file order

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the list holds fewer than two words
    """
    file_path = file_path or DEFAULT_WORD_LIST_FILE
    try:
        words = _read_lines(file_path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {file_path}")

    if len(words) < 2:
        raise ValueError("Word list must contain at least two words.")

    return words


def load_block_list(file_path: Optional[str] = None) -> Set[str]:
    """
    Load the profanity block list into a lowercase set.

    Raises:
        OSError: If the file cannot be read
    """
    file_path = file_path or DEFAULT_BLOCK_LIST_FILE
    return {word.lower() for word in _read_lines(file_path)}


def default_twist_budgets(config_class) -> Dict[str, Optional[int]]:
    """Per-game twist budgets from configuration (None = unlimited)."""
    return {
        'LETTER_TWIST': config_class.TWIST_USES_LETTER_TWIST,
        'WORD_TWIST': config_class.TWIST_USES_WORD_TWIST,
        'SPLIT': config_class.TWIST_USES_SPLIT,
        'MERGE': config_class.TWIST_USES_MERGE,
    }


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates a loaded word list.

    Checks that every entry is alphabetic and that there are no
    case-insensitive duplicates.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if len(words) < 2:
        raise ValueError("Word list must contain at least two words.")

    for index, word in enumerate(words):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

    lowered = [word.lower() for word in words]
    if len(lowered) != len(set(lowered)):
        duplicates = sorted({word for word in lowered if lowered.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Module initialization: Validate configuration when run directly
if __name__ == "__main__":

    try:
        bundled = load_word_list()
        validate_word_list_integrity(bundled)
        print(f" Word list validation passed ({len(bundled)} words)")
        print(f" Block list entries: {len(load_block_list())}")
    except (OSError, ValueError) as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
