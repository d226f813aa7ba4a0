"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game content (word lists, block list, twist catalogue)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    TWIST_NAMES, load_word_list, load_block_list, default_twist_budgets, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game content
    'TWIST_NAMES', 'load_word_list', 'load_block_list', 'default_twist_budgets',
    'validate_word_list_integrity'
]
