"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name: str, default: int):
    """Read an integer budget where a negative value means unlimited (None)."""
    value = int(os.getenv(name, default))
    return None if value < 0 else value


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3001))

    # Database Settings
    MONGO_URI = os.getenv('MONGO_URI')
    DB_NAME = os.getenv('DB_NAME', 'word_game')
    GAMES_COLLECTION = os.getenv('GAMES_COLLECTION', 'games')
    PERSISTENCE_RETRIES = int(os.getenv('PERSISTENCE_RETRIES', 1))

    # Dictionary Settings
    DICTIONARY_API_URL = os.getenv('DICTIONARY_API_URL', 'https://api.dictionaryapi.dev/api/v2/entries/en/')
    DICTIONARY_TIMEOUT_SECONDS = float(os.getenv('DICTIONARY_TIMEOUT_SECONDS', 3))
    DICTIONARY_MAX_RETRIES = int(os.getenv('DICTIONARY_MAX_RETRIES', 2))
    DICTIONARY_MAX_WORKERS = int(os.getenv('DICTIONARY_MAX_WORKERS', 8))
    VALIDATION_TIMEOUT_SECONDS = float(os.getenv('VALIDATION_TIMEOUT_SECONDS', 10))

    # Game Settings
    PLAYER_ID = os.getenv('PLAYER_ID', 'player_001')
    MAX_TURNS = int(os.getenv('MAX_TURNS', 0))  # 0 disables the turn cap
    WORD_LIST_FILE = os.getenv('WORD_LIST_FILE')
    BLOCK_LIST_FILE = os.getenv('BLOCK_LIST_FILE')

    # Twist budgets per game (-1 = unlimited)
    TWIST_USES_LETTER_TWIST = _optional_int('TWIST_USES_LETTER_TWIST', -1)
    TWIST_USES_WORD_TWIST = _optional_int('TWIST_USES_WORD_TWIST', 3)
    TWIST_USES_SPLIT = _optional_int('TWIST_USES_SPLIT', 2)
    TWIST_USES_MERGE = _optional_int('TWIST_USES_MERGE', 2)

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    MONGO_URI = None
    DICTIONARY_MAX_RETRIES = 0
    PERSISTENCE_RETRIES = 1
    MAX_TURNS = 0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
