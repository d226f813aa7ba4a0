"""
Game Logger Module

This module provides structured logging for player actions, server
responses and game events (turns committed, games won, lost or forfeited).
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from .helpers import get_user_identity


class GameLogger:
    """
    Centralized logging system for the word game server.

    Features:
    - Player action tracking with IP/player identification
    - Server response logging
    - Game event logging
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file handler."""
        logger = logging.getLogger('wordgame')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        log_file = self._log_file()

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions with full context.

        Args:
            request: Flask request object
            action: Type of action (e.g., 'new_game', 'submit_turn', 'get_game')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = get_user_identity(request)

        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            'url': request.url,
            **kwargs
        }

        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """
        Log server responses with full context.

        Args:
            request: Flask request object
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data being returned to client
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        user_info = get_user_identity(request)

        details = {
            'game_id': game_id,
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """
        Log game-specific events (wins, losses, forfeits).

        Args:
            game_id: Game identifier
            event: Type of game event (e.g., 'game_won', 'game_lost', 'turn_committed')
            user_ip: Client IP address
            **kwargs: Additional game details
        """
        user_info = {'user_ip': user_ip, 'player_id': None}

        details = {
            'game_id': game_id,
            **kwargs
        }

        log_message = self._create_log_entry('GAME_EVENT', event, user_info, details)
        self.logger.info(log_message)

    def log_turn_rejected(self,
                          request,
                          game_id: str,
                          error,
                          **kwargs):
        """
        Log a turn the resolver refused.

        Args:
            request: Flask request object
            game_id: Game the turn was played in
            error: The TurnError raised by the resolver
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'error_code': error.error_code,
            'retryable': error.retryable,
            'offending_word': error.offending_word,
            'message': error.message,
            **kwargs
        }

        log_message = self._create_log_entry('TURN_REJECTED', 'submit_turn', get_user_identity(request), details)
        if error.retryable:
            self.logger.warning(log_message)
        else:
            self.logger.info(log_message)

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """Log unexpected errors with full context."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }

        log_message = self._create_log_entry('ERROR', action, get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Collapse game states in responses to a short summary."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        for key in ('updatedGameState', 'state'):
            state = sanitized.get(key)
            if isinstance(state, dict):
                sanitized[key] = {
                    'turnNumber': state.get('turnNumber'),
                    'gameStatus': state.get('gameStatus'),
                    'word_count': len(state.get('currentWords', [])),
                    'history_length': len(state.get('history', [])),
                }

        return sanitized

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def get_log_stats(self) -> Dict[str, Any]:
        """
        Summarise today's log: entries per event type and rejected turns
        per error code.
        """
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        event_types = Counter()
        rejections = Counter()

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    _, _, payload = line.rpartition(' | ')
                    try:
                        entry = json.loads(payload)
                    except ValueError:
                        # Plain messages from logger.info/warning calls
                        event_types['MESSAGE'] += 1
                        continue
                    event_types[entry.get('event_type', 'UNKNOWN')] += 1
                    if entry.get('event_type') == 'TURN_REJECTED':
                        rejections[entry['details'].get('error_code')] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}

        return {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': sum(event_types.values()),
            'event_types': dict(event_types),
            'rejected_turns': dict(rejections),
        }


def _build_default_logger() -> GameLogger:
    from ..config.app_config import Config
    return GameLogger(log_dir=Config.LOG_DIR, level=Config.LOG_LEVEL)


# Global logger instance
game_logger = _build_default_logger()
