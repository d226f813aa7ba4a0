"""
Service Decorators

Contains decorators shared by HTTP and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit

from .helpers import error_body


def require_game_service(f):
    """
    Decorator that injects the game service as `game_service`, or answers
    500 when it has not been initialized.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'isValid': False,
                'errorMessage': error_body('SERVICE_UNAVAILABLE', 'Game service unavailable')
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events whose payload must name a game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = args[0] if args else None
        if not isinstance(data, dict) or not data.get('gameId'):
            emit('error', {'error': 'gameId is required'})
            return

        kwargs['game_id'] = data['gameId']
        return f(*args, **kwargs)

    return decorated_function
