"""
WebSocket Event Handlers

Clients join a per-game room and receive the new state after every
committed turn or forfeit.
"""

from flask_socketio import emit, join_room, leave_room

from ..models.errors import TurnError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def broadcast_game_state_update(socketio, state):
    """Send the latest state to everyone watching the game."""
    if socketio is None:
        return
    socketio.emit('game_state_update', state.to_document(), to=game_room(state.game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_id=None):
        """Join a game room for real-time updates and receive the current state."""
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        try:
            state = game_service.get_game(game_id)
        except TurnError as e:
            emit('error', {'error': e.message, 'errorCode': e.error_code})
            return

        join_room(game_room(game_id))
        game_logger.logger.info(f"Socket joined room for game {game_id}")
        emit('game_state_update', state.to_document())

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_id=None):
        """Stop receiving updates for a game."""
        leave_room(game_room(game_id))
        emit('left_game', {'gameId': game_id})
