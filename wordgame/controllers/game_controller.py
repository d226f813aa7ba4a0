"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, current_app, request, jsonify

from ..models.errors import TurnError
from ..models.game import GameStatus
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import error_body
from ..websocket.handlers import broadcast_game_state_update

game_bp = Blueprint('game', __name__)


def _failure(error: TurnError):
    return {'isValid': False, 'errorMessage': error.to_dict()}, error.status_code


def _unexpected(action: str, error: Exception, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'isValid': False,
        'errorMessage': error_body('INTERNAL_ERROR', 'An unexpected error occurred.')
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/games', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Start a new game with a random start/target word pair."""
    game_logger.log_user_action(request, 'new_game')
    try:
        state = game_service.create_new_game()
    except TurnError as e:
        error_response, status = _failure(e)
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), status
    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'isValid': False,
            'errorMessage': error_body('GAME_START_FAILED', f'Failed to start a new game. {e}')
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500

    response_data = state.to_document()
    game_logger.log_server_response(request, 'new_game', True, {'state': response_data}, state.game_id)
    return jsonify(response_data), 201


@game_bp.route('/games/<game_id>', methods=['GET'])
@require_game_service
def get_game(game_id, game_service):
    """Get the current state of a game."""
    game_logger.log_user_action(request, 'get_game', game_id)
    try:
        state = game_service.get_game(game_id)
    except TurnError as e:
        error_response, status = _failure(e)
        game_logger.log_server_response(request, 'get_game', False, error_response, game_id)
        return jsonify(error_response), status
    except Exception as e:
        return _unexpected('get_game', e, game_id)

    response_data = state.to_document()
    game_logger.log_server_response(request, 'get_game', True, {'state': response_data}, game_id)
    return jsonify(response_data)


@game_bp.route('/games/<game_id>/turns', methods=['POST'])
@require_game_service
def submit_turn(game_id, game_service):
    """Submit a turn: the actions played and the claimed final words."""
    payload = request.get_json(silent=True)
    game_logger.log_user_action(request, 'submit_turn', game_id, turn=payload)

    try:
        state = game_service.submit_turn(game_id, payload)
    except TurnError as e:
        error_response, status = _failure(e)
        game_logger.log_turn_rejected(request, game_id, e)
        game_logger.log_server_response(request, 'submit_turn', False, error_response, game_id)
        return jsonify(error_response), status
    except Exception as e:
        return _unexpected('submit_turn', e, game_id)

    response_data = {
        'isValid': True,
        'updatedGameState': state.to_document()
    }
    game_logger.log_server_response(
        request, 'submit_turn', True, response_data, game_id,
        turn_number=state.turn_number, game_status=state.game_status.value
    )

    if state.game_status == GameStatus.COMPLETED:
        game_logger.log_game_event(
            game_id, 'game_won', request.remote_addr,
            turns_used=state.turn_number - 1, target_words=state.target_words
        )
    elif state.game_status == GameStatus.FAILED:
        game_logger.log_game_event(
            game_id, 'game_lost', request.remote_addr,
            turns_used=state.turn_number - 1, target_words=state.target_words
        )
    else:
        game_logger.log_game_event(
            game_id, 'turn_committed', request.remote_addr,
            turn_number=state.turn_number - 1, current_words=state.current_words
        )

    broadcast_game_state_update(current_app.socketio, state)
    return jsonify(response_data)


@game_bp.route('/games/<game_id>/forfeit', methods=['POST'])
@require_game_service
def forfeit_game(game_id, game_service):
    """Give up an active game."""
    game_logger.log_user_action(request, 'forfeit_game', game_id)
    try:
        state = game_service.forfeit_game(game_id)
    except TurnError as e:
        error_response, status = _failure(e)
        game_logger.log_server_response(request, 'forfeit_game', False, error_response, game_id)
        return jsonify(error_response), status
    except Exception as e:
        return _unexpected('forfeit_game', e, game_id)

    response_data = state.to_document()
    game_logger.log_server_response(request, 'forfeit_game', True, {'state': response_data}, game_id)
    game_logger.log_game_event(game_id, 'game_forfeited', request.remote_addr, turn_number=state.turn_number)

    broadcast_game_state_update(current_app.socketio, state)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    from ..services.game_service import get_game_service

    game_service = get_game_service()
    response_data = {
        'status': 'healthy' if game_service else 'degraded',
        'game_service': game_service is not None,
        'word_count': len(game_service.word_list) if game_service else 0,
        'log_stats': game_logger.get_log_stats()
    }
    return jsonify(response_data)
