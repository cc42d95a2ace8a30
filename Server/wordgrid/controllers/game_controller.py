"""
Game Controller

Handles all game-related HTTP endpoints.

Alerts raised by the engine (win, loss, copied) are returned to the caller
in an "alerts" list; presenting them is the client's job.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import require_json_field

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_not_found(action, game_id):
    error_response = {
        'success': False,
        'error': 'Game not found'
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 404


def _server_error(e, action, game_id=None):
    game_logger.log_error(request, e, action, game_id)
    error_response = {
        'success': False,
        'error': str(e)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'new_game')


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state.current_row, status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'get_state', game_id)


@game_bp.route('/game/<game_id>/key', methods=['POST'])
def press_key(game_id):
    """Apply a single keyboard key (letter, CLEAR or ENTER)."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        key = require_json_field(request.get_json(silent=True), 'key')
        if key is None:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        alerts = []
        state = game_service.apply_key(game_id, key, notify=alerts.append)
        if state is None:
            return _game_not_found('key_press', game_id)

        response_data = {
            'success': True,
            'state': asdict(state),
            'alerts': [asdict(alert) for alert in alerts]
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            key=key, current_row=state.current_row, current_cell=state.current_cell
        )

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'key_press', game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start the game over with a new target word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        if state is None:
            return _game_not_found('restart_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'restart_game', game_id)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
def share_score(game_id):
    """Return the emoji summary of the grid for the client to copy."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'share_score', game_id)

        copied = []
        alerts = []
        text = game_service.share_score(game_id, clipboard=copied.append, notify=alerts.append)
        if text is None:
            return _game_not_found('share_score', game_id)

        response_data = {
            'success': True,
            'text': text,
            'alerts': [asdict(alert) for alert in alerts]
        }

        game_logger.log_server_response(request, 'share_score', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'share_score', game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _server_error(e, 'delete_game', game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
