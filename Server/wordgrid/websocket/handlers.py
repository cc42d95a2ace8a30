"""
WebSocket Event Handlers

Real-time channel for renderers: clients join a game room, send key presses
and receive the resulting snapshot after every transition.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import require_json_field


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_state(game_id, state):
        socketio.emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        }, to=_room(game_id))

    def broadcast_alert(game_id):
        def notify(alert):
            socketio.emit('game_alert', asdict(alert), to=_room(game_id))
        return notify

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room for real-time updates."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = require_json_field(data, 'game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            join_room(_room(game_id))
            game_logger.log_user_action(request, 'join_game', game_id)

            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'join_game')
            emit('error', {'error': 'Failed to join game'})

    @socketio.on('key_press')
    def handle_key_press(data):
        """Apply one key and broadcast the new snapshot to the room."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = require_json_field(data, 'game_id')
            key = require_json_field(data, 'key')
            if not game_id or key is None:
                emit('error', {'error': 'Game ID and key are required'})
                return

            game_logger.log_user_action(request, 'key_press', game_id, key=key)

            state = game_service.apply_key(game_id, key, notify=broadcast_alert(game_id))
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            broadcast_state(game_id, state)

        except Exception as e:
            game_logger.log_error(request, e, 'key_press')
            emit('error', {'error': 'Failed to process key'})

    @socketio.on('restart_game')
    def handle_restart_game(data):
        """Restart a game with a new word and broadcast the empty grid."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = require_json_field(data, 'game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            game_logger.log_user_action(request, 'restart_game', game_id)

            state = game_service.restart_game(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            broadcast_state(game_id, state)

        except Exception as e:
            game_logger.log_error(request, e, 'restart_game')
            emit('error', {'error': 'Failed to restart game'})

    @socketio.on('share_score')
    def handle_share_score(data):
        """Send the share text back to the requesting client only."""
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            game_id = require_json_field(data, 'game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            game_logger.log_user_action(request, 'share_score', game_id)

            text = game_service.share_score(
                game_id,
                clipboard=lambda text: emit('share_ready', {'game_id': game_id, 'text': text}),
                notify=lambda alert: emit('game_alert', asdict(alert))
            )
            if text is None:
                emit('error', {'error': 'Game not found'})

        except Exception as e:
            game_logger.log_error(request, e, 'share_score')
            emit('error', {'error': 'Failed to share score'})
