"""
Wordgrid Game Server Application Package

This package hosts the guess-grid engine behind a Flask HTTP API and a
Flask-SocketIO event channel. The engine itself (wordgrid.engine) is pure
and has no web dependencies.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Pre-built GameService; built from config when omitted

    Returns:
        Flask application instance and its SocketIO server
    """
    from .config.game_settings import load_word_list
    from .engine import WordSource
    from .services.game_service import GameService

    app = Flask(__name__)
    app.config.from_object(config_class)

    if game_service is None:
        word_source = WordSource(load_word_list(app.config.get('WORD_LIST_PATH')))
        game_service = GameService(
            word_source,
            max_attempts=app.config['MAX_ATTEMPTS'],
            count_duplicates=app.config['COUNT_DUPLICATE_LETTERS']
        )
    app.extensions['wordgrid_game_service'] = game_service

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
