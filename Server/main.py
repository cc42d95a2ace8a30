"""
Wordgrid Game Server - Main Entry Point

This is the main entry point for the game server.
It builds the Flask-SocketIO application and starts serving.
"""

from wordgrid import create_app
from wordgrid.config import Config, get_word_statistics, load_word_list
from wordgrid.engine import WordSource
from wordgrid.services import GameService
from wordgrid.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # Fail fast on a bad dictionary before binding the port
        words = load_word_list(Config.WORD_LIST_PATH)
        stats = get_word_statistics(words)
        print(f"✓ Word list loaded ({stats['total_words']} words)")

        print("Creating Flask application...")
        game_service = GameService(
            WordSource(words),
            max_attempts=Config.MAX_ATTEMPTS,
            count_duplicates=Config.COUNT_DUPLICATE_LETTERS
        )
        app, socketio = create_app(Config, game_service=game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordgrid Server Starting")

        print(f"\nStarting Wordgrid Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Max attempts: {Config.MAX_ATTEMPTS}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordgrid Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
