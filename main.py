"""
Word Game Server - Main Entry Point

This is the main entry point for the word game server.
It loads the word and block lists, initializes the game service and
starts the Flask-SocketIO application.
"""

from wordgame import create_app
from wordgame.config import Config
from wordgame.services.game_service import initialize_game_service
from wordgame.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    game_service = None
    try:
        print("Initializing services...")

        # Word list problems are fatal; block list problems are logged and tolerated
        game_service = initialize_game_service(Config)
        print(f"✓ Game service initialized ({len(game_service.word_list)} words)")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Game Server Starting")

        print(f"\nStarting Word Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Persistence: {'MongoDB' if Config.MONGO_URI else 'in-memory'}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Game Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if game_service:
            game_service.close()


if __name__ == '__main__':
    main()
