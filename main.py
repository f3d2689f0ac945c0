"""
Wurdle Game Server - Main Entry Point

This is the main entry point for the Wurdle game server.
It builds the Flask application (which initializes the game service) and
starts serving.
"""

import os
from wurdle import create_app
from wurdle.config import config
from wurdle.services.session_service import get_session_service
from wurdle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('WURDLE_ENV', 'default')]

    try:
        print("Creating Flask application...")
        app = create_app(config_class)
        session_service = get_session_service()
        print("✓ Game service initialized successfully")

        game_logger.logger.info(
            f"Wurdle Server Starting - {len(session_service.target_words)} target words, "
            f"open mode: {session_service.dictionary is None}"
        )

        print(f"\nStarting Wurdle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Word length: {config_class.WORD_LENGTH}, attempts: {config_class.MAX_ATTEMPTS}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wurdle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
