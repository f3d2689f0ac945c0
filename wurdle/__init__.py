"""
Wurdle Game Server Application Package

A single-player Wordle game. The guess engine in `services` holds all of the
game logic; the Flask layer only forwards text changes and submissions to it
and returns render-ready state.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config, load_dictionary, load_word_list


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with the game service initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    CORS(app)

    from .utils.game_logger import game_logger
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    # Accepted guesses default to the target word file
    from .services.session_service import initialize_session_service
    target_words = load_word_list(config_class.WORD_FILE, config_class.WORD_LENGTH)
    dictionary = None
    if not config_class.OPEN_MODE:
        dictionary = load_dictionary(
            config_class.DICTIONARY_FILE or config_class.WORD_FILE, config_class.WORD_LENGTH
        )
    initialize_session_service(
        target_words,
        dictionary=dictionary,
        word_length=config_class.WORD_LENGTH,
        max_attempts=config_class.MAX_ATTEMPTS,
    )

    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    return app
