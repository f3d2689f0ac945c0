"""
Game Controller

Handles all game-related HTTP endpoints. The client sends the full typed
text on every change and a separate request when the player submits.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.session_service import GameNotFoundError, get_session_service
from ..utils.game_logger import game_logger

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


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            error_response = {
                'success': False,
                'error': 'Request body must be a JSON object'
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400
        target_word = data.get('target_word')

        game_logger.log_user_action(request, 'new_game', fixed_target=target_word is not None)

        try:
            game_id = session_service.create_new_game(target_word)
        except ValueError as e:
            error_response = {
                'success': False,
                'error': str(e)
            }
            game_logger.log_server_response(request, 'new_game', False, error_response)
            return jsonify(error_response), 400

        state = session_service.get_game_state(game_id)
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
        game_logger.log_error(request, e, 'new_game')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        try:
            state = session_service.get_game_state(game_id)
        except GameNotFoundError:
            return _game_not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts_used=state.attempts_used, status=state.status
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/text', methods=['PUT'])
def set_text(game_id):
    """Replace the typed, not yet submitted text."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('text'), str):
            error_response = {
                'success': False,
                'error': 'Text is required'
            }
            game_logger.log_server_response(request, 'set_text', False, error_response, game_id)
            return jsonify(error_response), 400

        text = data['text']
        game_logger.log_user_action(request, 'set_text', game_id, text_length=len(text))

        try:
            state = session_service.set_text(game_id, text)
        except GameNotFoundError:
            return _game_not_found('set_text', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'set_text', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'set_text', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'set_text', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
def submit_guess(game_id):
    """Submit the typed text as a guess for evaluation."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'submit_guess', game_id)

        try:
            result, state = session_service.submit(game_id)
        except GameNotFoundError:
            return _game_not_found('submit_guess', game_id)

        if not result.ok:
            error_response = {
                'success': False,
                'error': result.error.message,
                'error_kind': result.error.value,
                'state': asdict(state)
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=result.error.value, attempted_guess=state.in_progress_text
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'guess': result.guess.to_pairs(),
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=result.guess.word, round=state.attempts_used, status=state.status
        )

        if state.answer is not None:
            event = 'game_won' if state.status == 'WON' else 'game_lost'
            game_logger.log_game_event(
                game_id, event, request.remote_addr,
                rounds_used=state.attempts_used, target_word=state.answer,
                final_guess=result.guess.word
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    try:
        session_service = get_session_service()
        if not session_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = session_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        session_service = get_session_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': len(session_service.games) if session_service else 0,
            'open_mode': session_service.dictionary is None if session_service else None,
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
