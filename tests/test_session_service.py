"""Tests for SessionService."""

import random

import pytest

from wurdle.models.game import ErrorKind
from wurdle.services.session_service import GameNotFoundError, SessionService


@pytest.fixture
def session_service() -> SessionService:
    return SessionService(["speed", "crane"], dictionary={"SPEED", "CRANE", "ERASE"},
                          rng=random.Random(7))


class TestSessionService:
    def test_requires_target_words(self):
        with pytest.raises(ValueError):
            SessionService([])

    def test_targets_uppercased(self, session_service: SessionService):
        assert session_service.target_words == ["SPEED", "CRANE"]

    def test_random_target_comes_from_list(self, session_service: SessionService):
        game_id = session_service.create_new_game()
        assert session_service.get_engine(game_id).target_word in {"SPEED", "CRANE"}

    def test_games_are_independent(self, session_service: SessionService):
        first = session_service.create_new_game("SPEED")
        second = session_service.create_new_game("SPEED")
        session_service.set_text(first, "ERASE")
        session_service.submit(first)
        assert session_service.get_engine(first).attempts_used == 1
        assert session_service.get_engine(second).attempts_used == 0

    def test_answer_hidden_until_over(self, session_service: SessionService):
        game_id = session_service.create_new_game("SPEED")
        assert session_service.get_game_state(game_id).answer is None
        session_service.set_text(game_id, "speed")
        result, view = session_service.submit(game_id)
        assert result.ok
        assert view.answer == "SPEED"
        view = session_service.get_game_state(game_id)
        assert view.status == "WON"
        assert view.answer == "SPEED"

    def test_dictionary_applies_to_every_game(self, session_service: SessionService):
        game_id = session_service.create_new_game("SPEED")
        session_service.set_text(game_id, "ABCDE")
        result, _ = session_service.submit(game_id)
        assert result.error == ErrorKind.NOT_IN_DICTIONARY

    def test_unknown_game(self, session_service: SessionService):
        with pytest.raises(GameNotFoundError):
            session_service.get_game_state("missing")

    def test_delete(self, session_service: SessionService):
        game_id = session_service.create_new_game()
        assert session_service.delete_game(game_id)
        assert not session_service.delete_game(game_id)

    def test_target_outside_dictionary_rejected(self, session_service: SessionService):
        with pytest.raises(ValueError, match="not in the word list"):
            session_service.create_new_game("zzzzz")
        assert session_service.games == {}

    def test_submit_returns_state_after_guess(self, session_service: SessionService):
        game_id = session_service.create_new_game("SPEED")
        session_service.set_text(game_id, "ERASE")
        result, view = session_service.submit(game_id)
        assert result.ok
        assert view.attempts_used == 1
        assert view.in_progress_text == ""
        assert view.grid[0] == result.guess.to_pairs()
