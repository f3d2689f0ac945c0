"""Tests for the HTTP game endpoints."""

from wurdle.services.session_service import get_session_service


def _new_game(client, target_word="SPEED"):
    response = client.post("/api/new_game", json={"target_word": target_word})
    assert response.status_code == 200
    return response.get_json()["game_id"]


def _guess(client, game_id, word):
    client.put(f"/api/game/{game_id}/text", json={"text": word})
    return client.post(f"/api/game/{game_id}/submit")


class TestNewGame:
    def test_fixed_target(self, client):
        response = client.post("/api/new_game", json={"target_word": "speed"})
        data = response.get_json()
        assert data["success"]
        assert data["state"]["status"] == "IN_PROGRESS"
        assert data["state"]["answer"] is None
        assert len(data["state"]["grid"]) == 6
        assert data["state"]["grid"][0][0] == [" ", "UNFILLED"]
        assert get_session_service().get_engine(data["game_id"]).target_word == "SPEED"

    def test_random_target_from_word_list(self, client):
        response = client.post("/api/new_game")
        assert response.status_code == 200
        engine = get_session_service().get_engine(response.get_json()["game_id"])
        assert engine.target_word in get_session_service().target_words

    def test_invalid_target(self, client):
        response = client.post("/api/new_game", json={"target_word": "TOOLONG"})
        assert response.status_code == 400
        assert not response.get_json()["success"]

    def test_target_outside_word_list(self, client):
        response = client.post("/api/new_game", json={"target_word": "ZZZZZ"})
        assert response.status_code == 400
        assert "not in the word list" in response.get_json()["error"]
        assert get_session_service().games == {}

    def test_body_must_be_object(self, client):
        response = client.post("/api/new_game", json=["SPEED"])
        assert response.status_code == 400
        assert not response.get_json()["success"]


class TestTypingAndSubmitting:
    def test_text_update_replaces_typed_text(self, client):
        game_id = _new_game(client)
        client.put(f"/api/game/{game_id}/text", json={"text": "ab"})
        response = client.put(f"/api/game/{game_id}/text", json={"text": "c1"})
        state = response.get_json()["state"]
        assert state["in_progress_text"] == "C"
        assert state["grid"][0][0] == ["C", "IN_PROGRESS"]

    def test_text_required(self, client):
        game_id = _new_game(client)
        response = client.put(f"/api/game/{game_id}/text", json={})
        assert response.status_code == 400

    def test_text_body_must_be_object(self, client):
        game_id = _new_game(client)
        response = client.put(f"/api/game/{game_id}/text", json=["AB"])
        assert response.status_code == 400

    def test_scored_guess(self, client):
        game_id = _new_game(client)
        response = _guess(client, game_id, "erase")
        data = response.get_json()
        assert response.status_code == 200
        assert data["guess"] == [
            ["E", "PRESENT"], ["R", "ABSENT"], ["A", "ABSENT"], ["S", "PRESENT"], ["E", "PRESENT"]
        ]
        assert data["state"]["attempts_used"] == 1
        assert data["state"]["in_progress_text"] == ""
        assert data["state"]["letter_status"]["E"] == "PRESENT"

    def test_too_short(self, client):
        game_id = _new_game(client)
        response = _guess(client, game_id, "SPE")
        data = response.get_json()
        assert response.status_code == 400
        assert data["error_kind"] == "TooShortError"
        assert data["state"]["in_progress_text"] == "SPE"

    def test_not_in_dictionary(self, client):
        game_id = _new_game(client)
        response = _guess(client, game_id, "ABCDE")
        assert response.status_code == 400
        assert response.get_json()["error_kind"] == "NotInDictionaryError"
        assert response.get_json()["state"]["attempts_used"] == 0

    def test_win_reveals_answer(self, client):
        game_id = _new_game(client)
        data = _guess(client, game_id, "SPEED").get_json()
        assert data["state"]["status"] == "WON"
        assert data["state"]["answer"] == "SPEED"

        response = _guess(client, game_id, "CRANE")
        assert response.status_code == 400
        assert response.get_json()["error_kind"] == "GameAlreadyOverError"

    def test_loss_after_six_misses(self, client):
        game_id = _new_game(client)
        for word in ["CRANE", "HELLO", "WORLD", "BRAIN", "NIGHT", "TABLE"]:
            data = _guess(client, game_id, word).get_json()
        assert data["state"]["status"] == "LOST"
        assert data["state"]["answer"] == "SPEED"


class TestStateAndLifecycle:
    def test_get_state(self, client):
        game_id = _new_game(client)
        response = client.get(f"/api/game/{game_id}/state")
        assert response.status_code == 200
        assert response.get_json()["state"]["game_id"] == game_id

    def test_unknown_game(self, client):
        assert client.get("/api/game/missing/state").status_code == 404
        assert client.post("/api/game/missing/submit").status_code == 404
        assert client.put("/api/game/missing/text", json={"text": "A"}).status_code == 404

    def test_delete_game(self, client):
        game_id = _new_game(client)
        assert client.delete(f"/api/game/{game_id}").get_json()["success"]
        assert client.delete(f"/api/game/{game_id}").status_code == 404
        assert client.get(f"/api/game/{game_id}/state").status_code == 404

    def test_health(self, client):
        _new_game(client)
        data = client.get("/api/health").get_json()
        assert data["status"] == "healthy"
        assert data["active_games"] == 1
        assert data["open_mode"] is False
