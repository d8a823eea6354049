"""HTTP surface: public, auth, current-user and progress routes, CORS and static fallback."""
from tests.conftest import login

from eduplay.static import StaticAssetResponder


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["version"] == "1.0.0"


def test_json_is_pretty_printed(client):
    response = client.get("/api/health")
    assert response.headers["content-type"].startswith("application/json")
    assert '{\n  "status": "healthy"' in response.text


def test_list_games_returns_seeded_catalogue(client):
    games = client.get("/api/games").json()
    assert [g["path"] for g in games] == ["/games/math-quiz/", "/games/memory/"]
    assert games[1]["status"] == "in-development"


def test_get_game(client):
    assert client.get("/api/game/1").json()["title"] == "Mathematical game"

    missing = client.get("/api/game/999")
    assert missing.status_code == 404
    assert missing.json() == {"error": "Game not found"}
    assert client.get("/api/game/abc").status_code == 404


def test_extra_segment_matches_no_route(client):
    response = client.get("/api/game/1/extra")
    assert response.status_code == 404
    assert response.json() == {"error": "Page was not found"}


def test_register(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "newbie", "email": "newbie@example.com", "password": "secret1"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "newbie"
    assert "password_hash" not in body["user"]

    profile = client.get("/api/user/profile", headers={"Authorization": f"Bearer {body['token']}"})
    assert profile.json()["email"] == "newbie@example.com"


def test_register_duplicate(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "demo", "email": "fresh@example.com", "password": "secret1"},
    )
    assert response.status_code == 409
    assert "error" in response.json()


def test_register_validation(client):
    short = client.post(
        "/api/auth/register",
        json={"username": "x", "email": "x@example.com", "password": "123"},
    )
    assert short.status_code == 400
    assert "password" in short.json()["error"]

    missing = client.post("/api/auth/register", json={"username": "x"})
    assert missing.status_code == 400

    bad_email = client.post(
        "/api/auth/register",
        json={"username": "x", "email": "nope", "password": "secret1"},
    )
    assert bad_email.status_code == 400


def test_malformed_json_body(client):
    response = client.post(
        "/api/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON format"}


def test_login_errors_look_the_same(client):
    wrong_password = client.post("/api/auth/login", json={"identifier": "demo", "password": "nope!!"})
    unknown_user = client.post("/api/auth/login", json={"identifier": "ghost", "password": "nope!!"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_logout(client):
    assert client.post("/api/auth/logout").json() == {"success": True}


def test_profile_requires_bearer_token(client):
    assert client.get("/api/user/profile").status_code == 401
    assert client.get("/api/user/profile", headers={"Authorization": "Token abc"}).status_code == 401
    assert client.get("/api/user/profile", headers={"Authorization": "Bearer abc"}).status_code == 401


def test_profile(client, user_headers):
    profile = client.get("/api/user/profile", headers=user_headers).json()
    assert profile["username"] == "demo"
    assert "password_hash" not in profile


def test_update_profile_reissues_token(client, user_headers):
    response = client.put("/api/user/profile", json={"avatar": "owl"}, headers=user_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["avatar"] == "owl"
    assert body["user"]["username"] == "demo"

    fresh = {"Authorization": f"Bearer {body['token']}"}
    assert client.get("/api/user/profile", headers=fresh).json()["avatar"] == "owl"


def test_update_profile_to_taken_username(client, user_headers):
    response = client.put("/api/user/profile", json={"username": "test"}, headers=user_headers)
    assert response.status_code == 409


def test_change_password(client, user_headers):
    wrong = client.put(
        "/api/user/password",
        json={"oldPassword": "wrong-one", "newPassword": "new-secret"},
        headers=user_headers,
    )
    assert wrong.status_code == 401

    ok = client.put(
        "/api/user/password",
        json={"oldPassword": "password123", "newPassword": "new-secret"},
        headers=user_headers,
    )
    assert ok.json() == {"success": True}
    login(client, "demo", "new-secret")


def test_save_progress_sequence(client, user_headers):
    for score, completed in [(5, False), (3, False), (8, True)]:
        response = client.post(
            "/api/game/1/progress",
            json={"score": score, "completed": completed},
            headers=user_headers,
        )
        assert response.status_code == 200

    progress = response.json()["progress"]
    assert progress["score"] == 8
    assert progress["max_score"] == 8
    assert progress["attempts"] == 3
    assert progress["completed"] is True

    history = client.get("/api/user/progress", headers=user_headers).json()
    assert len(history) == 1
    assert history[0]["title"] == "Mathematical game"

    stats = client.get("/api/user/stats", headers=user_headers).json()
    assert stats["games_played"] == 1
    assert stats["total_attempts"] == 3
    assert stats["best_score"] == 8


def test_save_progress_needs_auth_and_valid_body(client, user_headers):
    assert client.post("/api/game/1/progress", json={"score": 1}).status_code == 401
    assert client.post("/api/game/1/progress", json={}, headers=user_headers).status_code == 400
    assert (
        client.post("/api/game/999/progress", json={"score": 1}, headers=user_headers).status_code
        == 404
    )


def test_options_preflight(client):
    response = client.options("/api/games")
    assert response.status_code == 204
    assert response.content == b""
    assert response.headers["access-control-allow-origin"] == "*"
    assert "Authorization" in response.headers["access-control-allow-headers"]


def test_cors_headers_on_responses(client):
    response = client.get("/api/games")
    assert response.headers["access-control-allow-origin"] == "*"
    assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"


def test_static_shell_and_assets(client):
    assert client.get("/").text == "<html>shell</html>"
    assert client.get("/login").text == "<html>shell</html>"
    assert client.get("/game/3").text == "<html>shell</html>"
    assert client.get("/css/style.css").text == "body {}"

    missing = client.get("/nope.js")
    assert missing.status_code == 404
    assert missing.json() == {"error": "file was not found"}


def test_static_refuses_paths_outside_public_dir(settings):
    response = StaticAssetResponder(settings.public_dir).respond("/../test.sqlite")
    assert response.status_code == 403


def test_ids_beyond_sqlite_integer_range_are_not_found(client, user_headers):
    huge = "99999999999999999999999"
    response = client.get(f"/api/game/{huge}")
    assert response.status_code == 404
    assert response.json() == {"error": "Not found"}

    save = client.post(f"/api/game/{huge}/progress", json={"score": 1}, headers=user_headers)
    assert save.status_code == 404


def test_score_beyond_sqlite_integer_range_is_rejected(client, user_headers):
    response = client.post("/api/game/1/progress", json={"score": 10**20}, headers=user_headers)
    assert response.status_code == 400
    assert "score" in response.json()["error"]
    assert client.get("/api/user/progress", headers=user_headers).json() == []


def test_profile_username_is_stripped_and_required(client, user_headers):
    blank = client.put("/api/user/profile", json={"username": "   "}, headers=user_headers)
    assert blank.status_code == 400
    assert client.get("/api/user/profile", headers=user_headers).json()["username"] == "demo"

    padded = client.put("/api/user/profile", json={"username": "  demo2 "}, headers=user_headers)
    assert padded.json()["user"]["username"] == "demo2"
