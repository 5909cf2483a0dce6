import logging
from datetime import timedelta

import pytest
from authlib.jose import JsonWebToken

from focus_admin.api.routers import console
from focus_admin.core import SESSION_COOKIE_NAME, utcnow
from focus_admin.core.config import JWT_SECRET
from focus_admin.core.logging import LOGGER_NAME
from focus_admin.core.security import (
    create_session_token,
    verify_credentials,
    verify_session_token,
)


def _sign(payload, secret=JWT_SECRET):
    return JsonWebToken(["HS256"]).encode({"alg": "HS256"}, payload, secret).decode("ascii")


def test_login_sets_http_only_cookie(client, admin_credentials):
    response = client.post("/api/auth/login", json=admin_credentials)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    cookie = response.headers["set-cookie"]
    assert cookie.startswith(f"{SESSION_COOKIE_NAME}=")
    assert "HttpOnly" in cookie
    assert "Max-Age=604800" in cookie
    assert "Path=/" in cookie
    assert "samesite=lax" in cookie.lower()


@pytest.mark.parametrize(
    "overrides",
    [
        {"password": "wrong"},
        {"username": "root"},
        {"password": None},
        {"username": 1, "password": 2},
    ],
)
def test_login_rejects_bad_credentials(client, admin_credentials, overrides):
    body = {**admin_credentials, **overrides}
    body = {key: value for key, value in body.items() if value is not None}

    response = client.post("/api/auth/login", json=body)

    assert response.status_code == 401
    assert response.json() == {"detail": "Invalid credentials"}
    assert "set-cookie" not in response.headers


def test_session_endpoint_reports_expiry(admin_client):
    response = admin_client.get("/api/auth/session")

    assert response.status_code == 200
    body = response.json()
    assert body["authenticated"] is True
    assert body["role"] == "admin"
    assert body["expires_at"].endswith("Z")


def test_session_endpoint_without_cookie(client):
    assert client.get("/api/auth/session").status_code == 401


def test_logout_clears_the_cookie(admin_client):
    assert admin_client.get("/api/admin/dashboard").status_code == 200

    response = admin_client.post("/api/auth/logout")

    assert response.status_code == 200
    assert "Max-Age=0" in response.headers["set-cookie"]
    assert admin_client.get("/api/admin/dashboard").status_code == 401


def test_logout_is_logged(admin_client, caplog, monkeypatch):
    monkeypatch.setattr(logging.getLogger(LOGGER_NAME), "propagate", True)

    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        admin_client.post("/api/auth/logout")

    assert "Admin session cleared" in caplog.messages


def test_credentials_are_compared_exactly(admin_credentials):
    username, password = admin_credentials["username"], admin_credentials["password"]

    assert verify_credentials(username, password)
    assert not verify_credentials(username.upper(), password)
    assert not verify_credentials(username, password + " ")
    assert not verify_credentials(None, None)


def test_fresh_token_round_trips():
    claims = verify_session_token(create_session_token())

    assert claims["role"] == "admin"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_expired_token_is_rejected():
    token = create_session_token(now=utcnow() - timedelta(days=8))

    assert verify_session_token(token) is None


def test_token_is_valid_until_expiry():
    issued = utcnow()
    token = create_session_token(now=issued)

    assert verify_session_token(token, now=issued + timedelta(days=6, hours=23)) is not None
    assert verify_session_token(token, now=issued + timedelta(days=7, seconds=1)) is None


def test_token_signed_with_another_secret_is_rejected():
    exp = int((utcnow() + timedelta(days=1)).timestamp())
    token = _sign({"role": "admin", "exp": exp}, secret="x" * 48)

    assert verify_session_token(token) is None


def test_token_without_admin_role_is_rejected():
    exp = int((utcnow() + timedelta(days=1)).timestamp())

    assert verify_session_token(_sign({"role": "user", "exp": exp})) is None
    assert verify_session_token(_sign({"exp": exp})) is None


def test_token_without_expiry_is_rejected():
    assert verify_session_token(_sign({"role": "admin"})) is None


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_malformed_tokens_are_rejected(token):
    assert verify_session_token(token) is None


def test_forged_cookie_is_unauthorized(client):
    client.cookies.set(SESSION_COOKIE_NAME, "not-a-token")

    assert client.get("/api/admin/users").status_code == 401


# Navigation guard ------------------------------------------------------------


@pytest.fixture
def console_dir(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<html>console</html>")
    (tmp_path / "app.js").write_text("console.log('hi')")
    monkeypatch.setattr(console, "CONSOLE_DIR", tmp_path)
    return tmp_path


def test_pages_redirect_to_login_without_session(client, console_dir):
    for path in ("/", "/users", "/leaderboard"):
        response = client.get(path, follow_redirects=False)
        assert response.status_code == 307
        assert response.headers["location"] == "/login"


def test_login_page_is_public(client, console_dir):
    response = client.get("/login", follow_redirects=False)

    assert response.status_code == 200
    assert "console" in response.text


def test_console_files_load_without_session(client, console_dir):
    (console_dir / "assets").mkdir()
    (console_dir / "assets" / "login.css").write_text("body {}")

    script = client.get("/app.js", follow_redirects=False)
    style = client.get("/assets/login.css", follow_redirects=False)

    assert script.status_code == 200
    assert script.text == "console.log('hi')"
    assert style.status_code == 200
    assert client.get("/favicon.ico", follow_redirects=False).status_code == 204


@pytest.mark.parametrize("path", ["/index.html", "/assets/missing.js"])
def test_pages_and_unknown_files_stay_guarded(client, console_dir, path):
    response = client.get(path, follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/login"


def test_asset_lookup_stays_inside_the_console(tmp_path, monkeypatch):
    root = tmp_path / "console"
    root.mkdir()
    (root / "app.js").write_text("")
    (tmp_path / "secret.txt").write_text("secret")
    monkeypatch.setattr(console, "CONSOLE_DIR", root)

    assert console.asset_path("/app.js") == (root / "app.js").resolve()
    assert console.asset_path("../secret.txt") is None
    assert not console.is_public_asset("/../secret.txt")


def test_login_page_redirects_home_with_session(admin_client, console_dir):
    response = admin_client.get("/login", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/"


def test_console_is_served_with_session(admin_client, console_dir):
    assert "console" in admin_client.get("/").text
    assert "console" in admin_client.get("/users/123").text
    assert admin_client.get("/app.js").text == "console.log('hi')"
    assert admin_client.get("/favicon.ico").status_code == 204


def test_console_not_built(admin_client, tmp_path, monkeypatch):
    monkeypatch.setattr(console, "CONSOLE_DIR", tmp_path / "missing")

    response = admin_client.get("/")

    assert response.status_code == 404
    assert response.json() == {"detail": "Console not built"}


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}
