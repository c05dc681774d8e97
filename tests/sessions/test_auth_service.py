from __future__ import annotations

from datetime import timedelta

import pytest
from werkzeug.security import generate_password_hash

from checkin_desk.core.enums import AuthFailure
from checkin_desk.core.exceptions import AuthenticationError
from checkin_desk.sessions.service import AuthService
from checkin_desk.sessions.store import SessionStore, generate_token


@pytest.fixture
def store(clock, token_factory):
    return SessionStore(clock=clock, token_factory=token_factory)


@pytest.fixture
def auth(store):
    return AuthService(store, username="operator", password="s3cret")


@pytest.mark.parametrize("username,password", [("operator", "wrong"), ("admin", "s3cret"), ("", "")])
def test_login_rejects_bad_credentials(auth, store, username, password):
    with pytest.raises(AuthenticationError) as exc:
        auth.login(username, password)

    assert exc.value.code == AuthFailure.INVALID_CREDENTIALS
    assert len(store) == 0


def test_login_creates_session(auth, store, clock):
    result = auth.login("operator", "s3cret")

    assert result.token == "tok01"
    assert result.username == "operator"
    assert result.expires_at == clock.now + timedelta(hours=8)
    assert "tok01" in store


def test_login_with_password_hash(store):
    auth = AuthService(store, username="operator", password_hash=generate_password_hash("hashed-pw"))

    assert auth.login("operator", "hashed-pw").token
    with pytest.raises(AuthenticationError):
        auth.login("operator", "")


def test_empty_configured_password_never_matches(store):
    auth = AuthService(store, username="operator", password="")

    with pytest.raises(AuthenticationError):
        auth.login("operator", "")


def test_default_tokens_are_256_bit_hex():
    token = generate_token()

    assert len(token) == 64
    int(token, 16)
    assert token != generate_token()


def test_authenticate_unknown_token(auth):
    with pytest.raises(AuthenticationError) as exc:
        auth.authenticate("nope")

    assert exc.value.code == AuthFailure.UNAUTHENTICATED


def test_activity_within_window_refreshes_last_active(auth, store, clock):
    token = auth.login("operator", "s3cret").token

    clock.advance(minutes=20)
    result = auth.authenticate(token)
    assert result.token == token
    assert not result.rotated
    assert result.new_token is None
    assert store.get(token).last_active == clock.now

    # Sliding: another 20 minutes is still inside the window.
    clock.advance(minutes=20)
    assert not auth.authenticate(token).rotated


def test_idle_past_rotation_threshold_rotates_token(auth, store, clock):
    old = auth.login("operator", "s3cret").token

    clock.advance(minutes=31)
    result = auth.authenticate(old)

    assert result.rotated
    assert result.new_token == "tok02"
    assert result.username == "operator"
    assert old not in store
    with pytest.raises(AuthenticationError):
        auth.authenticate(old)
    assert auth.authenticate("tok02").token == "tok02"


def test_token_rejected_after_absolute_expiry_without_sweep(auth, store, clock):
    token = auth.login("operator", "s3cret").token

    clock.advance(hours=8, minutes=1)

    with pytest.raises(AuthenticationError):
        auth.authenticate(token)
    assert token not in store


def test_logout_is_idempotent(auth, store):
    token = auth.login("operator", "s3cret").token

    auth.logout(token)
    auth.logout(token)

    assert token not in store


def test_sweep_removes_only_expired(auth, store, clock):
    stale = auth.login("operator", "s3cret").token
    clock.advance(hours=7)
    fresh = auth.login("operator", "s3cret").token
    clock.advance(hours=1, minutes=1)

    assert auth.sweep() == 1
    assert stale not in store
    assert fresh in store
