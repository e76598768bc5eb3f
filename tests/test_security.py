from datetime import datetime, timedelta, timezone

from jose import jwt

from factory_dashboard.core.security import (
    create_session_token,
    get_password_hash,
    get_session_user_id,
    password_needs_rehash,
    verify_password,
)
from factory_dashboard.core.settings import AppSettings

SETTINGS = AppSettings(SESSION_SECRET_KEY="unit-test-secret")


def test_hash_verifies_and_is_current():
    hashed = get_password_hash("password")
    assert hashed != "password"
    assert verify_password("password", hashed)
    assert not verify_password("Password", hashed)
    assert not password_needs_rehash(hashed)


def test_plaintext_value_verifies_but_needs_rehash():
    assert verify_password("password", "password")
    assert password_needs_rehash("password")


def test_session_token_round_trip():
    token = create_session_token(7, SETTINGS)
    assert get_session_user_id(token, SETTINGS) == 7


def test_missing_or_foreign_tokens_yield_no_user():
    assert get_session_user_id(None, SETTINGS) is None
    assert get_session_user_id("", SETTINGS) is None
    other = AppSettings(SESSION_SECRET_KEY="someone-else")
    assert get_session_user_id(create_session_token(7, other), SETTINGS) is None


def test_expired_token_yields_no_user():
    past = datetime.now(tz=timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"sub": "7", "iat": past - timedelta(hours=1), "exp": past, "type": "session"},
        SETTINGS.SESSION_SECRET_KEY,
        algorithm=SETTINGS.SESSION_ALGORITHM,
    )
    assert get_session_user_id(token, SETTINGS) is None


def test_non_session_token_yields_no_user():
    token = jwt.encode({"sub": "7", "type": "refresh"}, SETTINGS.SESSION_SECRET_KEY, algorithm="HS256")
    assert get_session_user_id(token, SETTINGS) is None
