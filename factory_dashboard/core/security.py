from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from factory_dashboard.core.settings import AppSettings, get_app_settings

# "plaintext" only verifies legacy rows; it is deprecated so such hashes report needs_update.
_pwd_context = CryptContext(schemes=["pbkdf2_sha256", "plaintext"], deprecated=["plaintext"])


# PUBLIC_INTERFACE
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash (or a legacy plaintext value)."""
    return _pwd_context.verify(plain_password, hashed_password)


# PUBLIC_INTERFACE
def get_password_hash(password: str) -> str:
    """Hash a password with the default scheme."""
    return _pwd_context.hash(password)


# PUBLIC_INTERFACE
def password_needs_rehash(hashed_password: str) -> bool:
    """True when the stored value uses a deprecated scheme."""
    return _pwd_context.needs_update(hashed_password)


# PUBLIC_INTERFACE
def create_session_token(
    user_id: int,
    settings: Optional[AppSettings] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """Create a signed session token whose subject is the user id."""
    settings = settings or get_app_settings()
    now = datetime.now(tz=timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.SESSION_EXPIRE_MINUTES)
    payload: Dict[str, Any] = {"sub": str(user_id), "iat": now, "exp": expire, "type": "session"}
    return jwt.encode(payload, settings.SESSION_SECRET_KEY, algorithm=settings.SESSION_ALGORITHM)


# PUBLIC_INTERFACE
def decode_token(token: str, settings: Optional[AppSettings] = None) -> Dict[str, Any]:
    """Decode and validate a session token; raises JWTError if invalid/expired."""
    settings = settings or get_app_settings()
    return jwt.decode(token, settings.SESSION_SECRET_KEY, algorithms=[settings.SESSION_ALGORITHM])


# PUBLIC_INTERFACE
def get_session_user_id(token: Optional[str], settings: Optional[AppSettings] = None) -> Optional[int]:
    """Return the user id stored in a session token or None when the token is missing/invalid."""
    if not token:
        return None
    try:
        payload = decode_token(token, settings)
    except JWTError:
        return None
    if payload.get("type") != "session":
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
