from __future__ import annotations

import logging
from typing import Optional

from factory_dashboard.core.errors import AuthError, NotFoundError, ValidationError
from factory_dashboard.core.security import get_password_hash, password_needs_rehash, verify_password
from factory_dashboard.schemas.auth import UserCreate, UserRead, UserRecord
from factory_dashboard.services.base import BaseService

logger = logging.getLogger(__name__)


class AccountService(BaseService):
    """
    User accounts and credential checks.

    Passwords are stored as passlib hashes. Rows holding a legacy plaintext value
    still verify and are re-hashed on the next successful login.
    """

    # PUBLIC_INTERFACE
    async def create_user(self, payload: UserCreate) -> UserRead:
        """Create a user, hashing the password; usernames are unique."""
        await self.require_factory(payload.factory, field="factory")
        if await self.store.users.get_by_username(payload.username) is not None:
            raise ValidationError.for_field("username", "already exists")
        hashed = payload.model_copy(update={"password": get_password_hash(payload.password)})
        created = await self.store.users.create(hashed)
        logger.info("Created user id=%s username=%s", created.id, created.username)
        return UserRead.model_validate(created.model_dump())

    # PUBLIC_INTERFACE
    async def get_user(self, user_id: int) -> UserRead:
        user = await self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user.model_dump())

    # PUBLIC_INTERFACE
    async def authenticate(self, username: str, password: str) -> UserRead:
        """
        Check credentials.

        Raises:
            AuthError: unknown username or wrong password (same message for both).
        Returns:
            The authenticated user without its password hash.
        """
        user: Optional[UserRecord] = await self.store.users.get_by_username(username)
        if user is None or not verify_password(password, user.password):
            logger.info("Login failed for username=%s", username)
            raise AuthError("Invalid credentials")
        if password_needs_rehash(user.password):
            await self.store.users.update(user.id, {"password": get_password_hash(password)})
            logger.info("Re-hashed legacy password for user id=%s", user.id)
        return UserRead.model_validate(user.model_dump())

    # PUBLIC_INTERFACE
    async def get_session_user(self, user_id: Optional[int]) -> UserRead:
        """Resolve the user of a session; AuthError without a session, NotFoundError if the user is gone."""
        if user_id is None:
            raise AuthError("Not authenticated")
        return await self.get_user(user_id)
