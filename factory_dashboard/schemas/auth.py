from __future__ import annotations

from pydantic import Field

from factory_dashboard.schemas.common import CamelModel


class LoginRequest(CamelModel):
    """Username/password credentials."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    """User read model. The stored password hash is never exposed."""
    id: int = Field(..., description="User ID")
    username: str = Field(..., description="Login name")
    name: str = Field(..., description="Display name")
    role: str = Field(..., description="Job role, e.g. Floor Manager")
    factory: str = Field(..., description="Home factory name")


class UserRecord(UserRead):
    """Stored user row including the password hash; internal to stores and services."""
    password: str = Field(..., description="Password hash")


class UserCreate(CamelModel):
    """Create user payload."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, description="Password")
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    factory: str = Field(..., min_length=1)


class LoginResponse(CamelModel):
    """Successful login result."""
    success: bool = Field(True)
    user: UserRead = Field(...)
