from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from factory_dashboard.core.deps import get_account_service
from factory_dashboard.db.base import MAX_RECORD_ID
from factory_dashboard.schemas.auth import UserCreate, UserRead
from factory_dashboard.services.accounts import AccountService

router = APIRouter(prefix="/users", tags=["Users"])


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Create a user. The password is stored hashed and never returned.",
)
async def create_user(
    payload: UserCreate,
    service: AccountService = Depends(get_account_service),
) -> UserRead:
    """Create a new user; 400 when the username is taken."""
    return await service.create_user(payload)


# PUBLIC_INTERFACE
@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user",
    description="Fetch a user by id.",
)
async def get_user(
    user_id: int = Path(..., ge=1, le=MAX_RECORD_ID, description="User id"),
    service: AccountService = Depends(get_account_service),
) -> UserRead:
    return await service.get_user(user_id)
