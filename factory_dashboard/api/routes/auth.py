from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from factory_dashboard.core.deps import get_account_service, get_current_user, get_settings
from factory_dashboard.core.security import create_session_token
from factory_dashboard.core.settings import AppSettings
from factory_dashboard.schemas.auth import LoginRequest, LoginResponse, UserRead
from factory_dashboard.schemas.common import SuccessResponse
from factory_dashboard.services.accounts import AccountService

router = APIRouter(tags=["Auth"])


# PUBLIC_INTERFACE
@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login",
    description="Check username/password and start a cookie session.",
)
async def login(
    payload: LoginRequest,
    response: Response,
    settings: AppSettings = Depends(get_settings),
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    """
    Authenticate the user and set the session cookie.

    Returns:
        LoginResponse: {success: true, user}
    Raises:
        AuthError (401) on bad credentials.
    """
    user = await service.authenticate(payload.username, payload.password)
    token = create_session_token(user.id, settings)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
    )
    return LoginResponse(success=True, user=user)


# PUBLIC_INTERFACE
@router.get(
    "/auth/current-user",
    response_model=UserRead,
    summary="Read current user",
    description="Return the user of the current session; 401 without a valid session.",
)
async def read_current_user(user: UserRead = Depends(get_current_user)) -> UserRead:
    return user


# PUBLIC_INTERFACE
@router.post(
    "/logout",
    response_model=SuccessResponse,
    summary="Logout",
    description="Clear the session cookie.",
)
async def logout(response: Response, settings: AppSettings = Depends(get_settings)) -> SuccessResponse:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return SuccessResponse(success=True)
