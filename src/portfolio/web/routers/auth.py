from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from portfolio.core.modules.user.models import UserView
from portfolio.web.deps import SESSION_COOKIE_NAME, AppDep, AuthTokenDep, ConfigDep, CurrentUserDep
from portfolio.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    username: str = Field(..., min_length=1, description="Username for authentication")
    password: str = Field(..., min_length=1, description="Password for authentication")


class LoginResponse(BaseModel):
    """Authentication response."""

    message: str = Field(..., description="Human-readable status")
    user: UserView = Field(..., description="Authenticated user")


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human-readable status")


@router.post(
    "/auth/login",
    summary="Authenticate admin",
    description="Authenticate with username and password. The session token is returned as an httpOnly cookie.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Invalid request data"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, config: ConfigDep, response: Response) -> LoginResponse:
    """Authenticate user and create session."""
    token, user = await app.login(login_data.username, login_data.password)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=config.cookie_secure,
        max_age=config.session_ttl_hours * 60 * 60,  # Matches session lifetime
    )

    return LoginResponse(message="Login successful", user=user)


@router.post(
    "/auth/logout",
    summary="End session",
    description="Invalidate the current session and clear the session cookie.",
    operation_id="logout",
    responses={
        200: {"description": "Successfully logged out"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def logout(app: AppDep, config: ConfigDep, auth_token: AuthTokenDep, response: Response) -> MessageResponse:
    await app.logout(auth_token)
    response.delete_cookie(SESSION_COOKIE_NAME, httponly=True, samesite="lax", secure=config.cookie_secure)
    return MessageResponse(message="Logout successful")


@router.get(
    "/auth/user",
    summary="Get current user",
    description="Get the user owning the current session.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_current_user(current_user: CurrentUserDep) -> UserView:
    return current_user
