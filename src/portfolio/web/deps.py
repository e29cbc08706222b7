from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyCookie

from portfolio.app import App
from portfolio.config import Config
from portfolio.core.modules.session.models import AuthToken
from portfolio.core.modules.user.models import UserView

SESSION_COOKIE_NAME = "session_id"

# Security scheme
cookie_scheme = APIKeyCookie(name=SESSION_COOKIE_NAME, auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_config(request: Request) -> Config:
    return cast(Config, request.app.state.config)


async def get_auth_token(
    request: Request,
    app: Annotated[App, Depends(get_app)],
    token_cookie: Annotated[str | None, Depends(cookie_scheme)] = None,
) -> AuthToken:
    """Get and validate the session token from the cookie.

    The resolved user is kept on ``request.state.user`` for the rest of the request.
    """
    auth_token = AuthToken(token_cookie) if token_cookie else None
    request.state.user = await app.get_current_user(auth_token)
    return cast(AuthToken, auth_token)


async def get_current_user(request: Request, _: Annotated[AuthToken, Depends(get_auth_token)]) -> UserView:
    """User resolved by get_auth_token for this request."""
    return cast(UserView, request.state.user)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ConfigDep = Annotated[Config, Depends(get_config)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
CurrentUserDep = Annotated[UserView, Depends(get_current_user)]
