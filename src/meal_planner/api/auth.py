"""Google sign-in endpoints and the session cookie dependency."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Cookie, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse

from meal_planner.api.serializers import user_to_dict
from meal_planner.domain.models import UserRecord  # noqa: TC001
from meal_planner.services.errors import AuthenticationError

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

AUTH_COOKIE = "authToken"
CALLBACK_PATH = "/api/auth/google/callback"

router = APIRouter(prefix="/api/auth", tags=["auth"])
_logger = logging.getLogger(__name__)


async def require_user(
    request: Request,
    auth_token: str | None = Cookie(default=None, alias=AUTH_COOKIE),
) -> UserRecord:
    """Resolve the signed-in user from the session cookie."""
    container: AppContainer = request.app.state.container
    return container.auth_service.authenticate(auth_token)


def _redirect_uri(request: Request) -> str:
    scheme = (
        "https"
        if request.headers.get("x-forwarded-proto") == "https"
        else request.url.scheme
    )
    host = request.headers.get("host") or request.url.netloc
    return f"{scheme}://{host}{CALLBACK_PATH}"


@router.get("/google/url")
async def google_auth_url(request: Request) -> dict[str, str]:
    """Return the Google consent screen URL."""
    container: AppContainer = request.app.state.container
    try:
        url = container.auth_service.authorization_url(_redirect_uri(request))
    except RuntimeError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    return {"authUrl": url}


@router.get("/google/callback")
async def google_callback(request: Request, code: str | None = None) -> Response:
    """Finish the OAuth flow, set the session cookie and go to the frontend."""
    if not code:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Authorization code not provided",
        )
    container: AppContainer = request.app.state.container
    frontend_url = container.settings.frontend_url
    try:
        _, token = await container.auth_service.login(code, _redirect_uri(request))
    except Exception:
        _logger.exception("Google OAuth callback failed")
        return RedirectResponse(
            f"{frontend_url}?auth=error", status_code=status.HTTP_302_FOUND
        )
    response = RedirectResponse(frontend_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        AUTH_COOKIE,
        token,
        max_age=container.auth_service.token_max_age_seconds,
        path="/",
        httponly=True,
        samesite="lax",
        secure=_redirect_uri(request).startswith("https://"),
    )
    return response


@router.get("/me")
async def me(
    request: Request,
    auth_token: str | None = Cookie(default=None, alias=AUTH_COOKIE),
) -> dict[str, object]:
    """Report whether the session cookie belongs to a known user."""
    container: AppContainer = request.app.state.container
    try:
        user = container.auth_service.authenticate(auth_token)
    except AuthenticationError:
        return {"authenticated": False}
    return {"authenticated": True, "user": user_to_dict(user)}


@router.post("/logout")
async def logout(response: Response) -> dict[str, bool]:
    response.delete_cookie(AUTH_COOKIE, path="/")
    return {"success": True}
