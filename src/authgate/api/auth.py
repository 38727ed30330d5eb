"""
Authentication API endpoints for AuthGate.

This module exposes the session lifecycle over HTTP: status checks, the
GitHub OAuth callback and logout. Routes only translate outcomes into
responses and commit cookie changes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import RedirectResponse

from ..auth import (
    CookieCredentialStore,
    SessionLifecycleManager,
    get_credential_store,
    get_lifecycle_manager,
)
from ..core import (
    Settings,
    SessionCheckError,
    get_logger,
    get_settings,
    log_error,
)
from ..models import ErrorResponse, LogoutResponse

# Create router
router = APIRouter(prefix="/auth", tags=["authentication"])
logger = get_logger(__name__)


@router.get(
    "/status",
    response_model=Dict[str, Any],
    summary="Get authentication status",
    description="Validate the session cookie with GitHub and return the user's profile.",
)
async def get_auth_status(
    response: Response,
    store: CookieCredentialStore = Depends(get_credential_store),
    lifecycle: SessionLifecycleManager = Depends(get_lifecycle_manager),
) -> Dict[str, Any]:
    """
    Get authentication status.

    Answers ``{"loggedIn": false}`` when there is no valid session, and 500
    with the same body when GitHub could not be consulted.
    """
    try:
        status = await lifecycle.check_status(store)
    except SessionCheckError as e:
        response.status_code = e.status_code
        return e.to_dict()
    finally:
        store.commit(response)

    return status.to_dict()


@router.get(
    "/callback",
    responses={
        302: {"description": "Login completed, redirect to the frontend"},
        400: {"model": ErrorResponse, "description": "Missing or invalid code"},
        500: {"model": ErrorResponse, "description": "GitHub unavailable"},
    },
    summary="OAuth callback",
    description="Exchange the GitHub authorization code and start a session.",
)
async def oauth_callback(
    code: Optional[str] = None,
    store: CookieCredentialStore = Depends(get_credential_store),
    lifecycle: SessionLifecycleManager = Depends(get_lifecycle_manager),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Handle OAuth callback.

    Login errors propagate to the application's error handler, which renders
    their public message.
    """
    await lifecycle.complete_login(code, store)

    response = RedirectResponse(url=settings.login_redirect_url, status_code=302)
    store.commit(response)
    return response


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Logout user",
    description="Clear the session cookie and revoke the GitHub grant.",
)
async def logout(
    response: Response,
    store: CookieCredentialStore = Depends(get_credential_store),
    lifecycle: SessionLifecycleManager = Depends(get_lifecycle_manager),
) -> LogoutResponse:
    """
    Logout user.

    Always succeeds: the cookie is cleared on every path, revocation is best
    effort.
    """
    try:
        await lifecycle.logout(store)
    except Exception as e:
        log_error(logger, e, context={"path": "/auth/logout"})
    finally:
        store.clear()
        store.commit(response)

    return LogoutResponse()
