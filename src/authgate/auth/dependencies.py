"""
FastAPI dependencies wiring the session lifecycle into routes.
"""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import Depends, Request

from ..core import Settings, get_settings
from .cookies import CookieCredentialStore
from .oauth import GitHubOAuthClient
from .session import SessionLifecycleManager


def get_credential_store(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> CookieCredentialStore:
    """Credential store scoped to the current request."""
    return CookieCredentialStore(request, settings.cookie)


async def get_provider_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[GitHubOAuthClient]:
    """GitHub client for the current request, closed once the response is sent."""
    async with GitHubOAuthClient.from_settings(settings) as client:
        yield client


def get_lifecycle_manager(
    provider: GitHubOAuthClient = Depends(get_provider_client),
) -> SessionLifecycleManager:
    return SessionLifecycleManager(provider)
