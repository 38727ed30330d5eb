"""
Authentication modules for AuthGate.

This package contains the GitHub OAuth client, the cookie credential store,
the session lifecycle manager and their FastAPI dependencies.
"""

from __future__ import annotations

from .oauth import GitHubOAuthClient
from .cookies import CookieCredentialStore
from .session import SessionLifecycleManager
from .dependencies import (
    get_credential_store,
    get_provider_client,
    get_lifecycle_manager,
)

__all__ = [
    # OAuth
    "GitHubOAuthClient",
    # Credential storage
    "CookieCredentialStore",
    # Session lifecycle
    "SessionLifecycleManager",
    # Dependencies
    "get_credential_store",
    "get_provider_client",
    "get_lifecycle_manager",
]
