"""
Authentication related Pydantic models for AuthGate.

This module contains the credential, the GitHub profile and the derived
session status returned to the frontend.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SessionState(str, Enum):
    """States a browser session moves through."""

    ANONYMOUS = "anonymous"
    EXCHANGING = "exchanging"
    AUTHENTICATED = "authenticated"
    REVOKED = "revoked"


class Credential(BaseModel):
    """
    Opaque access token issued by GitHub.

    Only ``value`` travels in the cookie; ``token_type`` and ``scope`` are
    known right after the code exchange and are kept for logging.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True, extra="forbid")

    value: str = Field(..., description="Access token", min_length=1)
    token_type: Optional[str] = Field(None, description="Token type reported by GitHub")
    scope: Optional[str] = Field(None, description="Granted scopes")

    def __repr__(self) -> str:
        return f"Credential(token_type={self.token_type!r}, scope={self.scope!r})"

    __str__ = __repr__


class Profile(BaseModel):
    """
    The subset of a GitHub user we expose.
    """

    model_config = ConfigDict(extra="ignore")

    login: str = Field(..., description="GitHub username", min_length=1)
    name: Optional[str] = Field(None, description="Display name")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")
    id: int = Field(..., description="GitHub user id")


class SessionStatus(BaseModel):
    """
    Session status derived from the provider on every check.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    logged_in: bool = Field(..., alias="loggedIn", description="Whether the credential is valid")
    profile: Optional[Profile] = Field(None, description="Profile when logged in")

    @classmethod
    def anonymous(cls) -> SessionStatus:
        return cls(logged_in=False)

    @classmethod
    def authenticated(cls, profile: Profile) -> SessionStatus:
        return cls(logged_in=True, profile=profile)

    def to_dict(self) -> Dict[str, Any]:
        """Render the body served by ``GET /auth/status``."""
        if not self.logged_in or self.profile is None:
            return {"loggedIn": False}
        return {
            "loggedIn": True,
            "login": self.profile.login,
            "name": self.profile.name,
            "avatar_url": self.profile.avatar_url,
            "id": self.profile.id,
        }


class LogoutResponse(BaseModel):
    """
    Response model for logout. Always ``{"ok": true}``.
    """

    ok: bool = Field(True, description="Logout always succeeds client-side")


class ErrorResponse(BaseModel):
    """
    Error body for failed callbacks.
    """

    error: str = Field(..., description="Public error message")
