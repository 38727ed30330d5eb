"""
AuthGate data models.

This module provides the Pydantic models for credentials, profiles and
session status responses.
"""

from __future__ import annotations

from .auth import (
    SessionState,
    Credential,
    Profile,
    SessionStatus,
    LogoutResponse,
    ErrorResponse,
)

__all__ = [
    "SessionState",
    "Credential",
    "Profile",
    "SessionStatus",
    "LogoutResponse",
    "ErrorResponse",
]
