"""
API modules for AuthGate.

This package contains all API endpoints and routing logic.
"""

from __future__ import annotations

from .auth import router as auth_router

__all__ = ["auth_router"]
