"""
AuthGate - GitHub OAuth session gateway.

This package lets a web frontend sign users in with GitHub. The browser only
ever holds a signed, http-only cookie; GitHub stays the source of truth for
whether that session is still valid.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
__description__ = "GitHub OAuth session gateway"

# Core exports
from .core import get_settings, get_logger
from .main import create_app

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "get_settings",
    "get_logger",
    "create_app",
]
