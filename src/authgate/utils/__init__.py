"""
Utility modules for AuthGate.

This package contains the HTTP client used to talk to GitHub.
"""

from __future__ import annotations

from .http_client import HTTPClient

__all__ = [
    "HTTPClient",
]
