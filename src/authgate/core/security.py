"""
Security utilities for AuthGate.

This module provides request identifiers, credential fingerprints for logs,
and the headers added to every response.
"""

from __future__ import annotations

import hashlib
import secrets
from typing import Dict


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracing.

    Returns:
        Random request ID string
    """
    return secrets.token_urlsafe(16)


def credential_fingerprint(value: str, length: int = 12) -> str:
    """
    Derive a short, non-reversible identifier for a credential.

    Lets operators correlate log lines for one session without the
    credential itself ever reaching the logs.

    Args:
        value: Raw credential
        length: Number of hex characters to keep

    Returns:
        Truncated SHA256 hex digest
    """
    return hashlib.sha256(value.encode('utf-8')).hexdigest()[:length]


def get_security_headers() -> Dict[str, str]:
    """
    Get security headers for HTTP responses.

    Returns:
        Dictionary of security headers
    """
    return {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
        "Cache-Control": "no-store",
    }
