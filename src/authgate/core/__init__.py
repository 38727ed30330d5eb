"""
Core modules for AuthGate.

This package contains the core infrastructure components including
configuration, exceptions, logging, and security utilities.
"""

from __future__ import annotations

from .config import Settings, get_settings, reload_settings
from .exceptions import (
    AuthGateError,
    ProviderError,
    ProviderUnavailableError,
    InvalidCredentialError,
    UnclassifiedProviderError,
    ExchangeError,
    RevokeError,
    LoginError,
    MissingCodeError,
    InvalidCodeError,
    LoginFailedError,
    SessionCheckError,
    ConfigurationError,
)
from .logging import (
    get_logger,
    setup_logging,
    log_request_start,
    log_request_end,
    log_auth_event,
    log_api_call,
    log_error,
)
from .security import (
    generate_request_id,
    credential_fingerprint,
    get_security_headers,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    # Exceptions
    "AuthGateError",
    "ProviderError",
    "ProviderUnavailableError",
    "InvalidCredentialError",
    "UnclassifiedProviderError",
    "ExchangeError",
    "RevokeError",
    "LoginError",
    "MissingCodeError",
    "InvalidCodeError",
    "LoginFailedError",
    "SessionCheckError",
    "ConfigurationError",
    # Logging
    "get_logger",
    "setup_logging",
    "log_request_start",
    "log_request_end",
    "log_auth_event",
    "log_api_call",
    "log_error",
    # Security
    "generate_request_id",
    "credential_fingerprint",
    "get_security_headers",
]
