"""
Custom exceptions for AuthGate.

Two families live here. ``ProviderError`` subclasses describe what went wrong
while talking to GitHub and are raised by the OAuth client. ``LoginError``
subclasses and ``SessionCheckError`` are what the session lifecycle reports to
its callers; they carry the public message and HTTP status sent to the browser.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class AuthGateError(Exception):
    """Base exception for all AuthGate errors."""

    public_message = "Internal server error"

    def __init__(
        self,
        message: str,
        error_type: str = "authgate_error",
        error_code: Optional[str] = None,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the response body shown to clients."""
        return {"error": self.public_message}

    def log_context(self) -> Dict[str, Any]:
        """Internal detail for structured logs, never sent to clients."""
        context = {
            "error_type": self.error_type,
            "error_message": self.message,
        }
        if self.error_code:
            context["error_code"] = self.error_code
        context.update(self.details)
        return context


# Identity provider errors


class ProviderError(AuthGateError):
    """GitHub call failed."""

    def __init__(
        self,
        message: str = "Identity provider error",
        error_code: Optional[str] = None,
        status_code: int = 502,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="provider_error",
            error_code=error_code,
            status_code=status_code,
            details=details
        )


class ProviderUnavailableError(ProviderError):
    """Transport failure or timeout talking to GitHub."""

    def __init__(
        self,
        message: str = "Identity provider unreachable",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="provider_unavailable",
            status_code=503,
            details=details
        )


class InvalidCredentialError(ProviderError):
    """GitHub rejected the credential (401/403)."""

    def __init__(
        self,
        message: str = "Credential rejected by identity provider",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="invalid_credential",
            status_code=401,
            details=details
        )


class UnclassifiedProviderError(ProviderError):
    """Unexpected status or response shape from GitHub."""

    def __init__(
        self,
        message: str = "Unexpected identity provider response",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="unclassified_provider_error",
            status_code=502,
            details=details
        )


class ExchangeError(ProviderError):
    """Token endpoint answered without a usable access token."""

    def __init__(
        self,
        message: str = "No access token in exchange response",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="exchange_failed",
            status_code=400,
            details=details
        )


class RevokeError(ProviderError):
    """Grant deletion was not acknowledged."""

    def __init__(
        self,
        message: str = "Credential revocation failed",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_code="revoke_failed",
            status_code=502,
            details=details
        )


# Session lifecycle errors


class LoginError(AuthGateError):
    """Login could not be completed."""

    public_message = "OAuth failed"

    def __init__(
        self,
        message: str = "Login failed",
        error_code: Optional[str] = None,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="login_error",
            error_code=error_code,
            status_code=status_code,
            details=details
        )


class MissingCodeError(LoginError):
    """Callback arrived without an authorization code."""

    public_message = "Missing code"

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message="Authorization code is missing",
            error_code="missing_code",
            status_code=400,
            details=details
        )


class InvalidCodeError(LoginError):
    """Authorization code did not yield a credential."""

    public_message = "Invalid OAuth code"

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message="Authorization code was not accepted",
            error_code="invalid_code",
            status_code=400,
            details=details
        )


class LoginFailedError(LoginError):
    """Provider could not be reached or answered nonsense during exchange."""

    def __init__(self, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message="Identity provider unavailable during code exchange",
            error_code="provider_unavailable",
            status_code=500,
            details=details
        )


class SessionCheckError(AuthGateError):
    """Session validity could not be determined."""

    def __init__(
        self,
        message: str = "Session status could not be determined",
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="session_check_error",
            error_code="session_check_failed",
            status_code=500,
            details=details
        )

    def to_dict(self) -> Dict[str, Any]:
        """Status checks always answer with an anonymous body."""
        return {"loggedIn": False}


class ConfigurationError(AuthGateError):
    """Configuration related errors."""

    def __init__(
        self,
        message: str = "Configuration error",
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=message,
            error_type="configuration_error",
            error_code=error_code,
            status_code=500,
            details=details
        )
