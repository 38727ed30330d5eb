"""
Session lifecycle management for AuthGate.

This module owns the transitions of a browser session between anonymous,
exchanging and authenticated. GitHub is the source of truth for whether a
credential is valid; the only thing kept locally is the credential itself,
held by a per-request store (see ``CookieCredentialStore``).
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core import (
    get_logger,
    AuthGateError,
    credential_fingerprint,
    log_auth_event,
    log_error,
    ExchangeError,
    InvalidCodeError,
    InvalidCredentialError,
    LoginFailedError,
    MissingCodeError,
    ProviderError,
    SessionCheckError,
)
from ..models import Credential, SessionState, SessionStatus
from .cookies import CookieCredentialStore
from .oauth import GitHubOAuthClient


class SessionLifecycleManager:
    """Checks, establishes and tears down sessions against GitHub."""

    def __init__(self, provider: GitHubOAuthClient):
        self.logger = get_logger(__name__)
        self.provider = provider

    async def check_status(self, store: CookieCredentialStore) -> SessionStatus:
        """
        Validate the stored credential with GitHub.

        Args:
            store: Credential store for the current request

        Returns:
            Authenticated status with the user's profile, or anonymous status

        Raises:
            SessionCheckError: If GitHub could not confirm either way. The
                credential is kept in that case.
        """
        credential = store.read()
        if credential is None:
            return SessionStatus.anonymous()

        fingerprint = credential_fingerprint(credential.value)

        try:
            profile = await self.provider.fetch_profile(credential)
        except InvalidCredentialError as e:
            store.clear()
            log_auth_event(
                self.logger,
                "credential_rejected",
                success=False,
                details={
                    "credential_id": fingerprint,
                    "state": SessionState.ANONYMOUS.value,
                    **e.details,
                },
            )
            return SessionStatus.anonymous()
        except Exception as e:
            log_error(self.logger, e, context={"credential_id": fingerprint, **_error_context(e)})
            raise SessionCheckError(details={"cause": type(e).__name__}) from e

        return SessionStatus.authenticated(profile)

    async def complete_login(
        self, code: Optional[str], store: CookieCredentialStore
    ) -> Credential:
        """
        Exchange an authorization code and store the resulting credential.

        Args:
            code: Authorization code from the callback query
            store: Credential store for the current request

        Returns:
            The stored credential

        Raises:
            MissingCodeError: If no code was supplied
            InvalidCodeError: If GitHub did not issue a credential for the code
            LoginFailedError: If GitHub was unreachable or answered unexpectedly
        """
        if not code:
            raise MissingCodeError()

        log_auth_event(
            self.logger,
            "code_exchange_started",
            details={"state": SessionState.EXCHANGING.value},
        )

        try:
            credential = await self.provider.exchange_code(code)
        except ExchangeError as e:
            log_auth_event(
                self.logger,
                "code_exchange_rejected",
                success=False,
                details={"state": SessionState.ANONYMOUS.value, **e.details},
            )
            raise InvalidCodeError() from e
        except Exception as e:
            log_error(self.logger, e, context=_error_context(e))
            raise LoginFailedError(details={"cause": type(e).__name__}) from e

        # Any stale credential from an earlier session is replaced
        store.write(credential)

        log_auth_event(
            self.logger,
            "login_completed",
            details={
                "credential_id": credential_fingerprint(credential.value),
                "state": SessionState.AUTHENTICATED.value,
                "scope": credential.scope,
            },
        )
        return credential

    async def logout(self, store: CookieCredentialStore) -> None:
        """
        End the session locally, then revoke the grant with GitHub.

        The store is cleared before GitHub is contacted, so the session ends
        even if revocation fails. Revocation failures are logged as
        ``credential_revoke_failed`` events and never raised.

        Args:
            store: Credential store for the current request
        """
        credential = store.read()
        store.clear()

        if credential is None:
            return

        fingerprint = credential_fingerprint(credential.value)

        try:
            await self.provider.revoke(credential)
        except Exception as e:
            if not isinstance(e, ProviderError):
                log_error(self.logger, e, context={"credential_id": fingerprint})
            log_auth_event(
                self.logger,
                "credential_revoke_failed",
                success=False,
                details={"credential_id": fingerprint, **_error_context(e)},
            )
            return

        log_auth_event(
            self.logger,
            "credential_revoked",
            details={"credential_id": fingerprint, "state": SessionState.REVOKED.value},
        )


def _error_context(error: Exception) -> Dict[str, Any]:
    if isinstance(error, AuthGateError):
        return error.log_context()
    return {"error_type": type(error).__name__}
