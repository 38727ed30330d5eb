"""
Cookie-backed credential store for AuthGate.

The store is scoped to one request: it reads the signed credential cookie
from the incoming request, records at most one pending mutation, and applies
it to whichever response the route finally returns.
"""

from __future__ import annotations

import secrets
from typing import Optional

from itsdangerous import BadSignature, TimestampSigner
from starlette.requests import Request
from starlette.responses import Response

from ..core import get_logger
from ..core.config import CookieConfig
from ..models import Credential

# Used when COOKIE_SECRET_KEY is unset; cookies then die with the process.
_PROCESS_SECRET = secrets.token_urlsafe(32)

_SIGNER_SALT = "authgate.credential"

_WRITE = "write"
_CLEAR = "clear"


class CookieCredentialStore:
    """Read, write and clear the credential cookie for one request."""

    def __init__(self, request: Request, config: CookieConfig):
        self.logger = get_logger(__name__)
        self.request = request
        self.config = config
        self.signer = TimestampSigner(config.secret_key or _PROCESS_SECRET, salt=_SIGNER_SALT)

        self._pending: Optional[str] = None
        self._written: Optional[Credential] = None

    def read(self) -> Optional[Credential]:
        """
        Get the credential for this request.

        Returns:
            The credential written during this request, otherwise the verified
            cookie value. None if cleared, absent, tampered with or expired.
        """
        if self._pending == _WRITE:
            return self._written
        if self._pending == _CLEAR:
            return None

        raw = self.request.cookies.get(self.config.name)
        if not raw:
            return None

        try:
            value = self.signer.unsign(raw, max_age=self.config.max_age).decode("utf-8")
        except BadSignature as e:
            self.logger.info("Ignoring credential cookie", reason=type(e).__name__)
            return None

        if not value:
            return None
        return Credential(value=value)

    def write(self, credential: Credential) -> None:
        """Store a credential, replacing any previous one."""
        self._pending = _WRITE
        self._written = credential

    def clear(self) -> None:
        """Drop the credential."""
        self._pending = _CLEAR
        self._written = None

    def commit(self, response: Response) -> None:
        """
        Apply the pending mutation to an outgoing response.

        Args:
            response: Response that will carry the Set-Cookie header
        """
        if self._pending == _WRITE and self._written is not None:
            response.set_cookie(
                self.config.name,
                self.signer.sign(self._written.value).decode("utf-8"),
                max_age=self.config.max_age,
                path="/",
                domain=self.config.domain,
                secure=self.config.secure,
                httponly=True,
                samesite=self.config.same_site,
            )
        elif self._pending == _CLEAR:
            response.delete_cookie(
                self.config.name,
                path="/",
                domain=self.config.domain,
                secure=self.config.secure,
                httponly=True,
                samesite=self.config.same_site,
            )
