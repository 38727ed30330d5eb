"""
GitHub OAuth client for AuthGate.

This module talks to GitHub for the three calls the session lifecycle needs:
exchanging an authorization code, fetching the profile behind a credential,
and deleting the application grant on logout.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..core import (
    Settings,
    get_logger,
    ExchangeError,
    InvalidCredentialError,
    RevokeError,
    UnclassifiedProviderError,
)
from ..models import Credential, Profile
from ..utils.http_client import HTTPClient


class GitHubOAuthClient:
    """OAuth client for GitHub authentication."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        token_url: str = "https://github.com/login/oauth/access_token",
        api_base_url: str = "https://api.github.com",
        user_agent: str = "MCP-Orchestrator",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.logger = get_logger(__name__)
        self.client_id = client_id
        self.client_secret = client_secret

        # OAuth endpoints
        self.token_url = token_url
        self.user_url = f"{api_base_url}/user"
        self.grant_url = f"{api_base_url}/applications/{client_id}/grant"

        self.http = HTTPClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            service="github",
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> GitHubOAuthClient:
        """Build a client from application settings."""
        github = settings.github
        return cls(
            client_id=github.client_id,
            client_secret=github.client_secret,
            token_url=github.token_url,
            api_base_url=github.api_base_url,
            user_agent=github.user_agent,
            timeout=github.timeout,
        )

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.http.close()

    async def exchange_code(self, code: str) -> Credential:
        """
        Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the callback

        Returns:
            The issued credential

        Raises:
            ExchangeError: If the response carries no access token
            UnclassifiedProviderError: If GitHub fails or answers with a non-JSON body
            ProviderUnavailableError: On timeout or transport failure
        """
        response = await self.http.post(
            self.token_url,
            json={
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "code": code,
            },
        )

        if response.status_code >= 500:
            raise UnclassifiedProviderError(
                f"Token exchange failed: {response.status_code}",
                details={"status_code": response.status_code},
            )

        data = _json_object(response)
        if data is None:
            raise UnclassifiedProviderError(
                "Token endpoint returned a non-JSON body",
                details={"status_code": response.status_code},
            )

        # GitHub reports bad codes as 200 with an "error" field
        access_token = data.get("access_token")
        if not isinstance(access_token, str) or not access_token.strip():
            raise ExchangeError(
                details={
                    "status_code": response.status_code,
                    "provider_error": data.get("error"),
                }
            )

        return Credential(
            value=access_token,
            token_type=data.get("token_type"),
            scope=data.get("scope"),
        )

    async def fetch_profile(self, credential: Credential) -> Profile:
        """
        Get the GitHub user owning a credential.

        Args:
            credential: Credential to validate

        Returns:
            User profile

        Raises:
            InvalidCredentialError: If GitHub answers 401 or 403
            UnclassifiedProviderError: On any other unexpected status or body
            ProviderUnavailableError: On timeout or transport failure
        """
        response = await self.http.get(
            self.user_url,
            headers={
                "Authorization": f"Bearer {credential.value}",
                "Accept": "application/vnd.github+json",
            },
        )

        if response.status_code in (401, 403):
            raise InvalidCredentialError(details={"status_code": response.status_code})

        if response.status_code != 200:
            raise UnclassifiedProviderError(
                f"Failed to get user profile: {response.status_code}",
                details={"status_code": response.status_code},
            )

        data = _json_object(response)
        if data is None:
            raise UnclassifiedProviderError("User endpoint returned a non-JSON body")

        try:
            return Profile.model_validate(data)
        except ValidationError as e:
            raise UnclassifiedProviderError(
                "User endpoint returned an unexpected profile",
                details={"validation_errors": e.error_count()},
            ) from e

    async def revoke(self, credential: Credential) -> None:
        """
        Delete the application grant behind a credential.

        Authenticates with the OAuth app's own client credentials, not the
        user's token.

        Args:
            credential: Credential to revoke

        Raises:
            RevokeError: If GitHub does not acknowledge the deletion
            ProviderUnavailableError: On timeout or transport failure
        """
        response = await self.http.delete(
            self.grant_url,
            headers={"Accept": "application/vnd.github+json"},
            json={"access_token": credential.value},
            auth=(self.client_id, self.client_secret),
        )

        if response.status_code != 204:
            raise RevokeError(
                f"Grant deletion returned {response.status_code}",
                details={"status_code": response.status_code},
            )


def _json_object(response: httpx.Response) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body, or None when the body is anything else."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
