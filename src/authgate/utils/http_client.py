"""
HTTP client utilities for AuthGate.

This module provides a configured HTTP client with timeout handling and
request/response logging. Calls are single-shot: authorization codes are
single-use, so a failed request is reported, never replayed.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional, Tuple

import httpx
from httpx import Response

from ..core import (
    get_logger,
    ProviderUnavailableError,
    log_api_call,
)


class HTTPClient:
    """HTTP client with an explicit timeout and call logging."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 5.0,
        headers: Optional[Dict[str, str]] = None,
        service: str = "github",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.logger = get_logger(__name__)

        # Client configuration
        self.base_url = base_url
        self.timeout = timeout
        self.service = service

        # Default headers
        default_headers = {"Accept": "application/json"}
        if headers:
            default_headers.update(headers)

        # Create HTTP client
        client_kwargs: Dict[str, Any] = {
            "timeout": httpx.Timeout(self.timeout),
            "headers": default_headers,
        }
        if base_url:
            client_kwargs["base_url"] = base_url
        if transport is not None:
            client_kwargs["transport"] = transport

        self.client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        auth: Optional[Tuple[str, str]] = None,
    ) -> Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method
            url: Request URL, relative to ``base_url`` when one is set
            headers: Additional headers
            json: JSON body
            auth: Basic auth credentials

        Returns:
            HTTP response, whatever its status code

        Raises:
            ProviderUnavailableError: On timeout or transport failure
        """
        start_time = time.time()

        try:
            response = await self.client.request(
                method=method,
                url=url,
                headers=headers,
                json=json,
                auth=auth,
            )
        except httpx.TimeoutException as e:
            self.logger.warning("Request timed out", method=method, url=url, timeout=self.timeout)
            raise ProviderUnavailableError(
                f"Request timed out after {self.timeout}s",
                details={"url": url, "timeout": self.timeout},
            ) from e
        except httpx.RequestError as e:
            self.logger.warning("Request failed", method=method, url=url, error=str(e))
            raise ProviderUnavailableError(
                f"Request failed: {type(e).__name__}",
                details={"url": url, "error": str(e)},
            ) from e

        log_api_call(
            self.logger,
            service=self.service,
            endpoint=url,
            method=method,
            status_code=response.status_code,
            duration_ms=(time.time() - start_time) * 1000,
        )

        return response

    async def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> Response:
        """Make GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Response:
        """Make POST request."""
        return await self.request("POST", url, headers=headers, json=json)

    async def delete(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        auth: Optional[Tuple[str, str]] = None,
    ) -> Response:
        """Make DELETE request, optionally with a JSON body."""
        return await self.request("DELETE", url, headers=headers, json=json, auth=auth)

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()
