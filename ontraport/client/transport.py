"""
Authenticated HTTP transport for the ONTRAPORT API.

Sends a single request per call: no retries, no backoff.
"""

import logging
from typing import Any

import httpx

from ..core.models import Configuration
from .response import Response

logger = logging.getLogger(__name__)

READ_METHODS = {"GET"}


class APIError(Exception):
    """Raised when the API returns a non-200 status or the request fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class Transport:
    """
    Builds and sends authenticated requests, and unwraps their responses.

    GET payloads are sent as query parameters; POST, PUT and DELETE
    payloads as a JSON body.
    """

    def __init__(
        self,
        configuration: Configuration,
        http_client: httpx.Client | None = None,
    ):
        """
        Initialize the transport.

        Args:
            configuration: Credentials and connection settings
            http_client: Optional httpx client (created if None)
        """
        self.configuration = configuration

        # Track if we own the HTTP client (for cleanup)
        self._owns_client = http_client is None

        if http_client is None:
            self.http_client = httpx.Client(timeout=configuration.timeout_seconds)
        else:
            self.http_client = http_client

    def close(self) -> None:
        """Close the HTTP client if we created it."""
        if self._owns_client and self.http_client:
            self.http_client.close()

    def _build_url(self, endpoint: str) -> str:
        """
        Build full URL from the versioned API URL and an endpoint.

        Args:
            endpoint: Endpoint path (e.g., "/objects")

        Returns:
            Full URL, e.g. https://api.ontraport.com/1/objects
        """
        return f"{self.configuration.api_url}/{endpoint.lstrip('/')}"

    def _build_headers(self) -> dict[str, str]:
        return {
            "Api-Appid": self.configuration.api_id,
            "Api-Key": self.configuration.api_key,
            "Content-Type": "application/json",
        }

    def send(
        self,
        method: str,
        endpoint: str,
        payload: dict[str, Any] | None = None,
    ) -> Response:
        """
        Make an authenticated HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT or DELETE)
            endpoint: Endpoint path relative to the versioned API URL
            payload: Query parameters for GET, JSON body otherwise

        Returns:
            Response wrapping the parsed JSON body

        Raises:
            APIError: On a non-200 response or a transport failure
        """
        method = method.upper()
        url = self._build_url(endpoint)

        request_kwargs: dict[str, Any] = {}
        if method in READ_METHODS:
            request_kwargs["params"] = payload or {}
        else:
            request_kwargs["json"] = payload or {}

        logger.debug(f"{method} {url}")

        try:
            response = self.http_client.request(
                method=method,
                url=url,
                headers=self._build_headers(),
                **request_kwargs,
            )
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {str(e)}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.status_code != 200:
            error = f"{response.status_code} {response.reason_phrase}"
            body = response.text
            message = f"{error} - {body}" if body and body.strip() else error
            logger.error(f"API request failed: {method} {url}: {error}")
            raise APIError(message, status_code=response.status_code)

        try:
            parsed = response.json() if response.content else {}
        except ValueError as e:
            logger.error(f"Invalid JSON response: {method} {url}")
            raise APIError(f"Invalid JSON response: {e}", status_code=response.status_code) from e
        if not isinstance(parsed, dict):
            parsed = {"data": parsed}

        if self.configuration.debug_mode:
            parsed["original_request"] = response.request

        return Response(parsed)
