"""Base client for accessing the speaker directory API.

This module provides a base client with the request plumbing shared by
directory endpoints: session management, URL normalization and the
translation of transport failures into ``UpstreamError`` subclasses.
No retries are attempted; a failed call fails the caller's cycle.
"""

import logging
from typing import Any

import requests

from ..exceptions.api_exceptions import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamResponseError,
)

# Configure logger
logger = logging.getLogger(__name__)


class DirectoryClient:
    """Base client for interacting with the speaker directory API."""

    BASE_URL = "https://api.devcon.org"

    def __init__(
        self,
        timeout: int = 30,
        session: requests.Session | None = None,
        base_url: str | None = None,
    ) -> None:
        """Initialize the directory client.

        Args:
            timeout: Request timeout in seconds
            session: Optional requests session to use for API calls
            base_url: Optional custom base URL
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

        self.session.headers.update({"Accept": "application/json"})

    def _normalize_url(self, url_or_path: str) -> str:
        """Normalize a URL or path to a full URL.

        Args:
            url_or_path: URL or path to normalize

        Returns
        -------
            A full URL
        """
        if url_or_path.startswith("http"):
            return url_or_path

        if url_or_path.startswith("/"):
            return f"{self.base_url}{url_or_path}"

        return f"{self.base_url}/{url_or_path}"

    def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Make a single GET request to the API.

        Args:
            endpoint: API endpoint path (without base URL)
            params: Optional query parameters

        Returns
        -------
            Parsed JSON response

        Raises
        ------
            UpstreamConnectionError: If connection to the API fails or times out
            UpstreamResponseError: If the API returns a non-2xx or non-JSON
                response; a missing resource carries ``status_code`` 404
        """
        url = self._normalize_url(endpoint)
        logger.debug(f"Making GET request to {url} with params: {params}")

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.ConnectionError as e:
            raise UpstreamConnectionError(
                f"Failed to connect to speaker directory: {e}"
            ) from e
        except requests.exceptions.Timeout as e:
            raise UpstreamConnectionError(
                f"Request to speaker directory timed out: {e}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(
                f"Error making request to speaker directory: {e}"
            ) from e

        if response.status_code == 404:
            raise UpstreamResponseError(
                f"Resource not found: {url}", status_code=404
            )

        if not response.ok:
            raise UpstreamResponseError(
                f"Response status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamResponseError(
                f"Failed to parse JSON response: {e}",
                status_code=response.status_code,
            ) from e
