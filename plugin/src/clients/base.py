"""
Shared httpx plumbing for the Drone and GitHub API clients.
"""

import logging
from typing import Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from plugin.src.errors import APIError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

DEFAULT_TIMEOUT = 30.0

class APIClient:
    """Thin synchronous wrapper around httpx.Client. No retries."""

    name = "api"

    def __init__(
        self,
        base_url: str,
        token: str,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        all_headers = {"Authorization": f"Bearer {token}"}
        all_headers.update(headers or {})
        self._client = httpx.Client(
            base_url=base_url,
            headers=all_headers,
            transport=transport,
            timeout=timeout,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self._client.close()

    def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send a request, raising APIError on transport or HTTP errors."""
        logger.debug(f"{self.name} {method} {url}")
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise APIError(
                f"{self.name} {method} {e.request.url} returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise APIError(f"{self.name} {method} {url} failed: {e}") from e
        return response

    def json(self, response: httpx.Response):
        """Decode a response body, treating anything but JSON as an API error."""
        try:
            return response.json()
        except ValueError as e:
            raise APIError(
                f"{self.name} {response.request.method} {response.request.url} returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e

    def parse(self, model: Type[M], payload) -> M:
        """Validate a response payload, treating malformed data as an API error."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise APIError(f"{self.name} returned an unexpected {model.__name__}: {e}") from e
