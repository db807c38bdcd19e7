"""
NFTfi SDK - API Client

Async REST client for the NFTfi API.
"""

import logging
from typing import Any, Optional

import httpx

from .config import Config

log = logging.getLogger(__name__)


class ApiError(Exception):
    """API call failed."""
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error {status_code}: {message}")


class Api:
    """
    Async client for the NFTfi REST API.

    Usage:
        async with Api(Config.from_env()) as api:
            response = await api.get("offers", params={"nftAddress": "0x..."})
            offers = response["results"]
    """

    def __init__(self, config: Optional[Config] = None,
                 client: Optional[httpx.AsyncClient] = None):
        """
        Initialize API client.

        Args:
            config: SDK configuration (defaults to Config())
            client: Preconfigured httpx client (optional, mainly for tests)
        """
        self.config = config or Config()
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["X-API-Key"] = self.config.api_key
        self._client = client or httpx.AsyncClient(
            base_url=self.config.api_url,
            headers=headers,
            timeout=self.config.timeout,
        )

    async def __aenter__(self) -> "Api":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(self, method: str, uri: str, **kwargs) -> Any:
        """Make API call and decode the JSON body."""
        log.debug(f"{method} {uri}")
        try:
            response = await self._client.request(method, uri, **kwargs)
        except httpx.TransportError as e:
            raise ApiError(-1, f"Connection failed: {e}") from e

        if response.is_error:
            raise ApiError(response.status_code, response.text)

        if not response.content:
            return None
        return response.json()

    async def get(self, uri: str, params: Optional[dict] = None) -> Any:
        """GET uri with query params."""
        return await self._request("GET", uri, params=params or {})

    async def post(self, uri: str, payload: Optional[dict] = None) -> Any:
        """POST a JSON payload to uri."""
        return await self._request("POST", uri, json=payload or {})

    async def delete(self, uri: str) -> Any:
        """DELETE uri."""
        return await self._request("DELETE", uri)
