"""Asynchronous request helper for the Strapi REST API.

One call performs one HTTP exchange and returns its status and body. Only
transport failures raise; HTTP error statuses are returned to the caller.
"""

import json
import logging
from typing import Any

import httpx

from ..exceptions import StrapiConnectionError
from ..models.response import ApiResponse
from .base import BaseRequester

logger = logging.getLogger(__name__)


class StrapiRequester(BaseRequester):
    """Non-blocking requester bound to one Strapi instance.

    Example:
        ```python
        import asyncio
        from strapi_migrate.client import StrapiRequester

        async def main():
            async with StrapiRequester("http://localhost:1337", "token") as requester:
                response = await requester.get("articles")
                print(response.status, response.data)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        *,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the requester.

        Args:
            base_url: Instance root URL
            api_token: Bearer token
            timeout: Per-request timeout in seconds (None disables it)
            http_client: Preconfigured client to use instead of a private one
        """
        super().__init__(base_url, api_token)

        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        self._owns_client = http_client is None

    async def __aenter__(self) -> "StrapiRequester":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this requester created it."""
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse:
        """Perform one HTTP request and buffer its response.

        Args:
            method: HTTP method
            endpoint: Endpoint path or absolute URL
            params: URL query parameters
            body: Value serialized as the JSON request body
            headers: Additional headers

        Returns:
            Status code and parsed-or-raw body

        Raises:
            StrapiConnectionError: If no response could be obtained
        """
        url = self._build_url(endpoint)
        content = json.dumps(body).encode("utf-8") if body is not None else None

        logger.debug(f"{method} {url} params={params}")

        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                content=content,
                headers=self._get_headers(headers),
            )
        except httpx.RequestError as e:
            raise StrapiConnectionError(f"{method} {url} failed: {e}") from e

        logger.debug(f"Response: {response.status_code}")
        return ApiResponse.from_content(
            response.status_code, response.content, response.charset_encoding
        )

    async def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse:
        """Make a GET request."""
        return await self.request("GET", endpoint, params=params, headers=headers)

    async def post(
        self,
        endpoint: str,
        body: Any,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> ApiResponse:
        """Make a POST request with a JSON body."""
        return await self.request("POST", endpoint, params=params, body=body, headers=headers)
