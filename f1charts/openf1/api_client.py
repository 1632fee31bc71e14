"""
Async OpenF1 API client.

One GET per call: no caching, no retries, no rate limiting. Failures are
logged and surfaced as `TransportError` or `MalformedResponseError`.
"""
from typing import Any, Optional

import httpx

from f1charts.config import cfg
from f1charts.exceptions import MalformedResponseError, TransportError
from f1charts.openf1.query import render_query
from f1charts.utils.logger import logger


class OpenF1Client:
    """
    HTTP client for the OpenF1 REST API.

    Wraps a single `httpx.AsyncClient`. Use as an async context manager or
    call `close()` when done.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or cfg.api.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.api.timeout
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "OpenF1Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def build_url(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> str:
        """Join base URL, endpoint path and rendered filters."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        query = render_query(params)
        return f"{url}?{query}" if query else url

    async def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> list[dict]:
        """
        Fetch records from an OpenF1 endpoint.

        Args:
            endpoint: API endpoint path (e.g. '/sessions').
            params: Filters, see `f1charts.openf1.query.render_query`.

        Returns:
            List of records (dicts) from the API response.

        Raises:
            TransportError: Network failure or non-2xx status.
            MalformedResponseError: Body is not JSON, or not a JSON list.
        """
        url = self.build_url(endpoint, params)
        logger.debug(f"Fetching: {url}")

        try:
            response = await self._client.get(url)
        except httpx.RequestError as e:
            logger.error(f"Request failed for {url}: {e}")
            raise TransportError(f"Request failed for {url}: {e}", url=url) from e

        if not response.is_success:
            logger.error(f"HTTP {response.status_code} for {url}")
            raise TransportError(
                f"HTTP {response.status_code} for {url}",
                status_code=response.status_code,
                url=url,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {e}")
            raise MalformedResponseError(f"Invalid JSON from {url}: {e}", url=url) from e

        if not isinstance(data, list):
            logger.error(f"Expected a JSON list from {url}, got {type(data).__name__}")
            raise MalformedResponseError(
                f"Expected a JSON list from {url}, got {type(data).__name__}", url=url
            )

        logger.debug(f"Received {len(data)} records from {endpoint}")
        return data
