"""
Infrastructure adapter: httpx -> IStockQueryClient.

Calls POST /api/stocks once per query. Every transport error and every
non-2xx response is reported as NetworkFailureError.
"""

import logging
from typing import Any, Optional

import httpx

from src.domain.exceptions import NetworkFailureError
from src.domain.ports.stock_data_port import IStockQueryClient

logger = logging.getLogger(__name__)

STOCKS_PATH = "/api/stocks"


class HttpStockQueryClient(IStockQueryClient):
    """Posts {ticker, startDate, endDate} to the stock query endpoint."""

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None) -> None:
        """
        Args:
            base_url: Server root, e.g. 'http://localhost:8000'.
            client:   Pre-configured AsyncClient (tests pass one with a mock or
                      ASGI transport). When omitted an owned client is created
                      and closed by aclose().
        """
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=None)
        self._url = base_url.rstrip("/") + STOCKS_PATH

    async def query(
        self, ticker: str, start_date: str, end_date: str
    ) -> list[dict[str, Any]]:
        payload = {"ticker": ticker, "startDate": start_date, "endDate": end_date}
        logger.debug("POST %s for %s", self._url, ticker)
        try:
            response = await self._client.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise NetworkFailureError(f"Request for {ticker} failed: {exc}") from exc

        if not response.is_success:
            raise NetworkFailureError(
                f"Request for {ticker} returned HTTP {response.status_code}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise NetworkFailureError(f"Response for {ticker} is not JSON") from exc
        if not isinstance(body, dict):
            raise NetworkFailureError(f"Unexpected response body for {ticker}")
        return body.get("data") or []

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpStockQueryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
