"""Harvest REST API client for API communication."""

import logging
from typing import Any, Dict, Optional

import httpx

from mcp_server_harvest.config import HarvestConfig
from mcp_server_harvest.errors import HarvestTransportError, InvalidResponseError, error_from_response
from mcp_server_harvest.logging_config import get_logger


class HarvestClient:
    """Client for interacting with Harvest via REST API.

    One instance holds one ``httpx.AsyncClient`` that every resource shares.
    Each call issues exactly one request; nothing is retried.
    """

    def __init__(
        self,
        config: HarvestConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config
        self.api_url = config.api_url.rstrip("/")
        self.logger = get_logger(__name__, logger)

        self.client = httpx.AsyncClient(
            timeout=config.timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {config.access_token}",
                "Harvest-Account-Id": config.account_id,
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": config.user_agent,
            },
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    def _url(self, endpoint: str) -> str:
        # plain concatenation keeps the /v2 prefix that urljoin would drop
        path = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self.api_url}{path}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a request to the Harvest API and return the decoded JSON body.

        Returns ``None`` for an empty body. Raises HarvestAPIError for non-2xx
        statuses and HarvestTransportError when no response was received.
        """
        try:
            response = await self.client.request(
                method=method,
                url=self._url(endpoint),
                params=params or None,
                json=json_data,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = error_from_response(e.response)
            self.logger.error(
                "Harvest API error: %s %s -> %s (%s)", method, endpoint, error.status, error.code
            )
            raise error from e
        except httpx.TimeoutException as e:
            self.logger.error("Request timed out: %s %s", method, endpoint)
            raise HarvestTransportError(f"Network error: request timed out after {self.config.timeout}s") from e
        except httpx.RequestError as e:
            self.logger.error("Request failed: %s %s: %s", method, endpoint, e)
            raise HarvestTransportError(f"Network error: {str(e) or type(e).__name__}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON received from Harvest API ({method} {endpoint})",
                status=response.status_code,
                response=response.text,
            ) from e

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("POST", endpoint, json_data=data)

    async def patch(self, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("PATCH", endpoint, json_data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self._request("DELETE", endpoint)
