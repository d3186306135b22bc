"""
HTTP Client for the Grafana API.

Provides an async JSON client for `<scheme>://<hostname>/api<endpoint>`.
Every request carries bearer authentication, JSON content negotiation and
the grafana-tools User-Agent.
"""

import json
from dataclasses import dataclass
from typing import Any

import httpx

from grafana_tools.core.config import ClientConfig
from grafana_tools.core.exceptions import RequestError
from grafana_tools.core.logging import get_logger, log_with_source
from grafana_tools.core.utils import merge_options

logger = get_logger(__name__)

_OPTION_KEYS = frozenset({"method", "headers", "body", "params"})


@dataclass(frozen=True)
class ApiResponse:
    """Raw response metadata and the parsed JSON body of one exchange."""

    response: httpx.Response
    body: Any


class GrafanaClient:
    """
    HTTP client for Grafana API communication.

    Features:
    - Default headers merged under caller-supplied options
    - JSON body parsed for every response, successful or not
    - Non-2xx statuses raised as RequestError
    - Structured logging of requests/responses

    Usage:
        async with GrafanaClient(config) as client:
            result = await client.get("/dashboards/db/home")
            result = await client.post("/dashboards/db", {"dashboard": {...}})
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Grafana client.

        Args:
            config: Connection details for the Grafana server
            transport: Optional httpx transport, used in tests
        """
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "GrafanaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    def url_for(self, endpoint: str) -> str:
        return f"{self.config.base_url}{endpoint}"

    def default_options(self) -> dict[str, Any]:
        """Fresh default request options for this client."""
        return {
            "headers": {
                "Accept": "application/json",
                "Authorization": f"Bearer {self.config.api_key}",
                "Content-Type": "application/json",
                "User-Agent": self.config.user_agent,
            },
        }

    async def fetch(self, endpoint: str, options: dict[str, Any] | None = None) -> ApiResponse:
        """
        Make a request to the Grafana API.

        Args:
            endpoint: API path below /api (e.g., /dashboards/db/home)
            options: Overrides for method, headers, body and params.
                Headers are merged with the defaults by case-insensitive
                name, the caller winning. None values are ignored.

        Returns:
            ApiResponse with the httpx response and parsed JSON body

        Raises:
            TypeError: On an unknown option key
            RequestError: When Grafana responds with a non-2xx status
            httpx.HTTPError: On transport failure
            json.JSONDecodeError: When the response body is not JSON
        """
        defaults = self.default_options()
        merged = merge_options(defaults, options)
        unknown = set(merged) - _OPTION_KEYS
        if unknown:
            raise TypeError(f"Unsupported request options: {', '.join(sorted(unknown))}")

        method = merged.get("method", "GET")
        headers = httpx.Headers(defaults["headers"])
        caller_headers = (options or {}).get("headers") or {}
        headers.update({k: v for k, v in caller_headers.items() if v is not None})
        client = await self._get_client()

        log_with_source(logger, "cli", "debug", "API request", method=method, endpoint=endpoint)

        response = await client.request(
            method,
            self.url_for(endpoint),
            headers=headers,
            content=merged.get("body"),
            params=merged.get("params"),
        )
        body = response.json()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
        )

        if not response.is_success:
            server_message = body.get("message") if isinstance(body, dict) else None
            log_with_source(
                logger,
                "cli",
                "warning",
                "API request failed",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
            )
            raise RequestError(endpoint, response.status_code, server_message)

        return ApiResponse(response=response, body=body)

    async def get(self, endpoint: str, options: dict[str, Any] | None = None) -> ApiResponse:
        """Make a GET request."""
        return await self.fetch(endpoint, merge_options(options or {}, {"method": "GET"}))

    async def post(
        self,
        endpoint: str,
        data: Any,
        options: dict[str, Any] | None = None,
    ) -> ApiResponse:
        """Make a POST request with `data` serialized as the JSON body."""
        return await self.fetch(
            endpoint,
            merge_options(options or {}, {"method": "POST", "body": json.dumps(data)}),
        )
