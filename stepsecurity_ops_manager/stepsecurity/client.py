"""Sets up the authenticated HTTP transport for the StepSecurity API."""

from typing import Any

import httpx
import structlog

from stepsecurity_ops_manager.configuration.models import ClientConfig
from stepsecurity_ops_manager.stepsecurity.exceptions import StepSecurityAPIStatusError, StepSecurityTransportError
from stepsecurity_ops_manager.utils.constants import SUCCESS_STATUS_CODES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def get_http_client() -> httpx.AsyncClient:
    """Returns an HTTP client without a client-side timeout.

    Callers bound the duration of a call by cancelling the task awaiting it.
    """
    return httpx.AsyncClient(timeout=None)


class StepSecurityTransport:
    """Executes authenticated requests against the StepSecurity API.

    Every request carries the API key as a bearer token. A response with a
    status code of 200, 201 or 204 is a success and its raw body is returned;
    any other status code raises ``StepSecurityAPIStatusError``. Nothing is
    retried.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize the transport with the client configuration and an optional HTTP client."""
        self.config = config
        self._owns_http_client = http_client is None
        self.http_client = http_client or get_http_client()

    @property
    def base_url(self) -> str:
        """Base URL every resource URI is built from."""
        return self.config.base_url

    @property
    def customer(self) -> str:
        """Customer identifier used by customer-scoped resources."""
        return self.config.customer

    async def execute(self, method: str, url: str, body: Any | None = None) -> bytes:
        """Execute a request and return the raw response body."""
        headers = {"Authorization": f"Bearer {self.config.api_key}"}
        kwargs: dict[str, Any] = {}
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["json"] = body
        try:
            response = await self.http_client.request(method, url, headers=headers, **kwargs)
        except httpx.TransportError as exc:
            raise StepSecurityTransportError(method, url, str(exc)) from exc

        logger.debug("StepSecurity API request completed", method=method, url=url, status_code=response.status_code)
        if response.status_code not in SUCCESS_STATUS_CODES:
            raise StepSecurityAPIStatusError(method, url, response.status_code, response.text)
        return response.content

    async def get(self, url: str) -> bytes:
        """Execute a GET request."""
        return await self.execute("GET", url)

    async def post(self, url: str, body: Any) -> bytes:
        """Execute a POST request with a JSON body."""
        return await self.execute("POST", url, body)

    async def put(self, url: str, body: Any) -> bytes:
        """Execute a PUT request with a JSON body."""
        return await self.execute("PUT", url, body)

    async def delete(self, url: str) -> bytes:
        """Execute a DELETE request."""
        return await self.execute("DELETE", url)

    async def aclose(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._owns_http_client:
            await self.http_client.aclose()
