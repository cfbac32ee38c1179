"""Fixtures for unit tests."""

import json
from dataclasses import dataclass
from typing import Any, Generator
from urllib.parse import unquote

import httpx
import pytest
import structlog

from stepsecurity_ops_manager.configuration.models import ClientConfig
from stepsecurity_ops_manager.stepsecurity.adapter import StepSecurityClient

BASE_URL = "https://api.stepsecurity.test"
API_KEY = "test-api-key"
CUSTOMER = "acme"


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@dataclass
class RecordedRequest:
    """A request received by the fake StepSecurity API."""

    method: str
    path: str
    query: dict[str, str]
    headers: httpx.Headers
    body: bytes

    @property
    def json(self) -> Any:
        """The decoded JSON body, or None when the request had no body."""
        return json.loads(self.body) if self.body else None


class FakeStepSecurityAPI:
    """In-memory stand-in for the StepSecurity API served through httpx.MockTransport.

    Responses are registered per method and path. Several responses registered
    for the same route are served in order, the last one repeating. Unknown GET
    routes answer 404; unknown writes answer 200 with an empty body.
    """

    def __init__(self) -> None:
        """Initialize the fake API with no routes and no recorded requests."""
        self.requests: list[RecordedRequest] = []
        self.routes: dict[tuple[str, str], list[dict[str, Any]]] = {}

    def add(self, method: str, path: str, status_code: int = 200, json_body: Any = None, text: str | None = None) -> None:
        """Register a response for a route, path relative to the base URL."""
        response: dict[str, Any] = {"status_code": status_code}
        if text is not None:
            response["text"] = text
        elif json_body is not None:
            response["json"] = json_body
        self.routes.setdefault((method, path), []).append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Record the request and serve the registered response."""
        path = unquote(request.url.path).removeprefix("/")
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=path,
                query=dict(request.url.params),
                headers=request.headers,
                body=request.content,
            )
        )
        responses = self.routes.get((request.method, path))
        if responses:
            return httpx.Response(**(responses.pop(0) if len(responses) > 1 else responses[0]))
        if request.method == "GET":
            return httpx.Response(404, text="not found")
        return httpx.Response(200)

    def requests_to(self, method: str) -> list[RecordedRequest]:
        """Recorded requests with the given method, in order."""
        return [request for request in self.requests if request.method == method]


@pytest.fixture
def fake_api() -> FakeStepSecurityAPI:
    """Fake StepSecurity API recording every request."""
    return FakeStepSecurityAPI()


@pytest.fixture
def client_config() -> ClientConfig:
    """Client configuration pointing at the fake API."""
    return ClientConfig(base_url=f"{BASE_URL}/", api_key=API_KEY, customer=CUSTOMER)


@pytest.fixture
def client(fake_api: FakeStepSecurityAPI, client_config: ClientConfig) -> StepSecurityClient:
    """StepSecurity client whose requests are served by the fake API."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler))
    return StepSecurityClient(client_config, http_client)
