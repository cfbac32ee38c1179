"""Shared plumbing for the StepSecurity resource clients."""

from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from stepsecurity_ops_manager.stepsecurity.client import StepSecurityTransport
from stepsecurity_ops_manager.stepsecurity.exceptions import StepSecurityAPIStatusError, StepSecurityDecodeError, StepSecurityError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])
T = TypeVar("T")


def log_api_errors(operation: str) -> Callable[[F], F]:
    """Decorator logging a failed API operation once before re-raising the error unchanged."""

    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except StepSecurityError as exc:
                logger.error(
                    f"Failed to {operation}",
                    function=func.__name__,
                    error_type=type(exc).__name__,
                    status_code=exc.status_code if isinstance(exc, StepSecurityAPIStatusError) else None,
                    error=str(exc),
                )
                raise

        return wrapper  # type: ignore

    return decorator


class ResourceClient:
    """Base class for a client of one StepSecurity resource."""

    def __init__(self, transport: StepSecurityTransport) -> None:
        """Initialize the resource client with the transport it issues requests through."""
        self.transport = transport

    @property
    def base_url(self) -> str:
        """Base URL of the API."""
        return self.transport.base_url

    def github_uri(self, owner: str, *segments: str) -> str:
        """Build a URI under the GitHub owner scope."""
        return "/".join([f"{self.base_url}/v1/github/{owner}", *segments])

    def customer_uri(self, *segments: str) -> str:
        """Build a URI under the customer scope."""
        return "/".join([f"{self.base_url}/v1/{self.transport.customer}", *segments])

    @staticmethod
    def decode(type_: type[T], body: bytes, what: str) -> T:
        """Decode a JSON response body into the given type."""
        try:
            return TypeAdapter(type_).validate_json(body)
        except ValidationError as exc:
            raise StepSecurityDecodeError(what, str(exc)) from exc
