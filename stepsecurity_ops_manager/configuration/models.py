"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the StepSecurity API, fixed for the lifetime of a client."""

    base_url: str
    api_key: str
    customer: str

    def __post_init__(self) -> None:
        """Normalize the base URL so resource URIs can be appended to it."""
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
