"""Reconcile StepSecurity API configuration."""

from stepsecurity_ops_manager.configuration.env import Settings
from stepsecurity_ops_manager.configuration.exceptions import ClientConfigurationUndefinedError
from stepsecurity_ops_manager.configuration.models import ClientConfig


def validate_client_configuration(
    base_url: str | None,
    api_key: str | None,
    customer: str | None,
) -> ClientConfig:
    """Validates the StepSecurity API configuration.

    Args:
        base_url (str | None): The base URL of the StepSecurity API.
        api_key (str | None): The API key sent as a bearer token.
        customer (str | None): The customer identifier.

    Raises:
        ClientConfigurationUndefinedError: If any of the settings is missing.

    Returns:
        ClientConfig: The immutable client configuration.
    """
    missing_settings: list[dict[str, str]] = []
    if not base_url:
        missing_settings.append(
            {
                "name": "StepSecurity API base URL",
                "cli_name": "api_base_url",
                "env_name": "STEPSECURITY_API_BASE_URL",
            }
        )
    if not api_key:
        missing_settings.append(
            {
                "name": "StepSecurity API key",
                "cli_name": "api_key",
                "env_name": "STEPSECURITY_API_KEY",
            }
        )
    if not customer:
        missing_settings.append(
            {
                "name": "StepSecurity customer",
                "cli_name": "customer",
                "env_name": "STEPSECURITY_CUSTOMER",
            }
        )
    if missing_settings:
        raise ClientConfigurationUndefinedError(missing_settings)
    return ClientConfig(base_url=base_url, api_key=api_key, customer=customer)  # type: ignore[arg-type]


def client_configuration_from_settings(settings: Settings | None = None) -> ClientConfig:
    """Builds the client configuration from environment variables and the .env file."""
    settings = settings or Settings()
    return validate_client_configuration(
        base_url=settings.STEPSECURITY_API_BASE_URL,
        api_key=settings.STEPSECURITY_API_KEY,
        customer=settings.STEPSECURITY_CUSTOMER,
    )
