"""Contains exceptions raised when reconciling application configuration."""


class ClientConfigurationUndefinedError(Exception):
    """Raised when the StepSecurity API configuration is incomplete."""

    def __init__(self, missing_settings: list[dict[str, str]]) -> None:
        """Initializes the exception with the settings that are missing."""
        super().__init__(
            "Incomplete StepSecurity API configuration - missing settings include "
            + ", ".join(
                f"{setting['name']} (command line option {setting['cli_name']}, environment variable {setting['env_name']})"
                for setting in missing_settings
            )
        )
        self.missing_settings = missing_settings
