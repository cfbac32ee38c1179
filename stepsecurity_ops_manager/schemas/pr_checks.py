"""Pydantic schemas for the pull request checks configuration of an owner."""

from typing import Any

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel

AVAILABLE_CONTROLS: dict[str, str] = {
    "NPM Package Compromised Updates": "npm_package_compromised_updates",
    "NPM Package Cooldown": "npm_package_recent_release_guard",
    "PWN Request": "pwn_request_check",
    "Script Injection": "script_injection_check",
}
"""Display names of the available PR checks mapped to their control identifiers."""


def get_available_controls() -> list[str]:
    """Return the display names of every available PR check."""
    return list(AVAILABLE_CONTROLS)


def get_control_name(control: str) -> str:
    """Return the display name of a control identifier, or an empty string if unknown."""
    for name, identifier in AVAILABLE_CONTROLS.items():
        if identifier == control:
            return name
    return ""


class CheckConfig(WireModel):
    """Pydantic model for the configuration of a single check."""

    enabled: bool = False
    type: str = ""
    settings: dict[str, Any] | None = None


class CheckOptions(WireModel):
    """Pydantic model for the checks run on a single repository."""

    baseline: bool = False
    run_required_checks: bool = False
    run_optional_checks: bool = False


class GitHubPRChecksConfig(WireModel):
    """Pydantic model for the PR checks configuration of an owner."""

    checks: dict[str, CheckConfig] = Field(default_factory=dict)
    enable_baseline_check_for_all_new_repos: bool | None = None
    enable_required_checks_for_all_new_repos: bool | None = None
    enable_optional_checks_for_all_new_repos: bool | None = None
    repos: dict[str, CheckOptions] = Field(default_factory=dict)

    @property
    def applies_to_all_new_repos(self) -> bool:
        """Whether any of the blanket flags for new repositories is set."""
        return bool(
            self.enable_baseline_check_for_all_new_repos
            or self.enable_required_checks_for_all_new_repos
            or self.enable_optional_checks_for_all_new_repos
        )

    def blanket_check_options(self) -> CheckOptions:
        """Check options implied by the blanket flags for new repositories."""
        return CheckOptions(
            baseline=bool(self.enable_baseline_check_for_all_new_repos),
            run_required_checks=bool(self.enable_required_checks_for_all_new_repos),
            run_optional_checks=bool(self.enable_optional_checks_for_all_new_repos),
        )
