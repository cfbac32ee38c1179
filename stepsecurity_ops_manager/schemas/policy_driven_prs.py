"""Pydantic schemas for policy-driven pull requests.

Two shapes live here. ``PolicyDrivenPRPolicy`` is the flat, user-facing policy:
a set of remediation toggles plus a repository selection. The API stores that
policy as one ``PolicyDrivenPRConfigOptions`` document per repository (or a
single document on the owner-wide ``[all]`` target), and lists them back as
``PolicyDrivenPRInternal`` entries.
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from stepsecurity_ops_manager.schemas.base import WireModel, zero_null_values
from stepsecurity_ops_manager.utils.constants import ORG_LEVEL_SELECTOR


class Control(str, Enum):
    """Enum for the controls that can raise issues or pull requests."""

    HARDEN_GITHUB_HOSTED_RUNNER = "GitHubHostedRunnerShouldBeHardened"
    PIN_ACTIONS_TO_SHA = "ActionsShouldBePinned"
    RESTRICT_GITHUB_TOKEN_PERMISSIONS = "GithubTokenShouldHaveMinPermission"
    SECURE_DOCKER_FILE = "SecureDockerFile"
    REPLACE_UNMAINTAINED_ACTIONS = "MaintainedGitHubActionsShouldBeUsed"
    UPDATE_PRECOMMIT_FILE = "UpdatePrecommitFile"
    UPDATE_DEPENDABOT_FILE = "DependabotConfiguration"
    ADD_WORKFLOWS = "AddWorkflows"


# Controls switched on by a boolean option, keyed by the option's field name
# on AutoRemediationOptions.
TOGGLE_CONTROLS: dict[str, Control] = {
    "harden_github_hosted_runner": Control.HARDEN_GITHUB_HOSTED_RUNNER,
    "pin_actions_to_sha": Control.PIN_ACTIONS_TO_SHA,
    "restrict_github_token_permissions": Control.RESTRICT_GITHUB_TOKEN_PERMISSIONS,
    "secure_docker_file": Control.SECURE_DOCKER_FILE,
}

# Controls switched on by a non-empty list or string option.
CONTENT_CONTROLS: dict[str, Control] = {
    "actions_to_replace_with_step_security_actions": Control.REPLACE_UNMAINTAINED_ACTIONS,
    "update_precommit_file": Control.UPDATE_PRECOMMIT_FILE,
    "package_ecosystem": Control.UPDATE_DEPENDABOT_FILE,
    "add_workflows": Control.ADD_WORKFLOWS,
}


class PackageEcosystem(WireModel):
    """Pydantic model for a Dependabot package ecosystem entry."""

    package: str = ""
    interval: str = ""


class AutoRemediationOptions(WireModel):
    """Pydantic model for the remediation toggles of a policy."""

    create_pr: bool = False
    create_issue: bool = False
    create_github_advanced_security_alert: bool = False
    harden_github_hosted_runner: bool = False
    pin_actions_to_sha: bool = False
    restrict_github_token_permissions: bool = False
    secure_docker_file: bool = False
    actions_to_exempt_while_pinning: list[str] = Field(default_factory=list)
    actions_to_replace_with_step_security_actions: list[str] = Field(default_factory=list)
    update_precommit_file: list[str] = Field(default_factory=list)
    package_ecosystem: list[PackageEcosystem] = Field(default_factory=list)
    add_workflows: str = ""


class OrgLevel(BaseModel):
    """Selection of every current and future repository under the owner."""

    kind: Literal["org"] = "org"


class RepoLevel(BaseModel):
    """Selection of an explicit list of repositories."""

    kind: Literal["repo"] = "repo"
    repos: list[str] = Field(default_factory=list)


RepoSelection = Annotated[OrgLevel | RepoLevel, Field(discriminator="kind")]


def selection_from_repos(repos: list[str]) -> OrgLevel | RepoLevel:
    """Build a repository selection from a list of repository names.

    A list containing the '*' selector is an org-level selection.
    """
    if ORG_LEVEL_SELECTOR in repos:
        return OrgLevel()
    return RepoLevel(repos=list(repos))


class PolicyDrivenPRPolicy(BaseModel):
    """Pydantic model for the user-facing policy-driven PR policy of an owner.

    Accepts and produces the ``selected_repos`` list form; ``["*"]`` selects
    the owner-wide configuration.
    """

    owner: str
    auto_remediation_options: AutoRemediationOptions = Field(default_factory=AutoRemediationOptions)
    selection: RepoSelection = Field(default_factory=RepoLevel)

    @model_validator(mode="before")
    @classmethod
    def _selection_from_selected_repos(cls, data: Any) -> Any:
        if isinstance(data, dict) and "selected_repos" in data:
            data = dict(data)
            selected_repos = data.pop("selected_repos") or []
            data.setdefault("selection", selection_from_repos(selected_repos))
        return data

    @property
    def use_org_level_config(self) -> bool:
        """Whether the policy applies to every repository under the owner."""
        return isinstance(self.selection, OrgLevel)

    @property
    def use_repo_level_config(self) -> bool:
        """Whether the policy applies to an explicit list of repositories."""
        return isinstance(self.selection, RepoLevel)

    @property
    def selected_repos(self) -> list[str]:
        """The selection as a list of repository names, ``["*"]`` at org level."""
        if isinstance(self.selection, OrgLevel):
            return [ORG_LEVEL_SELECTOR]
        return list(self.selection.repos)

    def to_document(self) -> dict[str, Any]:
        """Encode the policy in its external document form."""
        return {
            "owner": self.owner,
            "auto_remediation_options": self.auto_remediation_options.to_wire(),
            "selected_repos": self.selected_repos,
        }


class IssuePRConfig(WireModel):
    """Pydantic model for what a control triggers on a repository."""

    trigger_github_issue: bool = False
    trigger_github_pr: bool = False

    @property
    def enabled(self) -> bool:
        """Whether the control raises an issue or a pull request."""
        return self.trigger_github_issue or self.trigger_github_pr


class ControlSettings(WireModel):
    """Pydantic model for the settings shared by the controls of a configuration."""

    exempted_actions: list[str] = Field(default_factory=list)
    actions_to_replace: dict[str, str] = Field(default_factory=dict)
    update_precommit_file: dict[str, bool] = Field(default_factory=dict)
    package_ecosystem: list[PackageEcosystem] = Field(default_factory=list)
    add_workflows: str = ""
    apply_issue_pr_config_for_all_repos: bool = False

    @field_validator("actions_to_replace", mode="before")
    @classmethod
    def _null_replacements_are_empty(cls, value: Any) -> Any:
        return zero_null_values(value, "")

    @field_validator("update_precommit_file", mode="before")
    @classmethod
    def _null_precommit_flags_are_false(cls, value: Any) -> Any:
        return zero_null_values(value, False)


class PolicyDrivenPRConfigOptions(WireModel):
    """Pydantic model for the configuration written to a single target."""

    use_repo_level_config: bool = False
    use_org_level_config: bool = False
    control_checks_config: dict[str, IssuePRConfig] = Field(default_factory=dict)
    trigger_github_alert: bool = False
    trigger_pr_instead_of_issue: bool = False
    control_settings: ControlSettings = Field(default_factory=ControlSettings)


class PolicyDrivenPRInternal(PolicyDrivenPRConfigOptions):
    """Pydantic model for a configuration listed for an owner."""

    full_name: str = ""

    @property
    def repo_name(self) -> str:
        """The repository part of the full name."""
        return self.full_name.rpartition("/")[2]

    def shared_settings(self) -> dict[str, Any]:
        """The parts of the configuration that every selected repository shares."""
        return self.model_dump(
            include={"control_checks_config", "trigger_github_alert", "trigger_pr_instead_of_issue", "control_settings"},
        )
