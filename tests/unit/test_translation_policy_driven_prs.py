"""Unit tests for translating policy-driven PR policies to and from per-repository configurations."""

from typing import Any

import pytest

from stepsecurity_ops_manager.schemas.policy_driven_prs import (
    AutoRemediationOptions,
    Control,
    IssuePRConfig,
    OrgLevel,
    PackageEcosystem,
    PolicyDrivenPRConfigOptions,
    PolicyDrivenPRInternal,
    PolicyDrivenPRPolicy,
    RepoLevel,
)
from stepsecurity_ops_manager.translation.policy_driven_prs import (
    build_config_options,
    build_control_checks_config,
    enabled_controls,
    is_config_enabled,
    options_from_config,
    partition_configs,
    policy_from_configs,
)


def stored_config(full_name: str, **overrides: Any) -> PolicyDrivenPRInternal:
    """Build a listed configuration that raises PRs for pinned actions."""
    data: dict[str, Any] = {
        "full_name": full_name,
        "use_repo_level_config": True,
        "control_checks_config": {Control.PIN_ACTIONS_TO_SHA.value: {"trigger_github_issue": False, "trigger_github_pr": True}},
        "trigger_pr_instead_of_issue": True,
    }
    data.update(overrides)
    return PolicyDrivenPRInternal.model_validate(data)


def test_enabled_controls_order() -> None:
    """Test that toggles come before content controls and empty options enable nothing."""
    options = AutoRemediationOptions(
        secure_docker_file=True,
        harden_github_hosted_runner=True,
        add_workflows="https://github.com/octo/workflows",
        update_precommit_file=[".pre-commit-config.yaml"],
    )

    assert enabled_controls(options) == [
        Control.HARDEN_GITHUB_HOSTED_RUNNER,
        Control.SECURE_DOCKER_FILE,
        Control.UPDATE_PRECOMMIT_FILE,
        Control.ADD_WORKFLOWS,
    ]
    assert enabled_controls(AutoRemediationOptions()) == []


def test_build_control_checks_config_copies_global_toggles() -> None:
    """Test that every enabled control triggers what the global toggles ask for."""
    options = AutoRemediationOptions(create_issue=True, pin_actions_to_sha=True, package_ecosystem=[PackageEcosystem(package="npm", interval="daily")])

    checks = build_control_checks_config(options)

    assert checks == {
        "ActionsShouldBePinned": IssuePRConfig(trigger_github_issue=True, trigger_github_pr=False),
        "DependabotConfiguration": IssuePRConfig(trigger_github_issue=True, trigger_github_pr=False),
    }


def test_build_config_options_repo_level() -> None:
    """Test the configuration written for a repository-level policy."""
    policy = PolicyDrivenPRPolicy(
        owner="octo",
        selection=RepoLevel(repos=["api"]),
        auto_remediation_options=AutoRemediationOptions(
            create_pr=True,
            create_github_advanced_security_alert=True,
            pin_actions_to_sha=True,
            actions_to_exempt_while_pinning=["actions/checkout"],
            actions_to_replace_with_step_security_actions=["tj-actions/changed-files"],
            update_precommit_file=[".pre-commit-config.yaml"],
        ),
    )

    config = build_config_options(policy)

    assert config.use_repo_level_config is True
    assert config.use_org_level_config is False
    assert config.trigger_github_alert is True
    assert config.trigger_pr_instead_of_issue is True
    assert config.control_settings.exempted_actions == ["actions/checkout"]
    assert config.control_settings.actions_to_replace == {"tj-actions/changed-files": ""}
    assert config.control_settings.update_precommit_file == {".pre-commit-config.yaml": True}
    assert config.control_settings.apply_issue_pr_config_for_all_repos is False
    assert set(config.control_checks_config) == {"ActionsShouldBePinned", "MaintainedGitHubActionsShouldBeUsed", "UpdatePrecommitFile"}


def test_build_config_options_org_level() -> None:
    """Test that an org-level policy applies its issue and PR settings to every repository."""
    policy = PolicyDrivenPRPolicy(owner="octo", selection=OrgLevel(), auto_remediation_options=AutoRemediationOptions(create_issue=True))

    config = build_config_options(policy)

    assert config.use_org_level_config is True
    assert config.use_repo_level_config is False
    assert config.control_settings.apply_issue_pr_config_for_all_repos is True


@pytest.mark.parametrize(
    "config,expected",
    [
        pytest.param(PolicyDrivenPRConfigOptions(), False, id="nothing set"),
        pytest.param(PolicyDrivenPRConfigOptions(trigger_github_alert=True), True, id="alert"),
        pytest.param(PolicyDrivenPRConfigOptions(trigger_pr_instead_of_issue=True), True, id="pull requests"),
        pytest.param(PolicyDrivenPRConfigOptions(control_checks_config={"SecureDockerFile": IssuePRConfig()}), True, id="control configured"),
        pytest.param(PolicyDrivenPRConfigOptions(use_repo_level_config=True), False, id="only the selection flag"),
    ],
)
def test_is_config_enabled(config: PolicyDrivenPRConfigOptions, expected: bool) -> None:
    """Test when a stored configuration counts as enabled."""
    assert is_config_enabled(config) is expected


def test_partition_configs_drops_disabled_repo_entries() -> None:
    """Test that the owner-wide entry is kept apart and disabled repository entries are dropped."""
    configs = [
        stored_config("octo/api"),
        PolicyDrivenPRInternal(full_name="octo/web"),
        PolicyDrivenPRInternal(full_name="octo/[all]"),
        stored_config("octo/cli"),
    ]

    partitioned = partition_configs("octo", configs)

    assert partitioned.org_level is not None
    assert partitioned.org_level.full_name == "octo/[all]"
    assert list(partitioned.repo_level) == ["api", "cli"]


def test_options_from_config_toggles_and_lossy_replacements() -> None:
    """Test rebuilding options; replacement targets are not recoverable."""
    config = stored_config(
        "octo/api",
        control_checks_config={
            "ActionsShouldBePinned": {"trigger_github_issue": True, "trigger_github_pr": True},
            "SecureDockerFile": {"trigger_github_issue": False, "trigger_github_pr": False},
        },
        control_settings={"actions_to_replace": {"tj-actions/changed-files": "step-security/changed-files"}},
    )

    options = options_from_config(config)

    assert options.create_pr is True
    assert options.create_issue is True
    assert options.pin_actions_to_sha is True
    assert options.secure_docker_file is False
    assert options.actions_to_replace_with_step_security_actions == ["tj-actions/changed-files"]


@pytest.mark.parametrize(
    "trigger_pr,expected_create_issue",
    [
        pytest.param(True, False, id="pull requests"),
        pytest.param(False, True, id="issues"),
    ],
)
def test_options_from_config_without_controls(trigger_pr: bool, expected_create_issue: bool) -> None:
    """Test that issues are assumed when no control is configured and PRs are not requested."""
    config = PolicyDrivenPRConfigOptions(trigger_pr_instead_of_issue=trigger_pr, trigger_github_alert=True)

    assert options_from_config(config).create_issue is expected_create_issue


def test_policy_from_configs_org_level_wins_over_stale_repo_entries() -> None:
    """Test that an enabled owner-wide configuration hides leftover repository entries."""
    configs = [
        stored_config("octo/api", control_checks_config={"SecureDockerFile": {"trigger_github_pr": True}}),
        stored_config("octo/[all]", use_repo_level_config=False, use_org_level_config=True),
    ]

    policy = policy_from_configs("octo", configs)

    assert policy.selection == OrgLevel()
    assert policy.selected_repos == ["*"]
    assert policy.auto_remediation_options.pin_actions_to_sha is True
    assert policy.auto_remediation_options.secure_docker_file is False


def test_policy_from_configs_disabled_org_entry_falls_back_to_repos() -> None:
    """Test that a disabled owner-wide entry does not hide repository entries."""
    configs = [PolicyDrivenPRInternal(full_name="octo/[all]"), stored_config("octo/api"), stored_config("octo/web")]

    policy = policy_from_configs("octo", configs)

    assert policy.selection == RepoLevel(repos=["api", "web"])
    assert policy.auto_remediation_options.create_pr is True
    assert policy.auto_remediation_options.pin_actions_to_sha is True


def test_policy_from_configs_nothing_enabled() -> None:
    """Test that an owner without enabled configurations has an empty policy."""
    policy = policy_from_configs("octo", [PolicyDrivenPRInternal(full_name="octo/api"), PolicyDrivenPRInternal(full_name="octo/[all]")])

    assert policy == PolicyDrivenPRPolicy(owner="octo", selection=RepoLevel(repos=[]))
    assert policy.selected_repos == []
    assert policy.use_repo_level_config is True
    assert policy.use_org_level_config is False


def test_policy_from_configs_empty_listing() -> None:
    """Test that an empty listing is an empty policy."""
    assert policy_from_configs("octo", []).selected_repos == []


def test_policy_from_configs_logs_diverging_repos(caplog: pytest.LogCaptureFixture) -> None:
    """Test that repository entries differing from the first one are logged and the first one is used."""
    configs = [
        stored_config("octo/api"),
        stored_config("octo/web", trigger_github_alert=True),
        stored_config("octo/cli"),
    ]

    policy = policy_from_configs("octo", configs)

    assert policy.selected_repos == ["api", "web", "cli"]
    assert policy.auto_remediation_options.create_github_advanced_security_alert is False
    assert "out of sync" in caplog.text
    assert "web" in caplog.text


def test_policy_from_configs_in_sync_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    """Test that identical repository entries are not reported."""
    policy_from_configs("octo", [stored_config("octo/api"), stored_config("octo/web")])

    assert "out of sync" not in caplog.text


def test_policy_document_form() -> None:
    """Test the external document form of a policy."""
    policy = PolicyDrivenPRPolicy.model_validate(
        {"owner": "octo", "selected_repos": ["*"], "auto_remediation_options": {"create_issue": True, "secure_docker_file": True}}
    )

    document = policy.to_document()

    assert document["owner"] == "octo"
    assert document["selected_repos"] == ["*"]
    assert document["auto_remediation_options"]["create_issue"] is True
    assert document["auto_remediation_options"]["secure_docker_file"] is True
