"""Contains unit tests for the utils.yaml module."""

from pathlib import Path

import pytest

from stepsecurity_ops_manager.schemas.policy_driven_prs import OrgLevel, RepoLevel
from stepsecurity_ops_manager.utils.yaml import load_policy_driven_pr_policy

POLICY_YAML = """\
owner: octo
selected_repos:
  - api
  - web
auto_remediation_options:
  create_pr: true
  pin_actions_to_sha: true
  actions_to_exempt_while_pinning:
    - actions/checkout
  package_ecosystem:
    - package: pip
      interval: weekly
"""


def test_load_policy_driven_pr_policy(tmp_path: Path) -> None:
    """Test loading a repository-level policy from YAML."""
    path = tmp_path / "policy.yaml"
    path.write_text(POLICY_YAML, encoding="utf-8")

    policy = load_policy_driven_pr_policy(path)

    assert policy.owner == "octo"
    assert policy.selection == RepoLevel(repos=["api", "web"])
    options = policy.auto_remediation_options
    assert options.create_pr is True
    assert options.create_issue is False
    assert options.pin_actions_to_sha is True
    assert options.actions_to_exempt_while_pinning == ["actions/checkout"]
    assert options.package_ecosystem[0].package == "pip"
    assert options.package_ecosystem[0].interval == "weekly"


def test_load_policy_driven_pr_policy_org_level(tmp_path: Path) -> None:
    """Test that the '*' selector loads as an org-level selection."""
    path = tmp_path / "policy.yaml"
    path.write_text("owner: octo\nselected_repos: ['*']\nauto_remediation_options:\n  create_issue: true\n", encoding="utf-8")

    policy = load_policy_driven_pr_policy(path)

    assert policy.selection == OrgLevel()
    assert policy.selected_repos == ["*"]


def test_load_policy_driven_pr_policy_missing_file(tmp_path: Path) -> None:
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Policy file not found"):
        load_policy_driven_pr_policy(tmp_path / "missing.yaml")


def test_load_policy_driven_pr_policy_empty_file(tmp_path: Path) -> None:
    """Test that an empty file raises ValueError."""
    path = tmp_path / "policy.yaml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError, match="Policy file is empty"):
        load_policy_driven_pr_policy(path)


def test_load_policy_driven_pr_policy_invalid_content(tmp_path: Path) -> None:
    """Test that a policy without an owner raises ValueError."""
    path = tmp_path / "policy.yaml"
    path.write_text("selected_repos: [api]\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Error processing policy file 'policy.yaml'"):
        load_policy_driven_pr_policy(path)
