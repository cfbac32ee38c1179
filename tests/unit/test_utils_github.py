"""Contains unit tests for the utils.github module."""

import pytest

from stepsecurity_ops_manager.utils.github import org_level_full_name, removed_repos, repo_target


def test_org_level_full_name() -> None:
    """Test the full name of the owner-wide configuration."""
    assert org_level_full_name("octo") == "octo/[all]"


@pytest.mark.parametrize(
    "repo,expected",
    [
        pytest.param("*", "[all]", id="org-level selector"),
        pytest.param("api", "api", id="repository"),
        pytest.param("[all]", "[all]", id="already the owner-wide target"),
    ],
)
def test_repo_target(repo: str, expected: str) -> None:
    """Test that only the org-level selector is remapped."""
    assert repo_target(repo) == expected


def test_removed_repos_keeps_previous_order() -> None:
    """Test that repositories dropped from the selection are returned in their previous order."""
    assert removed_repos(["c", "a", "b", "d"], ["b", "e"]) == ["c", "a", "d"]


def test_removed_repos_when_switching_to_org_level() -> None:
    """Test that every repository is removed when the selection becomes org-level."""
    assert removed_repos(["a", "b"], ["*"]) == ["a", "b"]


def test_removed_repos_nothing_removed() -> None:
    """Test that an unchanged selection removes nothing."""
    assert removed_repos(["a"], ["a", "b"]) == []
