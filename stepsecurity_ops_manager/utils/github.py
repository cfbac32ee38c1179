"""Contains utility functions for GitHub owner and repository names."""

from stepsecurity_ops_manager.utils.constants import ALL_REPOS_TARGET, ORG_LEVEL_SELECTOR


def org_level_full_name(owner: str) -> str:
    """Returns the full name the API uses for the owner-wide configuration."""
    return f"{owner}/{ALL_REPOS_TARGET}"


def repo_target(repo: str) -> str:
    """Maps a repository selector to the path segment used by the API.

    The org-level selector '*' is addressed through the reserved '[all]' target
    rather than as a repository literally named '*'.
    """
    if repo == ORG_LEVEL_SELECTOR:
        return ALL_REPOS_TARGET
    return repo


def removed_repos(previous: list[str], desired: list[str]) -> list[str]:
    """Returns repositories in the previous selection that are absent from the desired one."""
    return [repo for repo in previous if repo not in desired]
