"""Utility modules for shared functionality."""

from .constants import (
    ALL_REPOS_TARGET,
    DEFAULT_API_BASE_URL,
    ORG_LEVEL_SELECTOR,
    SUCCESS_STATUS_CODES,
)
from .github import org_level_full_name, removed_repos, repo_target

__all__ = [
    "ALL_REPOS_TARGET",
    "DEFAULT_API_BASE_URL",
    "ORG_LEVEL_SELECTOR",
    "SUCCESS_STATUS_CODES",
    "org_level_full_name",
    "removed_repos",
    "repo_target",
]
