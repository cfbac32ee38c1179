"""Client for the pull request checks configuration of an owner."""

import structlog

from stepsecurity_ops_manager.schemas.pr_checks import CheckOptions, GitHubPRChecksConfig
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class PRChecksClient(ResourceClient):
    """Reads and writes the PR checks configuration.

    The endpoint has no DELETE verb; deleting disables every check and every
    repository and writes the configuration back.
    """

    def _uri(self, owner: str) -> str:
        return self.github_uri(owner, "checks", "config")

    async def _get(self, owner: str) -> GitHubPRChecksConfig:
        body = await self.transport.get(self._uri(owner))
        return self.decode(GitHubPRChecksConfig, body, "PR checks config")

    @log_api_errors("get PR checks config")
    async def get_pr_checks_config(self, owner: str) -> GitHubPRChecksConfig:
        """Get the PR checks configuration of an owner."""
        return await self._get(owner)

    @log_api_errors("update PR checks config")
    async def update_pr_checks_config(self, owner: str, request: GitHubPRChecksConfig) -> GitHubPRChecksConfig:
        """Write the PR checks configuration of an owner and return the payload sent.

        When any of the blanket flags for new repositories is set, every
        repository of the existing configuration that the request leaves out
        is added with the options those flags imply. Repositories present in
        the request are sent as given.
        """
        merged = request.model_copy(deep=True)
        if request.applies_to_all_new_repos:
            existing = await self._get(owner)
            seeded = [repo for repo in existing.repos if repo not in merged.repos]
            for repo in seeded:
                merged.repos[repo] = merged.blanket_check_options()
            logger.info("Seeding repositories from blanket PR check flags", owner=owner, repos=seeded)
        logger.info("Updating PR checks config", owner=owner)
        await self.transport.put(self._uri(owner), merged.to_wire())
        return merged

    @log_api_errors("delete PR checks config")
    async def delete_pr_checks_config(self, owner: str) -> None:
        """Disable every check, every repository and every blanket flag of an owner."""
        config = await self._get(owner)
        for check in config.checks.values():
            check.enabled = False
            check.settings = None
        for repo in config.repos:
            config.repos[repo] = CheckOptions()
        config.enable_baseline_check_for_all_new_repos = False
        config.enable_required_checks_for_all_new_repos = False
        config.enable_optional_checks_for_all_new_repos = False
        logger.info("Disabling PR checks config", owner=owner)
        await self.transport.put(self._uri(owner), config.to_wire())
