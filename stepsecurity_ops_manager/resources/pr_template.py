"""Client for the pull request template of an owner."""

import structlog

from stepsecurity_ops_manager.schemas.pr_template import GitHubPRTemplate
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class PRTemplateClient(ResourceClient):
    """Reads and writes the pull request template."""

    @log_api_errors("get PR template")
    async def get_pr_template(self, owner: str) -> GitHubPRTemplate:
        """Get the pull request template of an owner."""
        body = await self.transport.get(self.github_uri(owner, "pr-template"))
        return self.decode(GitHubPRTemplate, body, "PR template")

    @log_api_errors("update PR template")
    async def update_pr_template(self, owner: str, template: GitHubPRTemplate) -> None:
        """Write the pull request template of an owner."""
        logger.info("Updating PR template", owner=owner)
        await self.transport.post(self.github_uri(owner, "pr-template"), template.to_wire())
