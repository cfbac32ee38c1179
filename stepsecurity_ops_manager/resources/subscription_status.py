"""Client for the subscription status of a repository."""

from stepsecurity_ops_manager.schemas.subscription_status import SubscriptionStatus
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors


class SubscriptionStatusClient(ResourceClient):
    """Reads the subscription status."""

    @log_api_errors("get subscription status")
    async def get_subscription_status(self, owner: str, repo: str) -> SubscriptionStatus:
        """Get the subscription status of a repository."""
        body = await self.transport.get(self.github_uri(owner, repo, "actions", "subscription-status"))
        return self.decode(SubscriptionStatus, body, "subscription status")
