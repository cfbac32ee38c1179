"""Client for policies kept in the Harden-Runner policy store."""

import structlog

from stepsecurity_ops_manager.schemas.policy_store import GitHubPolicyAttachRequest, GitHubPolicyStorePolicy
from stepsecurity_ops_manager.stepsecurity.exceptions import EmptyPolicyError
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class PolicyStoreClient(ResourceClient):
    """Creates, reads, deletes, attaches and detaches policy store policies."""

    def _uri(self, owner: str, policy_name: str, *segments: str) -> str:
        return self.github_uri(owner, "actions", "policies", policy_name, *segments)

    @log_api_errors("create policy store policy")
    async def create_policy(self, policy: GitHubPolicyStorePolicy | None) -> None:
        """Create a policy; attachments are managed separately and never sent here.

        Raises:
            EmptyPolicyError: If no policy is provided.
        """
        if policy is None:
            raise EmptyPolicyError("empty policy provided")
        logger.info("Creating policy store policy", owner=policy.owner, policy_name=policy.policy_name)
        policy_for_creation = policy.model_copy(update={"attachments": None})
        await self.transport.post(self._uri(policy.owner, policy.policy_name), policy_for_creation.to_wire())

    @log_api_errors("get policy store policy")
    async def get_policy(self, owner: str, policy_name: str) -> GitHubPolicyStorePolicy:
        """Get a policy by name."""
        body = await self.transport.get(self._uri(owner, policy_name))
        return self.decode(GitHubPolicyStorePolicy, body, "policy store policy")

    @log_api_errors("delete policy store policy")
    async def delete_policy(self, owner: str, policy_name: str) -> None:
        """Delete a policy by name."""
        logger.info("Deleting policy store policy", owner=owner, policy_name=policy_name)
        await self.transport.delete(self._uri(owner, policy_name))

    @log_api_errors("attach policy store policy")
    async def attach_policy(self, owner: str, policy_name: str, request: GitHubPolicyAttachRequest | None) -> None:
        """Attach a policy to organizations, repositories, workflows or clusters.

        Raises:
            EmptyPolicyError: If no attach request is provided.
        """
        if request is None:
            raise EmptyPolicyError("empty attach request provided")
        logger.info("Attaching policy store policy", owner=owner, policy_name=policy_name)
        await self.transport.post(self._uri(owner, policy_name, "attach"), request.to_wire())

    @log_api_errors("detach policy store policy")
    async def detach_policy(self, owner: str, policy_name: str) -> None:
        """Detach a policy from everything it is attached to."""
        logger.info("Detaching policy store policy", owner=owner, policy_name=policy_name)
        await self.transport.delete(self._uri(owner, policy_name, "attach"))
