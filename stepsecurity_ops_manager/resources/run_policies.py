"""Client for workflow run policies."""

import structlog

from stepsecurity_ops_manager.schemas.run_policies import RunPolicy, RunPolicyRequest
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class RunPoliciesClient(ResourceClient):
    """Lists, creates, reads, updates and deletes run policies."""

    def _uri(self, owner: str, *segments: str) -> str:
        return self.github_uri(owner, "actions", "run-policies", *segments)

    @log_api_errors("list run policies")
    async def list_run_policies(self, owner: str) -> list[RunPolicy]:
        """List every run policy of an owner."""
        body = await self.transport.get(self._uri(owner))
        return self.decode(list[RunPolicy] | None, body, "run policies response") or []

    @log_api_errors("create run policy")
    async def create_run_policy(self, owner: str, request: RunPolicyRequest) -> RunPolicy:
        """Create a run policy and return it as stored by the API."""
        logger.info("Creating run policy", owner=owner, name=request.name)
        body = await self.transport.post(self._uri(owner), request.to_wire())
        return self.decode(RunPolicy, body, "created run policy response")

    @log_api_errors("get run policy")
    async def get_run_policy(self, owner: str, policy_id: str) -> RunPolicy:
        """Get a run policy by ID."""
        body = await self.transport.get(self._uri(owner, policy_id))
        return self.decode(RunPolicy, body, "run policy response")

    @log_api_errors("update run policy")
    async def update_run_policy(self, owner: str, policy_id: str, request: RunPolicyRequest) -> RunPolicy:
        """Replace a run policy and return it as stored by the API."""
        logger.info("Updating run policy", owner=owner, policy_id=policy_id, name=request.name)
        body = await self.transport.put(self._uri(owner, policy_id), request.to_wire())
        return self.decode(RunPolicy, body, "updated run policy response")

    @log_api_errors("delete run policy")
    async def delete_run_policy(self, owner: str, policy_id: str) -> None:
        """Delete a run policy by ID."""
        logger.info("Deleting run policy", owner=owner, policy_id=policy_id)
        await self.transport.delete(self._uri(owner, policy_id))
