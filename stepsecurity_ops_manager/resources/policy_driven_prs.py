"""Client for policy-driven pull request configurations."""

import structlog

from stepsecurity_ops_manager.schemas.policy_driven_prs import PolicyDrivenPRConfigOptions, PolicyDrivenPRInternal, PolicyDrivenPRPolicy
from stepsecurity_ops_manager.stepsecurity.exceptions import EmptyPolicyError
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors
from stepsecurity_ops_manager.translation.policy_driven_prs import build_config_options, policy_from_configs
from stepsecurity_ops_manager.utils.constants import ALL_REPOS_TARGET
from stepsecurity_ops_manager.utils.github import repo_target

logger = structlog.get_logger(__name__)


class PolicyDrivenPRsClient(ResourceClient):
    """Creates, reads, updates and deletes the policy-driven PR policy of an owner.

    Writes are not transactional. Repositories are written one at a time in
    selection order and the first failure stops the loop; repositories written
    before the failure keep their new configuration. Writing each repository
    is idempotent, so re-running the whole operation is the way to recover.
    """

    def _uri(self, owner: str, target: str) -> str:
        return self.github_uri(owner, target, "policy-driven-pr", "configs")

    async def _write_config(self, owner: str, target: str, config: PolicyDrivenPRConfigOptions) -> None:
        logger.debug("Writing policy-driven PR configuration", owner=owner, target=target)
        await self.transport.post(self._uri(owner, target), config.to_wire())

    async def _write_policy(self, policy: PolicyDrivenPRPolicy) -> None:
        config = build_config_options(policy)
        logger.info(
            "Writing policy-driven PR policy",
            owner=policy.owner,
            selected_repos=policy.selected_repos,
            controls=list(config.control_checks_config),
        )
        if policy.use_org_level_config:
            await self._write_config(policy.owner, ALL_REPOS_TARGET, config)
            return
        for repo in policy.selected_repos:
            await self._write_config(policy.owner, repo, config)

    async def _delete_configs(self, owner: str, repos: list[str]) -> None:
        for repo in repos:
            target = repo_target(repo)
            logger.info("Deleting policy-driven PR configuration", owner=owner, target=target)
            await self.transport.delete(self._uri(owner, target))

    @log_api_errors("create policy-driven PR policy")
    async def create_policy(self, policy: PolicyDrivenPRPolicy | None) -> None:
        """Write the policy to the owner-wide target or to every selected repository.

        Raises:
            EmptyPolicyError: If no policy is provided.
        """
        if policy is None:
            raise EmptyPolicyError("empty policy provided")
        await self._write_policy(policy)

    @log_api_errors("get policy-driven PR policy")
    async def get_policy(self, owner: str) -> PolicyDrivenPRPolicy:
        """Read every configuration of the owner and fold them into one policy."""
        body = await self.transport.get(self._uri(owner, ALL_REPOS_TARGET))
        configs = self.decode(list[PolicyDrivenPRInternal] | None, body, "policy-driven PR configs") or []
        return policy_from_configs(owner, configs)

    @log_api_errors("update policy-driven PR policy")
    async def update_policy(self, policy: PolicyDrivenPRPolicy | None, removed_repos: list[str]) -> None:
        """Delete the configurations of removed repositories, then write the policy.

        A failed delete stops the update before anything is written.

        Raises:
            EmptyPolicyError: If no policy is provided.
        """
        if policy is None:
            raise EmptyPolicyError("empty policy provided")
        await self._delete_configs(policy.owner, removed_repos)
        await self._write_policy(policy)

    @log_api_errors("delete policy-driven PR policy")
    async def delete_policy(self, owner: str, repos: list[str]) -> None:
        """Delete the configuration of each repository; '*' deletes the owner-wide one."""
        await self._delete_configs(owner, repos)
