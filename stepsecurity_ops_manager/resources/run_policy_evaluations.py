"""Client for run policy evaluations."""

from urllib.parse import urlencode

from stepsecurity_ops_manager.schemas.run_policy_evaluations import RunPolicyEvaluation
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors


class RunPolicyEvaluationsClient(ResourceClient):
    """Lists run policy evaluations of an owner or of a single repository."""

    def _with_status(self, uri: str, status: str | None) -> str:
        if status:
            return f"{uri}?{urlencode({'status': status})}"
        return uri

    @log_api_errors("list organization run policy evaluations")
    async def list_org_run_policy_evaluations(self, owner: str, status: str | None = None) -> list[RunPolicyEvaluation]:
        """List run policy evaluations across an owner, optionally filtered by status."""
        uri = self._with_status(self.github_uri(owner, "actions", "run-policy-evaluations"), status)
        body = await self.transport.get(uri)
        return self.decode(list[RunPolicyEvaluation] | None, body, "organization run policy evaluations response") or []

    @log_api_errors("list repository run policy evaluations")
    async def list_repo_run_policy_evaluations(self, owner: str, repo: str, status: str | None = None) -> list[RunPolicyEvaluation]:
        """List run policy evaluations of a repository, optionally filtered by status."""
        uri = self._with_status(self.github_uri(owner, repo, "actions", "run-policy-evaluations"), status)
        body = await self.transport.get(uri)
        return self.decode(list[RunPolicyEvaluation] | None, body, "repository run policy evaluations response") or []
