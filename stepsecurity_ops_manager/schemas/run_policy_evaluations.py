"""Pydantic schemas for run policy evaluations of workflow runs."""

from typing import Any

from pydantic import Field, field_validator

from stepsecurity_ops_manager.schemas.base import WireModel


class PolicyEvaluation(WireModel):
    """Pydantic model for the policy configuration a run was evaluated against."""

    owner: str = ""
    name: str = ""
    enable_action_policy: bool = False
    allowed_actions: dict[str, str] = Field(default_factory=dict)
    enable_runs_on_policy: bool = False
    disallowed_runner_labels: list[str] = Field(default_factory=list)
    enable_secrets_policy: bool = False
    enable_compromised_actions_policy: bool = False

    @field_validator("disallowed_runner_labels", mode="before")
    @classmethod
    def _labels_from_object(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return list(value)
        return value


class PolicyResult(WireModel):
    """Pydantic model for the outcome of one policy on one run."""

    policy: PolicyEvaluation = Field(default_factory=PolicyEvaluation)
    action_policy_status: str = ""
    actions_not_allowed: list[str] = Field(default_factory=list)
    runs_on_policy_status: str = ""
    runner_labels_not_allowed: list[str] = Field(default_factory=list)
    compromised_actions_policy_status: str = ""
    compromised_actions_detected: list[str] = Field(default_factory=list)
    secrets_policy_status: str = ""
    is_non_default_branch: bool | None = None
    workflow_contains_secrets: bool | None = None
    current_branch_hash: str = ""
    default_branch_hash: str = ""


class RunPolicyEvaluation(WireModel):
    """Pydantic model for the evaluation of a workflow run."""

    owner: str = ""
    repo_full_name: str = ""
    repo_workflow: str = ""
    head_branch: str = ""
    workflow_name: str = ""
    workflow_display_title: str = ""
    workflow_file_path: str = ""
    run_id: int = 0
    workflow_run_started_at: int = 0
    commit_message: str = ""
    committer: str = ""
    event: str = ""
    run_number: int = 0
    policy_results: list[PolicyResult] = Field(default_factory=list)
    status: str = ""
