"""Pydantic schemas for Harden-Runner policies kept in the policy store."""

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel


class RepoResource(WireModel):
    """Pydantic model for a repository a policy is attached to."""

    omit_empty = frozenset({"workflows"})

    name: str
    apply_to_repo: bool = False
    workflows: list[str] = Field(default_factory=list)


class OrgResource(WireModel):
    """Pydantic model for an organization a policy is attached to."""

    omit_empty = frozenset({"repos"})

    name: str
    apply_to_org: bool = False
    repos: list[RepoResource] = Field(default_factory=list)


class PolicyAttachments(WireModel):
    """Pydantic model for the resources a policy is attached to."""

    omit_empty = frozenset({"org", "clusters"})

    org: OrgResource | None = None
    clusters: list[str] = Field(default_factory=list)


class GitHubPolicyAttachRequest(PolicyAttachments):
    """Pydantic model for a request attaching a policy to resources."""


class GitHubPolicyStorePolicy(WireModel):
    """Pydantic model for a policy store policy."""

    omit_empty = frozenset({"attachments"})

    owner: str
    policy_name: str = Field(alias="policyName")
    allowed_endpoints: list[str] = Field(default_factory=list)
    egress_policy: str = ""
    disable_telemetry: bool = False
    disable_sudo: bool = False
    disable_file_monitoring: bool = False
    attachments: PolicyAttachments | None = None
