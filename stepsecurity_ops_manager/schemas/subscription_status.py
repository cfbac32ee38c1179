"""Pydantic schemas for the StepSecurity subscription of a repository."""

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel


class AppFeatureFlags(WireModel):
    """Pydantic model for feature flags enabled on the subscription."""

    is_policy_driven_pr_v2_enabled: bool = False


class SubscriptionStatus(WireModel):
    """Pydantic model for a subscription status."""

    tier: str = ""
    status: str = ""
    app_feature_flags: AppFeatureFlags = Field(default_factory=AppFeatureFlags)
