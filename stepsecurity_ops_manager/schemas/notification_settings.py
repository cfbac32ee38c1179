"""Pydantic schemas for GitHub Actions run notification settings."""

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel
from stepsecurity_ops_manager.utils.constants import BLANK_SETTING_VALUE, DISABLED_FLAG_VALUE


class NotificationSettings(WireModel):
    """Pydantic model for the notification settings of an owner.

    Notification flags are strings ("true"/"false") on the wire.
    """

    slack_webhook_url: str = Field(default="", alias="slackWebhookURL")
    teams_webhook_url: str = Field(default="", alias="teamsWebhookURL")
    email: str = ""
    notify_when_domain_blocked: str = Field(default="", alias="notifyWhenDomainBlocked")
    notify_on_file_overwrite: str = Field(default="", alias="notifyOnFileOverwrite")
    notify_when_endpoint_discovered: str = Field(default="", alias="notifyWhenEndpointDiscovered")
    notify_for_https_detections: str = Field(default="", alias="notifyForHttpsDetections")
    notify_for_secrets_detection: str = Field(default="", alias="notifyForSecretsDetection")
    notify_for_artifact_secrets_detection: str = Field(default="", alias="notifyForArtifactSecretsDetection")
    notify_for_imposter_commits_detection: str = Field(default="", alias="notifyForImposterCommitsDetection")
    notify_for_suspicious_network_call: str = Field(default="", alias="notifyForSuspiciousNetworkCall")
    notify_for_suspicious_process_events: str = Field(default="", alias="notifyForSuspiciousProcessEvents")
    notify_for_harden_runner_config_change: str = Field(default="", alias="notifyForHardenRunnerConfigChanged")
    notify_for_non_compliant_artifacts: str = Field(default="", alias="notifyForNonCompliantArtifacts")
    notify_for_blocked_run_policy: str = Field(default="", alias="notifyForBlockedRunPolicy")

    @classmethod
    def blanked(cls) -> "NotificationSettings":
        """Settings that clear every destination and disable every notification."""
        destinations = {"slack_webhook_url", "teams_webhook_url", "email"}
        return cls.model_validate(
            {name: BLANK_SETTING_VALUE if name in destinations else DISABLED_FLAG_VALUE for name in cls.model_fields},
        )


class GitHubNotificationSettingsRequest(NotificationSettings):
    """Pydantic model for the notification settings written for an owner."""

    owner: str
