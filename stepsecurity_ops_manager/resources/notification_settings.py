"""Client for the GitHub Actions run notification settings of an owner."""

import structlog

from stepsecurity_ops_manager.schemas.notification_settings import GitHubNotificationSettingsRequest, NotificationSettings
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class NotificationSettingsClient(ResourceClient):
    """Reads and writes notification settings.

    The endpoint has no DELETE verb; deleting overwrites the settings with
    blank destinations and disabled notifications.
    """

    def _uri(self, owner: str) -> str:
        return self.github_uri(owner, "actions", "runs", "notification-settings")

    async def _write(self, request: GitHubNotificationSettingsRequest) -> None:
        logger.info("Writing notification settings", owner=request.owner)
        await self.transport.post(self._uri(request.owner), request.to_wire())

    @log_api_errors("create notification settings")
    async def create_notification_settings(self, request: GitHubNotificationSettingsRequest) -> None:
        """Write the notification settings of an owner."""
        await self._write(request)

    @log_api_errors("get notification settings")
    async def get_notification_settings(self, owner: str) -> NotificationSettings:
        """Get the notification settings of an owner."""
        body = await self.transport.get(self._uri(owner))
        return self.decode(NotificationSettings, body, "notification settings")

    @log_api_errors("update notification settings")
    async def update_notification_settings(self, request: GitHubNotificationSettingsRequest) -> None:
        """Update the notification settings of an owner; the endpoint is idempotent on POST."""
        await self._write(request)

    @log_api_errors("delete notification settings")
    async def delete_notification_settings(self, owner: str) -> None:
        """Clear every destination and disable every notification of an owner."""
        blanked = NotificationSettings.blanked()
        await self._write(GitHubNotificationSettingsRequest(owner=owner, **blanked.model_dump()))
