"""Aggregate client exposing every StepSecurity API resource."""

from types import TracebackType
from typing import Self

import httpx
import structlog

from stepsecurity_ops_manager.configuration.models import ClientConfig
from stepsecurity_ops_manager.configuration.reconcile import validate_client_configuration
from stepsecurity_ops_manager.resources.notification_settings import NotificationSettingsClient
from stepsecurity_ops_manager.resources.policy_driven_prs import PolicyDrivenPRsClient
from stepsecurity_ops_manager.resources.policy_store import PolicyStoreClient
from stepsecurity_ops_manager.resources.pr_checks import PRChecksClient
from stepsecurity_ops_manager.resources.pr_template import PRTemplateClient
from stepsecurity_ops_manager.resources.run_policies import RunPoliciesClient
from stepsecurity_ops_manager.resources.run_policy_evaluations import RunPolicyEvaluationsClient
from stepsecurity_ops_manager.resources.subscription_status import SubscriptionStatusClient
from stepsecurity_ops_manager.resources.suppression_rules import SuppressionRulesClient
from stepsecurity_ops_manager.resources.users import UsersClient
from stepsecurity_ops_manager.utils.constants import DEFAULT_API_BASE_URL

from .client import StepSecurityTransport

logger = structlog.get_logger(__name__)


class StepSecurityClient:
    """Client for the StepSecurity API, one attribute per resource.

    All resource clients share a single transport. Used as an async context
    manager, the client closes the HTTP client it created on exit; an HTTP
    client passed in by the caller is left open.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None) -> None:
        """Initialize every resource client on a shared transport."""
        self.config = config
        self.transport = StepSecurityTransport(config, http_client)
        self.users = UsersClient(self.transport)
        self.notification_settings = NotificationSettingsClient(self.transport)
        self.policy_driven_prs = PolicyDrivenPRsClient(self.transport)
        self.pr_checks = PRChecksClient(self.transport)
        self.policy_store = PolicyStoreClient(self.transport)
        self.pr_template = PRTemplateClient(self.transport)
        self.run_policies = RunPoliciesClient(self.transport)
        self.run_policy_evaluations = RunPolicyEvaluationsClient(self.transport)
        self.suppression_rules = SuppressionRulesClient(self.transport)
        self.subscription_status = SubscriptionStatusClient(self.transport)

    @classmethod
    def create(
        cls,
        api_key: str | None,
        customer: str | None,
        base_url: str | None = DEFAULT_API_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        """Create a new client after validating its configuration.

        Raises:
            ClientConfigurationUndefinedError: If any setting is missing.
        """
        config = validate_client_configuration(base_url=base_url, api_key=api_key, customer=customer)
        logger.info("Creating client for StepSecurity API", base_url=config.base_url, customer=config.customer)
        return cls(config, http_client)

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        await self.transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
