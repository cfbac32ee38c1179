"""Client for customer-scoped detection suppression rules."""

import structlog

from stepsecurity_ops_manager.schemas.suppression_rules import SuppressionRule
from stepsecurity_ops_manager.stepsecurity.resource import ResourceClient, log_api_errors

logger = structlog.get_logger(__name__)


class SuppressionRulesClient(ResourceClient):
    """Creates, reads, updates and deletes suppression rules."""

    @log_api_errors("create suppression rule")
    async def create_suppression_rule(self, rule: SuppressionRule) -> SuppressionRule:
        """Create a suppression rule and return it as stored by the API."""
        logger.info("Creating suppression rule", customer=self.transport.customer, name=rule.name)
        body = await self.transport.post(self.customer_uri("detection-rules"), rule.to_wire())
        return self.decode(SuppressionRule, body, "suppression rule")

    @log_api_errors("read suppression rule")
    async def read_suppression_rule(self, rule_id: str) -> SuppressionRule:
        """Get a suppression rule by ID."""
        body = await self.transport.get(self.customer_uri("detection-rules", rule_id))
        return self.decode(SuppressionRule, body, "suppression rule")

    @log_api_errors("update suppression rule")
    async def update_suppression_rule(self, rule: SuppressionRule) -> None:
        """Replace a suppression rule, addressed by its rule ID."""
        uri = self.customer_uri("detection-rules", rule.rule_id)
        logger.info("Updating suppression rule", uri=uri)
        await self.transport.put(uri, rule.to_wire())

    @log_api_errors("delete suppression rule")
    async def delete_suppression_rule(self, rule_id: str) -> None:
        """Delete a suppression rule by ID."""
        logger.info("Deleting suppression rule", customer=self.transport.customer, rule_id=rule_id)
        await self.transport.delete(self.customer_uri("detection-rules", rule_id))
