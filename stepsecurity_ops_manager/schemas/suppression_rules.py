"""Pydantic schemas for detection suppression rules."""

from enum import Enum

from pydantic import Field

from stepsecurity_ops_manager.schemas.base import WireModel


class DetectionType(str, Enum):
    """Enum for the detections a suppression rule can match."""

    SOURCE_CODE_OVERWRITTEN = "Source-Code-Overwritten"
    ANOMALOUS_OUTBOUND_NETWORK_CALL = "New-Outbound-Network-Call"
    HTTPS_OUTBOUND_NETWORK_CALL = "HTTPS-Outbound-Network-Call"
    SECRET_IN_BUILD_LOG = "Secret-In-Build-Log"
    SECRET_IN_ARTIFACT = "Secret-In-Artifact"
    ACTION_USES_IMPOSTER_COMMIT = "Action-Uses-Imposter-Commit"
    PRIVILEGED_CONTAINER = "Privileged-Container"
    REVERSE_SHELL = "Reverse-Shell"
    SUSPICIOUS_NETWORK_CALL = "Suspicious-Network-Call"
    RUNNER_WORKER_MEMORY_READ = "Runner-Worker-Memory-Read"


class SeverityAction(WireModel):
    """Pydantic model for the action taken on a matched detection."""

    omit_empty = frozenset({"new_severity"})

    type: str = ""
    new_severity: str = ""


class SuppressionRule(WireModel):
    """Pydantic model for a customer-scoped suppression rule."""

    rule_id: str = ""
    id: str = ""
    name: str = ""
    description: str = ""
    customer: str = ""
    conditions: dict[str, str] = Field(default_factory=dict)
    created_by: str = ""
    created_on: str = ""
    updated_by: str = ""
    updated_on: str = ""
    severity_action: SeverityAction = Field(default_factory=SeverityAction)
