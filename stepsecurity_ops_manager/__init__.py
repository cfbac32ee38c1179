"""Client library and CLI for managing StepSecurity GitHub Actions security policies."""

from stepsecurity_ops_manager.stepsecurity.adapter import StepSecurityClient

__all__ = ["StepSecurityClient"]
