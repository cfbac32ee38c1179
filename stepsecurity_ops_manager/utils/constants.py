"""Shared constants used across the application."""

# This file is intended to hold shared constants.

# StepSecurity API Constants
# --------------------------

DEFAULT_API_BASE_URL = "https://agent.api.stepsecurity.io"
"""Default base URL of the StepSecurity API."""

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})
"""HTTP status codes the API uses to report success."""

# Repository Selection Constants
# ------------------------------

ORG_LEVEL_SELECTOR = "*"
"""Repository selector meaning every current and future repository under an owner."""

ALL_REPOS_TARGET = "[all]"
"""Path segment the API reserves for the owner-wide configuration."""

# Soft Delete Constants
# ---------------------

BLANK_SETTING_VALUE = " "
"""Value written to free-form notification settings to clear them."""

DISABLED_FLAG_VALUE = "false"
"""Value written to string-typed notification flags to disable them."""
