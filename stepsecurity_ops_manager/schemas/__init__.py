"""Pydantic schemas for StepSecurity API payloads."""
