"""Clients for the individual StepSecurity API resources."""
