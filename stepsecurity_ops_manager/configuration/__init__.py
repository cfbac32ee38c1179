"""Configuration of the StepSecurity client and CLI."""
