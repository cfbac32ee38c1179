"""StepSecurity API transport and client aggregate."""
