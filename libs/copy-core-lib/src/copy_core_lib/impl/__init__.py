"""Default implementations shared across copy assist services."""
