"""Default service implementations."""
