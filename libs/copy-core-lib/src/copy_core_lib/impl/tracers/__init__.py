"""Concrete tracer implementations."""
