"""Tracing wrappers for runnables."""
