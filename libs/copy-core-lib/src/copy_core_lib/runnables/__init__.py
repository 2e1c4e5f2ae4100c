"""Runnable base classes."""
