"""Hashed token embedder implementation."""
