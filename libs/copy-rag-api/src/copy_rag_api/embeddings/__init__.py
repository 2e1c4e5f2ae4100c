"""Embedder interface."""
