"""Chunker interface."""
