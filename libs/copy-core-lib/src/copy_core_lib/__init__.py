"""Shared building blocks for the copy assist libraries."""
