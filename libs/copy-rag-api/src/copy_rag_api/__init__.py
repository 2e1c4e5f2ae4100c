"""Retrieval core of the copy assist content-design service."""
