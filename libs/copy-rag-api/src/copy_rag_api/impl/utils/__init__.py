"""Helpers for the copy rag api."""
