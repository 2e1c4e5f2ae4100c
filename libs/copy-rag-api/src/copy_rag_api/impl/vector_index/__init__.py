"""Two-tier vector index implementation."""
