"""Vector cache interface."""

from copy_rag_api.vector_index.vector_cache import VectorCache

__all__ = ["VectorCache"]
