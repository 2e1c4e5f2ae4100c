"""Expose reusable data types."""

from .embedding import Embedding, dump_embedding, parse_embedding
from .pattern_metadata import PatternMetadata

__all__ = [
    "Embedding",
    "PatternMetadata",
    "dump_embedding",
    "parse_embedding",
]
