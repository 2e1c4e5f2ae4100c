"""Bag-of-hashed-tokens embedder."""

import re

from copy_core_lib.impl.data_types.embedding import Embedding
from copy_rag_api.embeddings.embedder import Embedder
from copy_rag_api.impl.embeddings.similarity import vector_norm
from copy_rag_api.impl.settings.embedder_settings import EmbedderSettings

# Word characters are ASCII only, whitespace is any Unicode space.
_PUNCTUATION = re.compile(r"[^A-Za-z0-9_\s]")

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def token_hash(token: str) -> int:
    """
    Deterministic non-negative 32-bit string hash (``h = h * 31 + code point``).

    Python's built-in ``hash`` is salted per process, so it cannot be used for vectors
    that are persisted and compared across restarts.
    """
    value = 0
    for char in token:
        value = (value * 31 + ord(char)) & _INT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return abs(value)


class HashedTokenEmbedder(Embedder):
    """
    Deterministic, dependency-free stand-in for a learned embedding model.

    Text is lowercased, stripped of everything but ASCII letters, digits, underscores and
    whitespace, then split on whitespace; every token of at least ``min_token_length``
    characters increments slot ``token_hash(token) % dimension``.
    The vector is L2-normalized unless it is all zeros. Only lexical overlap is captured.
    """

    def __init__(self, settings: EmbedderSettings):
        self._settings = settings

    @property
    def dimension(self) -> int:
        return self._settings.dimension

    def tokenize(self, text: str) -> list[str]:
        """Return the tokens that contribute to the embedding of ``text``."""
        normalized = _PUNCTUATION.sub("", text.lower())
        return [token for token in normalized.split() if len(token) >= self._settings.min_token_length]

    def embed_query(self, text: str) -> Embedding:
        vector = [0.0] * self.dimension
        for token in self.tokenize(text):
            vector[token_hash(token) % self.dimension] += 1.0

        magnitude = vector_norm(vector)
        if magnitude > 0:
            vector = [value / magnitude for value in vector]
        return vector
