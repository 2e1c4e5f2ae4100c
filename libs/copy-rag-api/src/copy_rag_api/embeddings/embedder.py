"""Module for the Embedder base class."""

from abc import ABC, abstractmethod

from langchain_core.embeddings import Embeddings

from copy_core_lib.impl.data_types.embedding import Embedding


class Embedder(Embeddings, ABC):
    """Map text to fixed-length vectors; compatible with langchain ``Embeddings`` consumers."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector this embedder returns."""

    @abstractmethod
    def embed_query(self, text: str) -> Embedding:
        """Embed a single text."""

    def embed_documents(self, texts: list[str]) -> list[Embedding]:
        """Embed several texts, preserving order."""
        return [self.embed_query(text) for text in texts]
