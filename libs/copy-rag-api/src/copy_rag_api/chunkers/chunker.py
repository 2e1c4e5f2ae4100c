"""Module for the Chunker base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Split a document's text into ordered segments that are embedded independently."""

    @abstractmethod
    def chunk(self, content: str, chunk_size: int | None = None, overlap: int | None = None) -> list[str]:
        """
        Split ``content`` into chunks.

        Parameters
        ----------
        content : str
            Raw document text.
        chunk_size : int, optional
            Soft size bound in characters; implementation default when omitted.
        overlap : int, optional
            Approximate overlap in characters; implementation default when omitted.

        Returns
        -------
        list[str]
            Chunks in document order. Empty input yields an empty list.
        """
