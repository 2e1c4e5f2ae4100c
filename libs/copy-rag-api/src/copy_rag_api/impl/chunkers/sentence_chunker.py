"""Greedy sentence packing chunker."""

import re

from copy_rag_api.chunkers.chunker import Chunker
from copy_rag_api.impl.settings.chunker_settings import ChunkerSettings

_SENTENCE_DELIMITERS = re.compile(r"[.!?]+")

# Characters per word used to turn the character overlap into a word count.
_CHARS_PER_WORD = 5


class SentenceChunker(Chunker):
    """
    Pack whole sentences into chunks of roughly ``chunk_size`` characters.

    When the next sentence would push a non-empty buffer past ``chunk_size`` the buffer is
    emitted and the next one is seeded with the last ``overlap // 5`` words of the emitted
    chunk. The bound is soft: a sentence longer than ``chunk_size`` is emitted whole.
    Sentence delimiters (``.``, ``!``, ``?``) are not kept in the output.
    """

    def __init__(self, settings: ChunkerSettings):
        self._settings = settings

    def chunk(self, content: str, chunk_size: int | None = None, overlap: int | None = None) -> list[str]:
        chunk_size = self._settings.chunk_size if chunk_size is None else chunk_size
        overlap = self._settings.overlap if overlap is None else overlap
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive.")
        if overlap < 0:
            raise ValueError("overlap must not be negative.")

        chunks: list[str] = []
        buffer = ""
        for sentence in self._split_sentences(content):
            if buffer and len(f"{buffer} {sentence}") > chunk_size:
                chunks.append(buffer)
                tail = self._overlap_tail(buffer, overlap)
                buffer = f"{tail} {sentence}" if tail else sentence
            else:
                buffer = f"{buffer} {sentence}" if buffer else sentence

        if buffer.strip():
            chunks.append(buffer.strip())
        return chunks

    @staticmethod
    def _split_sentences(content: str) -> list[str]:
        if not content:
            return []
        return [sentence.strip() for sentence in _SENTENCE_DELIMITERS.split(content) if sentence.strip()]

    @staticmethod
    def _overlap_tail(chunk: str, overlap: int) -> str:
        word_count = overlap // _CHARS_PER_WORD
        if word_count == 0:
            return ""
        return " ".join(chunk.split(" ")[-word_count:])
