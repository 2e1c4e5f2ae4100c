"""Embedding value type and its persistence-boundary parser."""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import TypeAdapter, ValidationError

from copy_core_lib.errors import InvalidEmbeddingError

Embedding = list[float]

_EMBEDDING_ADAPTER = TypeAdapter(Embedding)


def parse_embedding(raw: Any) -> Embedding:
    """
    Parse a persisted embedding into a list of floats.

    Parameters
    ----------
    raw : Any
        Either an already decoded sequence of numbers or its JSON text representation.

    Returns
    -------
    Embedding
        The validated vector.

    Raises
    ------
    InvalidEmbeddingError
        If the payload is missing, not valid JSON, not a flat numeric list or contains
        non-finite values.
    """
    if raw is None:
        raise InvalidEmbeddingError("Embedding is missing.")
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidEmbeddingError(f"Embedding is not valid JSON: {exc.msg}") from exc
    if isinstance(raw, (str, dict)):
        raise InvalidEmbeddingError(f"Embedding must be a list of numbers, got {type(raw).__name__}.")

    try:
        vector = _EMBEDDING_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise InvalidEmbeddingError(f"Embedding must be a list of numbers: {exc.error_count()} invalid values.") from exc

    if not all(math.isfinite(value) for value in vector):
        raise InvalidEmbeddingError("Embedding contains non-finite values.")
    return vector


def dump_embedding(vector: Embedding) -> str:
    """Serialize an embedding into its JSON text representation."""
    return json.dumps([float(value) for value in vector])
