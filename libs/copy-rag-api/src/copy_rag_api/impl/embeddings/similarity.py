"""Vector similarity helpers."""

import math
from collections.abc import Sequence


def vector_norm(vector: Sequence[float]) -> float:
    """Return the Euclidean norm of ``vector``."""
    return math.sqrt(sum(value * value for value in vector))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Cosine of the angle between ``a`` and ``b``.

    Returns 0.0 when either vector has zero norm. Vectors of different length raise
    ``ValueError``.
    """
    if len(a) != len(b):
        raise ValueError(f"Cannot compare vectors of length {len(a)} and {len(b)}.")
    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for left, right in zip(a, b):
        dot += left * right
        norm_a += left * left
        norm_b += right * right
    magnitude = math.sqrt(norm_a) * math.sqrt(norm_b)
    if magnitude == 0:
        return 0.0
    return dot / magnitude
