"""Default implementations of the retrieval core seams."""
