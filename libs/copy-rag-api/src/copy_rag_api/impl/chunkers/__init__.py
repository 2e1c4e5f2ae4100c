"""Sentence based chunker implementation."""
