"""LLM generation chains."""
