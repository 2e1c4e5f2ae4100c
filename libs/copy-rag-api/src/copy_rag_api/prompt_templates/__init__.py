"""Prompt templates."""

from copy_rag_api.prompt_templates.copy_generation_prompt import COPY_GENERATION_PROMPT, SYSTEM_PROMPT

__all__ = ["COPY_GENERATION_PROMPT", "SYSTEM_PROMPT"]
