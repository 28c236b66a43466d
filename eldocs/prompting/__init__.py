"""Prompt construction for delegated rendering."""

from .builder import PromptBuilder, format_method

__all__ = ["PromptBuilder", "format_method"]
