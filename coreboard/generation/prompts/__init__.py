"""Prompt templates for word generation."""

from .category_prompt import build_category_messages
from .suggestion_prompt import build_suggestion_messages

__all__ = [
    "build_category_messages",
    "build_suggestion_messages",
]
