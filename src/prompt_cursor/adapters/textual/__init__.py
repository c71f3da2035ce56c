"""Textual integration for prompt_cursor."""

from .controller import (
    TEXTUAL_ACTIONS,
    TextualPromptAdapter,
    TextualUIHooks,
    validate_mask,
)

__all__ = [
    "TEXTUAL_ACTIONS",
    "TextualPromptAdapter",
    "TextualUIHooks",
    "validate_mask",
]
