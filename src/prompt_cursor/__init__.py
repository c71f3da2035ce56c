"""Caret-tracking input buffer for interactive terminal prompts."""

from .cursor import (
    BLOCK_CURSOR,
    DEFAULT_CURSOR,
    PIPE_CURSOR,
    Cursor,
    ListenResult,
    Pointer,
)

__all__ = [
    "adapters",
    "cursor",
    "keymaps",
    "runtime",
    "Cursor",
    "ListenResult",
    "Pointer",
    "DEFAULT_CURSOR",
    "BLOCK_CURSOR",
    "PIPE_CURSOR",
]

__version__ = "0.1.0"
