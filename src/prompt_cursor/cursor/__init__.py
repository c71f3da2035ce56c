"""Cursor buffer, pointer strategies, and key-event results."""

from .cursor import Cursor
from .pointers import (
    BLOCK_CURSOR,
    DEFAULT_CURSOR,
    PIPE_CURSOR,
    POINTERS,
    Pointer,
    block_pointer,
    default_pointer,
    pipe_pointer,
    resolve_pointer,
)
from .state import ListenResult

__all__ = [
    "Cursor",
    "ListenResult",
    "Pointer",
    "default_pointer",
    "block_pointer",
    "pipe_pointer",
    "DEFAULT_CURSOR",
    "BLOCK_CURSOR",
    "PIPE_CURSOR",
    "POINTERS",
    "resolve_pointer",
]
