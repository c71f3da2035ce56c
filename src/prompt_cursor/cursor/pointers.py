"""Pointer strategies that turn the text under the caret into a marker."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Protocol

BLOCK_GLYPH = "█"
PIPE_GLYPH = "|"
REVERSE_VIDEO = "\x1b[7m"
RESET = "\x1b[0m"


class Pointer(Protocol):
    """Maps the character at the caret (zero or one code point) to its marker."""

    def __call__(self, to: str) -> str:
        ...


def default_pointer(ignored: str) -> str:
    """Solid block that hides whatever is under it."""

    del ignored
    return BLOCK_GLYPH


def block_pointer(to: str) -> str:
    """Highlight the character by inverting its colors."""

    return f"{REVERSE_VIDEO}{to}{RESET}"


def pipe_pointer(to: str) -> str:
    """Thin bar drawn in front of the character."""

    return PIPE_GLYPH + to


DEFAULT_CURSOR: Pointer = default_pointer
BLOCK_CURSOR: Pointer = block_pointer
PIPE_CURSOR: Pointer = pipe_pointer

POINTERS: Mapping[str, Pointer] = MappingProxyType(
    {
        "default": DEFAULT_CURSOR,
        "block": BLOCK_CURSOR,
        "pipe": PIPE_CURSOR,
    }
)


def resolve_pointer(name: str) -> Pointer:
    key = name.strip().lower()
    try:
        return POINTERS[key]
    except KeyError as exc:
        raise KeyError(
            f"Unknown pointer '{name}', expected one of {sorted(POINTERS)}"
        ) from exc


__all__ = [
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
