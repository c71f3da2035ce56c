"""Key codes, key actions, and the default binding table."""

from .models import KEY_NONE, KeyAction, KeyBindingConflictError, KeyBindings
from .defaults import (
    DEFAULT_KEYS,
    KEY_BACKSPACE,
    KEY_BACKWARD,
    KEY_CTRL_H,
    KEY_DELETE,
    KEY_ENTER,
    KEY_FORWARD,
    build_default_keys,
)

__all__ = [
    "KeyAction",
    "KeyBindings",
    "KeyBindingConflictError",
    "KEY_NONE",
    "KEY_ENTER",
    "KEY_BACKSPACE",
    "KEY_CTRL_H",
    "KEY_DELETE",
    "KEY_FORWARD",
    "KEY_BACKWARD",
    "DEFAULT_KEYS",
    "build_default_keys",
]
