"""Readline-style key codes and the default binding table."""

from __future__ import annotations

import sys

from .models import KEY_NONE, KeyBindings

KEY_ENTER = "\r"
KEY_CTRL_H = "\x08"
KEY_DELETE = "\x7f"
KEY_FORWARD = "\x06"  # Ctrl-F, what readline reports for the right arrow
KEY_BACKWARD = "\x02"  # Ctrl-B, what readline reports for the left arrow

# Windows consoles report backspace as Ctrl-H, everything else sends DEL.
KEY_BACKSPACE = KEY_CTRL_H if sys.platform.startswith("win") else KEY_DELETE


def build_default_keys() -> KeyBindings:
    return KeyBindings(
        submit=(KEY_ENTER,),
        backspace=(KEY_BACKSPACE, KEY_DELETE, KEY_CTRL_H),
        forward=(KEY_FORWARD,),
        backward=(KEY_BACKWARD,),
    )


DEFAULT_KEYS = build_default_keys()

__all__ = [
    "KEY_NONE",
    "KEY_ENTER",
    "KEY_CTRL_H",
    "KEY_DELETE",
    "KEY_FORWARD",
    "KEY_BACKWARD",
    "KEY_BACKSPACE",
    "DEFAULT_KEYS",
    "build_default_keys",
]
