"""Key actions and the binding table that classifies raw key codes."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable

KEY_NONE = "\x00"


class KeyAction(str, Enum):
    """What the cursor does in response to a key code."""

    NONE = "none"
    SUBMIT = "submit"
    BACKSPACE = "backspace"
    FORWARD = "forward"
    BACKWARD = "backward"
    OTHER = "other"


def _normalize_codes(codes: Iterable[str]) -> tuple[str, ...]:
    if isinstance(codes, str):
        codes = (codes,)
    return tuple(dict.fromkeys(codes))


class KeyBindingConflictError(ValueError):
    """Raised when one key code is bound to more than one action."""

    def __init__(self, code: str, actions: Iterable[KeyAction]):
        actions_tuple = tuple(actions)
        names = [action.value for action in actions_tuple]
        super().__init__(f"Key code {code!r} is bound to {names}")
        self.code = code
        self.actions = actions_tuple


@dataclass(frozen=True, slots=True)
class KeyBindings:
    """Maps key codes to the actions ``Cursor.listen`` understands.

    Codes not listed here fall into ``KeyAction.OTHER``. The NUL code and the
    empty string always mean ``KeyAction.NONE`` and cannot be rebound.
    """

    submit: tuple[str, ...] = ()
    backspace: tuple[str, ...] = ()
    forward: tuple[str, ...] = ()
    backward: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        seen: dict[str, KeyAction] = {}
        for item in fields(self):
            action = KeyAction(item.name)
            codes = _normalize_codes(getattr(self, item.name))
            for code in codes:
                if not code or code == KEY_NONE:
                    raise ValueError(f"{item.name} binding cannot use an empty key code")
                if code in seen:
                    raise KeyBindingConflictError(code, (seen[code], action))
                seen[code] = action
            object.__setattr__(self, item.name, codes)

    def classify(self, key: str | None) -> KeyAction:
        if not key or key == KEY_NONE:
            return KeyAction.NONE
        if key in self.submit:
            return KeyAction.SUBMIT
        if key in self.backspace:
            return KeyAction.BACKSPACE
        if key in self.forward:
            return KeyAction.FORWARD
        if key in self.backward:
            return KeyAction.BACKWARD
        return KeyAction.OTHER

    def codes_for(self, action: KeyAction) -> tuple[str, ...]:
        if action in (KeyAction.NONE, KeyAction.OTHER):
            return ()
        return getattr(self, action.value)


__all__ = [
    "KEY_NONE",
    "KeyAction",
    "KeyBindings",
    "KeyBindingConflictError",
]
