"""Textual adapter that feeds key presses into a Cursor and relays renders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from prompt_cursor.cursor import Cursor, ListenResult
from prompt_cursor.keymaps import KeyAction


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


# Textual key names for the non-printing keys a prompt cares about.
TEXTUAL_ACTIONS: Dict[str, KeyAction] = {
    "enter": KeyAction.SUBMIT,
    "return": KeyAction.SUBMIT,
    "backspace": KeyAction.BACKSPACE,
    "ctrl+h": KeyAction.BACKSPACE,
    "right": KeyAction.FORWARD,
    "ctrl+f": KeyAction.FORWARD,
    "left": KeyAction.BACKWARD,
    "ctrl+b": KeyAction.BACKWARD,
}


def validate_mask(mask: str) -> str:
    if len(mask) != 1:
        raise ValueError(f"mask must be exactly one character, got {mask!r}")
    return mask


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    update_display: Callable[[str], None]
    submit: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualPromptAdapter:
    """Bridges Textual key events to ``Cursor.listen`` for a single prompt."""

    def __init__(
        self,
        cursor: Cursor,
        hooks: TextualUIHooks,
        *,
        mask: Optional[str] = None,
    ) -> None:
        self.cursor = cursor
        self.hooks = hooks
        self.mask = validate_mask(mask) if mask is not None else None
        self.done = False
        self._refresh_display()

    def render(self) -> str:
        if self.mask is not None:
            return self.cursor.format_mask(self.mask)
        return self.cursor.format()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[ListenResult]:
        """Translate a Textual key event and dispatch it to the cursor.

        Printable characters are reported as new line text so the cursor
        inserts them at the caret. Keys with no meaning for the prompt are
        ignored and return ``None``.
        """

        if self.done:
            return None

        action = TEXTUAL_ACTIONS.get(key.lower())
        if action is not None:
            codes = self.cursor.keys.codes_for(action)
            if not codes:
                return None
            return self._dispatch(None, codes[0], key=key)

        if character and character.isprintable():
            return self._dispatch(character, character, key="text")
        return None

    def handle_paste(self, text: str) -> Optional[ListenResult]:
        """Insert pasted text at the caret as one edit."""

        if self.done or not text:
            return None
        cleaned = "".join(ch for ch in text if ch.isprintable())
        if not cleaned:
            return None
        return self._dispatch(cleaned, cleaned[0], key="paste")

    def _dispatch(self, line: Optional[str], code: str, *, key: str) -> ListenResult:
        self._log_state("key ->", key=key, action=self.cursor.keys.classify(code).value)
        result = self.cursor.listen(line, self.cursor.position, code)
        self._refresh_display()
        self._log_state("result <-", keep_going=result.keep_going)
        if not result.keep_going:
            self.done = True
            self.hooks.submit(result.line)
        return result

    def _refresh_display(self) -> None:
        self.hooks.update_display(self.render())

    def _log_state(self, prefix: str, **fields: object) -> None:
        # The buffer text is left out so masked input never reaches the log.
        snapshot: Dict[str, object] = {
            "position": self.cursor.position,
            "length": len(self.cursor.input),
            "erase": self.cursor.erase,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))


__all__ = [
    "TEXTUAL_ACTIONS",
    "TextualPromptAdapter",
    "TextualUIHooks",
    "validate_mask",
]
