"""Caret-tracking input buffer for single-line prompts."""

from __future__ import annotations

from typing import Optional

from prompt_cursor.keymaps import DEFAULT_KEYS, KeyAction, KeyBindings
from prompt_cursor.runtime import telemetry

from .pointers import DEFAULT_CURSOR, Pointer
from .state import ListenResult

LOGGER_NAME = "prompt_cursor.cursor"
DEFAULT_MASK = "*"


class Cursor:
    """Tracks what the user typed and where the caret sits in it.

    The input stays pristine apart from requested edits; the pointer is only
    spliced in when ``format`` or ``format_mask`` renders a display string.
    New text arrives through ``update`` or, from a line reader, ``listen``.
    """

    def __init__(
        self,
        starting_input: str = "",
        pointer: Optional[Pointer] = None,
        erase_default: bool = False,
        *,
        keys: Optional[KeyBindings] = None,
    ) -> None:
        self.pointer: Pointer = pointer if pointer is not None else DEFAULT_CURSOR
        self.keys = keys if keys is not None else DEFAULT_KEYS
        self.input = starting_input
        self.position = len(starting_input)
        self.erase = erase_default
        if erase_default:
            self.start()
        else:
            self.end()

    def __str__(self) -> str:
        return (
            f"Cursor: {self.pointer('')}, Input {self.input}, "
            f"Position {self.position}"
        )

    def __repr__(self) -> str:
        return (
            f"Cursor(position={self.position}, length={len(self.input)}, "
            f"erase={self.erase})"
        )

    def start(self) -> None:
        self.place(0)

    def end(self) -> None:
        self.place(len(self.input))

    def place(self, position: int) -> None:
        """Put the caret at an absolute index, clamped to the input."""

        self.position = position
        self._correct_position()

    def move(self, shift: int) -> None:
        """Shift the caret by ``shift`` code points, clamped to the input."""

        self.position += shift
        self._correct_position()

    def _correct_position(self) -> None:
        if self.position > len(self.input):
            self.position = len(self.input)
        if self.position < 0:
            self.position = 0

    def get(self) -> str:
        return self.input

    def update(self, new_input: str) -> None:
        """Insert ``new_input`` before the caret and leave the caret after it."""

        i = self.position
        self.input = self.input[:i] + new_input + self.input[i:]
        self.move(len(new_input))

    def replace(self, text: str) -> None:
        """Swap in ``text`` as the whole input and move the caret to the end."""

        self.input = text
        self.end()

    def backspace(self) -> None:
        """Remove the code point before the caret; a no-op at the start."""

        i = self.position
        if i == 0:
            return
        if i == len(self.input):
            self.input = self.input[: i - 1]
        else:
            self.input = self.input[: i - 1] + self.input[i:]
        self.move(-1)

    def format(self) -> str:
        """Render the input with the pointer at the caret."""

        return _splice_pointer(self.input, self.position, self.pointer)

    def format_mask(self, mask: str) -> str:
        """Render like ``format`` with every input character shown as ``mask``.

        Only the first code point of ``mask`` is used, so the masked text is as
        long as the input and the caret lands on the same column.
        """

        glyph = mask[:1] or DEFAULT_MASK
        return _splice_pointer(glyph * len(self.input), self.position, self.pointer)

    def listen(self, line: Optional[str], pos: int, key: Optional[str]) -> ListenResult:
        """Line-reader callback keeping the buffer in step with key events.

        ``line`` is whatever the reader reports as new text; it is inserted at
        the caret before ``key`` is acted on. ``pos`` is the reader's own
        caret and is not consulted.
        """

        del pos
        action = self.keys.classify(key)
        with telemetry.span(
            "cursor::listen",
            logger_name=LOGGER_NAME,
            component="cursor",
            metadata={"action": action.value, "erase": self.erase},
        ) as handle:
            if line is not None:
                self.update(line)

            if action is KeyAction.SUBMIT:
                telemetry.record_event(
                    "cursor.submit",
                    data={"length": len(self.input), "position": self.position},
                    logger_name=LOGGER_NAME,
                )
                return ListenResult(self.get(), self.position, keep_going=False)

            if action is KeyAction.BACKSPACE:
                if self.erase:
                    self._clear_erase(action)
                    self.replace("")
                self.backspace()
            elif action is KeyAction.FORWARD:
                # Moving into the default means the user wants to edit it.
                if self.erase:
                    self._clear_erase(action)
                self.move(1)
            elif action is KeyAction.BACKWARD:
                self.move(-1)
            elif action is KeyAction.OTHER and self.erase:
                self._clear_erase(action)
                self.replace("")
                if line is not None:
                    self.update(line)

            handle.add_metadata("position", self.position)
            return ListenResult(self.get(), self.position, keep_going=True)

    def _clear_erase(self, action: KeyAction) -> None:
        self.erase = False
        telemetry.record_event(
            "cursor.erase_cleared",
            data={"action": action.value},
            logger_name=LOGGER_NAME,
        )


def _splice_pointer(text: str, position: int, pointer: Pointer) -> str:
    # Over a character the pointer replaces it; past the end it is appended.
    if position < len(text):
        return text[:position] + pointer(text[position]) + text[position + 1 :]
    return text + pointer("")


__all__ = ["Cursor"]
