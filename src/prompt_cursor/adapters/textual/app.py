"""Executable Textual app hosting a single prompt backed by a Cursor."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use prompt_cursor.adapters.textual.app"
    ) from exc

from prompt_cursor.cursor import Cursor, resolve_pointer
from prompt_cursor.runtime import telemetry

from .controller import TextualPromptAdapter, TextualUIHooks, validate_mask


class PromptApp(App[Optional[str]]):
    """One-line prompt; exits with the entered text, or None on cancel."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#prompt-line {
		height: 1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Cancel"),
        ("escape", "quit", "Cancel"),
    ]

    def __init__(
        self,
        *,
        label: str = "Input",
        default: str = "",
        erase_default: bool = False,
        pointer: str = "block",
        mask: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._label = label
        self._cursor = Cursor(default, resolve_pointer(pointer), erase_default)
        self._mask = mask
        self._prompt_widget: Static | None = None
        self.adapter: TextualPromptAdapter | None = None

    def compose(self) -> ComposeResult:
        self._prompt_widget = Static("", id="prompt-line")
        yield self._prompt_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_display=self._update_display,
            submit=self._submit,
            log=self._log_line,
        )
        self.adapter = TextualPromptAdapter(self._cursor, hooks, mask=self._mask)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        if event.key in {"ctrl+c", "escape"}:
            return
        result = self.adapter.handle_textual_key(event.key, character=event.character)
        if result is not None:
            event.stop()

    def on_paste(self, event: events.Paste) -> None:
        if self.adapter:
            self.adapter.handle_paste(event.text)

    def _update_display(self, rendered: str) -> None:
        if self._prompt_widget:
            self._prompt_widget.update(Text.from_ansi(f"{self._label}: {rendered}"))

    def _submit(self, line: str) -> None:
        self.exit(line)

    def _log_line(self, line: str) -> None:
        telemetry.record_event(
            "textual.prompt", data={"trace": line}, logger_name="prompt_cursor.textual"
        )


def _mask_arg(value: str) -> str:
    try:
        return validate_mask(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a single Textual prompt.")
    parser.add_argument("--label", default="Input", help="Prompt label")
    parser.add_argument("--default", default="", help="Starting text")
    parser.add_argument(
        "--erase-default",
        action="store_true",
        help="Clear the starting text on the first edit",
    )
    parser.add_argument(
        "--pointer",
        default=os.environ.get("PROMPT_CURSOR_POINTER", "block"),
        choices=("default", "block", "pipe"),
        help="Caret style (default: block)",
    )
    parser.add_argument(
        "--mask",
        type=_mask_arg,
        default=os.environ.get("PROMPT_CURSOR_MASK") or None,
        help="Show this character instead of the typed text",
    )
    parser.add_argument(
        "--log-preset",
        default=None,
        choices=telemetry.PRESETS,
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    app = PromptApp(
        label=args.label,
        default=args.default,
        erase_default=args.erase_default,
        pointer=args.pointer,
        mask=args.mask,
    )
    result = app.run()
    if result is not None:
        print(result)


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
