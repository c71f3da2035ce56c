from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

import pytest

from prompt_cursor.runtime import telemetry


class RecordingLogger:
    """Stand-in for a telelog logger that keeps everything it is handed."""

    def __init__(self) -> None:
        self.lines: List[Tuple[str, str, Any]] = []
        self.context: Dict[str, str] = {}
        self.context_history: List[Tuple[str, str]] = []
        self.profiled: List[str] = []
        self.components: List[str] = []

    def info_with(self, message: str, pairs: Any) -> None:
        self.lines.append(("info", message, dict(pairs)))

    def error_with(self, message: str, pairs: Any) -> None:
        self.lines.append(("error", message, dict(pairs)))

    def warning(self, message: str) -> None:
        self.lines.append(("warning", message, None))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value
        self.context_history.append((key, value))

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.profiled.append(name)
        yield

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.components.append(name)
        yield

    def events(self) -> List[str]:
        return [
            payload["event"]
            for _level, _message, payload in self.lines
            if payload and "event" in payload
        ]

    def dump(self) -> str:
        return repr((self.lines, self.context_history))


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    logger = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name="prompt_cursor": logger)
    return logger
