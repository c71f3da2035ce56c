"""Prompt telemetry on top of telelog.

Everything here may run while a prompt line is on screen, so console output
is off unless ``PROMPT_CURSOR_LOG_CONSOLE`` is set, and anything that looks
like typed text is redacted before it reaches a logger.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "PROMPT_CURSOR_"
PRESETS = ("development", "production", "performance")

# Metadata keys that may carry buffer contents; only their length is logged.
TEXT_KEYS = frozenset({"line", "text", "input", "buffer"})

_loggers: Dict[str, Any] = {}
_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_on(name: str) -> bool:
    return (_env(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def redact(fields: Mapping[str, Any]) -> Dict[str, str]:
    """Stringify ``fields``, replacing typed text with its length."""

    cleaned: Dict[str, str] = {}
    for key, value in fields.items():
        if key in TEXT_KEYS and value is not None:
            cleaned[key] = f"<{len(str(value))} chars>"
        else:
            cleaned[key] = str(value)
    return cleaned


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    if preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        console = _env_on("LOG_CONSOLE")
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _env_on("NO_COLOR"))
        if _env("LOG_FILE"):
            config.with_file_output(_env("LOG_FILE"))
    elif preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset in ("production", "performance"):
        config.with_min_level("INFO" if preset == "production" else "DEBUG")
        config.with_console_output(False)
        config.with_json_format(preset == "performance")
        config.with_file_output(_env("LOG_FILE") or f"prompt_cursor-{preset}.log")
    else:
        raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}")
    config.with_profiling(True)
    return config


def configure(*, preset: Optional[str] = None) -> None:
    """Rebuild the telelog config from a preset, or from the environment."""

    global _config
    _config = _build_config(preset)
    _loggers.clear()


def get_logger(name: str = "prompt_cursor") -> Any:
    if name not in _loggers:
        if _config is None:
            configure()
        _loggers[name] = tl.Logger.with_config(name, _config)
    return _loggers[name]


def _write(log: Any, level: str, message: str, payload: Dict[str, str]) -> None:
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, list(payload.items()))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    data: Optional[Mapping[str, Any]] = None,
    level: str = "info",
    logger_name: str = "prompt_cursor",
) -> None:
    """Log ``event::<name>`` with redacted ``data`` attached."""

    payload = redact({"event": name, **(data or {})})
    _write(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata.update(redact({key: value}))


@contextmanager
def span(
    name: str,
    *,
    component: Optional[str] = None,
    metadata: Optional[Mapping[str, Any]] = None,
    logger_name: str = "prompt_cursor",
) -> Iterator[SpanHandle]:
    """Profile the block, with redacted ``metadata`` pushed as log context.

    An exception escaping the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(log, name, redact(metadata or {}))
    pushed = list(handle.metadata)
    for key in pushed:
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            failure = {"span": name, **handle.metadata, "reason": str(exc)}
            _write(log, "error", "span::fail", failure)
            raise
        finally:
            for key in pushed:
                log.remove_context(key)


__all__ = [
    "PRESETS",
    "TEXT_KEYS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "redact",
    "span",
]
