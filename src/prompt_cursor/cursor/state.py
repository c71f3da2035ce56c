"""Values handed back to the key-event dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ListenResult:
    """Buffer contents and caret after a key event.

    ``keep_going`` is False only after the submit key; the dispatcher should
    finalize the prompt then. Unpacks as ``(line, position, keep_going)``.
    """

    line: str
    position: int
    keep_going: bool = True

    def __iter__(self) -> Iterator[object]:
        yield self.line
        yield self.position
        yield self.keep_going
