"""Progress reporting for long-running flows.

The caller supplies a callback ``(percent, message) -> None``.  The reporter
guarantees the contract the UI relies on: percentages never go backwards
within one request and the message log only grows.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

ProgressCallback = Callable[[int, str], None]


@dataclass
class ProgressReporter:
    """Clamp progress to a running maximum and keep the message history."""

    callback: ProgressCallback | None = None
    percent: int = 0
    messages: list[str] = field(default_factory=list)

    def report(self, percent: int, message: str) -> None:
        self.percent = max(self.percent, min(int(percent), 100))
        self.messages.append(message)
        if self.callback is not None:
            self.callback(self.percent, message)
