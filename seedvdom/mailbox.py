"""A sink that messages produced by event handlers are delivered to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Mailbox:
    """Delivers each message to a single function."""

    func: Callable[[Any], Any]

    def send(self, message: Any) -> None:
        """Deliver a message."""
        self.func(message)