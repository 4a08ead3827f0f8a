"""Event listeners attached to virtual DOM elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from seedvdom.event_names import Ev
from seedvdom.mailbox import Mailbox

EventHandler = Callable[[Any], Any]


class Category(Enum):
    """The kind of event a listener handles."""

    CUSTOM = "custom"
    INPUT = "input"
    KEYBOARD = "keyboard"
    MOUSE = "mouse"
    POINTER = "pointer"
    RAW = "raw"
    SIMPLE = "simple"


@dataclass(eq=False)
class Listener:
    """Turns events of one kind into messages."""

    trigger: Ev | str
    handler: Optional[EventHandler] = None
    category: Optional[Category] = None
    message: Any = None
    control_val: Optional[str] = None
    control_checked: Optional[bool] = None

    def __post_init__(self) -> None:
        if not isinstance(self.trigger, Ev):
            self.trigger = Ev.from_str(str(self.trigger))

    @classmethod
    def new_control(cls, val: str) -> Listener:
        """A listener keeping a field's value in sync with the model."""
        return cls(Ev.INPUT, control_val=val)

    @classmethod
    def new_control_check(cls, checked: bool) -> Listener:
        """A listener keeping a checkbox's state in sync with the model."""
        return cls(Ev.CLICK, control_checked=checked)

    def handle(self, event: Any, mailbox: Mailbox) -> None:
        """Run the handler on an event and send the resulting message."""
        if self.handler is None:
            raise ValueError("listener has no handler")
        mailbox.send(self.handler(event))

    def map_msg(self, f: Callable[[Any], Any]) -> Listener:
        """Return a listener whose messages are passed through f."""
        handler = self.handler
        mapped_handler: Optional[EventHandler] = None
        if handler is not None:

            def mapped_handler(event: Any) -> Any:
                return f(handler(event))

        return Listener(
            self.trigger,
            handler=mapped_handler,
            category=self.category,
            message=None if self.message is None else f(self.message),
            control_val=self.control_val,
            control_checked=self.control_checked,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Listener):
            return NotImplemented
        return (
            self.trigger == other.trigger
            and self.category == other.category
            and (self.message is None) == (other.message is None)
        )