"""Ordered collections of CSS properties for an element."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from seedvdom.style_names import St
from seedvdom.values import CSSValue, to_css_value


def _to_st(key: St | str) -> St:
    if isinstance(key, St):
        return key
    if isinstance(key, str):
        return St.from_str(key)
    raise TypeError(f"style key must be St or str, not {type(key).__name__}")


@dataclass
class Style:
    """CSS properties of an element, kept in insertion order."""

    vals: dict[St, CSSValue] = field(default_factory=dict)

    def add(self, key: St | str, val: Any) -> None:
        """Set a property, replacing any earlier value."""
        self.vals[_to_st(key)] = to_css_value(val)

    def merge(self, other: Style) -> None:
        """Combine with other; on conflict the other's value wins."""
        self.vals.update(other.vals)

    def copy(self) -> Style:
        """Return an independent copy."""
        return Style(dict(self.vals))

    def __str__(self) -> str:
        return ";".join(
            f"{key.as_str()}:{value.value}"
            for key, value in self.vals.items()
            if not value.is_ignored()
        )