"""Ordered collections of element attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from seedvdom.values import AtValue, to_at_value

CLASS = "class"
ID = "id"


def _key(key: Any) -> str:
    as_str = getattr(key, "as_str", None)
    return as_str() if callable(as_str) else str(key)


@dataclass
class Attrs:
    """Element attributes, kept in insertion order."""

    vals: dict[str, AtValue] = field(default_factory=dict)

    @classmethod
    def from_id(cls, name: Any) -> Attrs:
        """Attributes holding only an id."""
        result = cls()
        result.add(ID, name)
        return result

    def add(self, key: Any, val: Any) -> None:
        """Set an attribute, replacing any earlier value."""
        self.vals[_key(key)] = to_at_value(val)

    def add_multiple(self, key: Any, items: Iterable[str]) -> None:
        """Set an attribute to the non-empty items joined by spaces."""
        self.add(key, " ".join(item for item in items if item))

    def merge(self, other: Attrs) -> None:
        """Combine with other; classes are concatenated, other keys are replaced."""
        for key, other_value in other.vals.items():
            original = self.vals.get(key)
            if (
                original is not None
                and key == CLASS
                and original.is_some()
                and other_value.is_some()
            ):
                joined = (
                    f"{original.text} {other_value.text}"
                    if original.text
                    else other_value.text
                )
                self.vals[key] = AtValue.some(joined)
            else:
                self.vals[key] = other_value

    def copy(self) -> Attrs:
        """Return an independent copy."""
        return Attrs(dict(self.vals))

    def __str__(self) -> str:
        parts = []
        for key, value in self.vals.items():
            if value.is_ignored():
                continue
            if value.is_none():
                parts.append(key)
            else:
                parts.append(f'{key}="{value.text}"')
        return " ".join(parts)