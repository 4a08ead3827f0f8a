"""Values for CSS properties and element attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class CSSValue:
    """A CSS property value; a value of None means the property is not rendered."""

    value: str | None = None

    IGNORED: ClassVar[CSSValue]

    def is_ignored(self) -> bool:
        """Whether the whole property is left out when rendering."""
        return self.value is None

    def __str__(self) -> str:
        return "" if self.value is None else self.value


CSSValue.IGNORED = CSSValue(None)


def to_css_value(value: Any) -> CSSValue:
    """Convert a value to a CSSValue; None gives IGNORED."""
    if isinstance(value, CSSValue):
        return value
    if value is None:
        return CSSValue.IGNORED
    return CSSValue(_stringify(value))


class AtValueKind(Enum):
    """How an attribute is rendered."""

    IGNORED = "ignored"
    NONE = "none"
    SOME = "some"


@dataclass(frozen=True)
class AtValue:
    """An attribute value: ignored, present without a value, or with a text value."""

    kind: AtValueKind
    text: str = ""

    IGNORED: ClassVar[AtValue]
    NONE: ClassVar[AtValue]

    @classmethod
    def some(cls, text: str) -> AtValue:
        """An attribute rendered with the given value."""
        return cls(AtValueKind.SOME, text)

    def is_ignored(self) -> bool:
        """Whether the whole attribute is left out when rendering."""
        return self.kind is AtValueKind.IGNORED

    def is_none(self) -> bool:
        """Whether the attribute is rendered without a value."""
        return self.kind is AtValueKind.NONE

    def is_some(self) -> bool:
        """Whether the attribute carries a text value."""
        return self.kind is AtValueKind.SOME


AtValue.IGNORED = AtValue(AtValueKind.IGNORED)
AtValue.NONE = AtValue(AtValueKind.NONE)


def to_at_value(value: Any) -> AtValue:
    """Convert a value to an AtValue; plain values become text values."""
    if isinstance(value, AtValue):
        return value
    if value is None:
        raise TypeError("None cannot be used as an attribute value")
    return AtValue.some(_stringify(value))


def as_at_value(flag: bool) -> AtValue:
    """A boolean attribute: True renders it without a value, False leaves it out."""
    return AtValue.NONE if flag else AtValue.IGNORED