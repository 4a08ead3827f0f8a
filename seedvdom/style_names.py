"""CSS property names used as style keys."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from seedvdom.style_table import CSS_PROPERTY_NAMES, MEMBER_BY_CSS_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class St:
    """A CSS property: one of the known properties, or a custom one."""

    name: str
    custom: bool = False

    _by_name: ClassVar[dict[str, St]] = {}

    def as_str(self) -> str:
        """Return the CSS property name."""
        return self.name

    @classmethod
    def from_str(cls, name: str) -> St:
        """Return the known property with this name; unknown names log an error and become custom."""
        known = cls._by_name.get(name)
        if known is not None:
            return known
        logger.error("Can't find this style: %s", name)
        return cls(name, custom=True)

    def is_custom(self) -> bool:
        """Whether this property is not one of the known properties."""
        return self.custom

    def __str__(self) -> str:
        return self.name


for _css_name in CSS_PROPERTY_NAMES:
    _st = St(_css_name)
    setattr(St, MEMBER_BY_CSS_NAME[_css_name], _st)
    St._by_name[_css_name] = _st