"""Applying element-creation arguments to an element."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from seedvdom.attrs import Attrs
from seedvdom.listener import Listener
from seedvdom.node import El, LifecycleHooks, Node, Text
from seedvdom.style import Style
from seedvdom.tag_names import Tag


def update_el(el: El, part: Any) -> None:
    """Apply one part to el: attributes, style, listeners, hooks, children or a tag.

    Iterables of parts are applied item by item.
    """
    if isinstance(part, Attrs):
        el.attrs.merge(part)
    elif isinstance(part, Style):
        el.style.merge(part)
    elif isinstance(part, Listener):
        el.listeners.append(part)
    elif isinstance(part, LifecycleHooks):
        for name in ("did_mount", "did_update", "will_unmount"):
            hook = getattr(part, name)
            if hook is not None:
                setattr(el.hooks, name, hook)
    elif isinstance(part, str):
        el.children.append(Text(part))
    elif isinstance(part, Node):
        el.children.append(part)
    elif isinstance(part, Tag):
        el.tag = part
    elif isinstance(part, Iterable):
        for item in part:
            update_el(el, item)
    else:
        raise TypeError(f"cannot update an element with {type(part).__name__}")