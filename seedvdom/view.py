"""Turning what a view returns into a list of nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from seedvdom.node import Node


def els(view: Any) -> list[Node]:
    """Return a single node as a one-item list, or an iterable of nodes as a list."""
    if isinstance(view, Node):
        return [view]
    if isinstance(view, Iterable) and not isinstance(view, (str, bytes)):
        nodes = list(view)
        for node in nodes:
            if not isinstance(node, Node):
                raise TypeError(f"view item is not a node: {type(node).__name__}")
        return nodes
    raise TypeError(f"cannot render {type(view).__name__} as a view")