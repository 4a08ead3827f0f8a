"""Virtual DOM nodes: elements, text nodes and empty placeholders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from seedvdom.attrs import CLASS, Attrs
from seedvdom.listener import Listener
from seedvdom.style import Style
from seedvdom.tag_names import Tag
from seedvdom.values import AtValue

NodeHook = Callable[[Any], Any]


class Namespace(Enum):
    """The namespace an element is created in."""

    HTML = "html"
    SVG = "svg"
    MATH_ML = "mathml"


@dataclass
class LifecycleHooks:
    """Callbacks run when an element's backing node is mounted, updated or removed."""

    did_mount: Optional[NodeHook] = None
    did_update: Optional[NodeHook] = None
    will_unmount: Optional[NodeHook] = None


class Node:
    """A component of the virtual DOM."""

    __slots__ = ()

    def is_text(self) -> bool:
        """Whether this is a text node."""
        return isinstance(self, Text)

    def is_el(self) -> bool:
        """Whether this is an element."""
        return isinstance(self, El)

    def is_empty(self) -> bool:
        """Whether this is an empty placeholder."""
        return isinstance(self, Empty)

    def get_text(self) -> str:
        """The text held by this node."""
        return ""

    def map_msg(self, f: Callable[[Any], Any]) -> Node:
        """Return this node with every message passed through f."""
        return self

    def strip_ws_nodes(self) -> None:
        """Drop references to backing nodes, recursively."""

    def clone(self) -> Node:
        """Return a copy of this node."""
        return self


@dataclass(eq=False)
class Text(Node):
    """A text node."""

    text: str
    node_ws: Any = None

    def get_text(self) -> str:
        return self.text

    def strip_ws_node(self) -> None:
        """Drop the reference to the backing node."""
        self.node_ws = None

    def strip_ws_nodes(self) -> None:
        self.strip_ws_node()

    def clone(self) -> Text:
        return Text(self.text, self.node_ws)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return isinstance(other, Text) and self.text == other.text


class Empty(Node):
    """A node that is never rendered."""

    __slots__ = ()

    def clone(self) -> Empty:
        return Empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return isinstance(other, Empty)

    def __hash__(self) -> int:
        return hash(Empty)

    def __repr__(self) -> str:
        return "Empty()"


@dataclass(eq=False)
class El(Node):
    """An element of the virtual DOM."""

    tag: Tag
    attrs: Attrs = field(default_factory=Attrs)
    style: Style = field(default_factory=Style)
    listeners: list[Listener] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    node_ws: Any = None
    namespace: Optional[Namespace] = None
    hooks: LifecycleHooks = field(default_factory=LifecycleHooks)

    def __post_init__(self) -> None:
        if isinstance(self.tag, str):
            self.tag = Tag.from_str(self.tag)

    @classmethod
    def svg(cls, tag: Tag | str) -> El:
        """An empty element in the SVG namespace."""
        return cls(tag, namespace=Namespace.SVG)

    def add_child(self, node: Node) -> El:
        """Append a child node."""
        self.children.append(node)
        return self

    def add_attr(self, key: Any, val: Any) -> El:
        """Set an attribute such as class or href."""
        self.attrs.add(key, val)
        return self

    def add_class(self, name: str) -> El:
        """Add a class to the class attribute."""
        current = self.attrs.vals.get(CLASS)
        if current is not None and current.is_some():
            joined = f"{current.text} {name}" if current.text else name
            self.attrs.vals[CLASS] = AtValue.some(joined)
        else:
            self.attrs.vals[CLASS] = AtValue.some(name)
        return self

    def add_style(self, key: Any, val: Any) -> El:
        """Set a style property such as display or height."""
        self.style.add(key, val)
        return self

    def add_listener(self, listener: Listener) -> El:
        """Append an event listener."""
        self.listeners.append(listener)
        return self

    def add_text(self, text: str) -> El:
        """Append a text node."""
        self.children.append(Text(text))
        return self

    def replace_text(self, text: str) -> El:
        """Remove all text children, then append a new text node."""
        self.children = [child for child in self.children if not child.is_text()]
        self.children.append(Text(text))
        return self

    def get_text(self) -> str:
        """The concatenated text of the direct text children."""
        return "".join(child.text for child in self.children if isinstance(child, Text))

    def strip_ws_nodes(self) -> None:
        self.node_ws = None
        for child in self.children:
            child.strip_ws_nodes()

    def map_msg(self, f: Callable[[Any], Any]) -> El:
        """Return this element with every listener's and child's messages passed through f."""
        return El(
            self.tag,
            attrs=self.attrs,
            style=self.style,
            listeners=[listener.map_msg(f) for listener in self.listeners],
            children=[child.map_msg(f) for child in self.children],
            node_ws=self.node_ws,
            namespace=self.namespace,
            hooks=self.hooks,
        )

    def clone(self) -> El:
        """Copy the element; listeners and lifecycle hooks are left out."""
        return El(
            self.tag,
            attrs=self.attrs.copy(),
            style=self.style.copy(),
            listeners=[],
            children=[child.clone() for child in self.children],
            node_ws=self.node_ws,
            namespace=self.namespace,
            hooks=LifecycleHooks(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        # Children are not compared.
        return (
            isinstance(other, El)
            and self.tag == other.tag
            and self.attrs == other.attrs
            and self.style == other.style
            and self.listeners == other.listeners
            and self.namespace == other.namespace
        )


def new_text(text: str) -> Text:
    """A text node."""
    return Text(text)


def empty() -> Empty:
    """A node that is never rendered."""
    return Empty()