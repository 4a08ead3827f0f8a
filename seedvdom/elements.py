"""Shortcuts for building elements, attributes, classes and styles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import partial
from typing import Any, Callable

from seedvdom.attrs import CLASS, Attrs
from seedvdom.node import El, Text, new_text
from seedvdom.style import Style
from seedvdom.tag_names import Tag
from seedvdom.update_el import update_el

logger = logging.getLogger(__name__)

_DEFAULT_CUSTOM_TAG = "missing-tag-name"

_HTML_ELEMENTS: frozenset[str] = frozenset(
    """
    address article aside footer header h1 h2 h3 h4 h5 h6 hgroup main nav section
    blockquote dd dir div dl dt figcaption figure hr li ol p pre ul
    a abbr b bdi bdo br cite code data dfn em i kbd mark q rb rp rt rtc ruby s samp
    small span strong sub sup time tt u var wbr
    area audio img map track video
    applet embed iframe noembed object param picture source
    canvas noscript Script
    del ins
    caption col colgroup table tbody td tfoot th thead tr
    button datalist fieldset form input label legend meter optgroup option output
    progress select textarea
    details dialog menu menuitem summary
    content element shadow slot template
    """.split()
)

_SVG_ELEMENTS: Mapping[str, str] = {
    # Shapes
    "line": "line", "rect": "rect", "circle": "circle", "ellipse": "ellipse",
    "polygon": "polygon", "polyline": "polyline", "mesh": "mesh", "path": "path",
    # Containers
    "defs": "defs", "g": "g", "marker": "marker", "mask": "mask",
    "pattern": "pattern", "svg": "svg", "switch": "switch", "symbol": "symbol",
    "unknown": "unknown",
    # Gradients
    "linear_gradient": "linearGradient", "radial_gradient": "radialGradient",
    "mesh_gradient": "meshGradient", "stop": "stop",
    # Graphics and referencing
    "image": "image", "use": "use",
    # Text content
    "altGlyph": "altGlyph", "altGlyphDef": "altGlyphDef",
    "altGlyphItem": "altGlyphItem", "glyph": "glyph", "glyphRef": "glyphRef",
    "textPath": "textPath", "text": "text", "tref": "tref", "tspan": "tspan",
    # Uncategorized
    "clipPath": "clipPath", "cursor": "cursor", "filter": "filter",
    "foreignObject": "foreignObject", "hatchpath": "hatchpath",
    "meshPatch": "meshpatch", "meshrow": "meshrow", "view": "view",
    # Animation
    "animate": "animate", "animateColor": "animateColor",
    "animateMotion": "animateMotion", "animateTransform": "animateTransform",
    "discard": "discard", "mpath": "mpath", "set": "set",
    # Descriptive
    "desc": "desc", "metadata": "metadata", "title": "title",
    # Filter primitives
    "feBlend": "feBlend", "feColorMatrix": "feColorMatrix",
    "feComponentTransfer": "feComponentTransfer", "feComposite": "feComposite",
    "feConvolveMatrix": "feConvolveMatrix", "feDiffuseLighting": "feDiffuseLighting",
    "feDisplacementMap": "feDisplacementMap", "feDropShadow": "feDropShadow",
    "feFlood": "feFlood", "feFuncA": "feFuncA", "feFuncB": "feFuncB",
    "feFuncG": "feFuncG", "feFuncR": "feFuncR", "feGaussianBlur": "feGaussianBlur",
    "feImage": "feImage", "feMerge": "feMerge", "feMergeNode": "feMergeNode",
    "feMorphology": "feMorphology", "feOffset": "feOffset",
    "feSpecularLighting": "feSpecularLighting", "feTile": "feTile",
    "feTurbulence": "feTurbulence",
    # Fonts
    "font": "font", "hkern": "hkern", "vkern": "vkern",
    # Paint servers
    "hatch": "hatch", "solidcolor": "solidcolor",
}


def _to_tag(tag: Tag | str) -> Tag:
    return tag if isinstance(tag, Tag) else Tag.from_str(tag)


def _keyword_name(name: str) -> str:
    """Turn a Python keyword argument into a markup name: ``data_id`` -> ``data-id``."""
    return name.rstrip("_").replace("_", "-")


def _pairs(args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> Iterable[tuple[Any, Any]]:
    for arg in args:
        if isinstance(arg, Mapping):
            yield from arg.items()
        elif isinstance(arg, tuple) and len(arg) == 2:
            yield arg
        else:
            raise TypeError(
                f"expected a mapping or a (key, value) pair, not {type(arg).__name__}"
            )
    for key, value in kwargs.items():
        yield _keyword_name(key), value


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def element(tag: Tag | str, *args: Any) -> El:
    """Create an element with the given tag and apply each part to it."""
    el = El(_to_tag(tag))
    for part in args:
        update_el(el, part)
    return el


def svg_element(tag: Tag | str, *args: Any) -> El:
    """Create an SVG-namespaced element and apply each part to it."""
    el = El.svg(_to_tag(tag))
    for part in args:
        update_el(el, part)
    return el


def custom(*args: Any) -> El:
    """Create an element whose tag is given among the parts as a Tag.

    Raises ValueError when no tag was supplied.
    """
    el = El(Tag.from_str(_DEFAULT_CUSTOM_TAG))
    for part in args:
        update_el(el, part)
    if el.tag.is_custom() and el.tag.as_str() == _DEFAULT_CUSTOM_TAG:
        raise ValueError(
            "Tag has not been set in custom element. Add e.g. Tag.from_str('code-block')."
        )
    return el


def plain(text: str) -> Text:
    """A text node."""
    return new_text(text)


def attrs(*args: Any, **kwargs: Any) -> Attrs:
    """Build attributes from mappings, (key, value) pairs and keyword arguments.

    Keyword names have trailing underscores dropped and other underscores
    turned into hyphens.
    """
    result = Attrs()
    for key, value in _pairs(args, kwargs):
        result.add(key, value)
    return result


def class_(*args: Any, **kwargs: Any) -> Attrs:
    """Build a class attribute.

    Positional items are class names or (name, predicate) pairs; keyword
    arguments map a class name to its predicate. Names whose predicate is
    false, and empty names, are left out.
    """
    classes: list[str] = []
    for arg in args:
        if isinstance(arg, tuple) and len(arg) == 2:
            name, predicate = arg
            if predicate:
                classes.append(name)
        else:
            classes.append(arg)
    for name, predicate in kwargs.items():
        if predicate:
            classes.append(_keyword_name(name))
    result = Attrs()
    result.add_multiple(CLASS, classes)
    return result


def id_(value: Any) -> Attrs:
    """Attributes holding only an id."""
    return Attrs.from_id(value)


def style(*args: Any, **kwargs: Any) -> Style:
    """Build a style from mappings, (key, value) pairs and keyword arguments.

    A value of None leaves the property out when rendering.
    """
    result = Style()
    for key, value in _pairs(args, kwargs):
        result.add(key, value)
    return result


def key_value_pairs(mapping: Mapping[Any, Any] | Iterable[tuple[Any, Any]]) -> dict[str, str]:
    """Return an ordered dict with keys and values turned into strings."""
    items = mapping.items() if isinstance(mapping, Mapping) else mapping
    return {_to_string(key): _to_string(value) for key, value in items}


def _format(args: tuple[Any, ...]) -> str:
    return " ".join(repr(arg) for arg in args)


def log(*args: Any) -> str:
    """Log the values, separated by spaces, and return the logged text."""
    text = _format(args)
    logger.info(text)
    return text


def error(*args: Any) -> str:
    """Log the values as an error, separated by spaces, and return the logged text."""
    text = _format(args)
    logger.error(text)
    return text


class ElementFactory:
    """Creates elements by attribute name, e.g. ``factory.div("text")``.

    A trailing underscore may be added to names that clash with Python
    keywords or builtins, e.g. ``factory.del_()``.
    """

    def __getattr__(self, name: str) -> Callable[..., El]:
        if name.startswith("_"):
            raise AttributeError(name)
        bare = name.rstrip("_")
        if bare in _SVG_ELEMENTS:
            return partial(svg_element, Tag.from_str(_SVG_ELEMENTS[bare]))
        if bare in _HTML_ELEMENTS:
            return partial(element, Tag.from_str(bare))
        raise AttributeError(f"no element shortcut named {name!r}")

    def __call__(self, tag: Tag | str, *args: Any) -> El:
        return element(tag, *args)