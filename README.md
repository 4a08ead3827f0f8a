# seedvdom

A small virtual DOM model for building element trees in plain Python.

## What is in the package

- `seedvdom.tag_names.Tag`: element tags. Known HTML and SVG tags are class
  attributes (`Tag.DIV`, `Tag.SPAN`, `Tag.FE_BLEND`, ...). `Tag.from_str(name)`
  returns the known tag or a custom one, and `is_custom()` tells them apart.
- `seedvdom.event_names.Ev`: an `Enum` of DOM event names. `Ev.from_str(name)`
  logs an error and returns `Ev.CLICK` for an unknown name.
- `seedvdom.style_names.St`: CSS properties. Known ones are class attributes
  (`St.DISPLAY`, `St.FONT_SIZE`, `St.MOZ_APPEARANCE`, ...). `St.from_str(name)`
  logs an error for an unknown name and returns a custom property.
  `seedvdom.style_table` holds the property table, with `style_member_name`
  and `css_name_of` to convert between CSS names and member names.
- `seedvdom.values`: `CSSValue` and `AtValue`, with `to_css_value`,
  `to_at_value` and `as_at_value`.
- `seedvdom.attrs.Attrs` and `seedvdom.style.Style`: ordered collections of
  attributes and CSS properties, with `add`, `merge` and `copy`. `str()` gives
  an HTML-compatible string, such as `class="card active"` or
  `display:flex;color:red`.
- `seedvdom.node`: `El`, `Text` and `Empty`, all subclasses of `Node`, plus
  `new_text` and `empty`. `El` has `add_child`, `add_attr`, `add_class`,
  `add_style`, `add_listener`, `add_text`, `replace_text`, `get_text`,
  `map_msg`, `clone` and `strip_ws_nodes`; `El.svg(tag)` creates an element in
  the SVG namespace.
- `seedvdom.listener`: `Listener` and `Category`.
- `seedvdom.mailbox.Mailbox`: delivers messages to one function.
- `seedvdom.update_el.update_el(el, part)`: applies one part (attributes,
  style, listener, lifecycle hooks, a string, a node, a tag, or an iterable of
  these) to an element.
- `seedvdom.view.els(view)`: turns a node or an iterable of nodes into a list.
- `seedvdom.elements`: shortcut builders.

## Installation

```
pip install .
```

## Building elements

```python
from seedvdom.elements import element, attrs, class_, style
from seedvdom.tag_names import Tag

node = element(
    Tag.DIV,
    class_("card", active=True),
    style({"display": "flex"}),
    "Hello",
    element(Tag.SPAN, attrs({"title": "greeting"}), "world"),
)
print(node.get_text())   # "Hello"
print(node.attrs)        # class="card active"
print(node.style)        # display:flex
```

`attrs` and `style` take mappings, `(key, value)` pairs and keyword
arguments; in keyword names a trailing underscore is dropped and other
underscores become hyphens (`data_id` gives `data-id`). `class_` takes class
names, `(name, predicate)` pairs and `name=predicate` keywords, and leaves out
empty names and names whose predicate is false. `id_(value)` gives an `id`
attribute.

`svg_element(tag, ...)` creates an element in the SVG namespace.
`custom(Tag.from_str("code-block"), ...)` creates an element with a custom
tag, and raises `ValueError` if no tag was given among its parts.
`plain(text)` creates a text node.

`ElementFactory` creates elements by attribute name:

```python
from seedvdom.elements import ElementFactory

h = ElementFactory()
h.div(h.span("a"), h.circle())   # circle is created in the SVG namespace
h.del_("removed")                # trailing underscore for Python keywords
```

`key_value_pairs` returns an ordered dict with keys and values turned into
strings. `log(*values)` and `error(*values)` write the values' `repr`s,
separated by spaces, to the `seedvdom.elements` logger and return that text.

## Attribute and style values

`AtValue` separates three cases: an ignored attribute (`AtValue.IGNORED`), an
attribute with no value such as `disabled` (`AtValue.NONE`), and an attribute
with a value (`AtValue.some(text)`). `as_at_value(True)` gives `NONE` and
`as_at_value(False)` gives `IGNORED`. Ignored attributes are left out of the
rendered string.

`CSSValue` separates an ignored property (`CSSValue.IGNORED`) from a rendered
one. `to_css_value(None)` gives an ignored property.

When attributes are merged, two `class` values are joined with a space; other
keys are replaced. When styles are merged, the other style's value wins.

## Messages

`Listener.handle(event, mailbox)` runs the handler on the event and sends the
message it returns to the `Mailbox`; it raises `ValueError` if the listener
has no handler. `map_msg` on listeners, elements and nodes wraps their
messages through a function, so a component's messages can be turned into an
application's messages. `Listener.new_control(value)` and
`Listener.new_control_check(checked)` create listeners that carry a value
for a controlled input or checkbox.

## What the package does not do

It only builds and compares element trees. It does not render them into a
browser document, does not diff or patch a live DOM, does not attach
listeners to real event targets, does not run lifecycle hooks, and does not
parse HTML or Markdown into nodes. There is no application loop and no
command-line program.

## Running the tests

```
pip install .[test]
pytest
```