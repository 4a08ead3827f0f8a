import logging

import pytest

from seedvdom.elements import (
    ElementFactory,
    attrs,
    class_,
    custom,
    element,
    error,
    id_,
    key_value_pairs,
    log,
    plain,
    style,
    svg_element,
)
from seedvdom.node import El, Namespace, Text, empty
from seedvdom.style_names import St
from seedvdom.tag_names import Tag
from seedvdom.values import AtValue, CSSValue, as_at_value


def test_element_with_text():
    el = element("div", "text")
    assert el.tag == Tag.DIV
    assert el.children == [Text("text")]
    assert el.get_text() == "text"


def test_element_with_nested_children():
    el = element("div", "text", "more text", [element("li", "even more text")])
    assert len(el.children) == 3
    assert el.children[0].get_text() == "text"
    assert el.children[1].get_text() == "more text"
    child = el.children[2]
    assert isinstance(child, El)
    assert child.tag == Tag.LI
    assert child.get_text() == "even more text"


def test_element_keeps_empty_children_in_place():
    el = element("div", empty(), "b", "c")
    assert [child.is_empty() for child in el.children] == [True, False, False]
    assert [child.get_text() for child in el.children[1:]] == ["b", "c"]


def test_element_class_attribute():
    el = element("span", class_("first"), "hello")
    assert el.attrs.vals["class"] == AtValue.some("first")
    assert el.get_text() == "hello"


def test_element_classes_merge():
    el = element("span", class_("first"), class_("second"))
    assert el.attrs.vals["class"] == AtValue.some("first second")


def test_element_namespace_is_none_for_html():
    assert element("div").namespace is None


def test_svg_element_has_svg_namespace():
    el = svg_element("circle")
    assert el.namespace == Namespace.SVG
    assert el.tag == Tag.CIRCLE


def test_attrs_disabled_false_is_ignored():
    result = attrs({"disabled": as_at_value(False)})
    assert result.vals["disabled"].is_ignored()
    assert str(result) == ""


def test_attrs_disabled_true_renders_without_value():
    assert str(attrs({"disabled": as_at_value(True)})) == "disabled"


def test_attrs_href():
    assert str(attrs({"href": "#"})) == 'href="#"'


def test_attrs_pairs_and_keywords():
    result = attrs(("href", "#"), data_id="x", for_="name")
    assert list(result.vals) == ["href", "data-id", "for"]
    assert result.vals["data-id"] == AtValue.some("x")


def test_attrs_rejects_bad_argument():
    with pytest.raises(TypeError):
        attrs("href")


def test_class_predicates():
    result = class_("a", ("b", False), ("c", True))
    assert result.vals["class"] == AtValue.some("a c")


def test_class_keyword_predicates_and_empty_names():
    result = class_("", "x", active=True, hidden=False)
    assert result.vals["class"] == AtValue.some("x active")


def test_id():
    assert str(id_("main")) == 'id="main"'


def test_style_rendering():
    result = style({"color": "red"}, ("display", None))
    assert str(result) == "color:red"
    assert result.vals[St.DISPLAY] == CSSValue.IGNORED


def test_style_keywords():
    result = style(font_size="12px")
    assert result.vals[St.FONT_SIZE] == CSSValue("12px")


def test_element_with_style():
    el = element("span", style({"color": "red"}), "def")
    assert str(el.style) == "color:red"


def test_custom_with_tag():
    el = custom(Tag.from_str("code-block"), "x")
    assert el.tag.as_str() == "code-block"
    assert el.get_text() == "x"


def test_custom_with_known_tag():
    assert custom(Tag.DIV).tag == Tag.DIV


def test_custom_without_tag_raises():
    with pytest.raises(ValueError):
        custom("x")


def test_plain():
    assert plain("abc") == Text("abc")


def test_key_value_pairs():
    assert key_value_pairs({"a": 1, 2: True}) == {"a": "1", "2": "true"}
    assert key_value_pairs([("k", "v")]) == {"k": "v"}


def test_log_returns_and_logs(caplog):
    caplog.set_level(logging.INFO, logger="seedvdom.elements")
    text = log("a", 1)
    assert text == "'a' 1"
    assert caplog.records[-1].getMessage() == text
    assert caplog.records[-1].levelno == logging.INFO


def test_error_logs_at_error_level(caplog):
    caplog.set_level(logging.INFO, logger="seedvdom.elements")
    text = error("bad")
    assert caplog.records[-1].getMessage() == text
    assert caplog.records[-1].levelno == logging.ERROR


def test_factory_html_element():
    factory = ElementFactory()
    el = factory.div("x")
    assert el.tag == Tag.DIV
    assert el.get_text() == "x"
    assert el.namespace is None


def test_factory_svg_elements():
    factory = ElementFactory()
    assert factory.circle().namespace == Namespace.SVG
    assert factory.linear_gradient().tag.as_str() == "linearGradient"
    assert factory.line_().tag == Tag.LINE


def test_factory_trailing_underscore():
    factory = ElementFactory()
    assert factory.del_().tag.as_str() == "del"
    assert factory.input_().tag == Tag.INPUT


def test_factory_call():
    el = ElementFactory()("section", "x")
    assert el.tag == Tag.SECTION


def test_factory_unknown_name():
    factory = ElementFactory()
    assert getattr(factory, "nonexistent", "missing") == "missing"
    assert getattr(factory, "_private", "missing") == "missing"
    assert hasattr(factory, "nonexistent") is False