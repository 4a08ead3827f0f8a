import pytest

from seedvdom.values import (
    AtValue,
    AtValueKind,
    CSSValue,
    as_at_value,
    to_at_value,
    to_css_value,
)


def test_as_at_value_true_is_none():
    assert as_at_value(True) == AtValue.NONE
    assert as_at_value(True).is_none()


def test_as_at_value_false_is_ignored():
    assert as_at_value(False) is AtValue.IGNORED
    assert as_at_value(False).is_ignored()


def test_to_at_value_from_string():
    value = to_at_value("abc")
    assert value == AtValue.some("abc")
    assert value.kind is AtValueKind.SOME
    assert not value.is_ignored()


def test_to_at_value_keeps_at_values():
    assert to_at_value(AtValue.NONE) is AtValue.NONE
    assert to_at_value(AtValue.IGNORED) is AtValue.IGNORED


def test_to_at_value_from_number_and_bool():
    assert to_at_value(5).text == "5"
    assert to_at_value(True).text == "true"


def test_to_at_value_rejects_none():
    with pytest.raises(TypeError):
        to_at_value(None)


def test_to_css_value_none_is_ignored():
    assert to_css_value(None).is_ignored()
    assert to_css_value(None) == CSSValue.IGNORED


def test_to_css_value_from_string():
    value = to_css_value("red")
    assert value == CSSValue("red")
    assert not value.is_ignored()
    assert str(value) == "red"


def test_to_css_value_keeps_css_values():
    assert to_css_value(CSSValue.IGNORED) is CSSValue.IGNORED
    given = CSSValue("12px")
    assert to_css_value(given) is given