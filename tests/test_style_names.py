import logging

import pytest

from seedvdom.style_names import St
from seedvdom.style_table import CSS_PROPERTY_NAMES


def test_known_property_is_member():
    st = St.from_str("line-height")
    assert st is St.LINE_HEIGHT
    assert st.as_str() == "line-height"
    assert not st.is_custom()


def test_vendor_prefixed_member():
    assert St.MOZ_APPEARANCE.as_str() == "-moz-appearance"
    assert St.from_str("-moz-appearance") is St.MOZ_APPEARANCE


@pytest.mark.parametrize("name", CSS_PROPERTY_NAMES)
def test_every_known_name_round_trips(name):
    st = St.from_str(name)
    assert st.as_str() == name
    assert not st.is_custom()


def test_unknown_property_is_custom_and_logged(caplog):
    with caplog.at_level(logging.ERROR):
        st = St.from_str("x-made-up")
    assert st.is_custom()
    assert st.as_str() == "x-made-up"
    assert "x-made-up" in caplog.text


def test_custom_properties_compare_by_name():
    assert St.from_str("x-foo") == St.from_str("x-foo")
    assert St.from_str("x-foo") != St.from_str("x-bar")


def test_str_is_css_name():
    st = St.from_str("color")
    assert st is St.COLOR
    assert str(st) == "color"