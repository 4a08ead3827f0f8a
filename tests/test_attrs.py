from seedvdom.attrs import Attrs
from seedvdom.values import AtValue


def test_from_id():
    attrs = Attrs.from_id("main")
    assert attrs.vals == {"id": AtValue.some("main")}
    assert str(attrs) == 'id="main"'


def test_str_skips_ignored_and_renders_bare_keys():
    attrs = Attrs()
    attrs.add("disabled", AtValue.NONE)
    attrs.add("hidden", AtValue.IGNORED)
    attrs.add("href", "#")
    assert str(attrs) == 'disabled href="#"'


def test_empty_renders_empty():
    assert str(Attrs()) == ""


def test_add_multiple_skips_empty_items():
    attrs = Attrs()
    attrs.add_multiple("class", ["a", "", "b"])
    assert attrs.vals["class"] == AtValue.some("a b")


def test_merge_concatenates_classes():
    first = Attrs()
    first.add("class", "x")
    second = Attrs()
    second.add("class", "y")
    first.merge(second)
    assert first.vals["class"].text.split() == ["x", "y"]


def test_merge_into_empty_class_takes_other():
    first = Attrs()
    first.add("class", "")
    second = Attrs()
    second.add("class", "y")
    first.merge(second)
    assert first.vals["class"] == AtValue.some("y")


def test_merge_class_with_bare_value_replaces():
    first = Attrs()
    first.add("class", "x")
    second = Attrs()
    second.add("class", AtValue.NONE)
    first.merge(second)
    assert first.vals["class"] is AtValue.NONE


def test_merge_replaces_other_keys_and_keeps_order():
    first = Attrs()
    first.add("id", "one")
    first.add("title", "t")
    second = Attrs()
    second.add("id", "two")
    second.add("href", "#")
    first.merge(second)
    assert list(first.vals) == ["id", "title", "href"]
    assert first.vals["id"] == AtValue.some("two")


def test_copy_is_independent():
    original = Attrs.from_id("a")
    duplicate = original.copy()
    duplicate.add("href", "#")
    assert "href" not in original.vals
    assert duplicate.vals["id"] == original.vals["id"]


def test_equality_ignores_order():
    first = Attrs()
    first.add("id", "a")
    first.add("href", "#")
    second = Attrs()
    second.add("href", "#")
    second.add("id", "a")
    assert first == second