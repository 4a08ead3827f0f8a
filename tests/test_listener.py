import logging

import pytest

from seedvdom.event_names import Ev
from seedvdom.listener import Category, Listener
from seedvdom.mailbox import Mailbox


def test_string_trigger_becomes_event():
    listener = Listener("click", lambda e: e)
    assert listener.trigger is Ev.CLICK


def test_unknown_trigger_falls_back_to_click(caplog):
    with caplog.at_level(logging.ERROR):
        listener = Listener("not-an-event")
    assert listener.trigger is Ev.CLICK
    assert "not-an-event" in caplog.text


def test_new_control():
    listener = Listener.new_control("abc")
    assert listener.trigger is Ev.INPUT
    assert listener.control_val == "abc"
    assert listener.control_checked is None
    assert listener.handler is None


def test_new_control_check():
    listener = Listener.new_control_check(True)
    assert listener.trigger is Ev.CLICK
    assert listener.control_checked is True
    assert listener.control_val is None


def test_handle_sends_handler_result():
    sent = []
    listener = Listener(Ev.CLICK, lambda e: ("msg", e))
    listener.handle("evt", Mailbox(sent.append))
    assert sent == [("msg", "evt")]


def test_handle_without_handler_raises():
    with pytest.raises(ValueError):
        Listener.new_control("x").handle("evt", Mailbox(lambda m: None))


def test_equality_compares_trigger_category_and_message_presence():
    first = Listener(Ev.CLICK, category=Category.MOUSE, message=1)
    second = Listener(Ev.CLICK, category=Category.MOUSE, message=2)
    assert first == second
    assert first != Listener(Ev.CLICK, category=Category.MOUSE)
    assert first != Listener(Ev.INPUT, category=Category.MOUSE, message=1)
    assert first != Listener(Ev.CLICK, category=Category.SIMPLE, message=1)


def test_map_msg_wraps_handler_and_message():
    sent = []
    listener = Listener(Ev.CLICK, lambda e: e, category=Category.RAW, message=1)
    mapped = listener.map_msg(lambda m: ("wrapped", m))
    assert mapped.message == ("wrapped", 1)
    assert mapped.category is Category.RAW
    mapped.handle("evt", Mailbox(sent.append))
    assert sent == [("wrapped", "evt")]


def test_map_msg_keeps_control_values():
    mapped = Listener.new_control("abc").map_msg(lambda m: m)
    assert mapped.control_val == "abc"
    assert mapped.handler is None
    assert mapped.message is None