import pytest

from frengine.dispatcher import EventDispatcher
from frengine.events import (
    Event,
    KeyEvent,
    KeyPressedEvent,
    MouseData,
    MouseMotionEvent,
    WindowResizedEvent,
)


def test_listener_receives_event():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.add_listener(WindowResizedEvent, received.append)
    event = WindowResizedEvent(800, 600)
    dispatcher.post(event)
    assert received == [event]


def test_listeners_called_in_order():
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.add_listener(KeyEvent, lambda e: calls.append("first"))
    dispatcher.add_listener(KeyEvent, lambda e: calls.append("second"))
    dispatcher.post(KeyEvent())
    assert calls == ["first", "second"]


def test_exact_type_matching():
    dispatcher = EventDispatcher()
    base, derived = [], []
    dispatcher.add_listener(KeyEvent, base.append)
    dispatcher.add_listener(KeyPressedEvent, derived.append)
    dispatcher.post(KeyPressedEvent())
    assert base == []
    assert derived == [KeyPressedEvent()]


def test_post_without_listeners_calls_nothing():
    dispatcher = EventDispatcher()
    received = []
    dispatcher.add_listener(KeyEvent, received.append)
    dispatcher.post(MouseMotionEvent.from_data(MouseData()))
    assert received == []


def test_listener_count():
    dispatcher = EventDispatcher()
    assert dispatcher.listener_count(KeyEvent) == 0
    dispatcher.add_listener(KeyEvent, print)
    dispatcher.add_listener(KeyEvent, repr)
    assert dispatcher.listener_count(KeyEvent) == 2
    assert dispatcher.listener_count(KeyPressedEvent) == 0


@pytest.mark.parametrize("bad", [Event, int, "KeyEvent", None])
def test_add_listener_rejects_non_event_types(bad):
    dispatcher = EventDispatcher()
    with pytest.raises(TypeError):
        dispatcher.add_listener(bad, print)


def test_post_rejects_non_events():
    dispatcher = EventDispatcher()
    with pytest.raises(TypeError):
        dispatcher.post(42)


def test_separate_dispatchers_are_independent():
    first, second = EventDispatcher(), EventDispatcher()
    received = []
    first.add_listener(KeyEvent, received.append)
    second.post(KeyEvent())
    assert received == []
    assert second.listener_count(KeyEvent) == 0