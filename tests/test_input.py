import pytest

from frengine.dispatcher import EventDispatcher
from frengine.events import (
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseEvent,
    MouseMotionEvent,
    MousePressEvent,
    MouseReleaseEvent,
    MouseScrollEvent,
    WindowCloseEvent,
    WindowEvent,
    WindowResizedEvent,
)
from frengine.input import KEYBOARD_SIZE, Action, EventSystem, MouseButton
from frengine.keycodes import KeyCode

_ALL_TYPES = [
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseEvent,
    MouseMotionEvent,
    MousePressEvent,
    MouseReleaseEvent,
    MouseScrollEvent,
    WindowCloseEvent,
    WindowEvent,
    WindowResizedEvent,
]


@pytest.fixture
def recorded():
    dispatcher = EventDispatcher()
    events = []
    for event_type in _ALL_TYPES:
        dispatcher.add_listener(event_type, events.append)
    return EventSystem(dispatcher), events


def test_window_close_posts_two_events(recorded):
    system, events = recorded
    system.on_window_close()
    assert events == [WindowEvent(), WindowCloseEvent()]


def test_window_resized(recorded):
    system, events = recorded
    system.on_window_resized(1280, 720)
    assert events == [WindowEvent(), WindowResizedEvent(1280, 720)]


def test_key_press_and_release(recorded):
    system, events = recorded
    system.on_key(KeyCode.W, Action.PRESS)
    assert system.is_key_pressed(KeyCode.W)
    assert system.pressed_keys == {KeyCode.W}
    system.on_key(KeyCode.W, Action.RELEASE)
    assert not system.is_key_pressed(KeyCode.W)
    assert events == [KeyPressedEvent(), KeyEvent(), KeyReleasedEvent(), KeyEvent()]


def test_key_repeat_only_posts_key_event(recorded):
    system, events = recorded
    system.on_key(KeyCode.A, Action.REPEAT)
    assert events == [KeyEvent()]
    assert not system.is_key_pressed(KeyCode.A)


def test_key_out_of_range(recorded):
    system, _ = recorded
    with pytest.raises(IndexError):
        system.on_key(KEYBOARD_SIZE, Action.PRESS)
    with pytest.raises(IndexError):
        system.is_key_pressed(-1)


def test_mouse_press_posts_state_before_press(recorded):
    system, events = recorded
    system.on_mouse_button(MouseButton.LEFT, Action.PRESS)
    assert system.is_mouse_down(MouseButton.LEFT)
    assert [type(e) for e in events] == [MousePressEvent, MouseEvent]


def test_mouse_release(recorded):
    system, events = recorded
    system.on_mouse_button(MouseButton.RIGHT, Action.PRESS)
    system.on_mouse_button(MouseButton.RIGHT, Action.RELEASE)
    assert not system.is_mouse_down(MouseButton.RIGHT)
    assert [type(e) for e in events][2:] == [MouseReleaseEvent, MouseEvent]


def test_mouse_button_out_of_range(recorded):
    system, _ = recorded
    with pytest.raises(IndexError):
        system.on_mouse_button(len(MouseButton), Action.PRESS)
    with pytest.raises(IndexError):
        system.is_mouse_down(len(MouseButton))


def test_mouse_motion_tracks_last_position(recorded):
    system, events = recorded
    system.on_mouse_motion(10.0, 20.0)
    system.on_mouse_motion(15.0, 25.0)
    assert (system.mouse.last_x, system.mouse.last_y) == (10.0, 20.0)
    assert (system.mouse.pos_x, system.mouse.pos_y) == (15.0, 25.0)
    motion = events[2]
    assert type(motion) is MouseMotionEvent
    assert motion.delta_x() == -5.0
    assert events[3] == MouseEvent(last_x=10.0, last_y=20.0, pos_x=15.0, pos_y=25.0)


def test_mouse_scroll(recorded):
    system, events = recorded
    system.on_mouse_scroll(0.0, -1.5)
    assert (system.mouse.scroll_x, system.mouse.scroll_y) == (0.0, -1.5)
    assert [type(e) for e in events] == [MouseScrollEvent, MouseEvent]
    assert events[0].scroll_y == -1.5


def test_action_values_accept_plain_ints(recorded):
    system, _ = recorded
    system.on_key(int(KeyCode.SPACE), int(Action.PRESS))
    assert system.is_key_pressed(KeyCode.SPACE)


def test_systems_do_not_share_state():
    first = EventSystem(EventDispatcher())
    second = EventSystem(EventDispatcher())
    first.on_key(KeyCode.Q, Action.PRESS)
    assert not second.is_key_pressed(KeyCode.Q)
    assert second.pressed_keys == frozenset()