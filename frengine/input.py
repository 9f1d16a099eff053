"""Keyboard and mouse state kept up to date from window callbacks."""

from enum import IntEnum

from frengine.events import (
    KeyEvent,
    KeyPressedEvent,
    KeyReleasedEvent,
    MouseData,
    MouseEvent,
    MouseMotionEvent,
    MousePressEvent,
    MouseReleaseEvent,
    MouseScrollEvent,
    WindowCloseEvent,
    WindowEvent,
    WindowResizedEvent,
)

KEYBOARD_SIZE = 1024
"""Number of key slots tracked."""

MOUSE_BUTTON_COUNT = 3
"""Number of mouse buttons tracked."""


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


def _check_key(key):
    if not 0 <= key < KEYBOARD_SIZE:
        raise IndexError(f"key code {key} out of range")


def _check_button(button):
    if not 0 <= button < MOUSE_BUTTON_COUNT:
        raise IndexError(f"mouse button {button} out of range")


class EventSystem:
    """Tracks pressed keys and the mouse, posting events through a dispatcher."""

    def __init__(self, dispatcher):
        self.dispatcher = dispatcher
        self.mouse = MouseData()
        self._keys = set()

    @property
    def pressed_keys(self):
        """The key codes currently held down."""
        return frozenset(self._keys)

    def is_key_pressed(self, key):
        _check_key(key)
        return key in self._keys

    def is_mouse_down(self, button):
        _check_button(button)
        return button in self.mouse.buttons

    def on_window_close(self):
        self.dispatcher.post(WindowEvent())
        self.dispatcher.post(WindowCloseEvent())

    def on_window_resized(self, width, height):
        self.dispatcher.post(WindowEvent())
        self.dispatcher.post(WindowResizedEvent(width, height))

    def on_key(self, key, action):
        """Record a key press or release; other actions only post a KeyEvent."""
        if action == Action.PRESS:
            _check_key(key)
            self._keys.add(key)
            self.dispatcher.post(KeyPressedEvent())
        elif action == Action.RELEASE:
            _check_key(key)
            self._keys.discard(key)
            self.dispatcher.post(KeyReleasedEvent())
        self.dispatcher.post(KeyEvent())

    def on_mouse_button(self, button, action):
        """Post the press or release with the state from before it, then record it."""
        if action == Action.PRESS:
            _check_button(button)
            self.dispatcher.post(MousePressEvent.from_data(self.mouse))
            self.mouse.buttons.add(button)
        elif action == Action.RELEASE:
            _check_button(button)
            self.dispatcher.post(MouseReleaseEvent.from_data(self.mouse))
            self.mouse.buttons.discard(button)
        self.dispatcher.post(MouseEvent.from_data(self.mouse))

    def on_mouse_motion(self, x, y):
        mouse = self.mouse
        mouse.last_x, mouse.last_y = mouse.pos_x, mouse.pos_y
        mouse.pos_x, mouse.pos_y = x, y
        self.dispatcher.post(MouseMotionEvent.from_data(mouse))
        self.dispatcher.post(MouseEvent.from_data(mouse))

    def on_mouse_scroll(self, x, y):
        self.mouse.scroll_x, self.mouse.scroll_y = x, y
        self.dispatcher.post(MouseScrollEvent.from_data(self.mouse))
        self.dispatcher.post(MouseEvent.from_data(self.mouse))