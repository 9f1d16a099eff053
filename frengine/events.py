"""Event types posted by the window, keyboard and mouse."""

from dataclasses import dataclass, field


class Event:
    """Base of every event; only its subclasses can be created and dispatched."""

    def __new__(cls, *args, **kwargs):
        if cls is Event:
            raise TypeError("Event is abstract; create one of its subclasses")
        return super().__new__(cls)


@dataclass(frozen=True)
class UiEvent(Event):
    """Raised by the editor interface."""


@dataclass(frozen=True)
class ViewportResizedEvent(Event):
    """The editor viewport changed size."""

    width: float
    height: float


@dataclass(frozen=True)
class KeyEvent(Event):
    """Any keyboard activity."""


@dataclass(frozen=True)
class KeyPressedEvent(KeyEvent):
    """A key went down."""


@dataclass(frozen=True)
class KeyReleasedEvent(KeyEvent):
    """A key went up."""


@dataclass(frozen=True)
class WindowEvent(Event):
    """Any window activity."""


@dataclass(frozen=True)
class WindowCloseEvent(Event):
    """The window was asked to close."""


@dataclass(frozen=True)
class WindowResizedEvent(Event):
    """The window changed size."""

    width: float
    height: float


@dataclass
class MouseData:
    """Live mouse state: pressed buttons, scroll offsets and cursor positions."""

    buttons: set = field(default_factory=set)
    scroll_x: float = 0.0
    scroll_y: float = 0.0
    last_x: float = 0.0
    last_y: float = 0.0
    pos_x: float = 0.0
    pos_y: float = 0.0


@dataclass(frozen=True)
class MouseEvent(Event):
    """Snapshot of the mouse state at the moment the event was posted."""

    scroll_x: float = 0.0
    scroll_y: float = 0.0
    last_x: float = 0.0
    last_y: float = 0.0
    pos_x: float = 0.0
    pos_y: float = 0.0

    @classmethod
    def from_data(cls, data):
        """Copy the positions and scroll offsets out of a MouseData."""
        return cls(
            scroll_x=data.scroll_x,
            scroll_y=data.scroll_y,
            last_x=data.last_x,
            last_y=data.last_y,
            pos_x=data.pos_x,
            pos_y=data.pos_y,
        )

    def delta_x(self):
        """Horizontal movement, previous position minus current."""
        return self.last_x - self.pos_x

    def delta_y(self):
        """Vertical movement, previous position minus current."""
        return self.last_y - self.pos_y


class MousePressEvent(MouseEvent):
    """A mouse button went down."""


class MouseReleaseEvent(MouseEvent):
    """A mouse button went up."""


class MouseMotionEvent(MouseEvent):
    """The cursor moved."""


class MouseScrollEvent(MouseEvent):
    """The scroll wheel turned."""