"""Routing of events to the callbacks registered for their exact type."""

from frengine.events import Event


def _check_event_type(event_type):
    if not (isinstance(event_type, type) and issubclass(event_type, Event)) or event_type is Event:
        raise TypeError(f"{event_type!r} is not a concrete event type")


class EventDispatcher:
    """Holds listeners per event type and calls them when an event is posted.

    Listeners are matched on the event's exact type: a listener for KeyEvent
    is not called for a KeyPressedEvent.
    """

    def __init__(self):
        self._callbacks = {}

    def add_listener(self, event_type, callback):
        """Register ``callback`` for events of ``event_type``."""
        _check_event_type(event_type)
        self._callbacks.setdefault(event_type, []).append(callback)

    def post(self, event):
        """Call every listener of the event's type, in registration order."""
        if not isinstance(event, Event):
            raise TypeError(f"{event!r} is not an event")
        for callback in tuple(self._callbacks.get(type(event), ())):
            callback(event)

    def listener_count(self, event_type):
        """Number of listeners registered for ``event_type``."""
        return len(self._callbacks.get(event_type, ()))