"""Base class for systems that act on entities holding a set of component types."""

from frengine.components import check_component_type


class BaseSystem:
    """A system with a signature of component types and the entities that match it.

    Subclasses declare their signature, usually in ``__init__``, and override
    the lifecycle hooks they need. The default hooks keep track of the
    system's lifecycle state: whether it is awake and running, and how many
    update and render passes it has seen.
    """

    def __init__(self):
        self._signature = set()
        self._entities = set()
        self._awake = False
        self._running = False
        self._updates = 0
        self._renders = 0

    @property
    def signature(self):
        """The component types an entity must have to belong to this system."""
        return frozenset(self._signature)

    @property
    def entities(self):
        """The entities currently handled by this system."""
        return frozenset(self._entities)

    @property
    def is_awake(self):
        """Whether the default ``awake`` hook has run."""
        return self._awake

    @property
    def running(self):
        """Whether the system was started and not stopped since."""
        return self._running

    @property
    def update_count(self):
        """How many times the default ``update`` hook has run."""
        return self._updates

    @property
    def render_count(self):
        """How many times the default ``render`` hook has run."""
        return self._renders

    def add_component_signature(self, component_type):
        check_component_type(component_type)
        self._signature.add(component_type)

    def push_entity(self, entity):
        self._entities.add(entity)

    def erase_entity(self, entity):
        self._entities.discard(entity)

    def is_empty(self):
        return not self._entities

    def has_entity(self, entity):
        return entity in self._entities

    def start(self):
        """Called when the system becomes active."""
        self._running = True

    def stop(self):
        """Called when the system is deactivated."""
        self._running = False

    def update(self):
        """Called once per frame while the system is active."""
        self._updates += 1

    def render(self):
        """Called once per rendered frame while the system is active."""
        self._renders += 1

    def awake(self):
        """Called when the system is first woken."""
        self._awake = True