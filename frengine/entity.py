"""Handle that ties an entity id to its manager."""


class Entity:
    """A new entity created in ``manager``, with shortcuts to its components."""

    def __init__(self, manager):
        self._manager = manager
        self._id = manager.add_new_entity()

    @property
    def id(self):
        """The entity id."""
        return self._id

    def add_component(self, component):
        """Attach a copy of ``component`` and return the stored one."""
        return self._manager.add_component(self._id, component)

    def get_component(self, component_type):
        return self._manager.get_component(self._id, component_type)

    def remove_component(self, component_type):
        self._manager.remove_component(self._id, component_type)

    def has_component(self, component_type):
        return self._manager.has_component(self._id, component_type)

    def destroy(self):
        self._manager.destroy_entity(self._id)

    def __repr__(self):
        return f"Entity({self._id})"