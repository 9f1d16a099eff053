"""Component base class, entity limits and per-type component storage."""

INVALID_TYPE_ID = 0
INVALID_ENTITY = -1
MAX_COMP_COUNT = 32
"""Most components one entity may carry."""
MAX_ENTITY_COUNT = 5000
"""Most entities a manager hands out."""


class ECSError(Exception):
    """Misuse of the entity-component registry: duplicates, missing entries, full limits."""


class BaseComponent:
    """Base of every component; the owning entity is written in when it is attached."""

    entity_id = INVALID_ENTITY

    @property
    def id(self):
        """The entity this component belongs to, or INVALID_ENTITY."""
        return self.entity_id


def check_component_type(component_type):
    """Raise TypeError unless ``component_type`` is a proper BaseComponent subclass."""
    if (
        not isinstance(component_type, type)
        or not issubclass(component_type, BaseComponent)
        or component_type is BaseComponent
    ):
        raise TypeError(f"{component_type!r} is not a component type")


class CompList:
    """All components of one type, keyed by the entity that owns them."""

    def __init__(self, component_type):
        check_component_type(component_type)
        self.component_type = component_type
        self._data = {}

    def insert(self, component):
        """Store a component; an entity may hold only one of each type."""
        if not isinstance(component, self.component_type):
            raise TypeError(
                f"{component!r} is not a {self.component_type.__name__}"
            )
        if component.entity_id in self._data:
            raise ECSError("Trying to insert duplicate of component!")
        self._data[component.entity_id] = component

    def get(self, entity):
        """The component owned by ``entity``."""
        try:
            return self._data[entity]
        except KeyError:
            raise ECSError("Trying to get non-existing component!") from None

    def erase(self, entity):
        """Drop the component owned by ``entity``, if there is one."""
        self._data.pop(entity, None)

    def __len__(self):
        return len(self._data)

    def __contains__(self, entity):
        return entity in self._data

    def __iter__(self):
        return iter(self._data.values())