"""Registry that builds components from their type names."""

from frengine.components import ECSError, check_component_type


class ComponentFactory:
    """Maps type names to component types and to constructors for them."""

    def __init__(self):
        self._constructors = {}
        self._types = {}

    def register_type(self, component_type, type_name, constructor):
        """Register ``constructor`` as the way to build ``type_name`` components."""
        check_component_type(component_type)
        self._constructors[type_name] = constructor
        self._types[type_name] = component_type

    def create_component(self, type_name):
        """Build a new component of the named type."""
        try:
            constructor = self._constructors[type_name]
        except KeyError:
            raise ECSError(
                f"Component type {type_name!r} not found in registry"
            ) from None
        return constructor()

    def type_of(self, type_name):
        """The component type registered under ``type_name``."""
        try:
            return self._types[type_name]
        except KeyError:
            raise ECSError(f"Type name {type_name!r} is not registered") from None

    def register(self, type_name):
        """Class decorator registering a component class under ``type_name``."""

        def decorator(component_type):
            self.register_type(component_type, type_name, component_type)
            return component_type

        return decorator