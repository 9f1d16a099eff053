"""Entity manager: hands out entity ids, stores components and feeds systems."""

import copy
from collections import deque

from frengine.components import (
    MAX_COMP_COUNT,
    MAX_ENTITY_COUNT,
    CompList,
    ECSError,
    check_component_type,
)
from frengine.factory import ComponentFactory


def _check_entity(entity):
    if not 0 <= entity < MAX_ENTITY_COUNT:
        raise IndexError(f"entity id {entity} out of range")


class EntityManager:
    """Owns entities, their components and the systems working on them.

    Systems added with ``add_system`` are activated as soon as an entity
    matches them; editor and runtime systems receive matching entities but
    only run once their group is activated.
    """

    def __init__(self, factory=None):
        self.factory = factory if factory is not None else ComponentFactory()
        # Counts every id handed out; destroying an entity does not lower it.
        self._entity_count = 0
        self._active_entities = set()
        self._available = deque(range(MAX_ENTITY_COUNT))
        # Dicts keep insertion order and serve as ordered sets.
        self._systems = {}
        self._active_systems = {}
        self._editor_systems = {}
        self._runtime_systems = {}
        self._component_lists = {}
        self._signatures = {}

    def start(self):
        for system in tuple(self._active_systems):
            system.start()

    def update(self):
        for system in tuple(self._active_systems):
            system.update()

    def render(self):
        for system in tuple(self._active_systems):
            system.render()

    def activate_runtime_systems(self):
        for system in self._runtime_systems:
            system.start()
            self._active_systems[system] = None

    def activate_editor_systems(self):
        for system in self._editor_systems:
            system.start()
            self._active_systems[system] = None

    def deactivate_runtime_systems(self):
        for system in self._runtime_systems:
            system.stop()
            self._active_systems.pop(system, None)

    def deactivate_editor_systems(self):
        for system in self._editor_systems:
            system.stop()
            self._active_systems.pop(system, None)

    def active_entities(self):
        """Ids of the live entities, in ascending order."""
        return sorted(self._active_entities)

    def active_systems(self):
        """The systems that currently run."""
        return tuple(self._active_systems)

    def add_new_entity(self):
        """Hand out the next free entity id."""
        if self._entity_count >= MAX_ENTITY_COUNT:
            raise ECSError("Entity count limit reached!")
        entity = self._available.popleft()
        self._active_entities.add(entity)
        self._entity_count += 1
        return entity

    def destroy_entity(self, entity):
        """Drop every component of ``entity`` and return its id to the back of the queue."""
        _check_entity(entity)
        self._signatures.pop(entity, None)
        for comp_list in self._component_lists.values():
            comp_list.erase(entity)
        self._update_entity_target_systems(entity)
        self._available.append(entity)
        self._active_entities.discard(entity)

    def _check_room(self, entity):
        _check_entity(entity)
        if len(self._signatures.get(entity, ())) >= MAX_COMP_COUNT:
            raise ECSError("Component count limit reached!")

    def add_component(self, entity, component):
        """Attach a copy of ``component`` to ``entity`` and return the stored copy."""
        self._check_room(entity)
        component_type = type(component)
        check_component_type(component_type)
        if component_type not in self._component_lists:
            self.register_comp_list(component_type)
        stored = copy.deepcopy(component)
        stored.entity_id = entity
        self._component_lists[component_type].insert(stored)
        self._signatures.setdefault(entity, set()).add(component_type)
        self._update_entity_target_systems(entity)
        return stored

    def add_component_by_name(self, entity, type_name):
        """Attach a new component built by the factory under ``type_name``."""
        self._check_room(entity)
        component_type = self.factory.type_of(type_name)
        comp_list = self._registered_list(component_type)
        component = self.factory.create_component(type_name)
        component.entity_id = entity
        comp_list.insert(component)
        self._signatures.setdefault(entity, set()).add(component_type)
        self._update_entity_target_systems(entity)
        return component

    def remove_component(self, entity, component_type):
        _check_entity(entity)
        self._signatures.get(entity, set()).discard(component_type)
        self._registered_list(component_type).erase(entity)
        self._update_entity_target_systems(entity)

    def remove_component_by_name(self, entity, type_name):
        _check_entity(entity)
        component_type = self.factory.type_of(type_name)
        comp_list = self._registered_list(component_type)
        comp_list.erase(entity)
        self._signatures.get(entity, set()).discard(component_type)
        self._update_entity_target_systems(entity)

    def get_component(self, entity, component_type):
        """The stored component of ``component_type`` owned by ``entity``."""
        _check_entity(entity)
        return self._registered_list(component_type).get(entity)

    def has_component(self, entity, component_type):
        _check_entity(entity)
        return component_type in self._signatures.get(entity, ())

    def add_system(self, system_type):
        """Create a system that runs in both editor and runtime; return it."""
        system = system_type()
        self._systems[system] = None
        return system

    def add_runtime_system(self, system_type):
        system = system_type()
        self._runtime_systems[system] = None
        return system

    def add_editor_system(self, system_type):
        system = system_type()
        self._editor_systems[system] = None
        return system

    def register_comp_list(self, component_type):
        """Create the storage for ``component_type``; it may be created only once."""
        if component_type in self._component_lists:
            raise ECSError("Component list already registered")
        self._component_lists[component_type] = CompList(component_type)

    def _registered_list(self, component_type):
        try:
            return self._component_lists[component_type]
        except (KeyError, TypeError):
            raise ECSError("Component list not registered") from None

    def _update_entity_target_systems(self, entity):
        for system in self._systems:
            self._push_entity_to_system(entity, system)
        for system in self._editor_systems:
            self._push_entity_to_system(entity, system, activate=False)
        for system in self._runtime_systems:
            self._push_entity_to_system(entity, system, activate=False)

    def _push_entity_to_system(self, entity, system, activate=True):
        signature = self._signatures.get(entity, set())
        if not system.signature <= signature:
            system.erase_entity(entity)
            if system.is_empty():
                self._active_systems.pop(system, None)
            return
        system.push_entity(entity)
        if activate:
            self._active_systems.setdefault(system, None)