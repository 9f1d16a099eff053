from dataclasses import dataclass

import pytest

from frengine.components import BaseComponent, ECSError
from frengine.factory import ComponentFactory


@dataclass
class Light(BaseComponent):
    intensity: float = 1.0


@dataclass
class Camera(BaseComponent):
    fov: float = 45.0


def test_register_type_and_create():
    factory = ComponentFactory()
    factory.register_type(Light, "Light", lambda: Light(intensity=3.5))
    made = factory.create_component("Light")
    assert isinstance(made, Light)
    assert made.intensity == 3.5
    assert factory.type_of("Light") is Light


def test_each_creation_is_a_new_object():
    factory = ComponentFactory()
    factory.register_type(Light, "Light", Light)
    first = factory.create_component("Light")
    second = factory.create_component("Light")
    assert first == second
    assert first is not second


def test_unknown_name_raises():
    factory = ComponentFactory()
    with pytest.raises(ECSError):
        factory.create_component("Missing")
    with pytest.raises(ECSError):
        factory.type_of("Missing")


def test_register_decorator_returns_class():
    factory = ComponentFactory()
    decorated = factory.register("Camera")(Camera)
    assert decorated is Camera
    assert factory.type_of("Camera") is Camera
    assert factory.create_component("Camera") == Camera()


def test_registering_again_replaces_entry():
    factory = ComponentFactory()
    factory.register_type(Light, "Thing", Light)
    factory.register_type(Camera, "Thing", Camera)
    assert factory.type_of("Thing") is Camera
    assert isinstance(factory.create_component("Thing"), Camera)


def test_register_rejects_non_component():
    factory = ComponentFactory()
    with pytest.raises(TypeError):
        factory.register_type(dict, "Dict", dict)