# frengine

The window-independent core of a small game engine, in pure Python with no
dependencies.

- **Math**: `frengine.mathutil`, the vectors `Vec2`, `Vec3` and `Vec4` in
  `frengine.vectors`, the 4×4 matrix `Mat4` in `frengine.matrix`, and
  `Quaternion` in `frengine.quaternion`.
- **Events**: event types in `frengine.events`, the `EventDispatcher` in
  `frengine.dispatcher`, the `KeyCode` enum in `frengine.keycodes`, and the
  `EventSystem` in `frengine.input`, which keeps keyboard and mouse state and
  turns window callbacks into dispatched events.
- **Entity-component-system**: `BaseComponent`, `CompList` and `ECSError` in
  `frengine.components`, `BaseSystem` in `frengine.systems`, the name-based
  `ComponentFactory` in `frengine.factory`, the `EntityManager` in
  `frengine.manager`, and the `Entity` handle in `frengine.entity`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Math

```python
from frengine import mathutil
from frengine.vectors import Vec3
from frengine.matrix import Mat4

mathutil.sin(90)                 # about 1.0
v = Vec3(3.0, 0.0, 4.0)
v.length()                       # about 5.0
v.normalized()                   # about Vec3(0.6, 0.0, 0.8)

m = Mat4.translation(Vec3(1.0, 2.0, 3.0))
m.get(0, 3)                      # 1.0
```

Points worth knowing:

- `sin`, `cos` and `tan` take an angle in whole degrees (fractional parts are
  truncated) and sum a seven-term Taylor series.
- `sqrt` is a Newton iteration started from the number itself; values not
  above one, negatives included, come back unchanged.
- `power` takes an integer exponent; a zero base with a negative exponent
  gives `0.0`. `fact` returns 1 for every argument up to zero.
- `lerp(start, stop, step)` returns `start` when it equals `stop`, returns
  `stop` when `stop * step + start - step` equals it exactly, and raises
  `ValueError` otherwise.
- `Vec2` vector-by-vector `+`, `-`, `*` and `/` combine only the `x`
  components and keep the left operand's `y`; `+=` and scalar `*` and `/`
  act on both components. `Vec3` and `Vec4` work component-wise.
- `Mat4()` is all zeros; `Mat4(*sixteen_values)` fills it row by row, and any
  other number of arguments raises `TypeError`. `set_identity` writes ones on
  the diagonal and leaves the other entries alone. `get` and `set` raise
  `IndexError` outside 0–3. `*` is the matrix product; `/`, `+` and `-` are
  element-wise. `values()` returns all sixteen entries in row-major order.
- The rotation setters convert their angle to radians and pass that value to
  the whole-degree `cos` and `sin`.
- `Quaternion.from_axis_angle(axis, angle)` builds a quaternion from an axis
  and an angle in degrees; `Quaternion.from_vec4` copies a `Vec4`.

## Events and input

```python
from frengine.dispatcher import EventDispatcher
from frengine.events import KeyPressedEvent, MouseMotionEvent
from frengine.input import Action, EventSystem
from frengine.keycodes import KeyCode

dispatcher = EventDispatcher()
dispatcher.add_listener(KeyPressedEvent, lambda e: print("key down"))
dispatcher.add_listener(MouseMotionEvent, lambda e: print(e.delta_x(), e.delta_y()))

events = EventSystem(dispatcher)
events.on_key(KeyCode.W, Action.PRESS)   # prints "key down"
events.is_key_pressed(KeyCode.W)         # True
events.on_mouse_motion(10.0, 20.0)       # prints "-10.0 -20.0"
```

- Listeners are matched on the event's exact type: a `KeyEvent` listener is
  not called for a `KeyPressedEvent`. They run in registration order.
  `listener_count(event_type)` reports how many are registered.
- `Event` itself cannot be instantiated, and only concrete event types may be
  listened for.
- `EventSystem` posts a `WindowEvent` before `WindowCloseEvent` and
  `WindowResizedEvent`, and a generic `KeyEvent` or `MouseEvent` after every
  key or mouse callback. Mouse press and release events carry the state from
  before the button changed. `delta_x()` and `delta_y()` are the previous
  position minus the current one.
- Key codes must lie in `0..1023` and mouse buttons in `0..2`
  (`MouseButton.LEFT`, `RIGHT`, `MIDDLE`); others raise `IndexError`.

## Entities and components

```python
from dataclasses import dataclass

from frengine.components import BaseComponent
from frengine.entity import Entity
from frengine.factory import ComponentFactory
from frengine.manager import EntityManager
from frengine.systems import BaseSystem

factory = ComponentFactory()

@factory.register("Position")
@dataclass
class Position(BaseComponent):
    x: float = 0.0
    y: float = 0.0

class Movement(BaseSystem):
    def __init__(self):
        super().__init__()
        self.add_component_signature(Position)

manager = EntityManager(factory)
movement = manager.add_system(Movement)

player = Entity(manager)
player.add_component(Position(1.0, 2.0))
player.get_component(Position).x        # 1.0
movement.has_entity(player.id)          # True
movement in manager.active_systems()    # True
player.destroy()
```

- `add_component` stores a copy of the component, stamps the entity id on it
  and returns the stored copy. `add_component_by_name` builds the component
  through the factory; its component list must already exist (see
  `register_comp_list`).
- Systems from `add_system` become active as soon as an entity matches their
  signature and drop out when they have no entities left. Editor and runtime
  systems (`add_editor_system`, `add_runtime_system`) receive matching
  entities but only run between `activate_*_systems` and
  `deactivate_*_systems`. `start`, `update` and `render` call the hook of
  every active system.
- The default `BaseSystem` hooks record their lifecycle: `running`,
  `is_awake`, `update_count` and `render_count`.
- Entity ids are handed out from 0 upwards; a destroyed id goes to the back of
  the queue. At most 5000 ids can be handed out in a manager's lifetime
  (destroying an entity does not give one back), and an entity may carry at
  most 32 components.
- Duplicate components, missing components, unregistered component lists or
  type names and exceeded limits raise `frengine.components.ECSError`; entity
  ids out of range raise `IndexError`.

## What is not included

The package has no window, no rendering and no scene saving or loading.
`EventSystem` does not poll any window system; its `on_*` methods must be
called by whatever layer receives the window's callbacks.

## Running the tests

```
pytest
```