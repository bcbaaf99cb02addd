# waldem

`waldem` is the core of a small game engine. It has these parts:

- `waldem.events`: typed window, application, keyboard and mouse events with
  category flags (`EventCategory`), and an `EventDispatcher` that sends an
  event to a handler chosen by the event's class.
- `waldem.input`: an `InputManager` that passes key, mouse button, mouse
  move and scroll events on to the handlers subscribed to them, along with
  `MouseButton` codes and `mouse_button_mask`.
- `waldem.keycodes`: the `KeyCode` table and `scancode_to_keycode`.
- `waldem.layers`: `Layer` and `LayerStack`. Regular layers always come
  before overlays.
- `waldem.mathutils`: quaternion and 4×4 matrix helpers built on numpy.
- `waldem.transform`: `Transform`, which holds a position, a quaternion
  rotation and a scale, and keeps the world matrix built from them.
- `waldem.camera`: `Camera` with perspective projection and frustum plane
  extraction, `Frustum`, `FrustumPlane`, and `BoundingBox` with frustum
  culling.
- `waldem.line`: `Line`, a coloured segment for debug drawing.
- `waldem.buffer`: `ShaderDataType`, `BufferElement` and `BufferLayout`,
  which compute offsets and stride, plus abstract GPU buffer interfaces.
- `waldem.graphic_types`, `waldem.texture_format`, `waldem.resources`:
  rasterizer, topology, resource-state and sampler descriptions, pixel
  formats, and the abstract shader, texture, render target, root signature
  and pipeline types, along with `Resource` for binding them to slots.
- `waldem.ecs`: a small entity/component `Registry`.
- `waldem.application`: `Application`, which runs the frame loop over a
  `Window`, keeps an average FPS, and stops on a `WindowCloseEvent`.
- `waldem.log`: the engine's and the client's loggers.

## Events and input

```python
from waldem.events import EventCategory, KeyPressedEvent, KeyReleasedEvent
from waldem.input import InputManager
from waldem.keycodes import KeyCode

inputs = InputManager()
pressed = []
inputs.subscribe_to_key_event(KeyCode.W, pressed.append)

inputs.broadcast(KeyPressedEvent(KeyCode.W, 0))
inputs.broadcast(KeyReleasedEvent(KeyCode.W))
assert pressed == [True, False]

event = KeyPressedEvent(KeyCode.W, 0)
assert event.is_in_category(EventCategory.KEYBOARD)
print(event)  # KeyPressedEvent: 119 (0 repeats)
```

A key or mouse button handler receives `True` on a press and `False` on a
release. Move and scroll handlers receive an `(x, y)` tuple.

`EventDispatcher(event).dispatch(WindowCloseEvent, handler)` calls `handler`
only when the event is of that type. The handler's return value becomes
`event.handled`.

## Layers

```python
from waldem.layers import Layer, LayerStack

with LayerStack() as stack:
    stack.push_layer(Layer("game"))
    stack.push_overlay(Layer("ui"))
    stack.push_layer(Layer("world"))

    names = [layer.name for layer in stack]             # ['game', 'world', 'ui']
    top_down = [layer.name for layer in reversed(stack)]
# leaving the block calls close(), which detaches every layer
```

## Transforms, cameras and culling

```python
import numpy as np
from waldem.camera import BoundingBox, Camera
from waldem.transform import Transform

transform = Transform(np.array([0.0, 0.0, -5.0]))
transform.look_at(np.array([0.0, 0.0, 0.0]))

camera = Camera(70.0, 16 / 9, 0.001, 1000.0, 30.0, 30.0)  # fov in degrees
camera.set_view_from_transform(transform)

box = BoundingBox(np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0]))
visible = box.is_in_frustum(camera.extract_frustum_planes())

view_proj = camera.projection_matrix @ camera.view_matrix
```

`Transform.rotate_yaw_pitch_roll` and `Transform.set_euler` take degrees.
`Transform.move` moves along the transform's own right, up and forward axes,
and `Transform.translate` moves in world space.

## Buffer layouts

```python
from waldem.buffer import BufferElement, BufferLayout, ShaderDataType

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "Position"),
    BufferElement(ShaderDataType.FLOAT3, "Normal"),
    BufferElement(ShaderDataType.FLOAT2, "UV", True),
    BufferElement(ShaderDataType.INT, "MeshId", True),
])
assert layout.stride == 36
assert [e.offset for e in layout] == [0, 12, 24, 32]
```

## Entities

```python
from waldem.ecs import Registry
from waldem.transform import Transform

registry = Registry()
entity = registry.create_entity()
entity.add(Transform())
registry.refresh()  # new entities become visible to queries here

for entity, transform in registry.entities_with(Transform):
    ...
```

## Application

`Application(window, renderer, ui_layer=None)` takes a concrete `Window`
subclass and a renderer object. The renderer must provide
`initialize(window)`, `begin()`, `end()` and `present()`. `run_frame(delta_time)`
updates every layer, draws the UI of every layer, presents the frame and
sets the window title to the average FPS. `run()` repeats this until a
`WindowCloseEvent` arrives.

## Logging

```python
from waldem import log

log.init()
log.core_logger().info("engine started")
log.client_logger().info("game started")
```

`init()` sends both loggers to standard output at every level, including
`log.TRACE`. Output is coloured when standard output is a terminal.

## What the package does not do

`waldem` draws nothing and opens no windows. It has no graphics backend, no
concrete `Window`, and no mesh, model, texture or light loading. Shaders,
textures, render targets, root signatures, pipelines and GPU buffers exist
here only as abstract interfaces, and `StorageBuffer.create` always raises
`UnsupportedRendererAPIError`. To run an `Application`, you must supply the
window and the renderer yourself. The package has no command-line program.