# enginecore

The core of a small entity-component game engine, in plain Python. It holds
the engine's math types, colour and bitmap handling, an entity registry with
versioned ids, and a scene that passes events to systems.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Modules

- `enginecore.scalar`: scalar helpers: `mod` (truncating remainder), `sqrt`
  (NaN for negative input), `ramp`, `sin`, `cos`, `tan`, `csc`, `sec`, `cot`,
  `lerp`, `minimum`, `maximum`, `avg`, `clamp`, and the random helpers
  `random_unit`, `random_below` and `random_between`; constants such as `PI`
  and `DEG_TO_RAD`.
- `enginecore.vectors`: `Float2`, `Float3` and `Float4` with componentwise
  arithmetic, `splat`, `dot`, `length_sq`, `length`, `normalized`
  (`Float3.cross`, `Float3.xy`, `Float4.from_xyz`, `Float4.xyz`), plus
  `componentwise_min`, `componentwise_max`, `componentwise_clamp` and
  `random_vector(kind, *bounds)`.
- `enginecore.intvectors`: `Int2`, `Int3` and `Int4`; division truncates
  toward zero.
- `enginecore.quaternion`: `Quaternion` with `identity`, `from_axis_angle`,
  `from_euler_angle`, `slerp`, `look_at`, `inverse`, `conjugate`,
  `normalized` and `rotate` (also `quaternion * Float3`).
- `enginecore.matrix`: `Float4x4`, a column-major matrix (`x`, `y`, `z`, `w`
  are columns) with `from_rows`, `transpose`, `inverse`, `cofactor`, `minor`,
  `translation`, `without_translation`, and the builders `identity`,
  `translate`, `rotate`, `translate_rotate`, `scale`, `perspective`,
  `orthographic` and `orthographic_bounds`.
- `enginecore.frustum`: `FrustumPlanes`, built from a projection-view matrix,
  with `contains(position, radius)` for sphere culling.
- `enginecore.noise`: deterministic xorshift hashes `noise_uint`,
  `noise_int`, `noise_double` and `noise_float`.
- `enginecore.color`: `Color32`, `ColorChannel`, `ColorChannelMask` and
  `ColorSwizzle`.
- `enginecore.bitmap`: `Bitmap`, an RGBA pixel grid. `Bitmap.load` reads an
  image file with Pillow and returns the 2×2 `Bitmap.placeholder()` when the
  file cannot be read. `evaluate`, `clear` and `copy_to` work on the whole
  bitmap or on an area given by position and size, routing channels through a
  swizzle and a mask.
- `enginecore.entity`: `EntityRegistry`, `EntityId` and `EntityComponent`.
  Iterating a registry yields live entities, newest first; destroyed ids stop
  resolving.
- `enginecore.components`: `CmpPosition`, `CmpRotation`, `CmpScale`,
  `CmpParent`, `CmpTransformLocalToWorld`, `CmpRotationVelocity`,
  `CmpCamera`, `CmpCameraFreecam`, the lights `CmpLightAmbient`,
  `CmpLightDirectional` and `CmpLightPoint`, the mesh renderers, and the
  camera queries `camera_projection`, `camera_view`, `camera_layers` and
  `camera_framebuffer`, which raise `MissingComponentError` when the entity
  lacks what they need.
- `enginecore.scene`: `Scene`, `SceneSystem`, the `listener` decorator and
  the events `EvtUpdate`, `EvtRenderPre`, `EvtRender` and `EvtRenderPost`.
- `enginecore.systems`: `TransformCalculator`, which builds local-to-world
  matrices from position, rotation and scale and through parent chains, and
  `RotateObjects`, which turns entities by their `CmpRotationVelocity`.

## Example

```python
from enginecore.components import CmpPosition, CmpScale, CmpTransformLocalToWorld
from enginecore.scene import Scene
from enginecore.systems import TransformCalculator
from enginecore.vectors import Float3

scene = Scene()
scene.get_or_add_system(TransformCalculator)

entity = scene.entities.create()
scene.entities.get_or_add_component(entity, CmpTransformLocalToWorld)
scene.entities.get_or_add_component(entity, CmpPosition, Float3(1.0, 2.0, 3.0))
scene.entities.get_or_add_component(entity, CmpScale, Float3.splat(2.0))

scene.update(1 / 60)

matrix = scene.entities.get_component(entity, CmpTransformLocalToWorld).value
print(matrix.translation())  # Float3(x=1.0, y=2.0, z=3.0)
```

Systems say which events they take by marking methods with `listener`:

```python
from enginecore.scene import EvtUpdate, SceneSystem, listener

class Clock(SceneSystem):
    @listener(EvtUpdate)
    def on_update(self, event):
        print(event.time, event.timestep)
```

## What it does not do

There is no renderer, window, input handling or command-line program.
`Scene.render` only sends the render events to systems; nothing draws. The
`mesh`, `material` and `framebuffer` fields of the renderer and camera
components are kept as given and never used by the package itself.