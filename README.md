# glviewer

`glviewer` contains the parts of a small 3D scene viewer that work without a
windowing toolkit. It has no dependencies and needs Python 3.10 or later.

## Modules

- **`glviewer.geometry`**: immutable math types.
  - `Vec3` provides `+`, `-`, unary minus, scalar `*` and `/`, `length()`,
    `normalized()`, `dot()` and `cross()`.
  - `normal(a, b, c)` returns the unit normal of a plane.
  - `Quaternion` provides `from_axis_and_angle` (angle in degrees),
    `from_axes`, `from_direction`, `conjugated()`, `normalized()` and
    `rotated_vector()`. `q * r` composes two quaternions, and `q * v`
    rotates a vector.
  - `Matrix4` is a row-major matrix. It provides `identity()`,
    `perspective()`, `ortho()`, `rotate()` and `translate()`, each of which
    returns a new matrix. `m @ n` multiplies two matrices, and `map()`
    transforms a point.
- **`glviewer.camera`**: a `Camera` configured by a `CameraConfig`.
  - It runs in one of two `CameraMode`s: `TARGET` orbits a reference point,
    and `FREE` flies freely.
  - It uses one of two `ProjectionMode`s: `PERSPECTIVE` or `ORTHOGRAPHIC`.
  - The config sets the field of view, the near and far planes, the initial
    translation, and which world vectors count as forward, right and up.
  - The camera offers three signals: `camera_mode_changed`,
    `projection_mode_changed` and `target_changed`. Attach a callable to
    any of them with `connect()`.
- **`glviewer.gldata`**: `GLData` holds flat float buffers of line and
  triangle vertices.
  - Each vertex is six floats: position followed by colour.
  - `add_cuboid` builds a coloured box from its top rectangle and a
    thickness. The `Sides` flags choose which faces to add.
- **`glviewer.viewer`**: a `Viewer` that adds a ground grid (`GridConfig`)
  and coordinate axes (`AxesConfig`) to the scene data.
  - It turns key presses, mouse drags and wheel steps into camera motion.
  - It reports the draws of a frame as a list of `DrawCall`s.
  - `example_config()` returns a camera setup for a Z-up world.

## Camera

```python
from glviewer.camera import Camera
from glviewer.geometry import Vec3
from glviewer.viewer import example_config

camera = Camera()
camera.set_config(example_config())   # z is up, starts at (900, 200, 100)
camera.set_aspect_ratio(16 / 9)
camera.target_changed.connect(lambda target: print("target:", target))

camera.rotate_about(30.0, Vec3(0, 0, 1))   # orbit 30 degrees about world up
camera.translate(camera.forward_vector() * 150)

mvp = camera.to_matrix()              # projection @ view, rebuilt only when changed
print(mvp.map(Vec3(0, 0, 0)))
print(camera.describe())
```

In target mode, `rotate` moves the camera around the target and keeps the
same distance from it.

When `set_camera_mode(CameraMode.TARGET)` is called, the camera picks a new
target in front of itself.

`upside_down()` returns `True` when the camera's up direction points against
the world's up direction.

The far plane is the configured far plane or twice the distance to the
target, whichever is larger.

## Scene data

```python
from glviewer.gldata import GLData, Sides
from glviewer.geometry import Vec3

data = GLData()
data.add_line(Vec3(0, 0, 0), Vec3(100, 0, 0), Vec3(1, 1, 1))
data.add_cuboid(
    Vec3(0, 0, 50), Vec3(100, 0, 50), Vec3(0, 100, 50), Vec3(100, 100, 50),
    20.0, 0.25, 0.1, Sides.TOP | Sides.BOTTOM,
)
print(data.line_vertex_count(), data.triangle_vertex_count())
print(data.line_data[:6])             # first line vertex: x, y, z, r, g, b
```

## Viewer logic

```python
from glviewer.viewer import MouseButton, Viewer

viewer = Viewer()
viewer.set_data(data)                 # copied; grid and axes are appended
viewer.resize(800, 600)
viewer.wheel(120, False)              # step forward along the view direction
viewer.mouse_press(10, 10)
viewer.mouse_move(30, 10, MouseButton.LEFT)
for call in viewer.draw_ranges():
    print(call.primitive, call.first, call.count, call.line_width)
```

### Draw ranges

`draw_ranges()` lists the draws of a frame in this order:

1. The scene triangles.
2. The scene lines, at width 2.
3. The grid, at width 0.5. This draw is left out while the grid is off.
4. The axes, at width 3. This draw is left out while the axes are off.

### Keys

`key_press` accepts a key name in either case:

| Key | Action |
| --- | --- |
| `a` | Toggle the axes. |
| `g` | Toggle the grid. |
| `0` | Reset the camera. |
| `p` | Use perspective projection. |
| `o` | Use orthographic projection. |
| `f` | Switch to free mode. |
| `t` | Switch to target mode. |
| `l` | Log the camera state through `logging` at debug level. |

### Mouse and wheel

Mouse moves are measured from the last `mouse_press` position:

- **Left button**: rotates the view.
- **Right button**: rolls and tilts.
- **Middle button**: pans.

With `shift=True`, drags move a quarter as far and wheel steps a tenth as
far.

### Errors

- `resize` raises `ValueError` when the height is zero.
- Setting a `GridConfig` whose `step` is not positive raises `ValueError`.

## What the package does not do

The package opens no window, creates no OpenGL context, compiles no shaders
and draws nothing.

`Viewer` only keeps the scene state and answers input events. Presenting
`to_matrix()`, `GLData.line_data` and `triangle_data`, and the ranges from
`draw_ranges()` on screen is left to the caller's own rendering code.

There is no command-line program.