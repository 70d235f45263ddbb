# pixraster

`pixraster` is a small software rasterizer with a drawing script language.
Points, lines and triangles can go through an optional
world/view/projection/screen pipeline. They are clipped against the canvas
rectangle when clipping is on, and are then drawn onto an in-memory canvas
of colors. The package uses only the Python standard library.

## Installation

```
pip install pixraster
```

To run the test suite:

```
pip install "pixraster[test]"
pytest
```

## Building blocks

- `pixraster.vectors`: immutable `Vector2` and `Vector3` with the usual
  arithmetic. `splat(s)` builds a vector with every component set to `s`.
- `pixraster.matrix`: the immutable, row-major `Matrix4`. It provides
  `identity`, `rotation_x/y/z`, `scale`, `translation` and `rows()`, with
  `@` (and `*` between matrices) as the matrix product and `*` with a
  number as scaling.
- `pixraster.mathhelper`: `is_equal`, `flatten_screen_coords`,
  `magnitude_squared`, `magnitude`, `normalize`, `dot`, `cross`,
  `transform_coord` (with perspective divide), `transform_normal`,
  `transpose`, `determinant`, `adjoint` and `inverse`. `inverse` raises
  `ValueError` for a singular matrix. The module also defines the
  `DEG_TO_RAD` constant.
- `pixraster.colors`: the RGBA `Color` type and `NAMED_COLORS`.
  `by_name(name)` looks a color up without regard to case and raises
  `KeyError` for unknown names.
- `pixraster.vertex`: `Vertex` (a position and a color) and the
  `lerp_position`, `lerp_color` and `lerp_vertex` helpers. `lerp_vertex`
  snaps x and y down to whole pixels.
- `pixraster.camera`: `Camera`, which has `view_matrix()` and
  `projection_matrix(width, height)`. Its field of view is in radians.
- `pixraster.matrixstack`: `MatrixStack`. Each matrix you push is
  pre-multiplied onto `transform`, and `pop()` undoes the last one.
- `pixraster.clipper`: `ClipRect` with `outcode(x, y)`, and `Clipper` with
  `clip_point`, `clip_line` (Cohen–Sutherland; returns the clipped
  endpoints or `None`) and `clip_triangle` (Sutherland–Hodgman; returns a
  polygon).
- `pixraster.rasterizer`: `Canvas` (`set_pixel`, `get_pixel`, `clear`),
  `FillMode` (`WIREFRAME`, `SOLID`) and `Rasterizer` (`draw_point`,
  `draw_vertex`, `draw_line`, `draw_triangle`).
- `pixraster.primitives`: `Topology`, `screen_transform` and
  `PrimitivesManager` (`begin_draw`, `add_vertex`, `end_draw`).
- `pixraster.context`: `RenderContext`, which holds the canvas,
  rasterizer, clipper, matrix stack, camera and script variables.
- `pixraster.commands`, `pixraster.dictionary`, `pixraster.script`: the
  script language.

## Scripts

A script has one command per line. Parameters are separated by spaces,
commas or parentheses. Lines that begin with `//` are comments. Names that
begin with `$` are float variables, declared with `float`.

```
SetResolution(100, 100)
float $depth = 40
SetFillMode(solid)
SetClipping(true)

BeginDraw(triangle)
Vertex(10, 10, 1, 0, 0)
Vertex(90, 10, 0, 1, 0)
Vertex(50, 90, 0, 0, 1)
EndDraw()

PushTranslation(0, 0, $depth)
BeginDraw(line, true)
Vertex(-10, 0, 0)
Vertex(10, 0, 0)
EndDraw()
```

To run a script from Python:

```python
from pixraster.context import RenderContext
from pixraster.script import ScriptParser

parser = ScriptParser()
with open("scene.pix") as f:
    parser.parse(f.read())

context = RenderContext()
context.new_frame()
errors = parser.execute(context)

pixel = context.canvas.get_pixel(50, 50)
```

`RenderContext.new_frame()` turns clipping off, empties the matrix stack
and resets the camera. It neither clears the canvas nor forgets variables.
Call `context.canvas.clear()` to start from a blank canvas.

If a statement names an unknown command, or a command cannot use its
parameters (it raises `CommandError`), that statement is logged and
skipped, and the rest of the script still runs. `execute` returns the
messages in the order they occurred.

## Commands

`default_dictionary()` in `pixraster.dictionary` registers these commands.
Parameters marked "resolved" may be a number or a declared `$variable`.
The others must be number literals.

| Command | Parameters |
| --- | --- |
| `SetResolution` | width, height, optional pixel size, optional `true` to show a grid |
| `float` | `$name = value`, optional speed, min, max |
| `DrawPixel` | x, y (integers) |
| `SetColor` | r, g, b (resolved) |
| `SetFillMode` | `wireframe` or `solid` |
| `BeginDraw` | `point`, `line` or `triangle`, optional `true` to apply transforms |
| `Vertex` | x, y / x, y, z / x, y, r, g, b / x, y, z, r, g, b |
| `EndDraw` | none |
| `SetClipping` | `true` or `false` |
| `PushTranslation` | x, y, z (resolved) |
| `PushRotationX` / `PushRotationY` / `PushRotationZ` | degrees (resolved) |
| `PushScaling` | x, y, z (resolved) |
| `PopMatrix` | none |
| `SetCameraPosition` / `SetCameraDirection` | x, y, z (resolved) |
| `SetCameraNear` / `SetCameraFar` | value (resolved) |
| `SetCameraFov` | degrees (resolved) |

`SetResolution` replaces the canvas with a blank one. The clip rectangle
always covers the whole canvas.

## What it does not do

- It has no window, editor or live view. The result is the in-memory
  `Canvas`, and there is no writer to an image file.
- There is no separate viewport. Clipping works against the canvas bounds
  only.
- The grid option of `SetResolution` and the speed, min and max of `float`
  are recorded (`RenderContext.show_grid`,
  `RenderContext.variable_settings`) but do not change the rendering.
- There is no command-line program. Scripts are run from Python as shown
  above.