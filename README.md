# nothingame

The engine-independent core of a small 2D puzzle platformer: geometry,
rigid-body physics, triangle rasterisation, the state of the user-interface
widgets, bitmap-font layout and level discovery. The package uses only the
Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### Geometry

- `nothingame.matrix`: `Mat3x3`, a frozen 3x3 matrix that supports the ` @ `
  operator. The module also has `product2(m1, m2, m3)` (which computes
  `m1 @ (m2 @ m3)`), `trans_mat(x, y)`, `rot_mat(angle)`, `scale_mat(factor)`
  and the constants `PI` and `PI_2`.
- `nothingame.point`: `Vec`, a frozen 2D vector. It supports `+`, `-` and
  unary `-`, and has `arg()`, `length()`, `sqr_norm()`, `scale()`,
  `entry_mult()`, `entry_div()`, `norm()` and `transform(m)`. `transform`
  applies a `Mat3x3` in homogeneous coordinates. The module also has
  `vec_from_polar`, `vec_from_ps` and `rad_to_deg`.
- `nothingame.rect`: `Rect`, `Line` and the `RectSide` enum.
  - `Rect` has `from_vecs`, `position`, `center`, `side`, `contains_point`,
    `grown` and `rounded`. `rounded` rounds half away from zero.
  - Module functions: `rect_from_points`, `rects_overlap`,
    `rects_overlap_area`, `rect_boundary2`, `horizontal_thicc_line` and
    `vertical_thicc_line`.
  - Collision helpers:
    - `rect_object_impact(object_rect, obstacle)` returns the set of sides
      that press against the obstacle.
    - `rect_snap(pivot, r)` returns the moved rectangle and a velocity mask.
    - `rect_impulse(r1, r2)` returns both moved rectangles and a velocity
      mask.
- `nothingame.triangle`: `Triangle`, with `sorted_by_y()` and
  `transform(m)`. The module also has `equilateral_triangle()`,
  `random_triangle(radius, rng=None)` and `rect_as_triangles(rect)`.
- `nothingame.rand`: `rand_float(max_value, rng=None)` and
  `rand_float_range(lower, upper, rng=None)`. Either function takes an
  optional `random.Random`, which makes the results reproducible.

```python
from nothingame.matrix import rot_mat, trans_mat
from nothingame.point import Vec

m = trans_mat(10.0, 0.0) @ rot_mat(0.0)
print(Vec(1.0, 2.0).transform(m))   # Vec(x=11.0, y=2.0)
```

### Physics

`nothingame.rigid_bodies.RigidBodies(capacity)` holds up to `capacity`
axis-aligned bodies. `add(rect)` adds a body and returns its integer id.

- **State of a body.** Each body has a hitbox, a velocity, a self-propelled
  movement and accumulated forces.
- **Changing a body.** Use `apply_force`, `apply_omniforce`, `move`,
  `damper`, `transform_velocity`, `teleport_to`, `disable` and `remove`.
- **Advancing time.** `update(body_id, delta_time)` integrates the forces,
  moves the body, and then clears its forces.
- **Collisions.** `collide(platforms)` first separates overlapping bodies
  from each other, then resolves each body against `platforms`. It also sets
  the flag that `touches_ground` reports.
- **Debugging.** `debug_lines(body_id)` returns labelled text lines with the
  positions to draw them at.

The package contains no platform geometry. `platforms` can be any object
that satisfies the `Platforms` protocol:

- `touches_rect_sides(rect)` returns a set of `RectSide`.
- `snap_rect(rect)` returns `(rect, mask)`.

Invalid ids raise `IndexError`. Adding a body beyond the capacity raises
`OverflowError`.

```python
from nothingame.point import Vec
from nothingame.rect import Rect
from nothingame.rigid_bodies import RigidBodies

bodies = RigidBodies(capacity=10)
box = bodies.add(Rect(0.0, 0.0, 20.0, 20.0))
bodies.apply_force(box, Vec(0.0, 100.0))
bodies.update(box, 1.0 / 60.0)
print(bodies.hitbox(box))
```

### Rasterisation

`nothingame.raster` converts triangles into integer line segments of the
form `(x1, y1, x2, y2)`. Any renderer can then draw these segments.

- `triangle_outline(t)` returns the three edges of the triangle.
- `fill_triangle(t)` returns the horizontal scanlines that fill it, in
  drawing order.

### Input events and widgets

The widgets are driven by the plain event objects in `nothingame.events`:

- `KeyDown(key, mod)`
- `TextInput(text, mod)`
- `MouseMotion(x, y)`
- `MouseButtonDown(x, y, button)`
- `MouseButtonUp(x, y, button)`

Keys, modifiers and mouse buttons come from the `Key`, `Mod` and
`MouseButton` enums.

- `nothingame.edit_field.EditField(capacity=256)` is a single-line editor
  with Emacs-style keys:
  - moving by character, by word, or to the start or end of the line;
  - deleting and killing words;
  - killing to the end of the line (Ctrl-K).

  Text typed while Ctrl or Alt is held is ignored. Text beyond the capacity
  is dropped. The contents are available as `text` and the cursor position
  as `cursor`. `replace(text)` sets the contents and `clean()` empties them.
- `nothingame.history.History(capacity)` is a ring buffer of commands. It
  provides `push`, `current`, `prev` and `next`.
- `nothingame.console_log.ConsoleLog(capacity)` keeps the most recent
  coloured lines. `lines()` returns them from oldest to newest.
- `nothingame.list_selector.ListSelector(items, font_scale, padding_bottom)`
  is a vertical list navigated with Up and Down and selected with Return or a
  left click.
  - `cursor` is the item under the cursor. `selected` is the index of the
    selected item, or `None` when nothing is selected.
  - The list also has `size`, `move` and `clean_selection`.
- `nothingame.slider.Slider(value, max_value)` is dragged with the mouse
  inside a boundary rectangle.
  - `handle_event(event, boundary)` returns `True` when the slider took the
    event.
  - `layout(boundary)` returns the core and cursor rectangles to draw.
- `nothingame.wiggly_text`:
  - `WigglyText` is text whose characters follow a sine wave.
    `glyph_positions(position)` gives the position of each character.
  - `FadingWigglyText` fades its alpha out over a duration. `reset()` makes
    it opaque again.

```python
from nothingame.edit_field import EditField
from nothingame.events import Key, KeyDown, Mod, TextInput

field = EditField()
field.handle_event(TextInput("hello world"))
field.handle_event(KeyDown(Key.BACKSPACE, Mod.CTRL))  # kill the last word
print(field.text)   # "hello "
```

### Bitmap font layout

`nothingame.sprite_font` describes a font sheet of 7x9-pixel glyphs laid out
18 per row. It covers printable ASCII; any other character maps to `?`.

- `char_rect(c)` gives the source rectangle of a glyph.
- `boundary_box(position, size, text)` gives the screen area that the text
  covers.
- `glyph_rects(position, size, text)` gives the source and destination
  rectangle pairs for every character.

### Levels and files

- `nothingame.level_folder.LevelFolder(dirpath)` lists every file in a
  directory whose name does not start with `.`, sorted by name. It exposes
  parallel `filenames` and `titles` lists. Each title is the first line of
  its file.
- `nothingame.level_metadata.LevelMetadata` holds a level title. Use
  `from_file(path)` or `from_line_stream(stream)`. A file with no lines
  raises `ValueError`.
- `nothingame.line_stream.LineStream(path, capacity=256)` reads a file in
  chunks of at most `capacity - 1` characters.
  - `next_line()` returns the start of the next line. If the line is longer
    than a chunk, the rest of it is skipped.
  - It also has `next_chunk`, `collect_n_lines` and `collect_until_end`.
    `collect_n_lines` raises `EOFError` if the file has too few lines.
  - It works as a context manager.
  - `trim_endline(s)` removes one trailing newline.

### Utilities

- `nothingame.hashset.HashSet(n)` is a set with `n` fixed buckets, chosen by
  a 64-bit FNV-1 hash (`fnv1`).
  - Elements may be bytes, unsigned integers, or tuples of unsigned
    integers.
  - Iteration goes bucket by bucket, and in insertion order within a bucket.
- `nothingame.log` provides `log_fail`, `log_warn` and `log_info`. Each
  writes `[FAIL] `, `[WARN] ` or `[INFO] ` and then the `%`-formatted message
  to standard error, and returns the number of characters written.

## What the package does not do

This package contains logic only. It does not:

- open a window or draw anything;
- load textures or play sound;
- read joystick or keyboard devices;
- parse the contents of a level beyond its title line;
- provide a scripting console, a game loop or a command to run a game.

A front end has to turn device input into the events in `nothingame.events`,
draw the rectangles, segments and glyph positions the modules return, and
supply the platform geometry for `RigidBodies.collide`.