# xf

A small library for 2D pixel-art games, built on pygame.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `xf.num.vec`: `Vec2` and `Vec3`, frozen vectors of ints or floats. They support `+`, `-`, unary `-`, `*` (by a vector or a number) and `/`, and `Vec2` also supports `%`. Division and remainder of two integers truncate toward zero. `i2`, `f2`, `i3` and `f3` are shorthand constructors. Also provided: `splat`, `flip`, `extend`, `truncate`, `xy`, `sum`, `product`, `abs`, `min`/`max`, `magnitude`, `normalize`, `lerp`, and the conversions `as_ivec2`, `as_fvec2`, `as_ivec3`, `as_fvec3`. `Vec2.wrap` turns a row-major index into a position and `Vec2.unwrap` does the reverse.
- `xf.num.lerp`: `lerp(y0, y1, x)`. Given two ints, the result is an int; given floats, a float. Any other type falls back to that type's own `lerp`.
- `xf.num.numeric`: integer `lerp` (plus `lerp_c`, which clamps `f` to `[0, 1]`, and `lerp_p` for vectors), the wrapping modulo `mod_`/`mod_p`, and `max_float`.
- `xf.num.range`: `Range(a, b)`, inclusive at both ends, with `contains`, `abs`, `delta`, `lerp` and division by a value.
- `xf.num.irect`: `IRect(pos, size)`, built directly or with `ir` and `rect`. It provides edges (`left`, `right`, `top`, `bottom`), `center`, `contains`, `overlaps`, `intersection`, `union`, `contains_rect`, `expand`, `corners`, `offset_by`, `keep_inside`, `corrected`, `x_range`/`y_range`, and `as_rect` for a `pygame.Rect`. Iterating an `IRect` yields every point in it, row by row.
- `xf.num.limit`: `Limit(min, max, value)`. `+=` stops at `max` and `-=` stops at `min`, while `set` clamps to both bounds. A `Limit` compares equal to its current value.
- `xf.num.frac`: `Frac(num, den)`, a fixed-point fraction. Addition, subtraction and comparison require equal denominators and otherwise raise `ValueError`. `float(frac)` converts it to a float.
- `xf.data.direction`: `Dir4` (N, E, S, W, numbered clockwise), `DirH` (L, R) and `Spin` (CCW, CW). `Dir4.parse` raises `ValueError` on anything other than `n`, `e`, `s` or `w` (in either case).
- `xf.data.arr2d`: `Arr2D`, a flat list viewed as a grid of fixed width. `get` returns `None` outside the grid, and `set` returns whether the cell exists. Iterating it yields `(position, value)` pairs.
- `xf.ds.queue`: `Queue`, a FIFO queue. `dequeue` and `peek` return `None` when it is empty.
- `xf.ds.fifo`: `Fifo`, a queue whose sending end (`FifoTx`) and receiving end (`FifoRx`) can be handed out separately with `split`.
- `xf.timing.clock`: a process-wide frame clock. `update_global_time(timedelta)` caps each step at 1/30 s, while `update_global_time_seconds(secs)` takes the step as given. Read it with `delta_s`, `curr_time_s` and `frame_num`.
- `xf.timing.timer`: `Timer`, which advances by `delta_s()` on each `update`.
- `xf.timing.countdown`: `Countdown`, a step counter that stops at zero.
- `xf.mq.texture`: `Texture`, which wraps a `pygame.Surface`. `Texture.from_bytes` decodes an image held in memory.
- `xf.mq.textures`: `Textures`, a cache that decodes each texture on first use.
- `xf.mq.draw`: `draw_rect`, `draw_ellipse` and `draw_texture`. These draw onto the surface chosen with `set_target`, and raise `RuntimeError` if no target is set.
- `xf.mq.window`: `Window(WindowParams(resolution, scale))`. Only one may be created. `render_pass` draws onto a low-resolution canvas and blits it, scaled up, onto the display surface.
- `xf.map.tiled_json`: parsing of Tiled JSON map and tileset documents (`JsonTilemap.from_bytes`, `JsonTileset.from_bytes`). Malformed input raises `ValueError`.
- `xf.map.tileset`, `xf.map.tilemap`: `Tileset.from_json` builds a grid of tile values, and `Tilemap.from_json` builds one `Tilemap` for each tile layer.
- `xf.anim.animation`, `xf.anim.animation_map`, `xf.anim.animator`:
  - `Animation` is a frame sequence taken from a sprite sheet.
  - `AnimationMap` holds animations by key. Build one with the helpers `seq`, `row`, `row_h` and `row_4`, and merge several with `AnimationMap.combine`.
  - `Animator` plays the animations from a map, advancing by `delta_s()` on each `update`.

## Examples

Vectors and rectangles:

```python
from xf.num.vec import i2
from xf.num.irect import rect

r = rect(0, 0, 4, 5)
r.contains(i2(3, 4))              # True
r.intersection(rect(2, 2, 5, 5))  # rect(2, 2, 2, 3)
list(rect(0, 0, 2, 1))            # [i2(0, 0), i2(1, 0)]
```

A grid:

```python
from xf.data.arr2d import Arr2D
from xf.num.vec import i2

grid = Arr2D.filled(0, i2(3, 2))
grid.set(i2(1, 1), 7)
grid.get(i2(1, 1))   # 7
grid.get(i2(5, 5))   # None
```

Timers driven by the global clock:

```python
from xf.timing.clock import update_global_time_seconds
from xf.timing.timer import Timer

timer = Timer(0.5)
update_global_time_seconds(0.25)
timer.update_and_check()   # False
update_global_time_seconds(0.25)
timer.update_and_check()   # True, and the timer starts over
```

Animations read from a sprite sheet:

```python
from xf.anim.animation_map import AnimationMap, row, row_h
from xf.num.vec import Vec2, i2

anims = AnimationMap.combine([
    row("idle", i2(0, 0), 4, i2(1, 1), Vec2.ZERO, 0.25, True),
    row_h(lambda d: ("run", d), i2(0, 1), 6, i2(1, 1), Vec2.ZERO, 0.1, True),
])
anims.get("idle").at(0.6)   # i2(2, 0)
```

## What it does not do

- There is no game loop, event handling or input. `Window.render_pass` does not call `pygame.display.flip`, so presenting the frame and advancing the clock are up to the caller.
- Tileset references in a map (`JsonTilemap.tilesets`) are parsed but not resolved or loaded from disk. Documents are read from bytes only.
- Object groups are parsed, but `Tilemap.from_json` turns only tile layers into tilemaps.
- No command-line program is installed.