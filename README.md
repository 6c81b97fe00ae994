# agptools

Small, dependency-free helpers for 2D game code: geometry, colours, strings,
float comparison, numeric utilities, timing, a delayed-task scheduler, file
helpers, a scene-to-screen view mapping and layout geometry for debug drawing
and texture sheets.

## Modules

- `agptools.geometry`: `Vec2D` (immutable vector/point with arithmetic,
  `mag`, `norm`, `perp`, `dot`, `cross`, `rot`, ...), `Rect` (axis-aligned
  rectangle with a `y_up` flag, `intersects`, strict `contains`, `united`,
  `adjust`, `vertices`, ...), `Line`, `RotatedRect` (`from_upper_edge`,
  `vertices`, `bounding_rect`, `contains`), the `Direction` enum with
  `dir2vec`, `dir2str`, `inverse` and `normal2dir`, and the enums
  `RoomState`, `RoomType`, `DoorState`, `DoorPosition` and `PanelPosition`.
- `agptools.color`: `Color`, a frozen RGBA value with 0..255 channels
  (alpha defaults to 255); out-of-range or non-integer channels raise.
- `agptools.strings`: `strrpl`, `strprintf`, `stristr`, `stricmp`,
  `num2str`, `str2num`, `list2str`, `fgetstr`, `singlespaces`, `clcr`,
  `split`, `has_ending`, `cls`, `shorten`, `padding`, `str2numlist`,
  `numlist2str` and `parse_range` (parses `[a,b)\[c,d)`, with `inf` as the
  largest 32-bit int; raises `ValueError` on a mismatch).
- `agptools.floatcmp`: `FloatingPoint` for 32- or 64-bit IEEE numbers seen
  through their bits, and `are_equal` / `are_not_equal`, which treat numbers
  at most four units in the last place apart as equal (never for NaN).
- `agptools.mathutils`: `approximately_equal`, `essentially_equal`,
  `Interval` (half-open, with `subtract`), `partition`, `distance`, `log2`,
  `round_half_away`, `rad2deg`, `deg2rad`, `ssqrt`, `octspace10`, `decades`,
  `subdivide`, `isfinite`, `meanstd`, `minmax`, `prctile`, `str2f`, `f2str`,
  `LinearInterpolation` and `linear_once`.
- `agptools.timing`: `Timer` (stopwatch), `FPS` (frame-rate counter that
  prints and updates about once a second) and `Profiler` (averages section
  durations in microseconds; usable as a context manager). Each takes an
  optional clock function, which makes them easy to drive in tests.
- `agptools.scheduler`: `Scheduler`, which runs a task once a delay of
  simulated time has passed, repeating `loop` more times (forever if
  negative).
- `agptools.files`: `get_files_in_directory`, `get_file_extension`,
  `get_file_name`, `cd_up`, `change_extension`, `is_directory`, `is_file`,
  `make_dir`, `check_and_make_dir`, `remove_folder` and `rename_file`.
- `agptools.view`: `View`, a camera rect in scene coordinates mapped onto a
  viewport of an output surface of a given pixel size, with an optional fixed
  aspect ratio; `map_to_scene`, `map_from_scene`, `map_rect_to_scene` and
  `map_rect_from_scene` convert between the two.
- `agptools.layout`: `circle_segments`, `capsule_outline` and `obb_edges`
  return the line segments of those outlines; `sequence_layout` lays equal
  images out row by row on a texture sheet; `move_by` steps a rect across a
  bordered sprite grid.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from agptools.geometry import Rect, Vec2D

a = Rect(0, 0, 4, 3)
b = Rect(2, 1, 4, 4)
a.intersects(b)              # True
a.contains(Vec2D(1, 1))      # True
a.united(b)                  # rectangle from (0, 0) to (6, 5)
```

```python
from agptools.scheduler import Scheduler

fired = []
s = Scheduler(0.5, lambda: fired.append(True))
s.update(0.3)
s.update(0.3)                # task runs once the delay has elapsed
```

```python
from agptools.strings import split, shorten

split("a,b,,c", ",")         # ['a', 'b', '', 'c']
shorten("hello world", 8)    # 'hello...'
```

```python
from agptools.geometry import Rect, Vec2D
from agptools.view import View

view = View(Rect(0, 0, 16, 15), output_size=(320, 300))
view.map_from_scene(Vec2D(1, 1))   # Vec2D(x=20.0, y=20.0)
```

```python
from agptools.layout import sequence_layout

width, height, rects = sequence_layout(3, 16, 16, 64, 64)
# width == 48, height == 16, three 16x16 rects side by side
```

## What it does not do

The package draws nothing and opens no window. `View` and the functions in
`agptools.layout` compute coordinates, segments and rects only; rendering
them, loading images or sprites, playing audio and running a game loop are
left to whatever graphics library the caller uses.