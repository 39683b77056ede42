# dgmkit

Small building blocks for 2D games. The package has no dependencies outside the standard library.

## Modules

- `dgmkit.objects` holds the basic shapes.
  - `Circle` has a position and a radius.
  - `Rect` has a position and a size, plus a `center()` method.
  - `Mesh` is a row-major grid of integers. A cell with a value greater than zero is solid. You can index cells by a flat index or by an `(x, y)` pair. It also has `clone()`, `move()` and `set_data_size()`, which resets the grid to zeros.
- `dgmkit.jump_points` holds the step and stop helpers for walking a `Mesh` grid.
  - `Direction` lists the eight grid steps.
  - `advance(point, direction)` returns the next point in that direction.
  - `should_stop_straight(point, mesh)` tells you when a straight walk must stop.
  - `should_stop_diagonal(point, mesh, direction)` does the same for a diagonal walk. It raises `ValueError` for a direction that is not diagonal.
- `dgmkit.path` holds `Navpoint`, which is a coordinate with an integer value, and `Path`.
  - `Path` moves through its points with `current_point()` and `advance()`.
  - A looping path wraps back to its first point.
  - A non-looping path reports `is_traversed()` once every point has been passed.
- `dgmkit.dynamic_buffer` holds `DynamicBuffer`.
  - `add()` and `erase()` both run in O(1).
  - An index stays valid until the item at that index is erased.
  - Iterating a buffer yields `(item, index)` pairs.
  - `get()` returns `None` for an invalid index. `[]` raises `IndexError` instead.
- `dgmkit.static_buffer` holds `StaticBuffer`, a pool of preallocated items with a fixed capacity.
  - `grow()` exposes the next item.
  - `remove()` swaps the removed item with the last used one, so the order of items is not kept.
  - `len()` and iteration cover only the used items.
- `dgmkit.spatial_index` holds `SpatialIndex` and `SpatialBuffer`.
  - `SpatialIndex` maps grid cells to item indices. Its boxes are `(x, y)` points, `Circle` objects or `Rect` objects.
  - `get_overlap_candidates()` returns a sorted list of unique indices.
  - `SpatialBuffer` combines a `DynamicBuffer` with this lookup.
- `dgmkit.frame_time` holds `FrameTime`.
  - `reset()` stores the time that passed since the previous reset.
  - That time is kept as `delta_time` in seconds and as `elapsed`, a `timedelta`.
- `dgmkit.utility` holds two vector helpers.
  - `vector_to_string(vec)` formats a vector as `[x, y]`. Floats get six decimals.
  - `vector_sort_key(vec)` orders vectors by `y` first, then by `x`.
- `dgmkit.resource_manager` holds `ResourceManager`, which stores resources by kind and by id.
  - The id of a resource loaded from a file is the file name, unless you pass a `resource_id_func`.
  - `load_resources_from_directory()` loads the matching files in one directory, without going into subdirectories, and returns their ids.
- `dgmkit.errors` holds `DgmError`.
  - `ResourceManager` raises it for every failure.
  - `str()` of the error starts with `Error message:`.
  - The bare text is in `.message`.

## Install

```
pip install .
```

## Example

```python
from dgmkit.objects import Rect
from dgmkit.spatial_index import SpatialBuffer

buffer = SpatialBuffer(Rect((0.0, 0.0), (100.0, 100.0)), 10)
box = Rect((5.0, 5.0), (4.0, 4.0))
idx = buffer.insert("player", box)

for candidate in buffer.get_overlap_candidates(box):
    print(buffer[candidate])
```

```python
from dgmkit.resource_manager import ResourceManager

manager = ResourceManager()
manager.insert_resource(str, "greeting", "hello")
print(manager.get(str, "greeting"))
```

## What it does not do

This is a library of data structures only.

- It has no window, no rendering and no input handling.
- It has no sprite animation and no texture atlas.
- It does not read clip or animation files.
- It does not compute paths. `jump_points` provides only the step and stop checks a pathfinder would use, and `Path` only walks points it is given.

## Tests

```
pip install .[test]
pytest
```