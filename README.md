# citybuilder

The world model and interface layout of a city building game, as a plain
Python library. It has no window, renderer or game loop behind it. You
feed it positions, heights, road cells and mouse or key events, and it
returns coordinates, tile shapes, graphs, matrices and widget boxes.

## Modules

- `citybuilder.grid`: the world layout constants (`CELL_SIZE` = 5 m,
  `CHUNK_SIZE` = 200 m, `CELLS_PER_CHUNK` = 40, terrain and shadow
  settings). It converts between world, grid and chunk coordinates with
  `world_to_grid`, `grid_to_chunk`, `grid_to_chunk_int`, `world_to_chunk`,
  `grid_to_world`, `chunk_to_grid` and `chunk_to_world`. It also has
  `cartesian_to_spherical` and `spherical_to_cartesian`, plus the small
  helpers `in_range`, `in_chunk`, `interpolate`, `manhattan_length`,
  `sign_vector` and `format_vector`.
- `citybuilder.direction`: the `Direction` enum (NORTH = +x, EAST = +z,
  SOUTH = -x, WEST = -z, UNDEFINED). Each member has `inverse()` (also
  written as unary `-`), `is_north_south()`, `is_east_west()`, `vector()`
  and `next()`. `direction_of(vector)` gives the direction of an
  axis-aligned vector.
- `citybuilder.building`: the `BuildingType` enum with `label()`, and
  `building_name()`.
- `citybuilder.terrain_area`: `TerrainArea`, a rectangle of cells that
  normalizes negative sizes. It has `intersection`, `area_in_chunk`,
  `chunk_areas` (the area split up by chunk) and `shifted` (also written
  as `area + offset`).
- `citybuilder.ray`: `Ray`, created from a start and a direction or with
  `Ray.from_points`. `cell_intersections(max_length)` lists the grid cells
  the ray enters and the world points where it enters them.
- `citybuilder.terrain`: `Terrain` holds loaded `TerrainChunk`s in its
  `chunks` dict, keyed by chunk position. It gives corner heights
  (`height_at_cell`, `cell_heights`), the bilinearly interpolated height
  (`height_at`), `set_height`, `surface_type`, `chunk_loaded`,
  `position_valid` and the cell shape (`geometry`, a `SurfaceGeometry`).
  `geometry` raises `TerrainError` when the corner heights fit no known
  shape. A lookup in a chunk that is not loaded raises `KeyError`.
- `citybuilder.road_tile`: `RoadTileType`, `RoadType`, `RoadTile`,
  `RoadSpecs` and the name helpers `road_tile_type_name`,
  `road_type_name` and `road_type_id_name`.
- `citybuilder.road_graph`: `RoadGraph`, a directed graph of road nodes
  keyed by cell. It has `add_node`, `remove_node`, `add_edge`,
  `remove_edge`, `adjacent`, `neighbours`, `update_node_data`,
  `update_edge_data` and `clear`, plus the read-only `nodes` and `edges`
  mappings.
- `citybuilder.road_paths`: `generate_edge_path` builds the lane between
  two nodes. `generate_node_paths` builds the lanes through a node cell,
  indexed by entry and exit direction.
- `citybuilder.road_component`: `RoadComponent` holds the road tiles of
  one chunk and the road links across its borders. `set_road` marks a
  rectangle of cells as road. `update_road_types` and `update_road` work
  out each tile's shape from its neighbours and keep the graph nodes in
  step. `update_road_graph` joins nodes that an unbroken straight road
  connects. `tile_for_connections` and `node_positions` are also
  available. Changes are reported through the `logging` module at debug
  level.
- `citybuilder.components`: numpy matrix maths. It has `perspective`,
  `look_at`, `orthographic` and `frustum_corners`, and the classes
  `Transformation` (position, quaternion rotation, scale and model
  matrix), `Camera` (yaw and pitch in degrees, with projection and view
  matrices) and `DirectionalLight` (cascaded shadow matrices through
  `calculate_light_matrices` and `cascade_matrices`).
- `citybuilder.widgets`: the constraint-based layout. It has
  `ConstraintType`, `Constraint` (`absolute`, `relative`, `center`,
  `aspect`, `fit_to_content`), `Constraints`, `Rectangle`, the mouse
  events, `EventDispatcher` and the widgets `Widget`, `Container`,
  `Button`, `Label` and `TextButton`.
- `citybuilder.stack_panel`: `StackPanel` places its children in a row or
  a column (`StackOrientation`). `ItemAlignment` places them at the
  start, centre or end, or stretches them.
- `citybuilder.gui`: `Gui`, the root of the interface. It keeps a stack
  of menus (`show_menu`, `pop_menu`), a warning label (`show_warning`,
  `hide_warning`) and the screen size. It routes mouse and `KeyEvent`
  input: Escape opens or closes menus and F1 toggles the debug panel.
  Opening and closing menus sets `app.game_state` (`GameState`) on the
  application object you pass in. By default labels are measured as
  fixed-width text; pass your own `text_renderer` for real font metrics.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from citybuilder.grid import world_to_chunk
from citybuilder.direction import Direction, direction_of
from citybuilder.terrain import Terrain, TerrainChunk
from citybuilder.road_component import RoadComponent
from citybuilder.road_tile import RoadSpecs, RoadType

chunk, cell = world_to_chunk((250.0, 0.0, 10.0))
# chunk == (1, 0), cell == (10.0, 2.0)

assert direction_of((0, -3)) is Direction.WEST
assert Direction.NORTH.inverse() is Direction.SOUTH

terrain = Terrain()
terrain.chunks[(0, 0)] = TerrainChunk()
terrain.set_height((1, 0), 2.0)
assert terrain.height_at((0.5, 0.0)) == 1.0

specs = {RoadType.BASIC_ROADS: RoadSpecs(0.5, 0.1, 0.2, 16)}
roads = RoadComponent()
roads.set_road((2, 2), (2, 6))
roads.update_road_types(specs)
roads.update_road_graph(specs)
assert set(roads.graph.nodes) == {(2, 2), (2, 6)}
```

## What it does not do

The package draws nothing and opens no window. Widgets compute boxes but
do not render. The camera and light classes produce matrices but no
shader uses them. It does not generate terrain, load resources or save
games, and it has no game loop or command-line program. The game, its
systems (cars, building, physics) and the concrete menus are left to the
program that uses these modules.