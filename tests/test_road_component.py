import pytest

from citybuilder.direction import Direction
from citybuilder.grid import CELLS_PER_CHUNK
from citybuilder.road_component import RoadComponent
from citybuilder.road_tile import RoadSpecs, RoadTile, RoadTileType, RoadType

SPECS = {RoadType.BASIC_ROADS: RoadSpecs(1.0, 0.1, 0.2, 16)}
LAST = CELLS_PER_CHUNK - 1


@pytest.mark.parametrize(
    "connections, tile_type, rotation",
    [
        ((False, False, False, False), RoadTileType.NOT_CONNECTED, 0),
        ((True, False, False, False), RoadTileType.END, 0),
        ((False, True, False, False), RoadTileType.END, 1),
        ((False, False, True, False), RoadTileType.END, 2),
        ((False, False, False, True), RoadTileType.END, 3),
        ((True, False, True, False), RoadTileType.STRAIGHT, 0),
        ((False, True, False, True), RoadTileType.STRAIGHT, 1),
        ((True, True, False, False), RoadTileType.CURVE, 0),
        ((False, True, True, False), RoadTileType.CURVE, 1),
        ((False, False, True, True), RoadTileType.CURVE, 2),
        ((True, False, False, True), RoadTileType.CURVE, 3),
        ((True, True, True, False), RoadTileType.T_CROSSING, 0),
        ((False, True, True, True), RoadTileType.T_CROSSING, 1),
        ((True, False, True, True), RoadTileType.T_CROSSING, 2),
        ((True, True, False, True), RoadTileType.T_CROSSING, 3),
        ((True, True, True, True), RoadTileType.CROSSING, 0),
    ],
)
def test_tile_for_connections(connections, tile_type, rotation):
    tile = RoadComponent.tile_for_connections(connections)
    assert tile == RoadTile(tile_type, rotation)


def test_tile_for_connections_needs_four_flags():
    with pytest.raises(ValueError):
        RoadComponent.tile_for_connections((True, False))


def test_new_component_is_empty():
    component = RoadComponent()
    assert component.node_positions() == set()
    assert all(tile.empty() for column in component.road_tiles for tile in column)
    assert not any(flag for side in component.borders for flag in side)


def test_set_road_marks_rectangle():
    component = RoadComponent()
    component.set_road((6, 3), (4, 5))
    marked = {
        (x, y)
        for x, column in enumerate(component.road_tiles)
        for y, tile in enumerate(column)
        if tile.not_empty()
    }
    assert marked == {(x, y) for x in range(4, 7) for y in range(3, 6)}
    assert component.road_tiles[5][4].tile_type is RoadTileType.UNDEFINED


def test_set_road_outside_chunk_raises():
    component = RoadComponent()
    with pytest.raises(ValueError):
        component.set_road((0, 0), (CELLS_PER_CHUNK, 0))


def test_clear_resets_tiles_and_borders():
    component = RoadComponent()
    component.set_road((1, 1), (1, 3))
    component.borders[0][2] = True
    component.clear()
    assert all(tile.empty() for column in component.road_tiles for tile in column)
    assert not any(flag for side in component.borders for flag in side)


def test_is_connected_inside_chunk():
    component = RoadComponent()
    component.set_road((5, 5), (5, 6))
    assert component.is_connected((5, 5), Direction.EAST)
    assert not component.is_connected((5, 5), Direction.NORTH)
    assert component.is_connected((5, 5))
    assert not component.is_connected((10, 10))


def test_is_connected_uses_borders():
    component = RoadComponent()
    component.borders[Direction.NORTH.value][3] = True
    component.borders[Direction.EAST.value][7] = True
    assert component.is_connected((LAST, 3), Direction.NORTH)
    assert not component.is_connected((LAST, 4), Direction.NORTH)
    assert component.is_connected((7, LAST), Direction.EAST)
    assert not component.is_connected((0, 3), Direction.SOUTH)


def test_straight_road_types_and_graph():
    component = RoadComponent()
    component.set_road((5, 5), (5, 10))
    component.update_road_types(SPECS)

    assert component.road_tiles[5][5] == RoadTile(RoadTileType.END, 1)
    assert component.road_tiles[5][10] == RoadTile(RoadTileType.END, 3)
    for y in range(6, 10):
        assert component.road_tiles[5][y] == RoadTile(RoadTileType.STRAIGHT, 1)
    assert component.mesh_outdated
    assert set(component.graph.nodes) == {(5, 5), (5, 10)}
    assert component.node_positions() == {(5, 5), (5, 10)}

    component.update_road_graph(SPECS)
    assert component.graph.adjacent((5, 5), (5, 10))
    assert component.graph.adjacent((5, 10), (5, 5))
    assert len(component.graph.edges[((5, 5), (5, 10))]) == 2


def test_update_road_is_stable():
    component = RoadComponent()
    component.set_road((2, 2), (2, 4))
    component.update_road_types(SPECS)
    before = [[RoadTile(t.tile_type, t.rotation, t.road_type) for t in col] for col in component.road_tiles]
    component.mesh_outdated = False
    component.update_road_types(SPECS)
    assert component.road_tiles == before
    assert not component.mesh_outdated


def test_extended_end_leaves_graph():
    component = RoadComponent()
    component.set_road((5, 4), (5, 5))
    component.update_road_types(SPECS)
    assert (5, 5) in component.graph.nodes

    component.set_road((5, 6), (5, 6))
    component.update_road_types(SPECS)
    assert component.road_tiles[5][5].tile_type is RoadTileType.STRAIGHT
    assert (5, 5) not in component.graph.nodes
    assert (5, 6) in component.graph.nodes


def test_border_connection_shapes_tile():
    component = RoadComponent()
    component.borders[Direction.NORTH.value][3] = True
    component.set_road((LAST, 3), (LAST, 3))
    component.update_road_types(SPECS)
    assert component.road_tiles[LAST][3] == RoadTile(RoadTileType.END, 0)
    assert (LAST, 3) in component.graph.nodes


def test_node_in_between_blocks_and_removes_edge():
    component = RoadComponent()
    component.set_road((5, 5), (5, 10))
    component.update_road_types(SPECS)
    component.update_road_graph(SPECS)
    assert component.graph.adjacent((5, 5), (5, 10))

    component.set_road((6, 7), (6, 7))
    component.update_road_types(SPECS)
    assert component.road_tiles[5][7].tile_type is RoadTileType.T_CROSSING
    component.update_road_graph(SPECS)
    assert not component.graph.adjacent((5, 5), (5, 10))
    assert component.graph.adjacent((5, 5), (5, 7))
    assert component.graph.adjacent((5, 7), (5, 10))


def test_missing_specs_raise():
    component = RoadComponent()
    component.set_road((1, 1), (1, 1))
    with pytest.raises(KeyError):
        component.update_road_types({})


def test_constructor_copies_tiles():
    source = [[RoadTile() for _ in range(CELLS_PER_CHUNK)] for _ in range(CELLS_PER_CHUNK)]
    source[3][4] = RoadTile(RoadTileType.UNDEFINED)
    borders = [[False] * CELLS_PER_CHUNK for _ in range(4)]
    borders[2][1] = True
    component = RoadComponent(source, borders)
    component.road_tiles[3][4].tile_type = RoadTileType.END
    assert source[3][4].tile_type is RoadTileType.UNDEFINED
    assert component.borders[2][1]