import pytest

from citybuilder.grid import CELLS_PER_CHUNK
from citybuilder.terrain import (
    SurfaceGeometry,
    SurfaceType,
    Terrain,
    TerrainChunk,
    TerrainError,
)


@pytest.fixture
def terrain():
    t = Terrain()
    t.chunks[(0, 0)] = TerrainChunk()
    t.chunks[(-1, -1)] = TerrainChunk()
    return t


def _set_corners(terrain, cell, h0, h1, h2, h3):
    x, y = cell
    terrain.set_height((x, y), h0)
    terrain.set_height((x + 1, y), h1)
    terrain.set_height((x, y + 1), h2)
    terrain.set_height((x + 1, y + 1), h3)


def test_set_and_get_height_round_trip(terrain):
    terrain.set_height((5, 7), 4.0)
    assert terrain.height_at_cell((5, 7)) == 4
    assert terrain.cell_heights((5, 7))[0] == 4.0


def test_negative_positions_use_negative_chunk(terrain):
    terrain.set_height((-1, -1), 2.0)
    assert terrain.chunks[(-1, -1)].heights[CELLS_PER_CHUNK - 1][CELLS_PER_CHUNK - 1] == 2.0
    assert terrain.height_at_cell((-1, -1)) == 2


def test_height_at_cell_truncates(terrain):
    terrain.set_height((1, 1), 3.75)
    assert terrain.height_at_cell((1, 1)) == 3


def test_cell_heights_order(terrain):
    _set_corners(terrain, (2, 3), 1.0, 2.0, 3.0, 4.0)
    assert terrain.cell_heights((2, 3)) == (1.0, 2.0, 3.0, 4.0)


def test_interpolation_hits_corners_and_centre(terrain):
    _set_corners(terrain, (2, 3), 1.0, 2.0, 3.0, 4.0)
    assert terrain.height_at((2.0, 3.0)) == pytest.approx(1.0)
    assert terrain.height_at((2.5, 3.5)) == pytest.approx((1.0 + 2.0 + 3.0 + 4.0) / 4)
    assert terrain.height_at((2.5, 3.0)) == pytest.approx((1.0 + 2.0) / 2)


def test_flat_geometry(terrain):
    assert terrain.geometry((4, 4)) is SurfaceGeometry.FLAT


@pytest.mark.parametrize("heights", [(0, 0, 2, 2), (0, 2, 2, 0)])
def test_tilted_geometry(terrain, heights):
    _set_corners(terrain, (4, 4), *heights)
    assert terrain.geometry((4, 4)) is SurfaceGeometry.FLAT_TILTED


@pytest.mark.parametrize(
    "heights", [(0, 2, 2, 2), (2, 0, 2, 2), (2, 2, 0, 2), (2, 2, 2, 0)]
)
def test_diagonal_bottom_geometry(terrain, heights):
    _set_corners(terrain, (4, 4), *heights)
    assert terrain.geometry((4, 4)) is SurfaceGeometry.DIAGONAL_TILTED_BOTTOM


@pytest.mark.parametrize(
    "heights", [(4, 2, 2, 2), (2, 4, 2, 2), (2, 2, 4, 2), (2, 2, 2, 4)]
)
def test_inner_corner_geometry(terrain, heights):
    _set_corners(terrain, (4, 4), *heights)
    assert terrain.geometry((4, 4)) is SurfaceGeometry.INNER_CORNER


def test_invalid_geometry_raises(terrain):
    _set_corners(terrain, (4, 4), 0.0, 1.0, 2.0, 3.0)
    with pytest.raises(TerrainError):
        terrain.geometry((4, 4))


def test_surface_type(terrain):
    terrain.chunks[(0, 0)].surface_types[3][6] = SurfaceType.WATER
    assert terrain.surface_type((3.7, 6.2)) is SurfaceType.WATER
    assert terrain.surface_type((4.1, 6.2)) is SurfaceType.GRASS


def test_chunk_loaded_and_position_valid(terrain):
    assert terrain.chunk_loaded((0, 0))
    assert not terrain.chunk_loaded((1, 0))
    assert terrain.position_valid((10.5, 3.2))
    assert terrain.position_valid((-0.5, -0.5))
    assert not terrain.position_valid((CELLS_PER_CHUNK + 0.5, 0.0))


def test_missing_chunk_raises(terrain):
    with pytest.raises(KeyError):
        terrain.height_at_cell((CELLS_PER_CHUNK * 3, 0))
    with pytest.raises(KeyError):
        terrain.set_height((0, CELLS_PER_CHUNK * 2), 1.0)