import pytest

from citybuilder.grid import CELLS_PER_CHUNK
from citybuilder.terrain_area import TerrainArea


def test_default_is_empty():
    area = TerrainArea()
    assert area.position == (0, 0)
    assert area.size == (0, 0)


def test_negative_size_is_normalized():
    area = TerrainArea((5, 5), (-2, -3))
    assert area == TerrainArea((5 - 2, 5 - 3), (2, 3))
    assert all(s >= 0 for s in area.size)


def test_intersection_overlap():
    a = TerrainArea((0, 0), (10, 10))
    b = TerrainArea((5, 5), (10, 10))
    assert TerrainArea.intersection(a, b) == TerrainArea((5, 5), (5, 5))
    assert TerrainArea.intersection(a, b) == TerrainArea.intersection(b, a)


def test_intersection_with_self():
    a = TerrainArea((3, -4), (7, 2))
    assert TerrainArea.intersection(a, a) == a


def test_intersection_disjoint_is_empty():
    a = TerrainArea((0, 0), (2, 2))
    b = TerrainArea((10, 10), (2, 2))
    assert TerrainArea.intersection(a, b) == TerrainArea()


def test_area_in_own_chunk_is_itself():
    area = TerrainArea((2, 3), (10, 10))
    assert area.area_in_chunk((0, 0)) == area


def test_area_in_other_chunk_is_empty():
    area = TerrainArea((0, 0), (10, 10))
    assert area.area_in_chunk((1, 0)) == TerrainArea()


def test_chunk_areas_single_chunk():
    area = TerrainArea((1, 1), (5, 5))
    assert area.chunk_areas() == {(0, 0): area}


def test_chunk_areas_across_four_chunks():
    area = TerrainArea((CELLS_PER_CHUNK - 10, CELLS_PER_CHUNK - 10), (20, 20))
    pieces = area.chunk_areas()
    assert set(pieces) == {(0, 0), (1, 0), (0, 1), (1, 1)}
    assert sum(p.size[0] * p.size[1] for p in pieces.values()) == 20 * 20
    for chunk, piece in pieces.items():
        assert piece == area.area_in_chunk(chunk)


def test_chunk_areas_negative_positions():
    area = TerrainArea((-5, -5), (10, 10))
    pieces = area.chunk_areas()
    assert set(pieces) == {(-1, -1), (0, -1), (-1, 0), (0, 0)}
    assert sum(p.size[0] * p.size[1] for p in pieces.values()) == 10 * 10


@pytest.mark.parametrize("offset", [(3, 4), (-7, 0), (0, 0)])
def test_shifted_keeps_size(offset):
    area = TerrainArea((1, 2), (6, 8))
    moved = area.shifted(offset)
    assert moved.size == area.size
    assert moved.position == (1 + offset[0], 2 + offset[1])
    assert area + offset == moved


def test_equality_and_hash():
    a = TerrainArea((1, 2), (3, 4))
    b = TerrainArea((4, 6), (-3, -4))
    assert a == b
    assert hash(a) == hash(b)
    assert a != TerrainArea((1, 2), (3, 5))