import pytest

from citybuilder.direction import Direction, direction_of

CARDINALS = [Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST]


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.EAST, Direction.WEST),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.WEST, Direction.EAST),
        (Direction.UNDEFINED, Direction.UNDEFINED),
    ],
)
def test_inverse(direction, opposite):
    assert direction.inverse() is opposite
    assert -direction is opposite


@pytest.mark.parametrize("direction", list(Direction))
def test_double_inverse_is_identity(direction):
    assert Direction.inverse(Direction.inverse(direction)) is direction


def test_axis_predicates():
    assert Direction.NORTH.is_north_south()
    assert Direction.SOUTH.is_north_south()
    assert not Direction.EAST.is_north_south()
    assert Direction.EAST.is_east_west()
    assert Direction.WEST.is_east_west()
    assert not Direction.UNDEFINED.is_east_west()
    assert not Direction.UNDEFINED.is_north_south()


@pytest.mark.parametrize("direction", CARDINALS)
def test_vector_round_trip(direction):
    assert direction_of(direction.vector()) is direction


@pytest.mark.parametrize("direction", CARDINALS)
def test_opposite_vectors_cancel(direction):
    a = Direction.vector(direction)
    b = Direction.vector(Direction.inverse(direction))
    assert (a[0] + b[0], a[1] + b[1]) == (0, 0)
    assert direction_of((a[0] + b[0], a[1] + b[1])) is Direction.UNDEFINED


def test_undefined_vector_is_zero():
    assert direction_of(Direction.UNDEFINED.vector()) is Direction.UNDEFINED


def test_direction_of_vectors():
    assert direction_of((3.5, 0)) is Direction.NORTH
    assert direction_of((0, -2)) is Direction.WEST
    assert direction_of((1, 1)) is Direction.UNDEFINED
    assert direction_of((0, 0)) is Direction.UNDEFINED


def test_next():
    assert Direction.NORTH.next() is Direction.EAST
    assert Direction.SOUTH.next() is Direction.WEST
    assert Direction.WEST.next() is Direction.UNDEFINED
    assert Direction.UNDEFINED.next() is Direction.UNDEFINED