"""Compass directions on the building grid.

Positive x is north, positive z is east, negative x is south and
negative z is west.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Direction(Enum):
    """One of the four grid directions, or UNDEFINED."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3
    UNDEFINED = 4

    def inverse(self) -> "Direction":
        """The opposite direction; UNDEFINED stays UNDEFINED."""
        if self is Direction.UNDEFINED:
            return self
        return Direction((self.value + 2) % 4)

    def __neg__(self) -> "Direction":
        return self.inverse()

    def is_north_south(self) -> bool:
        return self in (Direction.NORTH, Direction.SOUTH)

    def is_east_west(self) -> bool:
        return self in (Direction.EAST, Direction.WEST)

    def vector(self) -> tuple[int, int]:
        """Unit grid vector of the direction; ``(0, 0)`` for UNDEFINED."""
        return _VECTORS.get(self, (0, 0))

    def next(self) -> "Direction":
        """The following direction; after WEST comes UNDEFINED."""
        following = self.value + 1
        return Direction(following) if following < 5 else Direction.UNDEFINED


_VECTORS = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
}


def direction_of(vector: Sequence[float]) -> Direction:
    """Direction of an axis-aligned vector, UNDEFINED otherwise."""
    x, y = vector[0], vector[1]
    if (x == 0) != (y == 0):
        if x != 0:
            return Direction.NORTH if x > 0 else Direction.SOUTH
        return Direction.EAST if y > 0 else Direction.WEST
    return Direction.UNDEFINED