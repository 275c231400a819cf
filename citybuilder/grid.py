"""World settings, grid coordinate transforms and small vector helpers.

Coordinate systems used throughout the package:

* world coordinates: ``(x, y, z)`` in meters, ``y`` pointing up;
* normalized world grid coordinates: ``(x, z)`` divided by the cell size;
* normalized chunk grid coordinates: a chunk index plus a position inside
  that chunk, both measured in cells.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Integral, Real
from typing import Tuple

Vec2 = Tuple[float, float]
IVec2 = Tuple[int, int]
Vec3 = Tuple[float, float, float]

#: Size of one building cell in meters.
CELL_SIZE = 5
#: Size of one chunk in meters.
CHUNK_SIZE = 200
#: Number of cells in a chunk along one axis.
CELLS_PER_CHUNK = CHUNK_SIZE // CELL_SIZE

#: Distance from one terrain level to the next.
TERRAIN_HEIGHT_STEPS = 2.0
#: Minimum terrain height.
TERRAIN_MIN_HEIGHT = -2.0
#: Maximum terrain height.
TERRAIN_MAX_HEIGHT = 6.0
#: Distance between the lowest and the highest terrain level.
TERRAIN_HEIGHT_RANGE = TERRAIN_MAX_HEIGHT - TERRAIN_MIN_HEIGHT
#: Number of terrain height levels.
TERRAIN_HEIGHT_LEVELS = int(TERRAIN_HEIGHT_RANGE / TERRAIN_HEIGHT_STEPS)

#: Distance of the camera above the terrain.
CAMERA_HEIGHT = 15.0

#: Maximum number of cars.
MAX_CARS = 1
#: Velocity of one car.
CAR_VELOCITY = 1.0

SHADOW_BUFFER_WIDTH = 4096
SHADOW_BUFFER_HEIGHT = 4096
SHADOW_CASCADE_COUNT = 4
CASCADE_FAR_PLANE_FACTORS = (0.05, 0.125, 0.25, 0.5)


def world_to_grid(position: Sequence[float]) -> Vec2:
    """Project a world position onto the normalized world grid."""
    x, _, z = position
    return (x / CELL_SIZE, z / CELL_SIZE)


def grid_to_chunk(position: Sequence[float]) -> tuple[IVec2, Vec2]:
    """Split a float grid position into its chunk and the position inside it."""
    x, y = position
    chunk = (math.floor(x / CELLS_PER_CHUNK), math.floor(y / CELLS_PER_CHUNK))
    local = (x - CELLS_PER_CHUNK * chunk[0], y - CELLS_PER_CHUNK * chunk[1])
    return chunk, local


def grid_to_chunk_int(position: Sequence[int]) -> tuple[IVec2, IVec2]:
    """Split an integer grid cell into its chunk and the cell inside it."""
    x, y = (int(c) for c in position)
    chunk = (x // CELLS_PER_CHUNK, y // CELLS_PER_CHUNK)
    local = (x - CELLS_PER_CHUNK * chunk[0], y - CELLS_PER_CHUNK * chunk[1])
    return chunk, local


def world_to_chunk(position: Sequence[float]) -> tuple[IVec2, Vec2]:
    """Convert a world position into chunk grid coordinates."""
    return grid_to_chunk(world_to_grid(position))


def grid_to_world(position: Sequence[float], y: float = 0.0) -> Vec3:
    """Lift a grid position back into world space at height ``y`` (scaled)."""
    gx, gz = position
    return (CELL_SIZE * gx, CELL_SIZE * y, CELL_SIZE * gz)


def chunk_to_grid(chunk: Sequence[int], position: Sequence[float]):
    """Combine a chunk index and a position inside it into a grid position."""
    return (
        CELLS_PER_CHUNK * chunk[0] + position[0],
        CELLS_PER_CHUNK * chunk[1] + position[1],
    )


def chunk_to_world(chunk: Sequence[int], position: Sequence[float], y: float = 0.0) -> Vec3:
    """Convert chunk grid coordinates into world coordinates."""
    return grid_to_world(chunk_to_grid(chunk, position), y)


def cartesian_to_spherical(x: float, y: float, z: float) -> Vec3:
    """Return ``(r, theta, phi)`` with ``theta`` measured from the y axis."""
    r = math.sqrt(x * x + y * y + z * z)
    if r == 0:
        raise ValueError("the zero vector has no spherical direction")
    theta = math.acos(max(-1.0, min(1.0, y / r)))
    if x == 0 and z == 0:
        phi = 0.0
    else:
        sign = (x > 0) - (x < 0)
        ratio = x / math.sqrt(x * x + z * z)
        phi = sign * math.acos(max(-1.0, min(1.0, ratio)))
    return (r, theta, phi)


def spherical_to_cartesian(r: float, theta: float, phi: float) -> Vec3:
    """Inverse of :func:`cartesian_to_spherical`."""
    return (
        r * math.sin(theta) * math.cos(phi),
        r * math.cos(theta),
        r * math.sin(theta) * math.sin(phi),
    )


def in_range(value, lower, upper) -> bool:
    """Inclusive range check, component-wise for vectors."""
    if isinstance(value, Sequence):
        return all(lo <= v <= hi for v, lo, hi in zip(value, lower, upper))
    return lower <= value <= upper


def in_chunk(position: Sequence[int]) -> bool:
    """Whether a local cell position lies within a chunk (edges included)."""
    return in_range(tuple(position), (0, 0), (CELLS_PER_CHUNK, CELLS_PER_CHUNK))


def interpolate(start: Sequence[int], end: Sequence[int], value: int) -> IVec2:
    """Linear interpolation between two integer vectors."""
    return tuple((e - s) * value + s for s, e in zip(start, end))


def manhattan_length(vector: Sequence[int]) -> int:
    """Length of an integer vector in the taxicab metric."""
    return sum(abs(c) for c in vector)


def sign_vector(vector: Sequence[int]) -> IVec2:
    """Component-wise sign of an integer vector."""
    return tuple((c > 0) - (c < 0) for c in vector)


def _format_component(value) -> str:
    if isinstance(value, Integral):
        return str(int(value))
    if isinstance(value, Real):
        return f"{float(value):g}"
    return str(value)


def format_vector(vector: Sequence) -> str:
    """Render a vector as ``(a, b, ...)``."""
    return "(" + ", ".join(_format_component(c) for c in vector) + ")"