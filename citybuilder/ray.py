"""Rays cast over the building grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Tuple

from .grid import CELL_SIZE, world_to_grid

IVec2 = Tuple[int, int]
Vec3 = Tuple[float, float, float]

#: Stand-in for "infinitely far" used where an axis is never crossed.
FAR_AWAY = 2147483648.0


@dataclass(frozen=True)
class Ray:
    """Half line from ``start`` along a normalized ``direction``."""

    start: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        start = tuple(float(c) for c in self.start)
        direction = tuple(float(c) for c in self.direction)
        if len(start) != 3 or len(direction) != 3:
            raise ValueError("a ray needs a three-dimensional start and direction")
        length = math.sqrt(sum(c * c for c in direction))
        if length == 0:
            raise ValueError("a ray needs a non-zero direction")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "direction", tuple(c / length for c in direction))

    @staticmethod
    def from_points(start: Sequence[float], point: Sequence[float]) -> "Ray":
        """Ray starting at ``start`` and passing through ``point``."""
        return Ray(tuple(start), tuple(p - s for p, s in zip(point, start)))

    def cell_intersections(self, max_length: float) -> List[Tuple[IVec2, Vec3]]:
        """Cells the ray enters, paired with the world point where it enters them.

        Cells are in normalized world grid coordinates; stepping stops after
        the first crossing at a ray parameter of at least ``max_length``.
        """
        sx, sy = world_to_grid(self.start)
        dx, _, dz = self.direction
        start_cell = (int(sx), int(sy))

        if dx == 0.0 and dz == 0.0:
            return [(start_cell, (FAR_AWAY, FAR_AWAY, FAR_AWAY))]

        next_x, next_y = start_cell
        x_step = y_step = -1
        if dx > 0:
            next_x += 1
            x_step = 1
        if dz > 0:
            next_y += 1
            y_step = 1

        cell_x, cell_y = start_cell
        cells: List[Tuple[IVec2, Vec3]] = []
        while True:
            lambda_x = FAR_AWAY if dx == 0 else (next_x - sx) / dx
            lambda_y = FAR_AWAY if dz == 0 else (next_y - sy) / dz

            if lambda_y < lambda_x:
                step = lambda_y
                next_y += y_step
                cell_y += y_step
            else:
                step = lambda_x
                next_x += x_step
                cell_x += x_step

            scale = CELL_SIZE * step
            point = tuple(s + scale * d for s, d in zip(self.start, self.direction))
            cells.append(((cell_x, cell_y), point))

            if abs(step) >= max_length:
                return cells