"""Terrain heights and surfaces, stored per chunk."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from .grid import CELLS_PER_CHUNK, grid_to_chunk, grid_to_chunk_int

IVec2 = Tuple[int, int]


class SurfaceType(Enum):
    GRASS = 0
    WATER = 1
    BEACH = 2


class SurfaceGeometry(Enum):
    FLAT = 0
    FLAT_TILTED = 1
    OUTER_CORNER = 2
    INNER_CORNER = 3
    DIAGONAL_TILTED_BOTTOM = 4
    DIAGONAL_TILTED_TOP = 5


class TerrainError(RuntimeError):
    """Raised when the terrain data is inconsistent."""


def _flat_heights() -> List[List[float]]:
    return [[0.0] * (CELLS_PER_CHUNK + 1) for _ in range(CELLS_PER_CHUNK + 1)]


def _grass() -> List[List[SurfaceType]]:
    return [[SurfaceType.GRASS] * CELLS_PER_CHUNK for _ in range(CELLS_PER_CHUNK)]


@dataclass
class TerrainChunk:
    """Corner heights and cell surfaces of one chunk.

    ``heights`` has one more row and column than there are cells so that
    every cell has all four corners inside its own chunk.
    """

    heights: List[List[float]] = field(default_factory=_flat_heights)
    surface_types: List[List[SurfaceType]] = field(default_factory=_grass)


class Terrain:
    """The loaded terrain chunks, addressed in normalized world grid coords."""

    def __init__(self) -> None:
        self.chunks: Dict[IVec2, TerrainChunk] = {}

    def _chunk(self, chunk: IVec2) -> TerrainChunk:
        try:
            return self.chunks[chunk]
        except KeyError:
            raise KeyError(f"chunk {chunk} is not loaded") from None

    def height_at_cell(self, position: Sequence[int]) -> int:
        """Height of the cell corner at ``position``, truncated to an integer."""
        chunk, (x, y) = grid_to_chunk_int(position)
        return int(self._chunk(chunk).heights[x][y])

    def cell_heights(self, position: Sequence[int]) -> Tuple[float, float, float, float]:
        """Corner heights of a cell: (x, y), (x+1, y), (x, y+1), (x+1, y+1)."""
        chunk, (x, y) = grid_to_chunk_int(position)
        heights = self._chunk(chunk).heights
        return (heights[x][y], heights[x + 1][y], heights[x][y + 1], heights[x + 1][y + 1])

    def height_at(self, position: Sequence[float]) -> float:
        """Bilinearly interpolated height at a float grid position."""
        cell = (math.floor(position[0]), math.floor(position[1]))
        h0, h1, h2, h3 = self.cell_heights(cell)
        fx, fy = position[0] - cell[0], position[1] - cell[1]
        x0 = h0 + fx * (h1 - h0)
        x1 = h2 + fx * (h3 - h2)
        return x0 + fy * (x1 - x0)

    def set_height(self, position: Sequence[int], height: float) -> None:
        """Set the corner height at a grid position."""
        chunk, (x, y) = grid_to_chunk_int(position)
        self._chunk(chunk).heights[x][y] = height

    def surface_type(self, position: Sequence[float]) -> SurfaceType:
        """Surface of the cell containing ``position``."""
        chunk, (x, y) = grid_to_chunk(position)
        return self._chunk(chunk).surface_types[math.floor(x)][math.floor(y)]

    def chunk_loaded(self, chunk: Sequence[int]) -> bool:
        return (int(chunk[0]), int(chunk[1])) in self.chunks

    def position_valid(self, position: Sequence[float]) -> bool:
        """Whether the chunk containing ``position`` is loaded."""
        chunk, _ = grid_to_chunk(position)
        return self.chunk_loaded(chunk)

    def geometry(self, cell: Sequence[int]) -> SurfaceGeometry:
        """Classify the shape of a cell from its corner heights."""
        h0, h1, h2, h3 = self.cell_heights(cell)

        if h0 == h1 == h2 == h3:
            return SurfaceGeometry.FLAT
        if (h0 == h1 and h2 == h3) or (h1 == h2 and h0 == h3):
            return SurfaceGeometry.FLAT_TILTED

        for odd, rest in ((h0, h1), (h1, h0), (h2, h0), (h3, h0)):
            others = [h for h in (h0, h1, h2, h3)]
            others.remove(odd)
            if others[0] == others[1] == others[2]:
                if odd < rest:
                    return SurfaceGeometry.DIAGONAL_TILTED_BOTTOM
                return SurfaceGeometry.INNER_CORNER

        raise TerrainError("Terrain surface type is invalid")