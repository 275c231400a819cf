"""Axis-aligned rectangular areas on the building grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .grid import CELLS_PER_CHUNK, grid_to_chunk_int

IVec2 = Tuple[int, int]


@dataclass(frozen=True)
class TerrainArea:
    """Rectangle in grid cells; the constructor normalizes negative sizes."""

    position: IVec2 = (0, 0)
    size: IVec2 = (0, 0)

    def __post_init__(self) -> None:
        px, py = (int(c) for c in self.position)
        sx, sy = (int(c) for c in self.size)
        ex, ey = px + sx, py + sy
        object.__setattr__(self, "position", (min(px, ex), min(py, ey)))
        object.__setattr__(self, "size", (abs(sx), abs(sy)))

    @staticmethod
    def intersection(first: "TerrainArea", second: "TerrainArea") -> "TerrainArea":
        """Overlap of two areas, or an empty area when they are disjoint."""
        px = max(first.position[0], second.position[0])
        py = max(first.position[1], second.position[1])
        sx = min(first.position[0] + first.size[0], second.position[0] + second.size[0]) - px
        sy = min(first.position[1] + first.size[1], second.position[1] + second.size[1]) - py
        if sx < 0 or sy < 0:
            return TerrainArea()
        return TerrainArea((px, py), (sx, sy))

    def area_in_chunk(self, chunk: IVec2) -> "TerrainArea":
        """The part of this area that lies in the given chunk."""
        chunk_area = TerrainArea(
            (chunk[0] * CELLS_PER_CHUNK, chunk[1] * CELLS_PER_CHUNK),
            (CELLS_PER_CHUNK, CELLS_PER_CHUNK),
        )
        return TerrainArea.intersection(self, chunk_area)

    def chunk_areas(self) -> dict[IVec2, "TerrainArea"]:
        """Split the area into pieces keyed by the chunk they lie in."""
        areas: dict[IVec2, TerrainArea] = {}
        chunk, _ = grid_to_chunk_int(self.position)
        piece = self.area_in_chunk(chunk)
        areas[chunk] = piece

        (px, py), (sx, sy) = self.position, self.size
        if piece.size[0] < sx:
            rest_x = TerrainArea((px + piece.size[0], py), (sx - piece.size[0], sy))
            areas.update(rest_x.chunk_areas())
        if piece.size[1] < sy:
            rest_y = TerrainArea((px, py + piece.size[1]), (piece.size[0], sy - piece.size[1]))
            areas.update(rest_y.chunk_areas())
        return areas

    def shifted(self, offset: IVec2) -> "TerrainArea":
        """The same area moved by ``offset``."""
        return TerrainArea(
            (self.position[0] + offset[0], self.position[1] + offset[1]), self.size
        )

    def __add__(self, offset: IVec2) -> "TerrainArea":
        return self.shifted(offset)