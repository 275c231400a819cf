"""Road tiles of one chunk and the road graph built from them."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import List, Optional, Set, Tuple

from .direction import Direction
from .grid import CELLS_PER_CHUNK, format_vector
from .road_graph import RoadGraph
from .road_paths import generate_edge_path, generate_node_paths
from .road_tile import RoadSpecs, RoadTile, RoadTileType, RoadType, road_tile_type_name

logger = logging.getLogger(__name__)

IVec2 = Tuple[int, int]
SpecsTable = Mapping[RoadType, RoadSpecs]


def _empty_tiles() -> List[List[RoadTile]]:
    return [[RoadTile() for _ in range(CELLS_PER_CHUNK)] for _ in range(CELLS_PER_CHUNK)]


def _empty_borders() -> List[List[bool]]:
    return [[False] * CELLS_PER_CHUNK for _ in range(4)]


def _in_chunk(x: int, y: int) -> bool:
    return 0 <= x < CELLS_PER_CHUNK and 0 <= y < CELLS_PER_CHUNK


class RoadComponent:
    """Road tiles of a chunk, the road links across its borders and its graph.

    ``borders[d][i]`` tells whether a road leaves the chunk in direction ``d``
    at index ``i`` (the y index for north/south, the x index for east/west).
    """

    def __init__(
        self,
        tiles: Optional[Sequence[Sequence[RoadTile]]] = None,
        borders: Optional[Sequence[Sequence[bool]]] = None,
    ) -> None:
        if tiles is None:
            self.road_tiles = _empty_tiles()
        else:
            self.road_tiles = [[replace(tile) for tile in column] for column in tiles]
        if borders is None:
            self.borders = _empty_borders()
        else:
            self.borders = [[bool(flag) for flag in side] for side in borders]
        self.graph = RoadGraph()
        self.mesh_outdated = False

    def clear(self) -> None:
        """Remove every road tile and every border connection."""
        self.road_tiles = _empty_tiles()
        self.borders = _empty_borders()

    def set_road(self, position1: Sequence[int], position2: Sequence[int]) -> None:
        """Mark the empty cells of the rectangle between two cells as road."""
        for x, y in (position1, position2):
            if not _in_chunk(x, y):
                raise ValueError(f"position {format_vector((x, y))} lies outside the chunk")
        x_lo, x_hi = sorted((position1[0], position2[0]))
        y_lo, y_hi = sorted((position1[1], position2[1]))
        for column in self.road_tiles[x_lo : x_hi + 1]:
            for tile in column[y_lo : y_hi + 1]:
                if tile.tile_type is RoadTileType.EMPTY:
                    tile.tile_type = RoadTileType.UNDEFINED

    def is_connected(
        self, position: Sequence[int], direction: Direction = Direction.UNDEFINED
    ) -> bool:
        """Whether a road continues from ``position`` in ``direction``.

        With UNDEFINED, whether it continues in any direction.
        """
        if direction is Direction.UNDEFINED:
            return any(
                self.is_connected(position, d)
                for d in (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)
            )

        dx, dy = direction.vector()
        nx, ny = position[0] + dx, position[1] + dy
        if not _in_chunk(nx, ny):
            index = ny if direction.value % 2 == 0 else nx
            return self.borders[direction.value][index]
        return self.road_tiles[nx][ny].not_empty()

    def update_road_types(self, specs: SpecsTable) -> None:
        """Recompute the shape of every road tile in the chunk."""
        for x in range(CELLS_PER_CHUNK):
            for y in range(CELLS_PER_CHUNK):
                self.update_road((x, y), specs)

    def _neighbour_connections(self, x: int, y: int) -> Tuple[bool, bool, bool, bool]:
        last = CELLS_PER_CHUNK - 1
        tiles, borders = self.road_tiles, self.borders
        return (
            borders[Direction.NORTH.value][y] if x == last else tiles[x + 1][y].not_empty(),
            borders[Direction.EAST.value][x] if y == last else tiles[x][y + 1].not_empty(),
            borders[Direction.SOUTH.value][y] if x == 0 else tiles[x - 1][y].not_empty(),
            borders[Direction.WEST.value][x] if y == 0 else tiles[x][y - 1].not_empty(),
        )

    def update_road(self, position: Sequence[int], specs: SpecsTable) -> None:
        """Recompute the shape of one tile and keep the graph node in step."""
        x, y = int(position[0]), int(position[1])
        current = self.road_tiles[x][y]
        if current.empty():
            return

        tile = self.tile_for_connections(self._neighbour_connections(x, y))
        if tile == current:
            return

        logger.debug(
            "Set road at %s type: %s", format_vector((x, y)), road_tile_type_name(tile.tile_type)
        )
        current.tile_type = tile.tile_type
        current.rotation = tile.rotation
        self.mesh_outdated = True

        last = CELLS_PER_CHUNK - 1
        on_border = x in (0, last) or y in (0, last)
        if tile.is_road_node() or on_border:
            self.graph.add_node((x, y), generate_node_paths((x, y), specs[tile.road_type], tile))
        else:
            self.graph.remove_node((x, y))

    @staticmethod
    def tile_for_connections(connections: Sequence[bool]) -> RoadTile:
        """Tile shape and rotation for the connections north, east, south, west."""
        flags = [bool(c) for c in connections]
        if len(flags) != 4:
            raise ValueError("exactly four connection flags are needed")
        count = sum(flags)
        rotation = 0

        if count == 0:
            tile_type = RoadTileType.NOT_CONNECTED
        elif count == 1:
            tile_type = RoadTileType.END
            rotation = flags.index(True)
        elif count == 2:
            if flags[0] and flags[2]:
                tile_type = RoadTileType.STRAIGHT
            elif flags[1] and flags[3]:
                tile_type = RoadTileType.STRAIGHT
                rotation = 1
            else:
                tile_type = RoadTileType.CURVE
                first = flags.index(True)
                if first != 0:
                    rotation = first
                else:
                    rotation = 3 if flags[Direction.WEST.value] else 0
        elif count == 3:
            tile_type = RoadTileType.T_CROSSING
            rotation = (flags.index(False) + 1) % 4
        else:
            tile_type = RoadTileType.CROSSING

        return RoadTile(tile_type, rotation)

    def node_positions(self) -> Set[IVec2]:
        """Cells whose tile is a node of the road graph."""
        return {
            (x, y)
            for x, column in enumerate(self.road_tiles)
            for y, tile in enumerate(column)
            if tile.is_road_node()
        }

    def _link_blocked(self, x: IVec2, y: IVec2, between: List[IVec2]) -> bool:
        """Check the cells between two nodes; drop a stale edge if one is a node."""
        nodes = self.graph.nodes
        for cx, cy in between:
            if self.road_tiles[cx][cy].empty():
                return True
            if (cx, cy) in nodes:
                if self.graph.adjacent(x, y):
                    logger.debug(
                        "Removing edge %s -> %s! There is a node %s in between",
                        format_vector(x),
                        format_vector(y),
                        format_vector((cx, cy)),
                    )
                    self.graph.remove_edge((x, y))
                    self.graph.remove_edge((y, x))
                return True
        return False

    def update_road_graph(self, specs: SpecsTable) -> None:
        """Connect graph nodes that are joined by an unbroken straight road."""
        keys = list(self.graph.nodes)
        for index, x in enumerate(keys):
            for y in keys[:index]:
                if x[0] == y[0]:
                    lo, hi = sorted((x[1], y[1]))
                    between = [(x[0], i) for i in range(lo + 1, hi)]
                elif x[1] == y[1]:
                    lo, hi = sorted((x[0], y[0]))
                    between = [(i, x[1]) for i in range(lo + 1, hi)]
                else:
                    continue

                if self._link_blocked(x, y, between):
                    continue

                road_specs = specs[self.road_tiles[x[0]][x[1]].road_type]
                self.graph.add_edge(x, y, generate_edge_path((x, y), road_specs))
                self.graph.add_edge(y, x, generate_edge_path((y, x), road_specs))

        for start, end in self.graph.edges:
            logger.debug("edge: %s -> %s", format_vector(start), format_vector(end))