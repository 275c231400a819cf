"""Driving paths along road edges and through road nodes."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import List, Tuple

from .direction import direction_of, Direction
from .grid import CELL_SIZE, manhattan_length
from .road_graph import NodeData, RoadPath, empty_node_data
from .road_tile import RoadSpecs, RoadTile, RoadTileType

Node = Tuple[int, int]

_SIN_VALUES = (0, 1, 0, -1)
_COS_VALUES = (1, 0, -1, 0)


def generate_edge_path(edge: Sequence[Sequence[int]], specs: RoadSpecs) -> RoadPath:
    """Straight lane between two road nodes; empty for neighbouring nodes."""
    start, end = edge
    delta = (end[0] - start[0], end[1] - start[1])
    if manhattan_length(delta) <= 1:
        return []

    direction = direction_of(delta)
    quarter = specs.roadway_width / 4.0
    ox, oy, oz = 0.0, specs.roadway_height, 0.0

    if direction is Direction.NORTH:
        ox += CELL_SIZE
        oz += CELL_SIZE * (0.5 + quarter)
    elif direction is Direction.EAST:
        ox += CELL_SIZE * (0.5 - quarter)
        oz += CELL_SIZE
    elif direction is Direction.SOUTH:
        oz += CELL_SIZE * (0.5 - quarter)
    elif direction is Direction.WEST:
        ox += CELL_SIZE * (0.5 + quarter)

    vx, vz = direction.vector()
    begin = (CELL_SIZE * start[0] + ox, oy, CELL_SIZE * start[1] + oz)
    finish = (CELL_SIZE * (end[0] - vx) + ox, oy, CELL_SIZE * (end[1] - vz) + oz)
    return [begin, finish]


def generate_node_paths(
    node: Sequence[int], specs: RoadSpecs, tile: RoadTile
) -> NodeData:
    """Paths through a node cell, indexed by entry and exit direction."""
    rotation = tile.rotation
    if rotation not in range(4):
        raise ValueError(f"tile rotation must be 0..3, got {rotation}")

    paths = empty_node_data()
    cos = float(_COS_VALUES[rotation])
    sin = float(_SIN_VALUES[rotation])
    node_x, node_y = node

    def add(i: int, j: int, x: float, z: float) -> None:
        paths[i % 4][j % 4].append(
            (
                CELL_SIZE * (cos * x - sin * z + 0.5 + node_x),
                specs.roadway_height,
                CELL_SIZE * (sin * x + cos * z + 0.5 + node_y),
            )
        )

    vertices = specs.vertices_per_circle
    angle_per_point = 2 * math.pi / vertices
    inner = specs.roadway_width / 4.0
    quarter_steps = range(vertices // 4 + 1)
    r = rotation
    kind = tile.tile_type

    if kind is RoadTileType.END:
        add(r, r, 0.5, -inner)
        for i in range(vertices // 2):
            add(r, r, -inner * math.sin(i * angle_per_point), -inner * math.cos(i * angle_per_point))
        add(r, r, 0.0, inner)
        add(r, r, 0.5, inner)

    elif kind is RoadTileType.NOT_CONNECTED:
        for i in range(vertices):
            add(0, 0, inner * math.cos(i * angle_per_point), inner * math.sin(i * angle_per_point))
        add(0, 0, inner, 0.0)

    elif kind is RoadTileType.STRAIGHT:
        add(r, r + 2, 0.5, -inner)
        add(r, r + 2, -0.5, -inner)
        add(r + 2, r, -0.5, inner)
        add(r + 2, r, 0.5, inner)

    elif kind in (RoadTileType.CURVE, RoadTileType.CURVE_FULL):
        for i in quarter_steps:
            s, c = math.sin(i * angle_per_point), math.cos(i * angle_per_point)
            add(r + 1, r, 0.5 - (0.5 - inner) * c, 0.5 - (0.5 - inner) * s)
            add(r, r + 1, 0.5 - (0.5 + inner) * s, 0.5 - (0.5 + inner) * c)

    elif kind is RoadTileType.T_CROSSING:
        add(r, r + 2, 0.5, -inner)
        add(r, r + 2, -0.5, -inner)
        add(r + 2, r, -0.5, inner)
        add(r + 2, r, 0.5, inner)
        for i in quarter_steps:
            s, c = math.sin(i * angle_per_point), math.cos(i * angle_per_point)
            add(r + 1, r, 0.5 - (0.5 - inner) * c, 0.5 - (0.5 - inner) * s)
            add(r + 2, r + 1, -0.5 + (0.5 - inner) * s, 0.5 - (0.5 - inner) * c)
            add(r, r + 1, 0.5 - (0.5 + inner) * s, 0.5 - (0.5 + inner) * c)
            add(r + 1, r + 2, -0.5 + (0.5 + inner) * c, 0.5 - (0.5 + inner) * s)

    elif kind is RoadTileType.CROSSING:
        add(0, 2, 0.5, -inner)
        add(0, 2, -0.5, -inner)
        add(1, 3, inner, 0.5)
        add(1, 3, inner, -0.5)
        add(2, 0, -0.5, inner)
        add(2, 0, 0.5, inner)
        add(1, 3, -inner, -0.5)
        add(1, 3, -inner, 0.5)
        for i in quarter_steps:
            s, c = math.sin(i * angle_per_point), math.cos(i * angle_per_point)
            add(1, 0, 0.5 - (0.5 - inner) * c, 0.5 - (0.5 - inner) * s)
            add(2, 1, -0.5 + (0.5 - inner) * s, 0.5 - (0.5 - inner) * c)
            add(3, 2, -0.5 + (0.5 - inner) * c, -0.5 + (0.5 - inner) * s)
            add(0, 3, 0.5 - (0.5 - inner) * s, -0.5 + (0.5 - inner) * c)
            add(0, 1, 0.5 - (0.5 + inner) * s, 0.5 - (0.5 + inner) * c)
            add(1, 2, -0.5 + (0.5 + inner) * c, 0.5 - (0.5 + inner) * s)
            add(2, 3, -0.5 + (0.5 + inner) * s, -0.5 + (0.5 + inner) * c)
            add(3, 0, 0.5 - (0.5 + inner) * c, -0.5 + (0.5 + inner) * s)

    return paths


def _all_points(paths: NodeData) -> List[Tuple[float, float, float]]:
    return [point for row in paths for path in row for point in path]