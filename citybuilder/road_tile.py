"""Road tiles, road types and road dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RoadTileType(Enum):
    """Shape of a road piece within one cell."""

    NOT_CONNECTED = 0
    END = 1
    CURVE = 2
    T_CROSSING = 3
    CROSSING = 4
    STRAIGHT = 5
    CURVE_FULL = 6
    RAMP = 7
    UNDEFINED = 254
    EMPTY = 255


class RoadType(Enum):
    """Family of roads a tile belongs to."""

    BASIC_ROADS = 0
    UNDEFINED = 1


@dataclass
class RoadSpecs:
    """Dimensions of a road family."""

    roadway_width: float
    roadway_height: float
    sidewalk_height: float
    vertices_per_circle: int


_NON_NODE_TYPES = frozenset(
    {
        RoadTileType.STRAIGHT,
        RoadTileType.RAMP,
        RoadTileType.UNDEFINED,
        RoadTileType.EMPTY,
    }
)


@dataclass
class RoadTile:
    """Road content of a single cell."""

    tile_type: RoadTileType = RoadTileType.EMPTY
    rotation: int = 0
    road_type: RoadType = RoadType.BASIC_ROADS

    def is_road_node(self) -> bool:
        """Whether the tile is a junction, bend or end in the road graph."""
        return self.tile_type not in _NON_NODE_TYPES

    def empty(self) -> bool:
        return self.tile_type is RoadTileType.EMPTY

    def not_empty(self) -> bool:
        return not self.empty()


def road_tile_type_name(tile_type: RoadTileType) -> str:
    """Display name of a tile type."""
    if tile_type is RoadTileType.UNDEFINED:
        return "Undefined"
    if tile_type is RoadTileType.EMPTY:
        return "Empty"
    return tile_type.name


def road_type_name(road_type: RoadType) -> str:
    """Resource name of a road family."""
    if road_type is RoadType.UNDEFINED:
        raise ValueError("the undefined road type has no name")
    return road_type.name


def road_type_id_name(road_type: RoadType, tile_type: RoadTileType) -> str:
    """Combined name of a road family and tile type, joined by a dot."""
    return road_type_name(road_type) + "." + road_tile_type_name(tile_type)