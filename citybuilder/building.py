"""Kinds of things a player can build."""

from __future__ import annotations

from enum import Enum


class BuildingType(Enum):
    """Selectable building tool."""

    NONE = 0
    CLEAR = 1
    ROAD = 2
    PARKING_LOT = 3

    def label(self) -> str:
        """Display label of the building type."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label()


_LABELS = {
    BuildingType.NONE: "NONE",
    BuildingType.CLEAR: "DEFAULT",
    BuildingType.ROAD: "ROAD",
    BuildingType.PARKING_LOT: "PARKING_LOT",
}


def building_name(building_type: BuildingType) -> str:
    """Resource name of a building type; empty for types without one."""
    if building_type is BuildingType.PARKING_LOT:
        return "parking_lot"
    if building_type is BuildingType.ROAD:
        return "road"
    return ""