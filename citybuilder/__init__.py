"""Grid coordinates, terrain, roads, camera maths and widget layout for a city building game."""

__version__ = "0.1.0"