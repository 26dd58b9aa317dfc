# tilezoom/core/__init__.py
from .errors import DegenerateInputError, InvalidLevelError
from .layout import CellSize, Extent, LayoutDefinition, LayoutLevel, TileLayout
from .scheme import (
    DEFAULT_RESOLUTION_THRESHOLD,
    DEFAULT_TILE_SIZE,
    LayoutScheme,
    ZoomedLayoutScheme,
    ZoomedLayoutSchemeBuilder,
)

__all__ = [
    "CellSize",
    "DEFAULT_RESOLUTION_THRESHOLD",
    "DEFAULT_TILE_SIZE",
    "DegenerateInputError",
    "Extent",
    "InvalidLevelError",
    "LayoutDefinition",
    "LayoutLevel",
    "LayoutScheme",
    "TileLayout",
    "ZoomedLayoutScheme",
    "ZoomedLayoutSchemeBuilder",
]
