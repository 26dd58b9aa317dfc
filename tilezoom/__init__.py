# tilezoom/__init__.py
"""
tilezoom: zoom level selection and tile-grid layouts for power-of-2
web-mapping tile pyramids.
"""
from .core.errors import DegenerateInputError, InvalidLevelError
from .core.layout import CellSize, Extent, LayoutDefinition, LayoutLevel, TileLayout
from .core.scheme import (
    DEFAULT_RESOLUTION_THRESHOLD,
    DEFAULT_TILE_SIZE,
    EARTH_CIRCUMFERENCE,
    ZoomedLayoutScheme,
    ZoomedLayoutSchemeBuilder,
)
from .utils.geo import LAT_LNG, WEB_MERCATOR, PyprojProjection, TileCRS
from .utils.logging_setup import get_logger

__all__ = [
    "CellSize",
    "DEFAULT_RESOLUTION_THRESHOLD",
    "DEFAULT_TILE_SIZE",
    "DegenerateInputError",
    "EARTH_CIRCUMFERENCE",
    "Extent",
    "InvalidLevelError",
    "LAT_LNG",
    "LayoutDefinition",
    "LayoutLevel",
    "PyprojProjection",
    "TileCRS",
    "TileLayout",
    "WEB_MERCATOR",
    "ZoomedLayoutScheme",
    "ZoomedLayoutSchemeBuilder",
    "get_logger",
]
