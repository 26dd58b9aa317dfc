# tilezoom/core/scheme.py
"""
Power-of-2 zoom level layout scheme, as used by Leaflet and other web-mapping
clients.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod

from ..utils.geo import (
    EARTH_CIRCUMFERENCE,
    EARTH_RADIUS,
    LAT_LNG,
    PyprojProjection,
    TileCRS,
    haversine_distance,
)
from ..utils.logging_setup import get_logger
from .errors import DegenerateInputError, InvalidLevelError
from .layout import CellSize, Extent, LayoutDefinition, LayoutLevel, TileLayout

log = get_logger()

DEFAULT_TILE_SIZE = 256
DEFAULT_RESOLUTION_THRESHOLD = 0.1

__all__ = [
    "DEFAULT_RESOLUTION_THRESHOLD",
    "DEFAULT_TILE_SIZE",
    "EARTH_CIRCUMFERENCE",
    "EARTH_RADIUS",
    "LayoutScheme",
    "ZoomedLayoutScheme",
    "ZoomedLayoutSchemeBuilder",
]


class LayoutScheme(ABC):
    """Chooses a layout for a raster and navigates between pyramid levels."""

    @abstractmethod
    def level_for(self, extent: Extent, cell_size: CellSize) -> LayoutLevel:
        ...

    @abstractmethod
    def zoom_out(self, level: LayoutLevel) -> LayoutLevel:
        ...

    @abstractmethod
    def zoom_in(self, level: LayoutLevel) -> LayoutLevel:
        ...


class ZoomedLayoutScheme(LayoutScheme):
    """
    Layout for zoom levels based off of a power-of-2 scheme.

    Args:
        crs (TileCRS): CRS the layouts are expressed in.
        tile_size (int): Pixel width and height of every tile. Defaults to 256.
        resolution_threshold (float): Tolerated downsampling when snapping to a
            zoom level, as a fraction of the resolution gap between level Z and
            Z+1. With 0.1, a raster is fitted to level Z if its cell size is
            finer than Z's resolution by at most 10% of that gap; otherwise
            Z+1 is chosen. Defaults to 0.1.
        projection: CRS collaborator exposing reproject, is_valid_utm_latitude
            and utm_zone_crs. Defaults to PyprojProjection().
    """

    def __init__(
        self,
        crs: TileCRS,
        tile_size: int = DEFAULT_TILE_SIZE,
        resolution_threshold: float = DEFAULT_RESOLUTION_THRESHOLD,
        projection=None,
    ):
        if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size < 1:
            msg = f"Tile size must be a positive integer, got {tile_size!r}."
            raise ValueError(msg)
        if not math.isfinite(resolution_threshold) or resolution_threshold < 0:
            msg = f"Resolution threshold must be a non-negative number, got {resolution_threshold!r}."
            raise ValueError(msg)

        self._crs = crs
        self._tile_size = tile_size
        self._resolution_threshold = float(resolution_threshold)
        self._projection = projection if projection is not None else PyprojProjection()

    @property
    def crs(self) -> TileCRS:
        return self._crs

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def resolution_threshold(self) -> float:
        return self._resolution_threshold

    def __repr__(self):
        return (
            f"ZoomedLayoutScheme(crs={self._crs.name!r}, tile_size={self._tile_size}, "
            f"resolution_threshold={self._resolution_threshold})"
        )

    def resolution_for_zoom(self, zoom_id: int) -> float:
        """Ground distance covered by one pixel at the given zoom level."""
        return EARTH_CIRCUMFERENCE / (math.pow(2, zoom_id) * self._tile_size)

    def _sample_distance(self, x: float, y: float, cell_size: CellSize) -> float:
        proj = self._projection
        lon1, lat1 = proj.reproject(x + cell_size.width, y + cell_size.height, self._crs, LAT_LNG)
        lon2, lat2 = proj.reproject(x, y, self._crs, LAT_LNG)

        if proj.is_valid_utm_latitude(lat1):
            utm_crs = proj.utm_zone_crs(lon1, lat1)
            x1, y1 = proj.reproject(lon1, lat1, LAT_LNG, utm_crs)
            x2, y2 = proj.reproject(lon2, lat2, LAT_LNG, utm_crs)
            dist = max(abs(x1 - x2), abs(y1 - y2))
            log.debug(f"Distance {dist:.3f} m measured in {utm_crs.name}")
        else:
            dist = haversine_distance(lon1, lat1, lon2, lat2)
            log.debug(f"Latitude {lat1:.4f} outside UTM band, haversine distance {dist:.3f} m")
        return dist

    def zoom(self, x: float, y: float, cell_size: CellSize) -> int:
        """
        Closest zoom level for a cell size, measured in the UTM zone containing
        the point (or by haversine distance outside the UTM band).

        The returned level is at most `resolution_threshold` of a level gap
        less resolute than the cell size; beyond that the next level up is
        returned.

        Raises:
            DegenerateInputError: for non-positive or non-finite cell sizes, or
                when the two sample points coincide after reprojection.
        """
        for value in (cell_size.width, cell_size.height):
            if not math.isfinite(value) or value <= 0:
                msg = f"Cell size must have positive, finite width and height, got {cell_size}."
                log.warning(msg)
                raise DegenerateInputError(msg)

        dist = self._sample_distance(x, y, cell_size)
        if not math.isfinite(dist) or dist <= 0:
            msg = f"Cannot derive a zoom level from sample distance {dist} at ({x}, {y})."
            log.warning(msg)
            raise DegenerateInputError(msg)

        z = int(math.log(EARTH_CIRCUMFERENCE / (dist * self._tile_size)) / math.log(2))
        z_res = self.resolution_for_zoom(z)
        next_z_res = self.resolution_for_zoom(z + 1)
        delta = z_res - next_z_res
        diff = z_res - dist

        zoom = z + 1 if diff / delta > self._resolution_threshold else z
        log.debug(f"Cell size {cell_size} at ({x}, {y}) maps to zoom {zoom}")
        return zoom

    def level_for(self, extent: Extent, cell_size: CellSize) -> LayoutLevel:
        zoom = self.zoom(extent.xmin, extent.ymin, cell_size)
        return self.level_for_zoom(zoom, self._crs.world_extent)

    def level_for_zoom(self, zoom_id: int, world_extent: Extent | None = None) -> LayoutLevel:
        if zoom_id < 1:
            log.warning(f"Rejected zoom id {zoom_id}")
            raise InvalidLevelError(zoom_id)
        if world_extent is None:
            world_extent = self._crs.world_extent

        dim = 2**zoom_id
        tile_layout = TileLayout(dim, dim, self._tile_size, self._tile_size)
        return LayoutLevel(zoom_id, LayoutDefinition(world_extent, tile_layout))

    def zoom_out(self, level: LayoutLevel) -> LayoutLevel:
        layout = level.layout
        tile_layout = layout.tile_layout
        return LayoutLevel(
            zoom=level.zoom - 1,
            layout=LayoutDefinition(
                extent=layout.extent,
                tile_layout=TileLayout(
                    tile_layout.layout_cols // 2,
                    tile_layout.layout_rows // 2,
                    tile_layout.tile_cols,
                    tile_layout.tile_rows,
                ),
            ),
        )

    def zoom_in(self, level: LayoutLevel) -> LayoutLevel:
        layout = level.layout
        tile_layout = layout.tile_layout
        return LayoutLevel(
            zoom=level.zoom + 1,
            layout=LayoutDefinition(
                extent=layout.extent,
                tile_layout=TileLayout(
                    tile_layout.layout_cols * 2,
                    tile_layout.layout_rows * 2,
                    tile_layout.tile_cols,
                    tile_layout.tile_rows,
                ),
            ),
        )


class ZoomedLayoutSchemeBuilder:
    def __init__(self):
        self.crs = None
        self.tile_size = DEFAULT_TILE_SIZE
        self.resolution_threshold = DEFAULT_RESOLUTION_THRESHOLD
        self.projection = None

    def set_crs(self, crs: TileCRS):
        self.crs = crs
        return self

    def set_tile_size(self, tile_size: int):
        self.tile_size = tile_size
        return self

    def set_resolution_threshold(self, resolution_threshold: float):
        self.resolution_threshold = resolution_threshold
        return self

    def set_projection(self, projection):
        self.projection = projection
        return self

    def build(self):
        if self.crs is None:
            raise ValueError("CRS must be set before building the layout scheme.")

        return ZoomedLayoutScheme(
            self.crs,
            self.tile_size,
            self.resolution_threshold,
            self.projection,
        )
