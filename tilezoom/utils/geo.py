# tilezoom/utils/geo.py
"""
Geographic utility functions: CRS records, reprojection and UTM zone lookup.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import pyproj

from ..core.layout import Extent

# Use what gdal2tiles uses.
EARTH_RADIUS = 6378137
EARTH_CIRCUMFERENCE = 2 * math.pi * EARTH_RADIUS

UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0

# Projected bounds of a single UTM zone band (easting is identical for every zone)
_UTM_NORTH_EXTENT = Extent(166021.44, 0.0, 833978.56, 9329005.18)
_UTM_SOUTH_EXTENT = Extent(166021.44, 1116915.04, 833978.56, 10000000.0)


@dataclass(frozen=True)
class TileCRS:
    """A CRS identifier pyproj understands, plus the extent tiled at zoom level 1."""

    name: str
    world_extent: Extent

    def __str__(self):
        return self.name


WEB_MERCATOR = TileCRS(
    "EPSG:3857",
    Extent(-20037508.342789244, -20037508.342789244, 20037508.342789244, 20037508.342789244),
)
LAT_LNG = TileCRS("EPSG:4326", Extent(-180.0, -90.0, 180.0, 90.0))


def reproject(x: float, y: float, src: TileCRS, dst: TileCRS) -> tuple[float, float]:
    """Reprojects a single (x, y) point; axis order is always (x/lon, y/lat)."""
    if src.name == dst.name:
        return x, y
    transformer = pyproj.Transformer.from_crs(src.name, dst.name, always_xy=True)
    return transformer.transform(x, y)


def is_valid_utm_latitude(lat: float) -> bool:
    return UTM_MIN_LATITUDE <= lat <= UTM_MAX_LATITUDE


def get_utm_zone(lon: float, lat: float) -> int:
    """UTM zone number for a point, including the Norway and Svalbard exceptions."""
    zone = int(math.floor((lon + 180.0) / 6.0)) + 1
    zone = min(max(zone, 1), 60)

    if 56.0 <= lat < 64.0 and 3.0 <= lon < 12.0:
        return 32
    if 72.0 <= lat < 84.0:
        if 0.0 <= lon < 9.0:
            return 31
        if 9.0 <= lon < 21.0:
            return 33
        if 21.0 <= lon < 33.0:
            return 35
        if 33.0 <= lon < 42.0:
            return 37
    return zone


def get_utm_epsg(lon: float, lat: float) -> str:
    """Calculates the appropriate UTM zone EPSG code for a given point."""
    zone = get_utm_zone(lon, lat)
    return f"EPSG:{326 if lat >= 0 else 327}{zone:02d}"


def utm_zone_crs(lon: float, lat: float) -> TileCRS:
    if not is_valid_utm_latitude(lat):
        msg = f"Latitude {lat} is outside the UTM band [{UTM_MIN_LATITUDE}, {UTM_MAX_LATITUDE}]."
        raise ValueError(msg)
    extent = _UTM_NORTH_EXTENT if lat >= 0 else _UTM_SOUTH_EXTENT
    return TileCRS(get_utm_epsg(lon, lat), extent)


def haversine_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Great-circle distance between two lon/lat points.

    Scaled by EARTH_CIRCUMFERENCE rather than the radius, matching the
    web-tiling tools whose zoom levels this reproduces.
    """
    p = math.pi / 180
    a = (
        0.5
        - math.cos((lat2 - lat1) * p) / 2
        + math.cos(lat1 * p) * math.cos(lat2 * p) * (1 - math.cos((lon2 - lon1) * p)) / 2
    )
    return 2 * EARTH_CIRCUMFERENCE * math.asin(math.sqrt(a))


class PyprojProjection:
    """
    Default CRS collaborator for ZoomedLayoutScheme. Any object exposing the
    same three methods can stand in for it.
    """

    def reproject(self, x, y, src, dst):
        return reproject(x, y, src, dst)

    def is_valid_utm_latitude(self, lat):
        return is_valid_utm_latitude(lat)

    def utm_zone_crs(self, lon, lat):
        return utm_zone_crs(lon, lat)
