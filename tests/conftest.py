"""
Pytest configuration file for the tilezoom tests.
"""
import sys
from pathlib import Path

import pytest

# Add the project root to Python path so we can import tilezoom modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tilezoom.core.layout import Extent  # noqa: E402
from tilezoom.utils import geo  # noqa: E402

# Meters per degree on the sphere used by the scheme
METERS_PER_DEGREE = geo.EARTH_CIRCUMFERENCE / 360.0

FLAT_CRS = geo.TileCRS("TEST:FLAT", geo.WEB_MERCATOR.world_extent)
FLAT_UTM_CRS = geo.TileCRS("TEST:FLAT-UTM", Extent(0.0, 0.0, 1000000.0, 10000000.0))


class FlatProjection:
    """
    Deterministic stand-in for pyproj: the scheme CRS and the "UTM" CRS are
    both plain meters, lon/lat is meters scaled by METERS_PER_DEGREE.
    """

    def __init__(self):
        self.utm_lookups = 0

    def reproject(self, x, y, src, dst):
        if src.name == dst.name:
            return x, y
        if dst.name == geo.LAT_LNG.name:
            return x / METERS_PER_DEGREE, y / METERS_PER_DEGREE
        return x * METERS_PER_DEGREE, y * METERS_PER_DEGREE

    def is_valid_utm_latitude(self, lat):
        return geo.is_valid_utm_latitude(lat)

    def utm_zone_crs(self, lon, lat):
        self.utm_lookups += 1
        return FLAT_UTM_CRS


class CollapsingProjection(FlatProjection):
    """Maps every point onto the origin."""

    def reproject(self, x, y, src, dst):
        return 0.0, 0.0


@pytest.fixture
def flat_projection():
    return FlatProjection()


@pytest.fixture
def flat_crs():
    return FLAT_CRS


@pytest.fixture
def meters_per_degree():
    return METERS_PER_DEGREE


@pytest.fixture
def collapsing_projection():
    return CollapsingProjection()
