# tilezoom/core/layout.py
"""
Value types describing how world space is cut into a grid of tiles.
"""
from __future__ import annotations

from dataclasses import dataclass

import geojson
import shapely
from shapely.geometry import box


@dataclass(frozen=True)
class CellSize:
    """Ground width and height of one raster pixel, in CRS units."""

    width: float
    height: float

    @classmethod
    def from_resolution(cls, resolution: float) -> CellSize:
        return cls(resolution, resolution)


@dataclass(frozen=True)
class Extent:
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self):
        if self.xmin > self.xmax or self.ymin > self.ymax:
            msg = f"Invalid extent bounds: ({self.xmin}, {self.ymin}, {self.xmax}, {self.ymax})."
            raise ValueError(msg)

    @classmethod
    def from_geometry(cls, geometry: shapely.Geometry) -> Extent:
        return cls(*geometry.bounds)

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> tuple[float, float]:
        return (0.5 * (self.xmin + self.xmax), 0.5 * (self.ymin + self.ymax))

    def to_polygon(self) -> shapely.Polygon:
        return box(self.xmin, self.ymin, self.xmax, self.ymax)


@dataclass(frozen=True)
class TileLayout:
    """
    Grid dimensions (layout_cols x layout_rows tiles) and the pixel size of
    each tile (tile_cols x tile_rows).
    """

    layout_cols: int
    layout_rows: int
    tile_cols: int
    tile_rows: int

    @property
    def total_cols(self) -> int:
        return self.layout_cols * self.tile_cols

    @property
    def total_rows(self) -> int:
        return self.layout_rows * self.tile_rows


@dataclass(frozen=True)
class LayoutDefinition:
    extent: Extent
    tile_layout: TileLayout

    @property
    def cell_width(self) -> float:
        return self.extent.width / self.tile_layout.total_cols

    @property
    def cell_height(self) -> float:
        return self.extent.height / self.tile_layout.total_rows

    @property
    def cell_size(self) -> CellSize:
        return CellSize(self.cell_width, self.cell_height)

    def tile_extent(self, col: int, row: int) -> Extent:
        """
        Extent covered by the tile at (col, row). Row 0 is the top row of the
        grid, i.e. the one touching extent.ymax.
        """
        layout = self.tile_layout
        if not (0 <= col < layout.layout_cols and 0 <= row < layout.layout_rows):
            msg = f"Tile ({col}, {row}) is outside a {layout.layout_cols}x{layout.layout_rows} grid."
            raise ValueError(msg)

        tile_width = self.extent.width / layout.layout_cols
        tile_height = self.extent.height / layout.layout_rows
        xmin = self.extent.xmin + col * tile_width
        ymax = self.extent.ymax - row * tile_height
        return Extent(xmin, ymax - tile_height, xmin + tile_width, ymax)

    def tile_feature(self, col: int, row: int, properties=None) -> geojson.Feature:
        properties = dict(properties or {})
        properties["col"] = col
        properties["row"] = row
        footprint = self.tile_extent(col, row).to_polygon()
        return geojson.Feature(id=f"{col}/{row}", geometry=footprint, properties=properties)


@dataclass(frozen=True)
class LayoutLevel:
    """A zoom id paired with the tile grid used at that zoom."""

    zoom: int
    layout: LayoutDefinition
