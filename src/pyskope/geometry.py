"""Study-area geometry helpers.

Area is computed on a sphere with the WGS84 equatorial radius using the
spherical-excess ring formula (Chamberlain & Duquette, "Some algorithms
for polygons on a sphere", JPL 2007).  Results agree with the usual
web-map area tools to well under a percent for study-area sized polygons.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from shapely.errors import ShapelyError
from shapely.geometry import GeometryCollection, MultiPolygon, Polygon, shape
from shapely.geometry.base import BaseGeometry

from pyskope._constants import EARTH_RADIUS_M
from pyskope.exceptions import SkopeGeometryError


def ring_area(coords: Sequence[Sequence[float]]) -> float:
    """Signed area in m² of a closed ``(lon, lat)`` ring.

    Clockwise rings are positive, counter-clockwise rings negative.
    """
    count = len(coords)
    if count <= 2:
        return 0.0

    total = 0.0
    for i in range(count):
        if i == count - 2:
            lower, middle, upper = count - 2, count - 1, 0
        elif i == count - 1:
            lower, middle, upper = count - 1, 0, 1
        else:
            lower, middle, upper = i, i + 1, i + 2
        p1, p2, p3 = coords[lower], coords[middle], coords[upper]
        total += (math.radians(p3[0]) - math.radians(p1[0])) * math.sin(math.radians(p2[1]))

    return total * EARTH_RADIUS_M * EARTH_RADIUS_M / 2.0


def polygon_area(polygon: Polygon) -> float:
    """Area in m² of *polygon*: outer ring minus its holes."""
    if polygon.is_empty:
        return 0.0
    area = abs(ring_area(list(polygon.exterior.coords)))
    for interior in polygon.interiors:
        area -= abs(ring_area(list(interior.coords)))
    return area


def to_shape(geojson: Any) -> BaseGeometry:
    """Parse a GeoJSON geometry, ``Feature`` or ``FeatureCollection``.

    Objects exposing ``__geo_interface__`` (shapely geometries, GeoPandas
    rows) are accepted as well.
    """
    if isinstance(geojson, BaseGeometry):
        return geojson
    data = getattr(geojson, "__geo_interface__", geojson)
    if not isinstance(data, Mapping):
        raise SkopeGeometryError(f"expected a GeoJSON mapping, got {type(geojson).__name__}")

    kind = data.get("type")
    try:
        if kind == "Feature":
            geometry = data.get("geometry")
            return GeometryCollection() if geometry is None else to_shape(geometry)
        if kind == "FeatureCollection":
            return GeometryCollection([to_shape(feature) for feature in data.get("features", [])])
        return shape(data)
    except SkopeGeometryError:
        raise
    except (ShapelyError, AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        raise SkopeGeometryError(f"invalid GeoJSON geometry of type {kind!r}: {exc}") from exc


def _shape_area(geom: BaseGeometry) -> float:
    if isinstance(geom, Polygon):
        return polygon_area(geom)
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        return sum(_shape_area(part) for part in geom.geoms)
    # Points and lines enclose no area.
    return 0.0


def geometry_area(geojson: Any) -> float:
    """Area in m² of a GeoJSON geometry in geographic coordinates."""
    return _shape_area(to_shape(geojson))
