"""
Local tangent-plane projection for polygon expansion.

Geographic points are (latitude, longitude) pairs in degrees. The tangent
plane is the ellipsoidal orthographic projection on WGS84 centered at an
origin point: east and north axes in meters, orthogonal at the origin, and
equal to the horizontal topocentric (ENU) coordinates of sea-level points.

An origin is built for a single polygon and discarded afterwards. Nothing in
this module caches transformers between calls.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

import numpy as np
import pyproj
from shapely.geometry import Point

logger = logging.getLogger(__name__)

GEOGRAPHIC_CRS = "EPSG:4326"


@dataclass(frozen=True)
class ProjectionOrigin:
    """Anchor of a tangent plane and the transformers into and out of it."""

    latitude: float
    longitude: float
    to_plane: pyproj.Transformer
    from_plane: pyproj.Transformer


def _latlon(point) -> Tuple[float, float]:
    if isinstance(point, Point):
        return point.x, point.y
    latitude, longitude = point[:2]
    return float(latitude), float(longitude)


def make_origin(point) -> ProjectionOrigin:
    """
    Create a tangent-plane origin at a geographic point.

    Args:
        point: (latitude, longitude) in degrees, or a shapely Point with
            x = latitude and y = longitude

    Returns:
        ProjectionOrigin for that point
    """
    latitude, longitude = _latlon(point)
    proj_string = (
        f"+proj=ortho +lat_0={latitude} +lon_0={longitude} "
        "+ellps=WGS84 +units=m +no_defs"
    )
    logger.debug(f"Tangent plane origin at ({latitude}, {longitude})")

    to_plane = pyproj.Transformer.from_crs(GEOGRAPHIC_CRS, proj_string, always_xy=True)
    from_plane = pyproj.Transformer.from_crs(proj_string, GEOGRAPHIC_CRS, always_xy=True)

    return ProjectionOrigin(latitude, longitude, to_plane, from_plane)


def to_planar(origin: ProjectionOrigin, point) -> Tuple[float, float]:
    """Project a geographic (latitude, longitude) point to (east, north) meters."""
    latitude, longitude = _latlon(point)
    east, north = origin.to_plane.transform(longitude, latitude)
    return float(east), float(north)


def to_geographic(origin: ProjectionOrigin, point) -> Tuple[float, float]:
    """Map a planar (east, north) point back to (latitude, longitude) degrees."""
    east, north = point[:2]
    longitude, latitude = origin.from_plane.transform(east, north)
    return float(latitude), float(longitude)


def project_ring(origin: ProjectionOrigin, coords: Iterable) -> np.ndarray:
    """
    Project a sequence of (latitude, longitude) pairs onto the tangent plane.

    Returns:
        (n, 2) array of (east, north) meters
    """
    latlon = np.asarray(list(coords), dtype=float)[:, :2]
    east, north = origin.to_plane.transform(latlon[:, 1], latlon[:, 0])
    return np.column_stack((east, north))


def unproject_ring(origin: ProjectionOrigin, coords: Iterable) -> np.ndarray:
    """
    Map a sequence of (east, north) pairs back to geographic coordinates.

    Returns:
        (n, 2) array of (latitude, longitude) degrees
    """
    planar = np.asarray(list(coords), dtype=float)[:, :2]
    longitude, latitude = origin.from_plane.transform(planar[:, 0], planar[:, 1])
    return np.column_stack((latitude, longitude))
