"""
Utility functions for polygon handling.

Polygons in this package store (latitude, longitude) pairs as (x, y) when they
are geographic and (east, north) meters when they are planar. These helpers
are shared by the expansion, coverage and cell modules.
"""

import logging
from typing import List, Sequence, Tuple

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from h3geometry.errors import InvalidGeometry

logger = logging.getLogger(__name__)


def as_polygon(shape) -> Polygon:
    """
    Return a Polygon for either a Polygon or a sequence of coordinate pairs.

    Args:
        shape: A shapely Polygon, or a sequence of (latitude, longitude) pairs

    Returns:
        The Polygon itself, or a new Polygon built from the pairs
    """
    if isinstance(shape, Polygon):
        return shape
    return Polygon([tuple(pair[:2]) for pair in shape])


def ring_coords(polygon: Polygon) -> List[Tuple[float, float]]:
    """Closed list of exterior ring coordinates, dropping any z value."""
    return [(c[0], c[1]) for c in polygon.exterior.coords]


def close_ring(coords: Sequence) -> List[Tuple[float, float]]:
    """
    Repeat the first vertex at the end of the ring unless already closed.
    """
    ring = [(c[0], c[1]) for c in coords]
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    return ring


def open_ring(coords: Sequence) -> List[Tuple[float, float]]:
    """
    Drop the closing vertex of a ring when it repeats the first one.
    """
    ring = [(c[0], c[1]) for c in coords]
    if len(ring) > 1 and ring[0] == ring[-1]:
        ring = ring[:-1]
    return ring


def check_simple(polygon: Polygon, allow_holes: bool = False) -> Polygon:
    """
    Verify a polygon is a valid, simple region.

    Self-intersecting rings (such as a bowtie) are reported with the reason
    given by shapely.

    Args:
        polygon: The polygon to check
        allow_holes: Accept polygons with interior rings

    Returns:
        The polygon, unchanged

    Raises:
        InvalidGeometry: If the polygon is empty, invalid, or has holes that
            are not allowed
    """
    if polygon.is_empty:
        raise InvalidGeometry("Polygon must not be empty")

    if not polygon.is_valid:
        raise InvalidGeometry(
            f"Polygon must not be self-intersecting: {explain_validity(polygon)}"
        )

    if not allow_holes and len(polygon.interiors) > 0:
        raise InvalidGeometry(
            f"Polygon must not have holes, found {len(polygon.interiors)}"
        )

    return polygon


def exterior_only(polygon: Polygon) -> Polygon:
    """Polygon bounded by the exterior ring alone, with any holes filled."""
    if len(polygon.interiors) == 0:
        return polygon
    logger.debug(f"Dropping {len(polygon.interiors)} interior ring(s)")
    return Polygon(polygon.exterior.coords)


def vertex_count(polygon: Polygon) -> int:
    """Number of distinct exterior vertices (closing point excluded)."""
    return len(polygon.exterior.coords) - 1
