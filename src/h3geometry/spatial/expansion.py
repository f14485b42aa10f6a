"""
Outward expansion of planar polygons.

The expansion is a standard polygon buffer: the result covers every point
within `distance` meters of the input region. Buffering rounds convex
corners with many short segments, so the buffered ring is simplified with a
tolerance of `distance / 5` before it is handed to the cell fill, whose cost
grows with the vertex count.

Only a single connected region is a usable result. A buffer that falls apart
into several polygons is reported, never reduced to one of its pieces.
"""

import logging

from shapely.geometry import MultiPolygon, Polygon

from h3geometry import constants
from h3geometry.errors import DegenerateExpansion

from .spatial_utils import check_simple, exterior_only, vertex_count

logger = logging.getLogger(__name__)


def expand(polygon: Polygon, distance: float) -> Polygon:
    """
    Expand a planar polygon outward by a distance in meters.

    Algorithm:
        1. Reject polygons that are not simple
        2. Return the input unchanged when distance <= 0
        3. Buffer the polygon by distance
        4. Simplify the buffered ring with tolerance distance / 5
        5. Reject multi-part results

    Holes produced by the buffer itself (a concave outline closing on itself)
    are filled; the exterior boundary is kept.

    Args:
        polygon: Polygon in planar (east, north) meters
        distance: Expansion distance in meters

    Returns:
        The expanded, simplified Polygon, or the input when distance <= 0

    Raises:
        InvalidGeometry: If the polygon is self-intersecting
        DegenerateExpansion: If the buffer yields more than one region

    Example:
        >>> square = Polygon([(0, 0), (100, 0), (100, 100), (0, 100), (0, 0)])
        >>> expanded = expand(square, 10.0)
        >>> expanded.contains(square)
        True
    """
    check_simple(polygon)

    if distance <= 0:
        return polygon

    buffered = polygon.buffer(distance)
    tolerance = distance / constants.SIMPLIFY_DIVISOR
    expanded = buffered.simplify(tolerance, preserve_topology=True)

    # expanded can be a Polygon or a MultiPolygon
    if isinstance(expanded, MultiPolygon):
        raise DegenerateExpansion(
            f"Buffering polygon by {distance:.3f} m produced "
            f"{len(expanded.geoms)} disjoint regions"
        )
    if not isinstance(expanded, Polygon) or expanded.is_empty:
        raise DegenerateExpansion(
            f"Buffering polygon by {distance:.3f} m produced {expanded.geom_type}"
        )

    expanded = exterior_only(expanded)

    logger.debug(
        f"Expanded polygon by {distance:.3f} m: {vertex_count(polygon)} -> "
        f"{vertex_count(expanded)} vertices"
    )

    return expanded
