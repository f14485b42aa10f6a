"""
Exceptions raised by h3geometry.

Errors reported by the underlying engines (h3, shapely, pyproj) are not
wrapped; they reach the caller unchanged.
"""


class H3GeometryError(Exception):
    """Base class for errors raised by this package."""

    pass


class InvalidGeometry(H3GeometryError, ValueError):
    """Raised when a polygon is not simple (self-intersecting) or has holes."""

    pass


class DegenerateExpansion(H3GeometryError, ValueError):
    """Raised when expanding a polygon does not yield a single valid region."""

    pass


class GridEngineError(H3GeometryError):
    """Raised when the cell fill overruns its pre-sized output buffer."""

    pass
