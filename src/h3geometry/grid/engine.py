"""
Adapter over the h3 library presenting the grid engine operations used by
h3geometry.

Cells are 64-bit integer indexes (``h3.api.basic_int``). Coordinates are
(latitude, longitude) pairs in degrees, which is what h3 itself accepts and
returns. The fill primitive works the way the H3 C library's does: the caller
sizes a buffer with `max_fill_size`, `fill_polygon` writes cells into it and
the unused slots keep the zero sentinel.
"""

import logging
import math
from typing import Sequence, Tuple

import h3
import h3.api.basic_int as h3int
import numpy as np

from h3geometry.errors import GridEngineError

logger = logging.getLogger(__name__)

# Area of a regular hexagon is 3/2 * sqrt(3) * edge^2
HEXAGON_AREA_FACTOR = 2.59807621135
# The pentagon has the most distortion (smallest edges); its area is shrunk by
# a further 20% in case a bounding box exactly bounds one.
PENTAGON_SHRINK = 0.8

LatLng = Tuple[float, float]


def cell_from_point(latitude: float, longitude: float, resolution: int) -> int:
    """
    Index of the cell containing a point.

    Args:
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        resolution: H3 resolution (0-15)

    Returns:
        Integer H3 cell index
    """
    return h3int.latlng_to_cell(latitude, longitude, resolution)


def boundary_of(cell: int) -> Tuple[LatLng, ...]:
    """Boundary vertices of a cell as (latitude, longitude) degrees, open ring."""
    return tuple(h3int.cell_to_boundary(cell))


def edge_length(resolution: int) -> float:
    """Average hexagon edge length in meters at a resolution."""
    return h3int.average_hexagon_edge_length(resolution, unit="m")


def _pentagon_area_km2(resolution: int) -> float:
    pentagon = h3int.get_pentagons(resolution)[0]
    boundary = h3int.cell_to_boundary(pentagon)
    edge_km = h3int.great_circle_distance(boundary[0], boundary[1], unit="km")
    return PENTAGON_SHRINK * HEXAGON_AREA_FACTOR * edge_km * edge_km


def max_fill_size(vertices: Sequence[LatLng], resolution: int) -> int:
    """
    Upper bound on the number of cells `fill_polygon` can return.

    The bounding box of the vertices is measured by the square of its
    diagonal (at least twice the box area on a locally flat patch) and
    divided by the area of the smallest cell at the resolution. The vertex
    count is added so a polygon with many vertices never overflows.

    Args:
        vertices: Polygon ring as (latitude, longitude) pairs in degrees
        resolution: H3 resolution (0-15)

    Returns:
        Size for the fill output buffer, at least 1
    """
    if len(vertices) == 0:
        return 1

    latlon = np.asarray(vertices, dtype=float)[:, :2]
    north, east = latlon[:, 0].max(), latlon[:, 1].max()
    south, west = latlon[:, 0].min(), latlon[:, 1].min()

    diagonal_km = h3int.great_circle_distance((north, east), (south, west), unit="km")
    estimate = (diagonal_km * diagonal_km) / _pentagon_area_km2(resolution)
    if not math.isfinite(estimate):
        raise GridEngineError(f"Unable to size fill buffer for {len(vertices)} vertices")

    return max(math.ceil(estimate), 1) + len(vertices)


def fill_polygon(vertices: Sequence[LatLng], resolution: int, out: np.ndarray) -> int:
    """
    Write the cells whose centers fall inside a polygon into `out`.

    Slots of `out` past the returned count are left as they were, which is
    the zero sentinel for a buffer created with numpy.zeros.

    Args:
        vertices: Open or closed ring as (latitude, longitude) degrees
        resolution: H3 resolution (0-15)
        out: uint64 buffer sized with `max_fill_size`

    Returns:
        Number of cells written

    Raises:
        GridEngineError: If `out` is too small for the cells found
    """
    ring = list(vertices)
    if len(ring) > 1 and tuple(ring[0]) == tuple(ring[-1]):
        ring = ring[:-1]

    cells = h3int.h3shape_to_cells(h3.LatLngPoly(ring), resolution)
    if len(cells) > len(out):
        raise GridEngineError(
            f"Fill produced {len(cells)} cells for a buffer of {len(out)}"
        )

    out[: len(cells)] = np.asarray(cells, dtype=np.uint64)
    logger.debug(
        f"Filled {len(cells)} of {len(out)} slots at resolution {resolution}"
    )
    return len(cells)
