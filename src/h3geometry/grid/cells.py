"""
Conversion between geographic polygons and sets of H3 cells.

`enumerate_cells` is the only place the grid engine's fill is invoked. The
reverse direction, `cell_to_polygon` and `cells_to_polygon`, rebuilds cell
outlines for drawing and for measuring how well a fill covers a polygon.
"""

import logging
from functools import reduce
from typing import Iterable, Set, Union

import numpy as np
from shapely.geometry import MultiPolygon, Polygon

from h3geometry import constants
from h3geometry.spatial.spatial_utils import as_polygon, close_ring, open_ring, ring_coords

from . import engine

logger = logging.getLogger(__name__)


def enumerate_cells(polygon, resolution: int) -> Set[int]:
    """
    Cells whose centers fall inside a geographic polygon.

    The fill buffer is sized by the engine's estimate, filled, and every
    unused slot (the zero sentinel) is dropped before the set is built.

    Args:
        polygon: Polygon of (latitude, longitude) degrees, or a sequence of
            (latitude, longitude) pairs
        resolution: H3 resolution (0-15)

    Returns:
        Set of integer H3 cell indexes, never containing the sentinel
    """
    vertices = open_ring(ring_coords(as_polygon(polygon)))

    size = engine.max_fill_size(vertices, resolution)
    buffer = np.zeros(size, dtype=np.uint64)
    engine.fill_polygon(vertices, resolution, buffer)

    cells = {int(cell) for cell in buffer[buffer != constants.SENTINEL_CELL]}
    logger.debug(
        f"Enumerated {len(cells)} cells at resolution {resolution} "
        f"from a buffer of {size}"
    )
    return cells


def cell_to_polygon(cell: int) -> Polygon:
    """
    Outline of a single cell.

    Returns:
        Polygon of (latitude, longitude) degrees with a closed ring
    """
    return Polygon(close_ring(engine.boundary_of(cell)))


def cells_to_polygon(cells: Iterable[int]) -> Union[Polygon, MultiPolygon]:
    """
    Union of the outlines of several cells.

    Cells are merged one after another; non-contiguous cells give a
    MultiPolygon. Boundaries are kept exactly as the engine reports them.
    An empty collection gives an empty Polygon.
    """
    return reduce(
        lambda merged, cell: merged.union(cell_to_polygon(cell)),
        cells,
        Polygon(),
    )
