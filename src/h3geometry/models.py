"""
Data models for the h3geometry package.
"""

import dataclasses


@dataclasses.dataclass(frozen=True)
class CoverageReport:
    """
    How well a set of cells covers a polygon.

    Areas are measured in the polygon's own coordinates (squared degrees for
    geographic polygons); `ratio` is dimensionless.
    """

    cell_count: int
    polygon_area: float
    cells_area: float
    over_coverage: float  # cells minus polygon
    under_coverage: float  # polygon minus cells

    @property
    def ratio(self) -> float:
        if self.polygon_area == 0.0:
            return 0.0
        return self.cells_area / self.polygon_area
