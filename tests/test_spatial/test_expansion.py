"""
Tests for the expansion module.
"""

from unittest.mock import patch

import pytest
from shapely.geometry import Point, Polygon

from h3geometry.errors import DegenerateExpansion, InvalidGeometry
from h3geometry.spatial.expansion import expand


@pytest.fixture
def square():
    """1 km square in planar meters."""
    return Polygon([(0, 0), (1000, 0), (1000, 1000), (0, 1000), (0, 0)])


class TestExpand:
    """Test suite for expanding planar polygons."""

    def test_zero_distance_is_identity(self, square):
        """Test distance 0 returns the same polygon object."""
        assert expand(square, 0.0) is square

    def test_negative_distance_is_identity(self, square):
        """Test negative distances do not shrink the polygon."""
        assert expand(square, -50.0) is square

    def test_expanded_contains_original(self, square):
        """Test the expanded polygon contains the original region."""
        expanded = expand(square, 100.0)
        assert expanded.contains(square)

    def test_expanded_reaches_distance(self, square):
        """Test the outline sits about `distance` away along each side."""
        expanded = expand(square, 100.0)
        minx, miny, maxx, maxy = expanded.bounds
        # simplification may move the outline inward by up to distance / 5
        assert minx == pytest.approx(-100.0, abs=20.0)
        assert miny == pytest.approx(-100.0, abs=20.0)
        assert maxx == pytest.approx(1100.0, abs=20.0)
        assert maxy == pytest.approx(1100.0, abs=20.0)

    def test_area_grows(self, square):
        """Test the area lies between the square and its full buffer."""
        expanded = expand(square, 100.0)
        assert square.area < expanded.area <= square.buffer(100.0).area + 1e-6

    def test_simplification_bounds_vertices(self, square):
        """Test simplification keeps fewer vertices than the raw buffer."""
        expanded = expand(square, 100.0)
        raw = square.buffer(100.0)
        assert len(expanded.exterior.coords) < len(raw.exterior.coords)

    def test_result_is_valid_polygon(self, square):
        expanded = expand(square, 250.0)
        assert isinstance(expanded, Polygon)
        assert expanded.is_valid
        assert len(expanded.interiors) == 0

    def test_monotonic_in_distance(self, square):
        """Test a larger distance contains the smaller expansion."""
        small = expand(square, 50.0)
        large = expand(square, 150.0)
        assert large.contains(small)

    def test_buffer_holes_are_filled(self):
        """Test a ring with a narrow slit that closes under buffering has no hole."""
        slit_ring = Polygon(
            [(0, 0), (480, 0), (480, 100), (100, 100), (100, 900), (900, 900),
             (900, 100), (520, 100), (520, 0), (1000, 0), (1000, 1000), (0, 1000), (0, 0)]
        )
        assert len(slit_ring.buffer(50.0).interiors) == 1

        expanded = expand(slit_ring, 50.0)
        assert len(expanded.interiors) == 0
        assert expanded.contains(Point(500, 500))
        assert expanded.contains(slit_ring)

    def test_bowtie_rejected(self):
        """Test self-intersecting polygons are rejected before buffering."""
        bowtie = Polygon([(0, 0), (1000, 1000), (1000, 0), (0, 1000), (0, 0)])
        with pytest.raises(InvalidGeometry):
            expand(bowtie, 100.0)

    def test_bowtie_rejected_at_zero_distance(self):
        """Test validation happens even when no expansion is applied."""
        bowtie = Polygon([(0, 0), (1000, 1000), (1000, 0), (0, 1000), (0, 0)])
        with pytest.raises(InvalidGeometry):
            expand(bowtie, 0.0)

    def test_multipart_buffer_rejected(self, square):
        """Test a buffer that falls apart raises DegenerateExpansion."""
        pieces = Polygon([(0, 0), (10, 0), (10, 10), (0, 0)]).union(
            Polygon([(100, 100), (110, 100), (110, 110), (100, 100)])
        )

        with patch.object(Polygon, "buffer", return_value=pieces):
            with pytest.raises(DegenerateExpansion, match="2 disjoint regions"):
                expand(square, 100.0)
