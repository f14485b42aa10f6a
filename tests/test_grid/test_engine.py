"""
Tests for the grid engine adapter.
"""

import h3
import h3.api.basic_int as h3int
import numpy as np
import pytest

from h3geometry.errors import GridEngineError
from h3geometry.grid import engine

TRIANGLE = [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0), (0.0, 0.0)]
RECTANGLE = [(45.5, -110.2), (46.1, -110.2), (46.1, -109.85), (45.5, -109.85), (45.5, -110.2)]


class TestCellLookup:
    """Test suite for point and boundary lookups."""

    def test_cell_from_point(self):
        assert engine.cell_from_point(42.0, -110.0, 6) == 0x08626B3CAFFFFFFF

    def test_triangle_vertices(self):
        """Test the vertices of a small triangle map to known cells."""
        cells = [engine.cell_from_point(lat, lon, 5) for lat, lon in TRIANGLE]
        assert cells == [
            0x085754E67FFFFFFF,
            0x0857541AFFFFFFFF,
            0x0857542B7FFFFFFF,
            0x085754E67FFFFFFF,
        ]

    def test_boundary_is_open_hexagon(self):
        cell = engine.cell_from_point(46.0, -110.0, 5)
        boundary = engine.boundary_of(cell)
        assert len(boundary) == 6
        assert boundary[0] != boundary[-1]

    def test_boundary_near_cell(self):
        """Test boundary vertices are in degrees near the point."""
        cell = engine.cell_from_point(46.0, -110.0, 5)
        for lat, lon in engine.boundary_of(cell):
            assert abs(lat - 46.0) < 0.2
            assert abs(lon + 110.0) < 0.2

    def test_bad_resolution_propagates(self):
        """Test errors from h3 are not wrapped."""
        with pytest.raises(h3.H3ResDomainError):
            engine.cell_from_point(46.0, -110.0, 16)


class TestEdgeLength:
    """Test suite for cell metrics."""

    def test_edge_length_in_meters(self):
        # resolution 7 hexagons have edges of roughly 1.4 km
        assert 1_200.0 < engine.edge_length(7) < 1_600.0

    def test_edge_length_shrinks_with_resolution(self):
        lengths = [engine.edge_length(res) for res in range(0, 16)]
        assert all(a > b for a, b in zip(lengths, lengths[1:]))


class TestFill:
    """Test suite for buffer sizing and the fill primitive."""

    def test_max_fill_size_is_upper_bound(self):
        size = engine.max_fill_size(RECTANGLE, 7)
        actual = h3int.h3shape_to_cells(h3.LatLngPoly(RECTANGLE[:-1]), 7)
        assert size >= len(actual)

    def test_max_fill_size_counts_vertices(self):
        """Test a tiny polygon still gets room for its vertices."""
        tiny = [(46.0, -110.0), (46.00001, -110.0), (46.00001, -109.99999)]
        assert engine.max_fill_size(tiny, 5) >= len(tiny) + 1

    def test_max_fill_size_grows_with_resolution(self):
        assert engine.max_fill_size(RECTANGLE, 8) > engine.max_fill_size(RECTANGLE, 6)

    def test_empty_vertices(self):
        assert engine.max_fill_size([], 5) == 1

    def test_fill_leaves_zero_padding(self):
        """Test unused slots keep the zero sentinel."""
        size = engine.max_fill_size(RECTANGLE, 6)
        out = np.zeros(size, dtype=np.uint64)
        count = engine.fill_polygon(RECTANGLE, 6, out)

        assert 0 < count < size
        assert np.all(out[:count] != 0)
        assert np.all(out[count:] == 0)

    def test_fill_accepts_open_and_closed_rings(self):
        closed = np.zeros(engine.max_fill_size(RECTANGLE, 6), dtype=np.uint64)
        opened = np.zeros(engine.max_fill_size(RECTANGLE, 6), dtype=np.uint64)
        engine.fill_polygon(RECTANGLE, 6, closed)
        engine.fill_polygon(RECTANGLE[:-1], 6, opened)
        assert set(closed.tolist()) == set(opened.tolist())

    def test_fill_overflow_raises(self):
        out = np.zeros(1, dtype=np.uint64)
        with pytest.raises(GridEngineError):
            engine.fill_polygon(RECTANGLE, 7, out)
