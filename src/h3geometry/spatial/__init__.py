"""
Planar geometry for coverage-controlled polyfill.

This package holds the steps that turn a geographic polygon into the polygon
actually handed to the cell fill:

1. **projection**: tangent-plane mapping anchored at one polygon vertex
   (east/north meters on WGS84)

2. **expansion**: outward buffer and simplification of a planar polygon,
   rejecting buffers that split into several regions

3. **coverage**: computes the expansion distance from a coverage factor and
   the cell edge length, and runs projection and expansion end to end

Most callers want h3geometry.polyfill, which runs coverage.polyfill_coverage
followed by the cell fill. For direct access (testing/debugging), import from
the specific module:
    from h3geometry.spatial.coverage import polyfill_coverage
    from h3geometry.spatial.expansion import expand
"""

__all__ = []
