"""
H3 grid access for h3geometry.

1. **engine**: thin adapter over the h3 library (cell lookup, boundaries,
   edge length, fill buffer sizing and the fill itself)

2. **cells**: cell enumeration for a polygon, and cell outlines for one or
   many cells
"""

__all__ = []
