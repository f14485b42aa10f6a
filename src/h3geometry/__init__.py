__version__ = "v0.1.0"


__all__ = [
    "__version__",
    "cli",
    "config",
    "constants",
    "errors",
    "h3geometry",
    "models",
    "DegenerateExpansion",
    "InvalidGeometry",
    "coverage_report",
    "latlng_to_cell",
    "polyfill",
    "to_cell_index",
    "to_polygon",
]

from . import config
from . import constants
from . import errors
from . import models
from . import h3geometry
from . import cli
from .errors import DegenerateExpansion, InvalidGeometry
from .h3geometry import coverage_report, latlng_to_cell, polyfill, to_cell_index, to_polygon
