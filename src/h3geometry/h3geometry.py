import configparser
import json
import logging
import os.path
import sys
from collections.abc import Iterable
from typing import Set, Union

from funcy import decorator, lmap
from pyfiglet import Figlet
from rich.prompt import Confirm, Prompt
from shapely import wkt
from shapely.errors import GEOSException
from shapely.geometry import MultiPolygon, Point, Polygon, shape

from h3geometry import config
from h3geometry import constants
from h3geometry.errors import InvalidGeometry
from h3geometry.grid import engine
from h3geometry.grid.cells import cell_to_polygon, cells_to_polygon, enumerate_cells
from h3geometry.models import CoverageReport
from h3geometry.spatial.coverage import polyfill_coverage
from h3geometry.spatial.spatial_utils import as_polygon


def init_logging():
    logger = logging.getLogger(constants.LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(constants.CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    logfile_handler = logging.FileHandler(constants.LOGFILE_NAME, "w")
    logfile_handler.setLevel(logging.DEBUG)
    logfile_handler.setFormatter(logging.Formatter(constants.LOGFILE_FORMAT))
    logger.addHandler(logfile_handler)


@decorator
def log(call):
    logging.getLogger(constants.LOGGER_NAME).debug(call._func.__name__)
    return call()


def banner():
    """
    Displays the name of this utility using incredible ASCII-art.
    """
    f = Figlet(font="slant")
    return f.renderText("h3geometry")


# -------------------------------------------------------------------
# Points and cells
# -------------------------------------------------------------------


def latlng_to_cell(latitude, longitude, resolution: int) -> int:
    """
    Converts a point given as latitude and longitude in degrees into an H3
    cell index.

    >>> hex(latlng_to_cell(42, -110, 6))
    '0x8626b3cafffffff'
    """
    return engine.cell_from_point(float(latitude), float(longitude), resolution)


def to_cell_index(point, resolution: int) -> int:
    """
    Converts a point into an H3 cell index. The point is either a shapely
    Point with x = latitude and y = longitude, or a (latitude, longitude)
    sequence, both in degrees.

    >>> lmap(lambda p: hex(to_cell_index(p, 5)), [(0, 0), (1, 1), (2, 0), (0, 0)])
    ['0x85754e67fffffff', '0x857541affffffff', '0x857542b7fffffff', '0x85754e67fffffff']
    """
    if isinstance(point, Point):
        return latlng_to_cell(point.x, point.y, resolution)
    latitude, longitude = point[:2]
    return latlng_to_cell(latitude, longitude, resolution)


def to_polygon(cell_or_cells) -> Union[Polygon, MultiPolygon]:
    """
    Converts a single H3 cell index into its outline, or a collection of
    cell indexes into the union of their outlines. Useful for drawing.
    """
    if isinstance(cell_or_cells, Iterable) and not isinstance(cell_or_cells, (str, bytes)):
        return cells_to_polygon(cell_or_cells)
    return cell_to_polygon(cell_or_cells)


# -------------------------------------------------------------------
# Polyfill
# -------------------------------------------------------------------


def polyfill(polygon, resolution: int, coverage: float = constants.DEFAULT_COVERAGE) -> Set[int]:
    """
    Covers a polygon given in latitude/longitude degrees with H3 cells and
    returns their indexes. This is only an approximate covering: some cells
    will likely extend outside the polygon, and the polygon may not be
    entirely covered.

    To avoid under-coverage the polygon is first expanded by `coverage`
    times the average cell edge length. The default rarely (if ever) leaves
    any of the polygon uncovered. A coverage of 2 prevents under-coverage
    entirely but with a lot of overspray, and coverage=0 avoids expansion but
    almost always under-covers.

    Args:
        polygon: Polygon of (latitude, longitude) degrees, or a sequence of
            (latitude, longitude) pairs
        resolution: H3 resolution (0-15)
        coverage: Coverage factor, clamped to >= 0 (default: 1.2)

    Returns:
        Set of integer H3 cell indexes

    Raises:
        InvalidGeometry: If the polygon is self-intersecting or has holes
        DegenerateExpansion: If expanding the polygon splits it apart

    Example:
        >>> p = Polygon([(40.0, -110.0), (41, -110), (41.4, -109), (40, -110)])
        >>> cells = polyfill(p, 4)
        >>> uncovered = p.difference(to_polygon(cells))
    """
    expanded = polyfill_coverage(polygon, resolution, coverage)
    return enumerate_cells(expanded, resolution)


def coverage_report(polygon, cells) -> CoverageReport:
    """
    Measures over- and under-coverage of a polygon by a set of cells.
    """
    polygon = as_polygon(polygon)
    cells = list(cells)
    covered = cells_to_polygon(cells)
    return CoverageReport(
        cell_count=len(cells),
        polygon_area=polygon.area,
        cells_area=covered.area,
        over_coverage=covered.difference(polygon).area,
        under_coverage=polygon.difference(covered).area,
    )


# -------------------------------------------------------------------
# Reading polygons and writing cells
# -------------------------------------------------------------------


def read_polygon(polygon_file) -> Polygon:
    """
    Reads a polygon from a GeoJSON or WKT file.

    GeoJSON positions are (longitude, latitude) and are swapped into this
    package's (latitude, longitude) order. WKT is read as (latitude,
    longitude) as written.
    """
    if polygon_file is None or not os.path.exists(polygon_file):
        raise ValueError(f"Unable to find polygon file {polygon_file}")

    with open(polygon_file) as file:
        content = file.read().strip()

    if content.startswith("{"):
        try:
            geojson = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvalidGeometry(f"Unable to parse GeoJSON in {polygon_file}: {e}") from e
        if geojson.get("type") == "FeatureCollection":
            geojson = geojson["features"][0]
        if geojson.get("type") == "Feature":
            geojson = geojson["geometry"]
        geometry = shape(geojson)
        if not isinstance(geometry, Polygon):
            raise InvalidGeometry(f"Expected a Polygon, found {geometry.geom_type}")
        return Polygon(
            [(lat, lon) for lon, lat, *_ in geometry.exterior.coords],
            [[(lat, lon) for lon, lat, *_ in ring.coords] for ring in geometry.interiors],
        )

    try:
        geometry = wkt.loads(content)
    except GEOSException as e:
        raise InvalidGeometry(f"Unable to parse WKT in {polygon_file}: {e}") from e
    if not isinstance(geometry, Polygon):
        raise InvalidGeometry(f"Expected a Polygon, found {geometry.geom_type}")
    return geometry


def format_cells(cells, output_format=constants.DEFAULT_OUTPUT_FORMAT):
    """
    Sorted list of cell indexes as hexadecimal strings or decimal integers.
    """
    if output_format == constants.HEX_FORMAT:
        return lmap(lambda cell: format(cell, "x"), sorted(cells))
    return lmap(str, sorted(cells))


@log
def process(polygon_file, configuration: config.Config):
    """
    Fills the polygon in polygon_file according to the configuration and
    writes the cell indexes, one per line, to the configured output file or
    stdout.
    """
    config.validate(configuration)
    logger = logging.getLogger(constants.LOGGER_NAME)

    polygon = read_polygon(polygon_file)
    cells = polyfill(polygon, configuration.resolution, configuration.coverage)
    lines = format_cells(cells, configuration.output_format)

    if configuration.output_file:
        with open(configuration.output_file, "tw") as file:
            file.write("\n".join(lines) + "\n")
        logger.info(f"Wrote {len(lines)} cells to {configuration.output_file}")
    else:
        for line in lines:
            print(line)
        logger.debug(f"Wrote {len(lines)} cells to stdout")

    return cells


# TODO require a non-blank input for elements that have no default value
def init_config(configuration_file):
    """
    Prompts the user for configuration values and then creates a valid configuration file.
    """
    print("""This utility will create a polyfill configuration file by prompting """
          """you for values for each of the configuration parameters.""")
    print()
    if not configuration_file:
        configuration_file = Prompt.ask("configuration file name", default="h3geometry.ini")
    else:
        print(f"Creating configuration file {configuration_file}")
        print()

    if os.path.exists(configuration_file):
        print(f"WARNING: The {configuration_file} already exists.")
        overwrite = Confirm.ask("Overwrite?")
        if not overwrite:
            print("Not overwriting existing file. Exiting.")
            exit(1)

    cfg_parser = configparser.ConfigParser()

    print()
    print(f"{constants.POLYFILL_SECTION_NAME} Parameters")
    print("--------------------------------------------------")
    cfg_parser.add_section(constants.POLYFILL_SECTION_NAME)
    cfg_parser.set(constants.POLYFILL_SECTION_NAME, "resolution", Prompt.ask("H3 resolution (0-15)", default=str(constants.DEFAULT_RESOLUTION)))
    cfg_parser.set(constants.POLYFILL_SECTION_NAME, "coverage", Prompt.ask("Coverage factor", default=str(constants.DEFAULT_COVERAGE)))
    print()

    print(f"{constants.OUTPUT_SECTION_NAME} Parameters")
    print("--------------------------------------------------")
    cfg_parser.add_section(constants.OUTPUT_SECTION_NAME)
    cfg_parser.set(constants.OUTPUT_SECTION_NAME, "output_format", Prompt.ask("Cell output format", choices=list(constants.OUTPUT_FORMATS), default=constants.DEFAULT_OUTPUT_FORMAT))
    cfg_parser.set(constants.OUTPUT_SECTION_NAME, "output_file", Prompt.ask("Output file (blank for stdout)", default=""))

    print()
    print(f"Saving new configuration: {configuration_file}")
    with open(configuration_file, "tw") as file:
        cfg_parser.write(file)

    return configuration_file
