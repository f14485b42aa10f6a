import logging

import click

from h3geometry import config
from h3geometry import constants
from h3geometry import h3geometry
from h3geometry.errors import H3GeometryError


@click.group(epilog="For detailed help on each command, run: h3geometry COMMAND --help")
def cli():
    """The h3geometry utility covers latitude/longitude polygons with H3
    cells, expanding each polygon first so that the cells leave little or
    none of it uncovered."""
    pass


@cli.command()
@click.option("-c", "--config", help="Path to configuration file to create or replace")
def init(config):
    """Populates a configuration file based on user input."""
    click.echo(h3geometry.banner())
    config = h3geometry.init_config(config)
    click.echo(f"Initialized the h3geometry configuration file {config}")


@cli.command()
@click.option("-c", "--config", "config_filename", help="Path to configuration file to display", required=True)
def info(config_filename):
    """Summarizes the contents of a configuration file."""
    click.echo(h3geometry.banner())
    h3geometry.init_logging()
    configuration = config.configuration(config.config_parser_factory(config_filename), {})
    configuration.show()


@cli.command()
@click.argument("polygon_file", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--config", "config_filename", help="Path to configuration file", required=False)
@click.option("-r", "--resolution", type=click.IntRange(constants.MIN_RESOLUTION, constants.MAX_RESOLUTION), help="H3 resolution")
@click.option("--coverage", type=float, help="Coverage factor; 0 disables expansion")
@click.option("-o", "--output", "output_file", help="Write cell indexes to this file instead of stdout")
@click.option("-f", "--format", "output_format", type=click.Choice(constants.OUTPUT_FORMATS), help="Cell index format")
def polyfill(polygon_file, config_filename, resolution, coverage, output_file, output_format):
    """Covers the polygon in POLYGON_FILE (GeoJSON or lat/lon WKT) with H3 cells."""
    h3geometry.init_logging()
    overrides = {
        "resolution": resolution,
        "coverage": coverage,
        "output_file": output_file,
        "output_format": output_format,
    }
    if config_filename:
        configuration = config.configuration(config.config_parser_factory(config_filename), overrides)
    else:
        configuration = config.default_configuration(overrides)

    try:
        h3geometry.process(polygon_file, configuration)
    except config.ValidationError as e:
        logger = logging.getLogger(constants.LOGGER_NAME)
        logger.info("The configuration is invalid:")
        for error in e.errors:
            logger.info(" * " + error)
        exit(1)
    except H3GeometryError as e:
        logger = logging.getLogger(constants.LOGGER_NAME)
        logger.info("\nUnable to fill polygon: " + str(e))
        exit(1)


@cli.command()
@click.argument("latitude", type=float)
@click.argument("longitude", type=float)
@click.option("-r", "--resolution", type=click.IntRange(constants.MIN_RESOLUTION, constants.MAX_RESOLUTION), default=constants.DEFAULT_RESOLUTION, show_default=True)
def cell(latitude, longitude, resolution):
    """Prints the H3 cell containing LATITUDE LONGITUDE."""
    click.echo(format(h3geometry.latlng_to_cell(latitude, longitude, resolution), "x"))


def _parse_cells(ctx, param, value):
    try:
        return [int(c, 16) for c in value]
    except ValueError as e:
        raise click.BadParameter(f"Cell indexes must be hexadecimal: {e}") from e


@cli.command()
@click.argument("cells", nargs=-1, required=True, callback=_parse_cells)
def boundary(cells):
    """Prints the outline of CELLS (hexadecimal indexes) as lat/lon WKT."""
    outline = h3geometry.to_polygon(cells[0] if len(cells) == 1 else cells)
    click.echo(outline.wkt)


if __name__ == "__main__":
    cli()
