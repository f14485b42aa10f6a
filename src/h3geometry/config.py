import configparser
import dataclasses
import logging
import os.path
from typing import Optional

from h3geometry import constants


class ValidationError(Exception):
    errors: list[str]

    def __init__(self, errors):
        super().__init__("The configuration is invalid")
        self.errors = errors


@dataclasses.dataclass
class Config:
    resolution: int
    coverage: float
    output_format: str
    output_file: Optional[str]

    def show(self):
        LOGGER = logging.getLogger(constants.LOGGER_NAME)
        LOGGER.info("")
        LOGGER.info("Using configuration:")
        for k, v in self.__dict__.items():
            LOGGER.info(f"  + {k}: {v}")


def config_parser_factory(configuration_file):
    """
    Returns a ConfigParser by reading the specified file.
    """
    if configuration_file is None or not os.path.exists(configuration_file):
        raise ValueError(f"Unable to find configuration file {configuration_file}")
    cfg_parser = configparser.ConfigParser(
        interpolation=configparser.ExtendedInterpolation()
    )
    cfg_parser.read(configuration_file)
    return cfg_parser


def _get_configuration_value(section, name, value_type, config_parser, overrides, default=None):
    """
    Returns a value from the provided config parser; any value for the key that
    is provided in the 'overrides' dictionary will take precedence.
    """
    if overrides.get(name) is not None:
        return overrides.get(name)

    if not config_parser.has_option(section, name):
        return default

    if value_type is bool:
        return config_parser.getboolean(section, name)
    elif value_type is int:
        return config_parser.getint(section, name)
    elif value_type is float:
        return config_parser.getfloat(section, name)
    else:
        value = config_parser.get(section, name)
        return value if value != "" else default


def configuration(config_parser, overrides):
    """
    Returns a valid Config object that is populated from the provided config
    parser, and with values overriden with anything provided in 'overrides'.
    """
    try:
        return Config(
            _get_configuration_value(
                constants.POLYFILL_SECTION_NAME, "resolution", int,
                config_parser, overrides, constants.DEFAULT_RESOLUTION,
            ),
            _get_configuration_value(
                constants.POLYFILL_SECTION_NAME, "coverage", float,
                config_parser, overrides, constants.DEFAULT_COVERAGE,
            ),
            _get_configuration_value(
                constants.OUTPUT_SECTION_NAME, "output_format", str,
                config_parser, overrides, constants.DEFAULT_OUTPUT_FORMAT,
            ),
            _get_configuration_value(
                constants.OUTPUT_SECTION_NAME, "output_file", str,
                config_parser, overrides, constants.DEFAULT_OUTPUT_FILE,
            ),
        )
    except ValueError as e:
        raise ValueError(f"Unable to read the configuration file: {e}") from e


def default_configuration(overrides):
    """
    Returns a Config built from the default values and any 'overrides', for
    use when no configuration file is given.
    """
    return configuration(configparser.ConfigParser(), overrides)


def validate(configuration):
    """
    Validates each value in the configuration.
    """
    validations = [
        [
            "resolution",
            lambda res: isinstance(res, int)
            and constants.MIN_RESOLUTION <= res <= constants.MAX_RESOLUTION,
            f"The resolution must be between {constants.MIN_RESOLUTION} "
            f"and {constants.MAX_RESOLUTION}.",
        ],
        ["coverage", lambda cover: cover >= 0, "The coverage must not be negative."],
        [
            "output_format",
            lambda fmt: fmt in constants.OUTPUT_FORMATS,
            f"The output_format must be one of {', '.join(constants.OUTPUT_FORMATS)}.",
        ],
        [
            "output_file",
            lambda path: path is None or os.path.isdir(os.path.dirname(os.path.abspath(path))),
            "The directory for output_file does not exist.",
        ],
    ]
    errors = [
        msg for name, fn, msg in validations if not fn(getattr(configuration, name))
    ]
    if len(errors) == 0:
        return True
    else:
        raise ValidationError(errors)
