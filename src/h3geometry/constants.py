# Default configuration values
DEFAULT_RESOLUTION = 7
DEFAULT_COVERAGE = 1.2
DEFAULT_OUTPUT_FORMAT = "hex"
DEFAULT_OUTPUT_FILE = None

# Configuration sections
POLYFILL_SECTION_NAME = "Polyfill"
OUTPUT_SECTION_NAME = "Output"

# Cell output formats
HEX_FORMAT = "hex"
INT_FORMAT = "int"
OUTPUT_FORMATS = (HEX_FORMAT, INT_FORMAT)

# H3 resolution range
MIN_RESOLUTION = 0
MAX_RESOLUTION = 15

# The grid engine pads unused slots of its fill buffer with this value
SENTINEL_CELL = 0

# Simplification tolerance is the expansion distance divided by this
SIMPLIFY_DIVISOR = 5.0

# Logging
LOGGER_NAME = "h3geometry"
LOGFILE_NAME = "h3geometry.log"
CONSOLE_FORMAT = "%(message)s"
LOGFILE_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"
