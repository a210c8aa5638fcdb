"""
Shared constants and logging configuration for spherogeo.
"""

from dataclasses import dataclass
import logging

# Every formula uses these same values so results are reproducible.
PI = 3.141592653589793
EARTH_RADIUS_KM = 6371.0

# Below this Mercator stretch an E-W rhumb course becomes 0/0.
RHUMB_SINGULARITY_THRESHOLD = 1e-11

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class GeodesyConfig:
    """Configuration for applications embedding spherogeo."""

    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
    date_format: str = "%H:%M:%S"


def setup_logging(config: GeodesyConfig = GeodesyConfig()) -> logging.Logger:
    """
    Attach a console handler to the spherogeo logger.

    The library itself never installs handlers; call this from an application
    that wants the calculation debug output on stderr.

    Args:
        config: GeodesyConfig carrying the log level and format

    Returns:
        The configured "spherogeo" logger

    Raises:
        ValueError: If config.log_level is not a standard logging level name
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    formatter = logging.Formatter(config.log_format, datefmt=config.date_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    logger = logging.getLogger("spherogeo")
    logger.setLevel(level)
    # Replace handlers from a previous call instead of stacking duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(console_handler)

    return logger
