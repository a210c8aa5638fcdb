"""
Spherogeo - great-circle and rhumb-line calculations on a spherical Earth.

This package provides distances, bearings, midpoints, interpolation,
destination projection and path intersection for latitude/longitude
coordinates, using a mean Earth radius of 6371 km.
"""
import importlib.metadata

__version__ = importlib.metadata.version("spherogeo")

# Import main classes and functions for public API
from .config import EARTH_RADIUS_KM, GeodesyConfig, setup_logging
from .exceptions import (
    AmbiguousIntersectionError,
    CoincidentPointsError,
    GeodesyError,
    InfiniteIntersectionError,
    IntersectionError,
)
from .geometry import Coordinate, coordinates_to_linestring
from .intersection import (
    IntersectionKind,
    IntersectionResult,
    intersection,
    intersection_point,
)
from .rhumb import rhumb_bearing, rhumb_destination, rhumb_distance, rhumb_midpoint
from .spherical import (
    along_track_distance,
    angular_distance,
    cross_track_distance,
    destination_point,
    equirectangular_distance,
    final_bearing,
    great_circle_linestring,
    haversine_distance,
    initial_bearing,
    intermediate_point,
    law_of_cosines_distance,
    midpoint,
    sample_path,
)
from .units import (
    degrees_to_radians,
    normalize_bearing,
    normalize_longitude,
    radians_to_degrees,
)

__all__ = [
    "EARTH_RADIUS_KM",
    "GeodesyConfig",
    "setup_logging",
    "GeodesyError",
    "CoincidentPointsError",
    "IntersectionError",
    "InfiniteIntersectionError",
    "AmbiguousIntersectionError",
    "Coordinate",
    "coordinates_to_linestring",
    "IntersectionKind",
    "IntersectionResult",
    "intersection",
    "intersection_point",
    "rhumb_bearing",
    "rhumb_destination",
    "rhumb_distance",
    "rhumb_midpoint",
    "along_track_distance",
    "angular_distance",
    "cross_track_distance",
    "destination_point",
    "equirectangular_distance",
    "final_bearing",
    "great_circle_linestring",
    "haversine_distance",
    "initial_bearing",
    "intermediate_point",
    "law_of_cosines_distance",
    "midpoint",
    "sample_path",
    "degrees_to_radians",
    "normalize_bearing",
    "normalize_longitude",
    "radians_to_degrees",
]
