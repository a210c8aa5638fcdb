"""
Great-circle calculations on a spherical Earth.

All formulas assume a sphere of radius EARTH_RADIUS_KM, which is accurate to
roughly 0.3% against the real ellipsoid. Angles are taken and returned in
degrees, distances in kilometres; the trigonometry runs in radians.
"""

from typing import List
import logging
import math
from shapely.geometry import LineString

from .config import EARTH_RADIUS_KM
from .exceptions import CoincidentPointsError
from .geometry import Coordinate, coordinates_to_linestring
from .units import (
    degrees_to_radians,
    normalize_bearing,
    normalize_longitude,
    radians_to_degrees,
)

logger = logging.getLogger(__name__)


def angular_distance(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the central angle between two coordinates.

    Args:
        start: First coordinate
        end: Second coordinate

    Returns:
        Angle subtended at the centre of the sphere, in radians
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distance(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the great-circle distance between two coordinates.

    Uses the haversine formula, which stays well conditioned for small
    distances.

    Args:
        start: First coordinate
        end: Second coordinate

    Returns:
        Distance in kilometers
    """
    return EARTH_RADIUS_KM * angular_distance(start, end)


def law_of_cosines_distance(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the great-circle distance with the spherical law of cosines.

    Agrees with haversine_distance for well separated points but loses
    precision for very short distances.

    Args:
        start: First coordinate
        end: Second coordinate

    Returns:
        Distance in kilometers
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    cos_angle = math.sin(lat1) * math.sin(lat2) + math.cos(lat1) * math.cos(
        lat2
    ) * math.cos(lon2 - lon1)
    # Rounding can push coincident points just past 1.0
    cos_angle = max(-1.0, min(1.0, cos_angle))

    return math.acos(cos_angle) * EARTH_RADIUS_KM


def equirectangular_distance(start: Coordinate, end: Coordinate) -> float:
    """
    Approximate the distance between two coordinates on a flat projection.

    Fast but only accurate for short spans away from the poles.

    Args:
        start: First coordinate
        end: Second coordinate

    Returns:
        Approximate distance in kilometers
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    x = (lon2 - lon1) * math.cos((lat1 + lat2) / 2)
    y = lat2 - lat1

    return math.sqrt(x * x + y * y) * EARTH_RADIUS_KM


def initial_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the initial bearing (forward azimuth) from start to end.

    The bearing is undefined for identical coordinates; 0.0 is returned.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Bearing in degrees (0-360), clockwise from true north
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    dlon = lon2 - lon1

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(
        dlon
    )

    return normalize_bearing(radians_to_degrees(math.atan2(y, x)))


def final_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the bearing on arrival at end when following the great circle.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Bearing in degrees (0-360), clockwise from true north
    """
    return normalize_bearing(initial_bearing(end, start) + 180)


def midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    """
    Find the half-way point along the great circle between two coordinates.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Midpoint coordinate
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    dlon = lon2 - lon1

    bx = math.cos(lat2) * math.cos(dlon)
    by = math.cos(lat2) * math.sin(dlon)

    lat_mid = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by**2),
    )
    lon_mid = lon1 + math.atan2(by, math.cos(lat1) + bx)

    return Coordinate(
        latitude=radians_to_degrees(lat_mid),
        longitude=normalize_longitude(radians_to_degrees(lon_mid)),
    )


def intermediate_point(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """
    Find the point at a given fraction of the way along the great circle.

    The fraction is not validated: values outside [0, 1] extrapolate along
    the same great circle.

    Args:
        start: Starting coordinate (fraction 0)
        end: Ending coordinate (fraction 1)
        fraction: Position along the path

    Returns:
        Interpolated coordinate

    Raises:
        CoincidentPointsError: If start and end are the same point
    """
    delta = angular_distance(start, end)
    sin_delta = math.sin(delta)
    if sin_delta == 0:
        raise CoincidentPointsError(
            f"Cannot interpolate between coincident coordinates {start} and {end}"
        )

    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    a = math.sin((1 - fraction) * delta) / sin_delta
    b = math.sin(fraction * delta) / sin_delta

    x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
    y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
    z = a * math.sin(lat1) + b * math.sin(lat2)

    lat = math.atan2(z, math.sqrt(x**2 + y**2))
    lon = math.atan2(y, x)

    return Coordinate(
        latitude=radians_to_degrees(lat),
        longitude=normalize_longitude(radians_to_degrees(lon)),
    )


def sample_path(start: Coordinate, end: Coordinate, n: int) -> List[Coordinate]:
    """
    Sample n evenly spaced coordinates along the great circle.

    The samples sit at fractions 0, 1/n, ..., (n-1)/n, so the first sample is
    start and the end coordinate itself is not included.

    Args:
        start: Starting coordinate
        end: Ending coordinate
        n: Number of samples

    Returns:
        List of n coordinates in path order

    Raises:
        ValueError: If n is not positive
        CoincidentPointsError: If start and end are the same point
    """
    if n <= 0:
        raise ValueError(f"Number of samples must be positive, got {n}")

    step = 1.0 / n
    samples = [intermediate_point(start, end, step * i) for i in range(n)]

    logger.debug(f"Sampled {n} points from {start} towards {end}")
    return samples


def great_circle_linestring(start: Coordinate, end: Coordinate, n: int = 64) -> LineString:
    """
    Build a Shapely LineString that follows the great circle from start to end.

    Args:
        start: Starting coordinate
        end: Ending coordinate
        n: Number of segments in the polyline (default: 64)

    Returns:
        LineString with n + 1 vertices in (longitude, latitude) order
    """
    return coordinates_to_linestring(sample_path(start, end, n) + [end])


def destination_point(start: Coordinate, distance: float, bearing: float) -> Coordinate:
    """
    Project a coordinate along a great circle.

    Args:
        start: Starting coordinate
        distance: Distance to travel in kilometers
        bearing: Initial bearing in degrees, clockwise from true north

    Returns:
        Destination coordinate
    """
    lat1, lon1 = start.to_radians()
    theta = degrees_to_radians(bearing)
    delta = distance / EARTH_RADIUS_KM

    lat2 = math.asin(
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    )
    lon2 = lon1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    return Coordinate(
        latitude=radians_to_degrees(lat2),
        longitude=normalize_longitude(radians_to_degrees(lon2)),
    )


def cross_track_distance(
    point: Coordinate, path_start: Coordinate, path_end: Coordinate
) -> float:
    """
    Calculate the distance from a point to the great circle through a path.

    Args:
        point: Point to measure from
        path_start: Start of the path
        path_end: End of the path

    Returns:
        Signed distance in kilometers; negative when point lies left of the path
    """
    delta13 = angular_distance(path_start, point)
    theta13 = degrees_to_radians(initial_bearing(path_start, point))
    theta12 = degrees_to_radians(initial_bearing(path_start, path_end))

    delta_xt = math.asin(
        max(-1.0, min(1.0, math.sin(delta13) * math.sin(theta13 - theta12)))
    )
    return delta_xt * EARTH_RADIUS_KM


def along_track_distance(
    point: Coordinate, path_start: Coordinate, path_end: Coordinate
) -> float:
    """
    Calculate how far along a path the closest point to a given point lies.

    Args:
        point: Point to project onto the path
        path_start: Start of the path
        path_end: End of the path

    Returns:
        Signed distance in kilometers from path_start; negative when the
        closest point lies behind path_start
    """
    delta13 = angular_distance(path_start, point)
    theta13 = degrees_to_radians(initial_bearing(path_start, point))
    theta12 = degrees_to_radians(initial_bearing(path_start, path_end))

    delta_xt = math.asin(
        max(-1.0, min(1.0, math.sin(delta13) * math.sin(theta13 - theta12)))
    )
    cos_at = math.cos(delta13) / math.cos(delta_xt)
    delta_at = math.acos(max(-1.0, min(1.0, cos_at)))

    direction = math.copysign(1.0, math.cos(theta12 - theta13))
    return direction * delta_at * EARTH_RADIUS_KM
