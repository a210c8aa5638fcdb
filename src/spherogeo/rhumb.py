"""
Rhumb-line (loxodrome) calculations on a spherical Earth.

A rhumb line crosses every meridian at the same angle, so it plots as a
straight line on a Mercator projection. The formulas work in Mercator
"stretched" latitude, psi = ln(tan(pi/4 + phi/2)).
"""

import logging
import math

from .config import EARTH_RADIUS_KM, PI, RHUMB_SINGULARITY_THRESHOLD
from .geometry import Coordinate
from .units import degrees_to_radians, normalize_longitude, radians_to_degrees

logger = logging.getLogger(__name__)


def _mercator_latitude(lat: float) -> float:
    """Mercator-projected latitude psi for a latitude in radians."""
    stretch = math.tan(PI / 4 + lat / 2)
    # The south pole projects to minus infinity
    if stretch == 0:
        return -math.inf
    return math.log(stretch)


def _mercator_stretch(lat1: float, lat2: float) -> float:
    """Difference in Mercator-projected latitude between two latitudes in radians."""
    return _mercator_latitude(lat2) - _mercator_latitude(lat1)


def _stretch_ratio(lat1: float, lat2: float) -> float:
    """
    Ratio of latitude difference to Mercator stretch for a course.

    East-west courses make both terms zero; the ratio then tends to cos(lat1).
    """
    dpsi = _mercator_stretch(lat1, lat2)
    if abs(dpsi) > RHUMB_SINGULARITY_THRESHOLD:
        return (lat2 - lat1) / dpsi

    logger.debug(f"E-W course at latitude {radians_to_degrees(lat1):.6f}, using cos(lat)")
    return math.cos(lat1)


def _fold_longitude_delta(dlon: float) -> float:
    """Take the shorter way around when a longitude difference exceeds 180 degrees."""
    if abs(dlon) > PI:
        return -(2 * PI - dlon) if dlon > 0 else 2 * PI + dlon
    return dlon


def rhumb_distance(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the distance along the rhumb line between two coordinates.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Distance in kilometers
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    dlat = lat2 - lat1
    q = _stretch_ratio(lat1, lat2)
    dlon = _fold_longitude_delta(lon2 - lon1)

    return math.sqrt(dlat * dlat + q * q * dlon * dlon) * EARTH_RADIUS_KM


def rhumb_bearing(start: Coordinate, end: Coordinate) -> float:
    """
    Calculate the constant bearing of the rhumb line from start to end.

    Unlike spherical.initial_bearing the result is not wrapped into
    [0, 360): westerly courses come back negative.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Bearing in degrees, in (-180, 180]
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    dpsi = _mercator_stretch(lat1, lat2)
    dlon = _fold_longitude_delta(lon2 - lon1)

    return radians_to_degrees(math.atan2(dlon, dpsi))


def rhumb_destination(start: Coordinate, distance: float, bearing: float) -> Coordinate:
    """
    Project a coordinate along a rhumb line.

    Args:
        start: Starting coordinate
        distance: Distance to travel in kilometers
        bearing: Constant bearing in degrees, clockwise from true north

    Returns:
        Destination coordinate
    """
    lat1, lon1 = start.to_radians()
    theta = degrees_to_radians(bearing)
    delta = distance / EARTH_RADIUS_KM

    dlat = delta * math.cos(theta)
    lat2 = lat1 + dlat

    # Courses running past a pole come back down the other side
    if abs(lat2) > PI / 2:
        lat2 = PI - lat2 if lat2 > 0 else -PI - lat2

    q = _stretch_ratio(lat1, lat2)
    # q vanishes only for a course ending on the south pole, where longitude is moot
    dlon = delta * math.sin(theta) / q if q else 0.0
    lon2 = lon1 + dlon

    return Coordinate(
        latitude=radians_to_degrees(lat2),
        longitude=normalize_longitude(radians_to_degrees(lon2)),
    )


def rhumb_midpoint(start: Coordinate, end: Coordinate) -> Coordinate:
    """
    Find the half-way point along the rhumb line between two coordinates.

    Args:
        start: Starting coordinate
        end: Ending coordinate

    Returns:
        Midpoint coordinate
    """
    lat1, lon1 = start.to_radians()
    lat2, lon2 = end.to_radians()

    # Crossing the antimeridian: lift the western longitude by a full turn
    if lon2 - lon1 > PI:
        lon1 += 2 * PI
    elif lon1 - lon2 > PI:
        lon2 += 2 * PI

    lat3 = (lat1 + lat2) / 2

    psi1 = _mercator_latitude(lat1)
    psi2 = _mercator_latitude(lat2)
    psi3 = _mercator_latitude(lat3)

    denominator = psi2 - psi1
    numerator = (lon2 - lon1) * psi3 + lon1 * psi2 - lon2 * psi1
    lon3 = numerator / denominator if denominator else math.nan

    if not math.isfinite(lon3):
        logger.debug(f"Rhumb midpoint of {start} and {end} along a parallel, using mean longitude")
        lon3 = (lon1 + lon2) / 2

    return Coordinate(
        latitude=radians_to_degrees(lat3),
        longitude=normalize_longitude(radians_to_degrees(lon3)),
    )
