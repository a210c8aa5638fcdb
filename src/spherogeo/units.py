"""
Angle conversions and normalization shared by the calculation engines.
"""

from .config import PI


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (PI / 180)


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180 / PI)


def normalize_longitude(longitude: float) -> float:
    """
    Wrap a longitude in degrees into the range (-180, 180].

    Python's modulo is floored, so negative inputs wrap the same way as
    positive ones.

    Args:
        longitude: Longitude in degrees, any magnitude

    Returns:
        Equivalent longitude in (-180, 180]
    """
    wrapped = (longitude + 540) % 360 - 180
    # The antimeridian is reported as +180
    if wrapped == -180:
        return 180.0
    return wrapped


def normalize_bearing(bearing: float) -> float:
    """Wrap a bearing in degrees into the range [0, 360)."""
    return (bearing + 360) % 360
