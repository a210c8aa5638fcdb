"""
Intersection of two great-circle paths, each given by a start and a bearing.

The calculation classifies degenerate configurations before finishing the
trigonometry, so callers receive an IntersectionResult that says whether a
unique intersection exists instead of a NaN coordinate.
"""

from enum import Enum
from typing import NamedTuple, Optional
import logging
import math

from .config import PI
from .exceptions import AmbiguousIntersectionError, InfiniteIntersectionError
from .geometry import Coordinate
from .units import degrees_to_radians, normalize_longitude, radians_to_degrees

logger = logging.getLogger(__name__)


class IntersectionKind(Enum):
    """Enumeration for the outcome of a path intersection."""

    UNIQUE = "unique"
    INFINITE = "infinite"
    AMBIGUOUS = "ambiguous"

    def __str__(self) -> str:
        return self.value


class IntersectionResult(NamedTuple):
    """Outcome of intersecting two paths; coordinate is set only when UNIQUE."""

    kind: IntersectionKind
    coordinate: Optional[Coordinate] = None

    @property
    def is_unique(self) -> bool:
        """Check if the paths meet at a single forward point."""
        return self.kind == IntersectionKind.UNIQUE

    def unwrap(self) -> Coordinate:
        """
        Return the intersection coordinate.

        Raises:
            InfiniteIntersectionError: If the paths share a great circle
            AmbiguousIntersectionError: If the paths diverge from each other
        """
        if self.kind == IntersectionKind.INFINITE:
            raise InfiniteIntersectionError("Paths lie on the same great circle")
        if self.kind == IntersectionKind.AMBIGUOUS:
            raise AmbiguousIntersectionError("Intersection of paths is ambiguous")
        return self.coordinate


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))


def intersection(
    point1: Coordinate, bearing1: float, point2: Coordinate, bearing2: float
) -> IntersectionResult:
    """
    Find where two great-circle paths cross.

    Args:
        point1: Start of the first path
        bearing1: Bearing of the first path in degrees
        point2: Start of the second path
        bearing2: Bearing of the second path in degrees

    Returns:
        IntersectionResult; UNIQUE results carry the intersection coordinate,
        INFINITE means the paths coincide, AMBIGUOUS means they turn away
        from each other (typically near-antipodal configurations)
    """
    lat1, lon1 = point1.to_radians()
    lat2, lon2 = point2.to_radians()
    theta13 = degrees_to_radians(bearing1)
    theta23 = degrees_to_radians(bearing2)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    # Angular distance point1 -> point2
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    delta12 = 2 * math.asin(min(1.0, math.sqrt(a)))

    if delta12 == 0:
        # Both paths start at the same point
        if bearing1 % 180 == bearing2 % 180:
            logger.debug(f"Paths from {point1} share start and great circle")
            return IntersectionResult(IntersectionKind.INFINITE)
        return IntersectionResult(IntersectionKind.UNIQUE, point1)

    # Bearings along the connecting great circle, at each end
    cos_theta_a = (math.sin(lat2) - math.sin(lat1) * math.cos(delta12)) / (
        math.sin(delta12) * math.cos(lat1)
    )
    cos_theta_b = (math.sin(lat1) - math.sin(lat2) * math.cos(delta12)) / (
        math.sin(delta12) * math.cos(lat2)
    )
    theta_a = math.acos(_clamp(cos_theta_a))
    theta_b = math.acos(_clamp(cos_theta_b))

    if math.sin(dlon) > 0:
        theta12 = theta_a
        theta21 = 2 * PI - theta_b
    else:
        theta12 = 2 * PI - theta_a
        theta21 = theta_b

    alpha1 = theta13 - theta12  # angle 2-1-3
    alpha2 = theta21 - theta23  # angle 1-2-3

    sin_alpha1 = math.sin(alpha1)
    sin_alpha2 = math.sin(alpha2)

    if sin_alpha1 == 0 and sin_alpha2 == 0:
        logger.debug(f"Paths from {point1} and {point2} coincide")
        return IntersectionResult(IntersectionKind.INFINITE)

    if sin_alpha1 * sin_alpha2 < 0:
        logger.debug(
            f"Paths from {point1} and {point2} diverge: "
            f"sin(alpha1)={sin_alpha1:.6g}, sin(alpha2)={sin_alpha2:.6g}"
        )
        return IntersectionResult(IntersectionKind.AMBIGUOUS)

    cos_alpha3 = -math.cos(alpha1) * math.cos(alpha2) + sin_alpha1 * sin_alpha2 * math.cos(
        delta12
    )

    delta13 = math.atan2(
        math.sin(delta12) * sin_alpha1 * sin_alpha2,
        math.cos(alpha2) + math.cos(alpha1) * cos_alpha3,
    )

    lat3 = math.asin(
        _clamp(
            math.sin(lat1) * math.cos(delta13)
            + math.cos(lat1) * math.sin(delta13) * math.cos(theta13)
        )
    )
    dlon13 = math.atan2(
        math.sin(theta13) * math.sin(delta13) * math.cos(lat1),
        math.cos(delta13) - math.sin(lat1) * math.sin(lat3),
    )
    lon3 = lon1 + dlon13

    result = Coordinate(
        latitude=radians_to_degrees(lat3),
        longitude=normalize_longitude(radians_to_degrees(lon3)),
    )
    logger.debug(f"Paths from {point1} and {point2} intersect at {result}")
    return IntersectionResult(IntersectionKind.UNIQUE, result)


def intersection_point(
    point1: Coordinate, bearing1: float, point2: Coordinate, bearing2: float
) -> Coordinate:
    """
    Find where two great-circle paths cross, raising when no unique point exists.

    Args:
        point1: Start of the first path
        bearing1: Bearing of the first path in degrees
        point2: Start of the second path
        bearing2: Bearing of the second path in degrees

    Returns:
        Intersection coordinate

    Raises:
        InfiniteIntersectionError: If the paths share a great circle
        AmbiguousIntersectionError: If the paths diverge from each other
    """
    return intersection(point1, bearing1, point2, bearing2).unwrap()
