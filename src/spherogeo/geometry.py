"""
Coordinate value type and conversion to Shapely geometries.
"""

from typing import Iterable, NamedTuple, Tuple
from shapely.geometry import LineString

from .units import degrees_to_radians


class Coordinate(NamedTuple):
    """
    A point on the sphere's surface, in decimal degrees.

    Values are not validated; latitudes outside [-90, 90] or longitudes
    outside (-180, 180] are carried through the formulas unchanged.
    """

    latitude: float
    longitude: float

    def to_radians(self) -> Tuple[float, float]:
        """Return (latitude, longitude) in radians."""
        return degrees_to_radians(self.latitude), degrees_to_radians(self.longitude)

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


def coordinates_to_linestring(coordinates: Iterable[Coordinate]) -> LineString:
    """
    Convert a sequence of coordinates to a Shapely LineString.

    Args:
        coordinates: Coordinates in path order

    Returns:
        LineString in geographic (longitude, latitude) order

    Raises:
        ValueError: If fewer than two coordinates are given
    """
    coord_tuples = [(coord.longitude, coord.latitude) for coord in coordinates]
    if len(coord_tuples) < 2:
        raise ValueError("At least two coordinates are required to create a LineString.")

    return LineString(coord_tuples)
