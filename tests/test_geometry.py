import math

import pytest
from shapely.geometry import LineString

from spherogeo.geometry import Coordinate, coordinates_to_linestring


def test_coordinate_fields():
    coord = Coordinate(latitude=52.205, longitude=0.119)
    assert coord.latitude == 52.205
    assert coord.longitude == 0.119
    assert coord == Coordinate(52.205, 0.119)


def test_coordinate_is_immutable():
    coord = Coordinate(10.0, 20.0)
    with pytest.raises(AttributeError):
        coord.latitude = 11.0  # type: ignore[misc]


def test_coordinate_accepts_out_of_range_values():
    # No validation at construction
    coord = Coordinate(latitude=123.0, longitude=-400.0)
    assert coord.latitude == 123.0
    assert coord.longitude == -400.0


def test_coordinate_to_radians():
    lat, lon = Coordinate(90.0, -180.0).to_radians()
    assert lat == pytest.approx(math.pi / 2)
    assert lon == pytest.approx(-math.pi)


def test_coordinate_str():
    assert str(Coordinate(1.5, -2.25)) == "(1.500000, -2.250000)"


def test_coordinates_to_linestring_uses_lon_lat_order():
    coords = [Coordinate(10.0, 20.0), Coordinate(11.0, 21.0), Coordinate(12.0, 22.0)]
    line = coordinates_to_linestring(coords)

    assert isinstance(line, LineString)
    assert list(line.coords) == [(20.0, 10.0), (21.0, 11.0), (22.0, 12.0)]


def test_coordinates_to_linestring_accepts_generators():
    line = coordinates_to_linestring(Coordinate(0.0, float(i)) for i in range(3))
    assert len(line.coords) == 3


@pytest.mark.parametrize("coords", [[], [Coordinate(0.0, 0.0)]])
def test_coordinates_to_linestring_requires_two_points(coords):
    with pytest.raises(ValueError):
        coordinates_to_linestring(coords)
