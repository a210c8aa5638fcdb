import pytest
from hypothesis import given, strategies as st, assume

from spherogeo.geometry import Coordinate
from spherogeo.spherical import (
    haversine_distance,
    initial_bearing,
    intermediate_point,
    midpoint,
    destination_point,
    sample_path,
)
from spherogeo.rhumb import rhumb_bearing, rhumb_destination, rhumb_distance
from spherogeo.intersection import IntersectionKind, intersection

# Strategy for valid coordinates away from the poles
valid_lat = st.floats(-85.0, 85.0)
valid_lon = st.floats(-180.0, 180.0)
valid_coordinate = st.builds(Coordinate, latitude=valid_lat, longitude=valid_lon)
valid_bearing = st.floats(0.0, 360.0, exclude_max=True)


def longitude_difference(lon1, lon2):
    """Smallest angle between two longitudes, in degrees."""
    return abs((lon1 - lon2 + 180) % 360 - 180)


class TestDistanceProperties:

    @given(valid_coordinate, valid_coordinate)
    def test_distance_is_symmetric(self, a, b):
        """Distance from A to B equals distance from B to A."""
        assert abs(haversine_distance(a, b) - haversine_distance(b, a)) < 1e-9

    @given(valid_coordinate)
    def test_distance_to_self_is_zero(self, a):
        """Distance from a point to itself is always zero."""
        assert haversine_distance(a, a) == 0


class TestBearingProperties:

    @given(valid_coordinate, valid_coordinate)
    def test_bearing_range(self, a, b):
        """Initial bearing is always in range [0, 360)."""
        assert 0 <= initial_bearing(a, b) < 360

    @given(valid_coordinate, valid_coordinate)
    def test_rhumb_bearing_range(self, a, b):
        """Rhumb bearing keeps the signed atan2 range."""
        assert -180 - 1e-9 <= rhumb_bearing(a, b) <= 180 + 1e-9


class TestPathProperties:

    @given(valid_coordinate, valid_coordinate)
    def test_interpolation_endpoints(self, a, b):
        """Fraction 0 gives the start and fraction 1 gives the end."""
        distance = haversine_distance(a, b)
        assume(1e-3 < distance < 19000)

        start = intermediate_point(a, b, 0.0)
        end = intermediate_point(a, b, 1.0)

        assert start.latitude == pytest.approx(a.latitude, abs=1e-6)
        assert longitude_difference(start.longitude, a.longitude) < 1e-6
        assert end.latitude == pytest.approx(b.latitude, abs=1e-6)
        assert longitude_difference(end.longitude, b.longitude) < 1e-6

    @given(valid_coordinate, valid_coordinate)
    def test_midpoint_is_equidistant(self, a, b):
        """The midpoint is the same distance from both ends."""
        assume(haversine_distance(a, b) < 19000)

        mid = midpoint(a, b)
        assert haversine_distance(a, mid) == pytest.approx(haversine_distance(mid, b), abs=1e-6)

    @given(valid_coordinate, valid_coordinate, st.integers(1, 20))
    def test_sample_path_length(self, a, b, n):
        """Sampling returns exactly n points starting at the start."""
        assume(1e-3 < haversine_distance(a, b) < 19000)

        samples = sample_path(a, b, n)
        assert len(samples) == n
        assert haversine_distance(samples[0], a) < 1e-6

    @given(valid_coordinate, valid_coordinate)
    def test_longitudes_are_normalized(self, a, b):
        """Every coordinate produced lies in (-180, 180]."""
        assume(1e-3 < haversine_distance(a, b) < 19000)

        results = [
            midpoint(a, b),
            intermediate_point(a, b, 0.3),
            destination_point(a, 5000, initial_bearing(a, b)),
            rhumb_destination(a, 500, 90),
        ]
        for result in results:
            assert -180 < result.longitude <= 180


class TestRoundTripProperties:

    @given(valid_coordinate, valid_coordinate)
    def test_destination_round_trip(self, a, b):
        """Travelling distance(A, B) on bearing(A, B) arrives at B."""
        distance = haversine_distance(a, b)
        assume(1e-3 < distance < 15000)

        result = destination_point(a, distance, initial_bearing(a, b))
        assert haversine_distance(result, b) < 1e-6

    @given(valid_coordinate, valid_coordinate)
    def test_rhumb_destination_round_trip(self, a, b):
        """Following the rhumb bearing for the rhumb distance arrives at B."""
        assume(abs(a.latitude - b.latitude) > 1e-3)

        result = rhumb_destination(a, rhumb_distance(a, b), rhumb_bearing(a, b))
        assert haversine_distance(result, b) < 1e-3


class TestIntersectionProperties:

    @given(valid_coordinate, valid_bearing, valid_coordinate, valid_bearing)
    def test_unique_results_carry_coordinates(self, a, bearing1, b, bearing2):
        """Only UNIQUE outcomes carry a coordinate."""
        result = intersection(a, bearing1, b, bearing2)

        if result.kind == IntersectionKind.UNIQUE:
            assert result.coordinate is not None
        else:
            assert result.coordinate is None
