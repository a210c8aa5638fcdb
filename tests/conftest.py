import pytest

from spherogeo.geometry import Coordinate


@pytest.fixture
def cambridge():
    return Coordinate(latitude=52.205, longitude=0.119)


@pytest.fixture
def paris():
    return Coordinate(latitude=48.857, longitude=2.351)
