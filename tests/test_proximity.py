from math import degrees

import pytest

from tournaments.constants import EARTH_RADIUS_METERS, SEARCH_RADIUS_METERS
from tournaments.models import Coordinate, TournamentRecord
from tournaments.proximity import distance_meters, within_radius


def _at(lat, lon):
    return TournamentRecord("T", "Somewhere", "2024", lat, lon)


def _meters_north(meters):
    """Latitude offset (degrees) for a distance along a meridian."""
    return degrees(meters / EARTH_RADIUS_METERS)


class TestDistance:
    def test_zero_for_same_point(self):
        assert distance_meters(30.0, -97.0, 30.0, -97.0) == 0.0

    def test_new_york_to_los_angeles(self):
        d = distance_meters(40.7128, -74.0060, 34.0522, -118.2437)
        assert d == pytest.approx(3_936_000, rel=0.01)

    def test_symmetric(self):
        a = distance_meters(30.27, -97.74, 32.78, -96.80)
        b = distance_meters(32.78, -96.80, 30.27, -97.74)
        assert a == pytest.approx(b)


class TestWithinRadius:
    def test_radius_is_thirty_miles(self):
        assert SEARCH_RADIUS_METERS == pytest.approx(48_280, abs=1)

    def test_just_inside(self):
        center = Coordinate(30.0, -97.0)
        record = _at(30.0 + _meters_north(48_000), -97.0)
        assert within_radius(record, center)

    def test_just_outside(self):
        center = Coordinate(30.0, -97.0)
        record = _at(30.0 + _meters_north(48_600), -97.0)
        assert not within_radius(record, center)

    def test_boundary_is_inclusive(self):
        center = Coordinate(30.0, -97.0)
        record = _at(30.3, -97.2)
        d = distance_meters(30.3, -97.2, 30.0, -97.0)
        assert within_radius(record, center, radius_meters=d)
        assert not within_radius(record, center, radius_meters=d - 1e-6)

    def test_missing_coordinate_never_inside(self):
        center = Coordinate(30.27, -97.74)
        assert not within_radius(TournamentRecord("T", "Austin", "2024", 30.27, None), center)
        assert not within_radius(TournamentRecord("T", "Austin", "2024", None, -97.74), center)
        assert not within_radius(TournamentRecord("T", "Austin", "2024"), center)

    def test_austin_and_round_rock(self):
        assert within_radius(_at(30.5083, -97.6789), Coordinate(30.2672, -97.7431))

    def test_austin_and_dallas(self):
        assert not within_radius(_at(32.78, -96.80), Coordinate(30.2672, -97.7431))


class TestRecordCoordinate:
    def test_present(self):
        assert _at(30.27, -97.74).coordinate == Coordinate(30.27, -97.74)

    def test_missing_either_part(self):
        assert TournamentRecord("T", "X", "2024", 30.27, None).coordinate is None
        assert TournamentRecord("T", "X", "2024", None, -97.74).coordinate is None
