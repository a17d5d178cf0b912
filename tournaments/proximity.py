"""
Proximity Filter: great-circle distance and the radius inclusion test.

Distances use the haversine formula on a spherical Earth. At 30 miles the
difference from an ellipsoidal model is a few meters, well below the
precision of a geocoded city centre.
"""

from math import asin, cos, radians, sin, sqrt

from tournaments.constants import EARTH_RADIUS_METERS, SEARCH_RADIUS_METERS
from tournaments.models import Coordinate, TournamentRecord


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points, in meters."""
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push `a` a hair above 1 for antipodal points.
    c = 2 * asin(sqrt(min(1.0, a)))

    return EARTH_RADIUS_METERS * c


def within_radius(
    record: TournamentRecord,
    center: Coordinate,
    radius_meters: float = SEARCH_RADIUS_METERS,
) -> bool:
    """
    Decide whether a tournament lies inside the search circle.

    Args:
        record:        The tournament to test.
        center:        Centre of the search (the geocoded location).
        radius_meters: Circle radius. The boundary itself is inside.

    Returns:
        False for records without both coordinates; otherwise whether the
        distance to `center` is at most `radius_meters`.
    """
    point = record.coordinate
    if point is None:
        return False
    distance = distance_meters(
        point.latitude, point.longitude, center.latitude, center.longitude
    )
    return distance <= radius_meters
