"""
Geometry helpers for ref locations.
"""
import math
from typing import NamedTuple

EARTH_RADIUS_MILES = 3958.8


class Coordinates(NamedTuple):
    lat: float
    lng: float


def _round_half_up(value: float, places: int = 2) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def blur_location(lat: float, lng: float) -> Coordinates:
    """Blur lat/lng to ~0.7 mile / zip-code precision."""
    return Coordinates(lat=_round_half_up(lat), lng=_round_half_up(lng))


def haversine_distance_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in miles between two lat/lng points."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Rounding can push a just past 1 for near-antipodal points
    if a > 1.0:
        a = 1.0
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def is_within_radius(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    radius_miles: float,
) -> bool:
    """True when the two points are at most `radius_miles` apart."""
    return haversine_distance_miles(lat1, lng1, lat2, lng2) <= radius_miles
