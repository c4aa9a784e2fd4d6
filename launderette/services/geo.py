"""Great-circle distance helpers."""

from math import asin, cos, radians, sin, sqrt

EARTH_RADIUS_MILES = 3959.0
EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lng1: float, lat2: float, lng2: float, radius: float) -> float:
    """Haversine distance between two points given in degrees.

    No validation is done: NaN or out-of-range input simply propagates.
    """
    phi1, phi2 = radians(lat1), radians(lat2)
    dphi = radians(lat2 - lat1)
    dlambda = radians(lng2 - lng1)

    a = sin(dphi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(dlambda / 2) ** 2
    if a > 1.0:  # rounding near antipodes; NaN passes through
        a = 1.0
    return radius * 2 * asin(sqrt(a))


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    return haversine(lat1, lng1, lat2, lng2, EARTH_RADIUS_MILES)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    return haversine(lat1, lng1, lat2, lng2, EARTH_RADIUS_KM)
