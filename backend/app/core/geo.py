import math

from app.core.constants import EARTH_RADIUS_M


def haversine(lat1, lon1, lat2, lon2):
    """Return great-circle distance in meters between two WGS84 points.

    Uses the standard haversine formula; sufficient for per-point distances
    over a typical GPS activity track.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def path_length_m(points) -> float:
    """Sum of consecutive point-to-point distances over (lat, lon) pairs.

    No smoothing: GPS jitter and backtracking add to the total.
    """
    total_m = 0.0
    prev = None
    for lat, lon in points:
        if prev is not None:
            total_m += haversine(prev[0], prev[1], lat, lon)
        prev = (lat, lon)
    return total_m
