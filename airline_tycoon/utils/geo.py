"""
Great-circle distance and flight duration math.
"""

import math
from typing import Tuple

EARTH_RADIUS_NM = 3440.065

Point = Tuple[float, float]


def distance_nm(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two coordinates using the haversine formula.

    Args:
        lat1, lng1: First point in degrees
        lat2, lng2: Second point in degrees

    Returns:
        float: Distance in nautical miles (0 for identical points)
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_NM * c


def duration_minutes(distance: float, speed_knots: float) -> int:
    """
    Block time in whole minutes, rounded up.

    Raises:
        ValueError: If ``speed_knots`` is not positive
    """
    if speed_knots <= 0:
        raise ValueError(f"Speed must be positive, got {speed_knots}")
    return math.ceil((distance / speed_knots) * 60)


def interpolate(origin: Point, destination: Point, progress: float) -> Point:
    """Linear (lat, lng) interpolation for display; progress is clamped to [0, 1]."""
    t = max(0.0, min(1.0, progress))
    return (
        origin[0] + (destination[0] - origin[0]) * t,
        origin[1] + (destination[1] - origin[1]) * t,
    )
