"""
Great circle distance on a spherical Earth.

All angles are in radians and all distances in kilometers.
"""

import math

EARTH_RADIUS_KM = 6371


def haversine_km(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """
    Great circle distance between two points using the Haversine formula.

    Args:
        lat_a: Latitude of the first point (radians)
        lon_a: Longitude of the first point (radians)
        lat_b: Latitude of the second point (radians)
        lon_b: Longitude of the second point (radians)

    Returns:
        Distance in kilometers
    """
    a = (
        math.sin(0.5 * (lat_a - lat_b)) ** 2
        + math.sin(0.5 * (lon_a - lon_b)) ** 2 * math.cos(lat_a) * math.cos(lat_b)
    )
    # Rounding can push a a hair above 1 for antipodal points
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(min(a, 1.0)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
