"""
Great-circle distance calculation module.

Implements the Haversine formula on a spherical earth of radius 6371 km.

The formula:
    a = sin²(Δφ/2) + cos(φ1)·cos(φ2)·sin²(Δλ/2)
    c = 2·atan2(√a, √(1−a))
    d = R·c

Inputs are not range-checked: callers validate coordinates first. Non-finite
inputs yield NaN rather than raising.
"""

import math

from ..core import constants


class GeoDistanceCalculator:
    """Haversine distance between two coordinate pairs."""

    @staticmethod
    def _to_radians(degrees: float) -> float:
        return degrees * (math.pi / 180)

    @staticmethod
    def distance_km(
        lat1: float,
        lng1: float,
        lat2: float,
        lng2: float,
        earth_radius_km: float = constants.EARTH_RADIUS_KM
    ) -> float:
        """
        Calculate great-circle distance between two points.

        Args:
            lat1: Latitude of the first point (degrees)
            lng1: Longitude of the first point (degrees)
            lat2: Latitude of the second point (degrees)
            lng2: Longitude of the second point (degrees)
            earth_radius_km: Sphere radius (km)

        Returns:
            Distance in km (>= 0), or NaN if any input is not finite
        """
        if not all(math.isfinite(v) for v in (lat1, lng1, lat2, lng2)):
            return math.nan

        to_rad = GeoDistanceCalculator._to_radians
        d_lat = to_rad(lat2 - lat1)
        d_lng = to_rad(lng2 - lng1)

        a = (
            math.sin(d_lat / 2) ** 2
            + math.cos(to_rad(lat1)) * math.cos(to_rad(lat2)) * math.sin(d_lng / 2) ** 2
        )
        # Rounding can push a just outside [0, 1]
        a = min(1.0, max(0.0, a))

        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return earth_radius_km * c


def distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine distance in km between (lat1, lng1) and (lat2, lng2)."""
    return GeoDistanceCalculator.distance_km(lat1, lng1, lat2, lng2)
