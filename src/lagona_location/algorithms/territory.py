"""
Territory membership and naming.

A territory is the service radius around a hub's coordinates. A missing or
non-positive radius means no territory is configured, and no point is inside it.
"""

from typing import Any, Dict, Optional, Union

from ..core import constants
from ..models.location import AdministrativeArea, LocationRecord
from .geodistance import GeoDistanceCalculator


class TerritoryBoundsChecker:
    """Radius membership checks against a location record."""

    @staticmethod
    def is_within_radius(
        point_lat: float,
        point_lng: float,
        center_lat: float,
        center_lng: float,
        radius_km: Optional[float]
    ) -> bool:
        """
        Check whether a point lies within radius_km of a center (inclusive).

        Returns False when radius_km is None or <= 0.
        """
        if radius_km is None or not radius_km > 0:
            return False

        distance = GeoDistanceCalculator.distance_km(point_lat, point_lng, center_lat, center_lng)
        return distance <= radius_km

    @staticmethod
    def is_within_bounds(
        point_lat: float,
        point_lng: float,
        record: LocationRecord
    ) -> bool:
        """
        Check whether a point falls inside the record's territory.

        Args:
            point_lat: Latitude of the point (degrees)
            point_lng: Longitude of the point (degrees)
            record: Location record whose coordinates are the territory center

        Returns:
            True if distance to the record's coordinates <= territory radius
        """
        return TerritoryBoundsChecker.is_within_radius(
            point_lat,
            point_lng,
            record.coordinates.lat,
            record.coordinates.lng,
            record.territory.radius_km,
        )


class TerritoryNameGenerator:
    """Human-readable territory labels."""

    # Output order is fixed; existing labels depend on it
    NAME_FIELDS = ("barangay", "district", "municipality")

    @staticmethod
    def generate_territory_name(
        administrative: Union[AdministrativeArea, Dict[str, Any], None]
    ) -> str:
        """
        Join barangay, district and municipality (whichever are set).

        Args:
            administrative: Administrative hierarchy

        Returns:
            Label such as 'Poblacion, Cebu City', or 'Territory' if none are set
        """
        area = AdministrativeArea.from_dict(administrative)
        parts = []
        for name in TerritoryNameGenerator.NAME_FIELDS:
            value = getattr(area, name)
            if value:
                parts.append(value)

        if not parts:
            return constants.TERRITORY_NAME_FALLBACK
        return constants.TERRITORY_NAME_SEPARATOR.join(parts)


def is_within_bounds(point_lat: float, point_lng: float, record: LocationRecord) -> bool:
    return TerritoryBoundsChecker.is_within_bounds(point_lat, point_lng, record)


def generate_territory_name(
    administrative: Union[AdministrativeArea, Dict[str, Any], None]
) -> str:
    return TerritoryNameGenerator.generate_territory_name(administrative)
