"""
Geolocation algorithms for LAGONA hub locations.

Provides distance, territory membership, territory naming, and Plus Code helpers.
"""

from .geodistance import GeoDistanceCalculator, distance_km
from .plus_code import PlusCodeValidator, is_valid_plus_code, generate_plus_code
from .territory import (
    TerritoryBoundsChecker,
    TerritoryNameGenerator,
    is_within_bounds,
    generate_territory_name,
)

__all__ = [
    "GeoDistanceCalculator",
    "PlusCodeValidator",
    "TerritoryBoundsChecker",
    "TerritoryNameGenerator",
    "distance_km",
    "is_valid_plus_code",
    "generate_plus_code",
    "is_within_bounds",
    "generate_territory_name",
]
