"""
Data models for the LAGONA location utilities.

Contains DTOs for location records, territories, and business hubs.
"""

from .location import (
    AdministrativeArea,
    Coordinates,
    LocationRecord,
    LocationSource,
    Territory,
    TerritoryBounds,
    ValidationStatus,
    is_location_document,
    parse_enum,
)
from .hub import BusinessHub

__all__ = [
    "AdministrativeArea",
    "Coordinates",
    "LocationRecord",
    "LocationSource",
    "Territory",
    "TerritoryBounds",
    "ValidationStatus",
    "is_location_document",
    "parse_enum",
    "BusinessHub",
]
