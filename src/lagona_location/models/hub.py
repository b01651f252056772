"""
Business hub data models.

Contains the subset of a business hub row used for location handling.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .location import LocationRecord, TerritoryBounds


@dataclass
class BusinessHub:
    """Business hub with its consolidated location."""

    id: str
    name: str
    municipality: Optional[str] = None
    province: Optional[str] = None
    bhcode: Optional[str] = None
    territory_name: Optional[str] = None
    status: Optional[str] = None
    location: Optional[LocationRecord] = None
    territory_boundaries: Optional[TerritoryBounds] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "BusinessHub":
        """Build from a ``business_hubs`` row returned by the store."""
        users = row.get("users") or {}
        return cls(
            id=str(row.get("id")),
            name=row.get("name") or "",
            municipality=row.get("municipality"),
            province=row.get("province"),
            bhcode=row.get("bhcode"),
            territory_name=row.get("territory_name"),
            status=row.get("status") or (users.get("status") if isinstance(users, dict) else None),
            location=LocationRecord.from_dict(row.get("location")),
            territory_boundaries=TerritoryBounds.from_dict(row.get("territory_boundaries")),
        )
