"""
Business hub operations for the data store REST API.

Handles reading hub locations and writing consolidated location records.
"""

import logging
from typing import List, Dict, Any, Optional

from ..models.hub import BusinessHub
from ..models.location import LocationRecord, TerritoryBounds

HUB_LOCATION_COLUMNS = (
    "id,name,bhcode,municipality,province,territory_name,status,"
    "location,territory_boundaries,coordinates,plus_code,formatted_address"
)


class BusinessHubsAPI:
    """Mixin for business hub operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def patch(self, endpoint: str, data: Dict[str, Any], params: Any = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def list_business_hub_rows(
        self,
        select: str = HUB_LOCATION_COLUMNS,
        status: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get raw business hub rows, newest first.

        Args:
            select: Columns to select
            status: Only hubs with this status

        Returns:
            List of row dictionaries
        """
        self.logger.info("Fetching business hubs" + (f" with status {status}" if status else ""))

        params: Dict[str, Any] = {"select": select, "order": "created_at.desc"}
        if status:
            params["status"] = f"eq.{status}"

        result = self.get("/business_hubs", params=params)
        if isinstance(result, list):
            return result
        return []

    def list_business_hubs(self, status: Optional[str] = None) -> List[BusinessHub]:
        """Get business hubs with their parsed locations."""
        return [BusinessHub.from_row(row) for row in self.list_business_hub_rows(status=status)]

    def get_business_hub(self, hub_id: str) -> Optional[BusinessHub]:
        """
        Get a single business hub.

        Args:
            hub_id: Business hub ID

        Returns:
            BusinessHub or None if no row matches
        """
        self.logger.info(f"Fetching business hub {hub_id}")
        rows = self.get(
            "/business_hubs",
            params={"select": HUB_LOCATION_COLUMNS, "id": f"eq.{hub_id}"}
        )
        if not isinstance(rows, list) or not rows:
            return None
        return BusinessHub.from_row(rows[0])

    def update_hub_location(
        self,
        hub_id: str,
        record: LocationRecord,
        bounds: Optional[TerritoryBounds] = None
    ) -> Optional[BusinessHub]:
        """
        Write a hub's location record and, optionally, its territory bounds.

        Args:
            hub_id: Business hub ID
            record: Location record to store in the 'location' column
            bounds: Territory bounds to store in 'territory_boundaries'

        Returns:
            Updated BusinessHub, or None if no row matched
        """
        data: Dict[str, Any] = {"location": record.to_dict()}
        if bounds is not None:
            data["territory_boundaries"] = bounds.to_dict()

        self.logger.info(f"Updating location of business hub {hub_id}")
        rows = self.patch("/business_hubs", data, params={"id": f"eq.{hub_id}"})
        if not rows:
            self.logger.warning(f"No business hub updated for id {hub_id}")
            return None
        return BusinessHub.from_row(rows[0])
