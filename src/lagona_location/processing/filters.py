"""
Hub location filters.

Predicates used by hub listings to narrow collections by location accuracy,
validation status, Plus Code presence, and radius membership.
"""

import logging
import math
from typing import Iterable, List, Optional, Union

from ..algorithms import GeoDistanceCalculator, PlusCodeValidator
from ..core import constants
from ..models.hub import BusinessHub
from ..models.location import LocationRecord, ValidationStatus

ACCURACY_HIGH = "high"
ACCURACY_MEDIUM = "medium"
ACCURACY_LOW = "low"
ACCURACY_UNKNOWN = "unknown"


def accuracy_tier(
    accuracy_meters: Optional[float],
    high_threshold_m: float = constants.HIGH_ACCURACY_THRESHOLD_METERS,
    medium_threshold_m: float = constants.MEDIUM_ACCURACY_THRESHOLD_METERS
) -> str:
    """
    Classify a location accuracy.

    Args:
        accuracy_meters: Accuracy radius in meters
        high_threshold_m: Upper bound (inclusive) of the 'high' tier
        medium_threshold_m: Upper bound (inclusive) of the 'medium' tier

    Returns:
        'high', 'medium', 'low', or 'unknown' for missing/non-positive values
    """
    if accuracy_meters is None or not math.isfinite(accuracy_meters) or accuracy_meters <= 0:
        return ACCURACY_UNKNOWN
    if accuracy_meters <= high_threshold_m:
        return ACCURACY_HIGH
    if accuracy_meters <= medium_threshold_m:
        return ACCURACY_MEDIUM
    return ACCURACY_LOW


def has_valid_plus_code(record: Optional[LocationRecord]) -> bool:
    """True if the record carries a Plus Code matching the grammar."""
    return record is not None and PlusCodeValidator.is_valid_plus_code(record.plus_code)


class HubLocationFilter:
    """Filter business hubs by properties of their location."""

    def __init__(
        self,
        high_accuracy_threshold_m: float = constants.HIGH_ACCURACY_THRESHOLD_METERS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize hub location filter.

        Args:
            high_accuracy_threshold_m: Upper bound of the 'high' accuracy tier
            logger: Logger instance
        """
        self.high_accuracy_threshold_m = high_accuracy_threshold_m
        self.logger = logger or logging.getLogger(__name__)

    def by_accuracy_tier(self, hubs: Iterable[BusinessHub], tier: str) -> List[BusinessHub]:
        """Hubs whose location accuracy falls in the given tier."""
        return [
            hub for hub in hubs
            if accuracy_tier(
                hub.location.accuracy_meters if hub.location else None,
                high_threshold_m=self.high_accuracy_threshold_m,
            ) == tier
        ]

    def by_validation_status(
        self,
        hubs: Iterable[BusinessHub],
        status: Union[ValidationStatus, str]
    ) -> List[BusinessHub]:
        """Hubs whose location has the given validation status."""
        wanted = ValidationStatus(status)
        return [
            hub for hub in hubs
            if hub.location is not None and hub.location.validation_status == wanted
        ]

    def by_plus_code(self, hubs: Iterable[BusinessHub], present: bool = True) -> List[BusinessHub]:
        """
        Hubs with (or without) a valid Plus Code.

        Codes that fail the grammar count as absent.
        """
        return [hub for hub in hubs if has_valid_plus_code(hub.location) == present]

    def within_radius(
        self,
        hubs: Iterable[BusinessHub],
        lat: float,
        lng: float,
        radius_km: float
    ) -> List[BusinessHub]:
        """
        Hubs located within radius_km of a point (inclusive).

        Hubs without a location or with invalid coordinates are skipped.
        A non-positive radius matches nothing.
        """
        if not radius_km > 0:
            return []

        matches = []
        for hub in hubs:
            if hub.location is None or not hub.location.coordinates.is_valid():
                self.logger.debug(f"Skipping hub {hub.id}: no usable coordinates")
                continue
            distance = GeoDistanceCalculator.distance_km(
                lat, lng, hub.location.coordinates.lat, hub.location.coordinates.lng
            )
            if distance <= radius_km:
                matches.append(hub)
        return matches

    def apply(
        self,
        hubs: Iterable[BusinessHub],
        accuracy: Optional[str] = None,
        validation_status: Optional[Union[ValidationStatus, str]] = None,
        plus_code: Optional[bool] = None,
        near: Optional[tuple] = None
    ) -> List[BusinessHub]:
        """
        Apply every given criterion in turn.

        Args:
            hubs: Hubs to filter
            accuracy: Accuracy tier name
            validation_status: Validation status
            plus_code: True for hubs with a valid Plus Code, False for without
            near: (lat, lng, radius_km) for radius membership

        Returns:
            Hubs matching all criteria, in input order
        """
        result = list(hubs)
        total = len(result)

        if accuracy is not None:
            result = self.by_accuracy_tier(result, accuracy)
        if validation_status is not None:
            result = self.by_validation_status(result, validation_status)
        if plus_code is not None:
            result = self.by_plus_code(result, present=plus_code)
        if near is not None:
            lat, lng, radius_km = near
            result = self.within_radius(result, lat, lng, radius_km)

        self.logger.info(f"Filtered hubs: {len(result)} of {total} match")
        return result
