"""
Location consolidation module.

Builds canonical LocationRecords from raw map-picker, geocoding, or GPS input.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Union

from ..algorithms import GeoDistanceCalculator, PlusCodeValidator, TerritoryBoundsChecker
from ..core import constants
from ..core.date_utils import DateUtils
from ..models.location import (
    AdministrativeArea,
    Coordinates,
    LocationRecord,
    LocationSource,
    Territory,
    TerritoryBounds,
    ValidationStatus,
    parse_enum,
)


class LocationConsolidator:
    """
    Build and refresh LocationRecords.

    Consolidation is a pure transformation: inputs are never mutated and the
    only non-deterministic field is the selection timestamp.
    """

    def __init__(
        self,
        default_radius_km: float = constants.DEFAULT_TERRITORY_RADIUS_KM,
        default_accuracy_meters: float = constants.DEFAULT_ACCURACY_METERS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize location consolidator.

        Args:
            default_radius_km: Territory radius used when none is supplied
            default_accuracy_meters: Accuracy used when none is supplied
            logger: Logger instance
        """
        self.default_radius_km = default_radius_km
        self.default_accuracy_meters = default_accuracy_meters
        self.logger = logger or logging.getLogger(__name__)

    def consolidate(
        self,
        lat: float,
        lng: float,
        formatted_address: str,
        administrative: Union[AdministrativeArea, Dict[str, Any], None],
        plus_code: Optional[str] = None,
        accuracy_meters: Optional[float] = None,
        territory_radius_km: Optional[float] = None,
        source: Union[LocationSource, str, None] = None,
        validation_status: Union[ValidationStatus, str, None] = None
    ) -> LocationRecord:
        """
        Build a canonical location record.

        A supplied plus_code is kept verbatim; callers validate it separately
        with PlusCodeValidator. Otherwise a placeholder is generated from the
        coordinates and municipality.

        Territory bounds fields start as placeholders (inside, 0 km from
        center) because no reference center is known here. Use
        recompute_territory() once the center is known.

        Args:
            lat: Latitude (degrees)
            lng: Longitude (degrees)
            formatted_address: Human-readable address
            administrative: Administrative hierarchy (dataclass or mapping)
            plus_code: Plus Code to keep as-is
            accuracy_meters: Location accuracy (default 10.0)
            territory_radius_km: Territory radius (default 15.0)
            source: Location source (default 'geocoded')
            validation_status: Validation status (default 'pending')

        Returns:
            Fully populated LocationRecord
        """
        if isinstance(administrative, AdministrativeArea):
            area = replace(administrative)
        else:
            area = AdministrativeArea.from_dict(administrative)

        if plus_code is None:
            plus_code = PlusCodeValidator.generate_plus_code(lat, lng, area.municipality or "")

        record = LocationRecord(
            display=formatted_address,
            coordinates=Coordinates(lat=lat, lng=lng),
            plus_code=plus_code,
            accuracy_meters=(
                accuracy_meters if accuracy_meters is not None else self.default_accuracy_meters
            ),
            source=parse_enum(LocationSource, source, LocationSource.GEOCODED),
            validation_status=parse_enum(
                ValidationStatus, validation_status, ValidationStatus.PENDING
            ),
            administrative=area,
            territory=Territory(
                radius_km=(
                    territory_radius_km
                    if territory_radius_km is not None
                    else self.default_radius_km
                ),
                is_within_bounds=True,
                distance_from_center=0.0,
                selected_at=DateUtils.utc_now(),
            ),
        )

        self.logger.debug(
            f"Consolidated location '{formatted_address}' at ({lat:.6f}, {lng:.6f}), "
            f"plus code {record.plus_code!r}, radius {record.territory.radius_km} km"
        )
        return record

    def from_gps(
        self,
        lat: float,
        lng: float,
        accuracy_meters: Optional[float] = None,
        municipality: Optional[str] = None,
        province: Optional[str] = None
    ) -> LocationRecord:
        """
        Build a record from a device GPS fix.

        Args:
            lat: Latitude (degrees)
            lng: Longitude (degrees)
            accuracy_meters: Reported GPS accuracy
            municipality: Hub municipality
            province: Hub province

        Returns:
            LocationRecord with source 'gps' and status 'pending'
        """
        return self.consolidate(
            lat=lat,
            lng=lng,
            formatted_address=f"GPS Location: {lat:.6f}, {lng:.6f}",
            administrative=AdministrativeArea(municipality=municipality, province=province),
            accuracy_meters=accuracy_meters,
            source=LocationSource.GPS,
            validation_status=ValidationStatus.PENDING,
        )

    def recompute_territory(
        self,
        record: LocationRecord,
        center_lat: float,
        center_lng: float
    ) -> LocationRecord:
        """
        Refresh territory placeholders against a reference center.

        Args:
            record: Location record to refresh (not modified)
            center_lat: Territory center latitude
            center_lng: Territory center longitude

        Returns:
            Copy of the record with distance_from_center and is_within_bounds set
        """
        distance = GeoDistanceCalculator.distance_km(
            center_lat, center_lng, record.coordinates.lat, record.coordinates.lng
        )
        within = TerritoryBoundsChecker.is_within_bounds(center_lat, center_lng, record)

        self.logger.debug(
            f"Location '{record.display}' is {distance:.3f} km from center "
            f"({center_lat:.6f}, {center_lng:.6f}), within bounds: {within}"
        )

        territory = replace(
            record.territory,
            distance_from_center=distance,
            is_within_bounds=within,
        )
        return replace(record, territory=territory)

    def territory_bounds_for(self, record: LocationRecord) -> TerritoryBounds:
        """Territory bounds centered on the record's coordinates."""
        radius = record.territory.radius_km
        return TerritoryBounds(
            center_lat=record.coordinates.lat,
            center_lng=record.coordinates.lng,
            radius_km=radius if radius is not None else self.default_radius_km,
        )


def consolidate(
    lat: float,
    lng: float,
    formatted_address: str,
    administrative: Union[AdministrativeArea, Dict[str, Any], None],
    **kwargs: Any
) -> LocationRecord:
    """Consolidate with the default radius and accuracy."""
    return LocationConsolidator().consolidate(lat, lng, formatted_address, administrative, **kwargs)
