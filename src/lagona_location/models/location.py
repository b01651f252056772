"""
Location data models.

Contains DTOs for the canonical location record stored against business hubs,
its administrative hierarchy and territory, and the hub's territory bounds.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, List, Tuple, Type, TypeVar

from ..core import constants
from ..core.date_utils import DateUtils

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class LocationSource(str, Enum):
    """Where a location's coordinates came from."""

    USER_SELECTION = "user_selection"
    GEOCODED = "geocoded"
    GPS = "gps"


class ValidationStatus(str, Enum):
    """Admin review state of a location."""

    PENDING = "pending"
    VALID = "valid"
    INVALID = "invalid"
    NEEDS_REVIEW = "needs_review"


def parse_enum(enum_cls: Type[E], value: Any, default: E) -> E:
    if isinstance(value, enum_cls):
        return value
    if value is None or value == "":
        return default
    try:
        return enum_cls(value)
    except (TypeError, ValueError):
        logger.warning(
            f"Unknown {enum_cls.__name__} value {value!r}, using {default.value!r}"
        )
        return default


def _optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def is_location_document(data: Any) -> bool:
    """
    Check whether a stored JSON value looks like a location document.

    A location document is a mapping with a ``coordinates`` mapping that
    carries both ``lat`` and ``lng`` keys.
    """
    if not isinstance(data, dict):
        return False
    coordinates = data.get("coordinates")
    return isinstance(coordinates, dict) and "lat" in coordinates and "lng" in coordinates


@dataclass
class Coordinates:
    """Latitude/longitude pair in degrees."""

    lat: float
    lng: float

    def is_valid(self) -> bool:
        """True if both values are finite and inside the WGS84 ranges."""
        try:
            lat = float(self.lat)
            lng = float(self.lng)
        except (TypeError, ValueError):
            return False
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return False
        return (
            constants.MIN_LATITUDE <= lat <= constants.MAX_LATITUDE
            and constants.MIN_LONGITUDE <= lng <= constants.MAX_LONGITUDE
        )

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass
class AdministrativeArea:
    """Philippine administrative hierarchy of a location. All fields optional."""

    region: Optional[str] = None
    province: Optional[str] = None
    municipality: Optional[str] = None
    barangay: Optional[str] = None
    district: Optional[str] = None
    zone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "AdministrativeArea":
        """Build from a mapping, ignoring unknown keys and non-string values."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return cls()
        return cls(
            region=_optional_str(data.get("region")),
            province=_optional_str(data.get("province")),
            municipality=_optional_str(data.get("municipality")),
            barangay=_optional_str(data.get("barangay")),
            district=_optional_str(data.get("district")),
            zone=_optional_str(data.get("zone")),
        )

    def to_dict(self) -> Dict[str, str]:
        """Mapping of the fields that are set."""
        values = {
            "region": self.region,
            "province": self.province,
            "municipality": self.municipality,
            "barangay": self.barangay,
            "district": self.district,
            "zone": self.zone,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass
class Territory:
    """Service territory attached to a location."""

    radius_km: Optional[float] = None
    is_within_bounds: Optional[bool] = None
    distance_from_center: Optional[float] = None
    boundaries: Optional[Dict[str, Any]] = None
    selected_at: Optional[datetime] = None

    @property
    def has_bounds(self) -> bool:
        """False when no positive radius is configured."""
        return self.radius_km is not None and self.radius_km > 0

    @classmethod
    def from_dict(cls, data: Any) -> "Territory":
        if not isinstance(data, dict):
            return cls()
        within = data.get("is_within_bounds")
        boundaries = data.get("boundaries")
        return cls(
            radius_km=_optional_float(data.get("radius_km")),
            is_within_bounds=within if isinstance(within, bool) else None,
            distance_from_center=_optional_float(data.get("distance_from_center")),
            boundaries=boundaries if isinstance(boundaries, dict) else None,
            selected_at=DateUtils.parse_iso(data.get("selected_at")),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        if self.radius_km is not None:
            result["radius_km"] = self.radius_km
        if self.is_within_bounds is not None:
            result["is_within_bounds"] = self.is_within_bounds
        if self.distance_from_center is not None:
            result["distance_from_center"] = self.distance_from_center
        if self.boundaries is not None:
            result["boundaries"] = self.boundaries
        if self.selected_at is not None:
            result["selected_at"] = DateUtils.to_iso(self.selected_at)
        return result


@dataclass
class LocationRecord:
    """
    Canonical location of a business hub.

    Mirrors the JSON document persisted in the hub's ``location`` column.
    """

    display: str
    coordinates: Coordinates
    plus_code: Optional[str] = None
    accuracy_meters: float = constants.DEFAULT_ACCURACY_METERS
    source: LocationSource = LocationSource.GEOCODED
    validation_status: ValidationStatus = ValidationStatus.PENDING
    administrative: AdministrativeArea = field(default_factory=AdministrativeArea)
    territory: Territory = field(default_factory=Territory)

    def validate(
        self,
        max_radius_km: float = constants.MAX_TERRITORY_RADIUS_KM
    ) -> Tuple[bool, List[str]]:
        """
        Validate the record against its invariants.

        Args:
            max_radius_km: Largest territory radius accepted

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if not self.coordinates.is_valid():
            errors.append(
                f"Invalid coordinates: ({self.coordinates.lat}, {self.coordinates.lng})"
            )
            if self.validation_status == ValidationStatus.VALID:
                errors.append("Location marked valid without valid coordinates")

        accuracy = _optional_float(self.accuracy_meters)
        if accuracy is None or not math.isfinite(accuracy) or accuracy <= 0:
            errors.append(f"Invalid accuracy_meters: {self.accuracy_meters} (must be > 0)")

        radius = self.territory.radius_km
        if radius is not None:
            if radius < 0:
                errors.append(f"Invalid radius_km: {radius} (must be >= 0; 0 means no territory)")
            elif radius > max_radius_km:
                errors.append(
                    f"radius_km {radius} exceeds maximum of {max_radius_km} km"
                )

        return len(errors) == 0, errors

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored JSON document shape."""
        result: Dict[str, Any] = {
            "display": self.display,
            "coordinates": self.coordinates.to_dict(),
            "accuracy_meters": self.accuracy_meters,
            "source": self.source.value,
            "validation_status": self.validation_status.value,
            "administrative": self.administrative.to_dict(),
            "territory": self.territory.to_dict(),
        }
        if self.plus_code is not None:
            result["plus_code"] = self.plus_code
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Optional["LocationRecord"]:
        """
        Parse a stored JSON document.

        Args:
            data: Value of a hub's ``location`` column

        Returns:
            LocationRecord, or None if the value is not a location document
        """
        if not is_location_document(data):
            return None

        coordinates = data["coordinates"]
        lat = _optional_float(coordinates.get("lat"))
        lng = _optional_float(coordinates.get("lng"))
        accuracy = _optional_float(data.get("accuracy_meters"))

        return cls(
            display=_optional_str(data.get("display")) or "",
            coordinates=Coordinates(
                lat=lat if lat is not None else math.nan,
                lng=lng if lng is not None else math.nan,
            ),
            plus_code=_optional_str(data.get("plus_code")) or None,
            accuracy_meters=accuracy if accuracy else constants.DEFAULT_ACCURACY_METERS,
            source=parse_enum(LocationSource, data.get("source"), LocationSource.GEOCODED),
            validation_status=parse_enum(
                ValidationStatus, data.get("validation_status"), ValidationStatus.PENDING
            ),
            administrative=AdministrativeArea.from_dict(data.get("administrative")),
            territory=Territory.from_dict(data.get("territory")),
        )


@dataclass
class TerritoryBounds:
    """Configured service area of a hub, stored beside its location."""

    center_lat: float
    center_lng: float
    radius_km: float
    polygon_points: Optional[List[Coordinates]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "centerLat": self.center_lat,
            "centerLng": self.center_lng,
            "radiusKm": self.radius_km,
        }
        if self.polygon_points:
            result["polygonPoints"] = [point.to_dict() for point in self.polygon_points]
        return result

    @classmethod
    def from_dict(cls, data: Any) -> Optional["TerritoryBounds"]:
        """Parse ``territory_boundaries``; None when center or radius is missing."""
        if not isinstance(data, dict):
            return None

        center_lat = _optional_float(data.get("centerLat"))
        center_lng = _optional_float(data.get("centerLng"))
        radius_km = _optional_float(data.get("radiusKm"))
        if center_lat is None or center_lng is None or radius_km is None:
            return None

        points = None
        raw_points = data.get("polygonPoints")
        if isinstance(raw_points, list):
            points = []
            for raw in raw_points:
                if not isinstance(raw, dict):
                    continue
                lat = _optional_float(raw.get("lat"))
                lng = _optional_float(raw.get("lng"))
                if lat is None or lng is None:
                    logger.warning(f"Skipping polygon point without numeric lat/lng: {raw!r}")
                    continue
                points.append(Coordinates(lat=lat, lng=lng))

        return cls(
            center_lat=center_lat,
            center_lng=center_lng,
            radius_km=radius_km,
            polygon_points=points,
        )
