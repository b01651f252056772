"""
Location document extraction.

Reads individual fields from the raw ``location`` JSON stored on hub rows.
Every getter returns None when the value is not a location document.
"""

from typing import Any, Dict, Optional

from ..models.location import is_location_document


def get_validation_status(location: Any) -> Optional[str]:
    if not is_location_document(location):
        return None
    return location.get("validation_status") or None


def get_within_bounds(location: Any) -> Optional[bool]:
    if not is_location_document(location):
        return None
    territory = location.get("territory") or {}
    return territory.get("is_within_bounds")


def get_accuracy(location: Any) -> Optional[float]:
    if not is_location_document(location):
        return None
    return location.get("accuracy_meters") or None


def get_source(location: Any) -> Optional[str]:
    if not is_location_document(location):
        return None
    return location.get("source") or None


def get_coordinates(location: Any) -> Optional[Dict[str, float]]:
    """Coordinates as a {'lat', 'lng'} mapping."""
    if not is_location_document(location):
        return None
    coordinates = location["coordinates"]
    return {"lat": coordinates["lat"], "lng": coordinates["lng"]}


def get_plus_code(location: Any) -> Optional[str]:
    if not is_location_document(location):
        return None
    return location.get("plus_code") or None


def get_formatted_address(location: Any) -> Optional[str]:
    if not is_location_document(location):
        return None
    return location.get("display") or None


def get_distance_from_center(location: Any) -> Optional[float]:
    if not is_location_document(location):
        return None
    territory = location.get("territory") or {}
    return territory.get("distance_from_center")


def get_selected_at(location: Any) -> Optional[str]:
    if not is_location_document(location):
        return None
    territory = location.get("territory") or {}
    return territory.get("selected_at") or None


def get_administrative(location: Any) -> Optional[Dict[str, Any]]:
    if not is_location_document(location):
        return None
    return location.get("administrative") or None


def extract_legacy_location_data(hub: Dict[str, Any]) -> Dict[str, Any]:
    """
    Flatten a hub row's location document into legacy column names.

    Rows written before the location column existed keep coordinates,
    plus_code and formatted_address as top-level columns. Those are used
    when the document does not provide the value.

    Args:
        hub: Business hub row

    Returns:
        Dictionary of flattened location fields
    """
    location = hub.get("location")

    result = {
        "location_validation_status": get_validation_status(location),
        "is_within_territory_bounds": get_within_bounds(location),
        "location_accuracy_meters": get_accuracy(location),
        "location_source": get_source(location),
        "coordinates": get_coordinates(location),
        "plus_code": get_plus_code(location),
        "formatted_address": get_formatted_address(location),
        "distance_from_center": get_distance_from_center(location),
        "location_selected_at": get_selected_at(location),
    }

    for key in ("coordinates", "plus_code", "formatted_address"):
        if result[key] is None and hub.get(key):
            result[key] = hub[key]

    return result
