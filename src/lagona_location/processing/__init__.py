"""
Location processing module.

Provides consolidation, stored-document extraction, and filtering of hub locations.
"""

from .consolidator import LocationConsolidator, consolidate
from .extractor import extract_legacy_location_data
from .filters import HubLocationFilter, accuracy_tier, has_valid_plus_code
from . import extractor

__all__ = [
    "LocationConsolidator",
    "HubLocationFilter",
    "consolidate",
    "extract_legacy_location_data",
    "accuracy_tier",
    "has_valid_plus_code",
    "extractor",
]
