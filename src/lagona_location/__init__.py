"""
LAGONA Location & Territory Utilities

This package provides the canonical location model of LAGONA business hubs:
consolidation of geocoded and GPS input, Haversine distance, territory
membership, territory naming, and simplified Plus Codes.
"""

__version__ = "0.1.0"
__author__ = "LAGONA"
__description__ = "Location consolidation and territory utilities for LAGONA business hubs"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "HubLocationAuditApp":
        from .main import HubLocationAuditApp
        return HubLocationAuditApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "HubLocationAuditApp",
]
