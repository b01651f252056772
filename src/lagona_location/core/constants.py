"""
Application-wide constants for LAGONA location handling.

This module defines default values and constants used throughout the application.
Values that can be overridden per deployment are exposed through Config.
"""

# Earth model
EARTH_RADIUS_KM = 6371.0  # mean radius used by the Haversine formula

# Location defaults
DEFAULT_ACCURACY_METERS = 10.0
DEFAULT_TERRITORY_RADIUS_KM = 15.0
MAX_TERRITORY_RADIUS_KM = 50.0

# Accuracy tiers (meters)
HIGH_ACCURACY_THRESHOLD_METERS = 10.0
MEDIUM_ACCURACY_THRESHOLD_METERS = 50.0

# Coordinate ranges (degrees)
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Simplified Plus Code grammar
# 8 characters, "+", then 2-3 characters from the same alphabet
PLUS_CODE_ALPHABET = "23456789CFGHJMPQRVWX"
PLUS_CODE_PATTERN = (
    f"[{PLUS_CODE_ALPHABET}]{{8}}\\+[{PLUS_CODE_ALPHABET}]{{2,3}}"
)

# Territory naming
TERRITORY_NAME_FALLBACK = "Territory"
TERRITORY_NAME_SEPARATOR = ", "

