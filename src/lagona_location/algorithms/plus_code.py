"""
Plus Code validation and generation.

This is a simplified local variant of Open Location Code, used to populate
and filter the Plus Code field of hub locations:

- The validator only checks the character set and the 8+2/3 length shape.
  It does not enforce the precision-pair ordering of real Plus Codes.
- The generator produces a deterministic placeholder from the formatted
  coordinates. Its output does not in general satisfy the validator.
"""

import re
from typing import Any

from ..core import constants

_PLUS_CODE_RE = re.compile(constants.PLUS_CODE_PATTERN)


class PlusCodeValidator:
    """Validate and generate simplified Plus Codes."""

    @staticmethod
    def normalize(code: str) -> str:
        """Upper-case and remove all spaces."""
        return code.upper().replace(" ", "")

    @staticmethod
    def is_valid_plus_code(code: Any) -> bool:
        """
        Check a Plus Code against the simplified grammar.

        Args:
            code: Candidate code, e.g. '7Q63HX8C+5V'

        Returns:
            True if the normalized code matches, False otherwise (never raises)
        """
        if not isinstance(code, str) or not code:
            return False
        return _PLUS_CODE_RE.fullmatch(PlusCodeValidator.normalize(code)) is not None

    @staticmethod
    def generate_plus_code(lat: float, lng: float, locality: str) -> str:
        """
        Generate a placeholder Plus Code for a UI field.

        Takes the first 4 characters of the latitude and the first 3 characters
        of the longitude, each formatted to 4 decimals with the decimal point
        removed.

        Args:
            lat: Latitude (degrees)
            lng: Longitude (degrees)
            locality: Locality appended after a space (may be empty)

        Returns:
            Code of the form '{latPart}+{lngPart} {locality}'
        """
        lat_part = f"{lat:.4f}".replace(".", "")[:4]
        lng_part = f"{lng:.4f}".replace(".", "")[:3]
        return f"{lat_part}+{lng_part} {locality}"


def is_valid_plus_code(code: Any) -> bool:
    return PlusCodeValidator.is_valid_plus_code(code)


def generate_plus_code(lat: float, lng: float, locality: str) -> str:
    return PlusCodeValidator.generate_plus_code(lat, lng, locality)
