"""
Date and timezone utilities.

Centralizes timestamp handling for location selection times.
"""

from datetime import datetime
from typing import Optional, Union
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Manila', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def utc_now() -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        return datetime.now(pytz.UTC)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @staticmethod
    def to_iso(dt: datetime) -> str:
        """
        Convert datetime to an ISO-8601 string in UTC.

        Naive datetimes are assumed to already be in UTC.
        """
        return DateUtils.to_utc(dt).isoformat()

    @staticmethod
    def parse_iso(value: Union[str, datetime, None]) -> Optional[datetime]:
        """
        Parse an ISO-8601 timestamp as written by the data store.

        Accepts a trailing 'Z' for UTC. Returns None for empty or
        unparseable values.

        Args:
            value: ISO string, datetime, or None

        Returns:
            Timezone-aware UTC datetime or None
        """
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return DateUtils.to_utc(value)
        if not isinstance(value, str):
            return None

        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return DateUtils.to_utc(parsed)

    @staticmethod
    def to_timezone(dt: datetime, timezone_str: str) -> datetime:
        """
        Convert a datetime to a different timezone.

        Args:
            dt: Datetime (naive values are treated as UTC)
            timezone_str: Target timezone string

        Returns:
            Datetime in the target timezone
        """
        tz = DateUtils.parse_timezone(timezone_str)
        return DateUtils.to_utc(dt).astimezone(tz)
