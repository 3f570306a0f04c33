"""
drtv_guide.utils - Time and text utilities

ISO-8601 parsing for the schedule API timestamps and the fixed output
formats used by the console table, JSON and CSV exports. Text taken from
the API is cleaned so that it can always be written as UTF-8.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from dateutil.parser import isoparse


class TimeUtils:
    """Time and date utilities"""

    CLOCK_FORMAT = "%H:%M"
    MINUTE_FORMAT = "%Y-%m-%d %H:%M"
    UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

    @staticmethod
    def parse_iso8601(value: Any) -> Optional[datetime]:
        """
        Parse an ISO-8601 timestamp, keeping its UTC offset

        Timestamps without an offset are taken as local time so that every
        parsed value is timezone-aware and comparable with the others.

        Args:
            value: Raw value from the API (anything, usually a string)

        Returns:
            Aware datetime, or None if the value is missing or malformed
        """
        if not isinstance(value, str):
            return None

        text = value.strip()
        if not text:
            return None

        try:
            parsed = isoparse(text)
            if parsed.tzinfo is None:
                parsed = parsed.astimezone()
        except (ValueError, OverflowError, OSError):
            return None

        return parsed

    @staticmethod
    def format_clock(timestamp: datetime) -> str:
        """HH:MM in the timestamp's own offset"""
        return timestamp.strftime(TimeUtils.CLOCK_FORMAT)

    @staticmethod
    def format_minutes(timestamp: datetime) -> str:
        """YYYY-MM-DD HH:MM in the timestamp's own offset"""
        return timestamp.strftime(TimeUtils.MINUTE_FORMAT)

    @staticmethod
    def utc_now_iso() -> str:
        """Current UTC time, ISO-8601 with second precision"""
        return datetime.now(timezone.utc).strftime(TimeUtils.UTC_FORMAT)

    @staticmethod
    def today_iso() -> str:
        """Current local date as YYYY-MM-DD"""
        return date.today().isoformat()


def clean_text(value: str) -> str:
    """Replace characters UTF-8 cannot encode, such as lone surrogates from JSON escapes"""
    return value.encode("utf-8", "replace").decode("utf-8")
