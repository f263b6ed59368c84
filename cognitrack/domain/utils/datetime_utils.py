"""
Datetime utilities for consistent timezone handling.

This module provides constants and helper functions for working
with dates and times in a consistent manner across the application.
"""

import datetime
from zoneinfo import ZoneInfo

# Standard timezone for all application operations
UTC = ZoneInfo("UTC")

SECONDS_PER_DAY = 24 * 60 * 60


def now() -> datetime.datetime:
    """
    Get current datetime in UTC.

    Returns:
        datetime.datetime: Current time in UTC timezone
    """
    return datetime.datetime.now(UTC)


def to_utc(dt: datetime.datetime) -> datetime.datetime:
    """
    Convert a datetime to UTC timezone.

    Args:
        dt: Datetime to convert

    Returns:
        datetime.datetime: Datetime in UTC timezone
    """
    if dt.tzinfo is None:
        # Assume naive datetimes are already UTC
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def parse_iso(date_str: str) -> datetime.datetime:
    """
    Parse ISO 8601 datetime string to datetime object.

    Ensures the result has UTC timezone if none specified.
    """
    return to_utc(datetime.datetime.fromisoformat(date_str))


def seconds_between(start: datetime.datetime, end: datetime.datetime) -> float:
    """Absolute distance between two instants in seconds."""
    return abs((to_utc(end) - to_utc(start)).total_seconds())


def days_between(start: datetime.datetime, end: datetime.datetime) -> int:
    """
    Calculate the number of whole days between two datetimes.

    Args:
        start: Start datetime
        end: End datetime

    Returns:
        int: Number of days between start and end (floored)
    """
    delta = to_utc(end) - to_utc(start)
    return delta.days


def age_on(date_of_birth: datetime.date, reference: datetime.date) -> int:
    """Completed years of age on the reference date."""
    age = reference.year - date_of_birth.year
    if (reference.month, reference.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
