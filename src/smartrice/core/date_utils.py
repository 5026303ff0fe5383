"""
Calendar date utilities.

Centralizes all date operations. Comparison arithmetic works on naive
``datetime.date`` values only; timezones are involved solely when resolving
"today" for a farm location.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Iterator, Optional, Union

import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants

DateLike = Union[str, date]


class DateUtils:
    """Utilities for calendar date handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_date(value: DateLike) -> date:
        """
        Parse a calendar date.

        Strings are truncated to their ``YYYY-MM-DD`` prefix, so values such as
        ``2025-06-01T00:00:00+08:00`` keep the calendar day they were written
        with instead of being shifted through UTC.

        Args:
            value: Date string or date object

        Returns:
            Naive calendar date

        Raises:
            ValueError: If the value cannot be parsed
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Invalid date: {value!r}")

        text = value.strip()[:constants.DATE_LENGTH]
        try:
            return datetime.strptime(text, constants.DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}")

    @staticmethod
    def to_date_string(value: date) -> str:
        """Format a date as ``YYYY-MM-DD``."""
        return value.strftime(constants.DATE_FORMAT)

    @staticmethod
    def days_between(start: date, end: date) -> int:
        """
        Signed number of calendar days from ``start`` to ``end``.

        Positive when ``end`` is later than ``start``.
        """
        return (end - start).days

    @staticmethod
    def iter_dates(start: date, end: date) -> Iterator[date]:
        """
        Iterate over every calendar date in the inclusive range.

        The range is normalised so that the earlier date comes first.
        """
        if end < start:
            start, end = end, start

        # Never step past end, which may be date.max
        for offset in range((end - start).days + 1):
            yield start + timedelta(days=offset)

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

    def today(
        self,
        timezone_str: str = constants.DEFAULT_TIMEZONE,
        reference_time: Optional[datetime] = None
    ) -> date:
        """
        Get the current calendar date at a location.

        Args:
            timezone_str: Timezone of the farm location
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Naive calendar date in the given timezone
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            # Assume UTC if no timezone
            reference_time = pytz.UTC.localize(reference_time)

        local_time = reference_time.astimezone(tz)

        self.logger.debug(
            f"Reference time: {reference_time.isoformat()} -> "
            f"Local time: {local_time.isoformat()}"
        )

        return local_time.date()

    def window_start(
        self,
        days: int,
        timezone_str: str = constants.DEFAULT_TIMEZONE,
        reference_time: Optional[datetime] = None
    ) -> date:
        """
        First date of a trailing window of ``days`` days ending today.

        Args:
            days: Window length in days
            timezone_str: Timezone of the farm location
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Naive calendar date
        """
        return self.today(timezone_str, reference_time) - timedelta(days=days)
