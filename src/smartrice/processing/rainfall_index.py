"""
Rainfall index module.

Builds a date-keyed lookup of daily rainfall from raw observations.
"""

import logging
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from ..core import DateUtils
from ..models import MonthlyRainfall, RainfallObservation
from .validator import RecordValidator


class DuplicatePolicy(str, Enum):
    """How to resolve two observations for the same date."""

    LAST = "last"  # Last occurrence in iteration order wins
    SUM = "sum"
    REJECT = "reject"


class RainfallIndex:
    """Daily rainfall amounts keyed by calendar date."""

    def __init__(self, amounts: Optional[Dict[date, float]] = None):
        self._amounts: Dict[date, float] = dict(amounts or {})

    def get(self, day: Union[str, date], default: float = 0.0) -> float:
        """
        Rainfall recorded for a date.

        Args:
            day: Calendar date or YYYY-MM-DD string
            default: Value returned when the date has no observation

        Returns:
            Amount in mm
        """
        return self._amounts.get(DateUtils.parse_date(day), default)

    def total_between(self, start: Union[str, date], end: Union[str, date]) -> float:
        """Sum of rainfall over the inclusive range, missing dates counting as 0."""
        return sum(
            self._amounts.get(day, 0.0)
            for day in DateUtils.iter_dates(DateUtils.parse_date(start), DateUtils.parse_date(end))
        )

    def monthly_totals(self, year: int) -> List[float]:
        """Twelve monthly rainfall sums for a year (January first)."""
        totals = [0.0] * 12
        for day, amount in self._amounts.items():
            if day.year == year:
                totals[day.month - 1] += amount
        return totals

    def monthly_records(self, year: int) -> List[MonthlyRainfall]:
        """Monthly totals as monthly_rainfall records."""
        return [
            MonthlyRainfall(year=year, month=month, amount_mm=amount)
            for month, amount in enumerate(self.monthly_totals(year), start=1)
        ]

    def dates(self) -> List[date]:
        """Observed dates in ascending order."""
        return sorted(self._amounts)

    def as_dict(self) -> Dict[str, float]:
        """Plain mapping keyed by YYYY-MM-DD strings."""
        return {DateUtils.to_date_string(day): amount for day, amount in sorted(self._amounts.items())}

    def __len__(self) -> int:
        return len(self._amounts)

    def __contains__(self, day: object) -> bool:
        if not isinstance(day, (str, date)):
            return False
        try:
            return DateUtils.parse_date(day) in self._amounts
        except ValueError:
            return False

    def __repr__(self) -> str:
        return f"RainfallIndex(days={len(self._amounts)})"


class RainfallIndexBuilder:
    """Build a RainfallIndex from rainfall observations."""

    def __init__(
        self,
        policy: Union[DuplicatePolicy, str] = DuplicatePolicy.LAST,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize rainfall index builder.

        Args:
            policy: Duplicate date policy ('last', 'sum' or 'reject')
            logger: Logger instance
        """
        self.policy = DuplicatePolicy(policy)
        self.logger = logger or logging.getLogger(__name__)
        self.validator = RecordValidator(logger)

    def build(self, observations: Iterable[RainfallObservation]) -> RainfallIndex:
        """
        Build an index from observations.

        Args:
            observations: Observations in any order, possibly with duplicated dates

        Returns:
            RainfallIndex

        Raises:
            ValueError: If a date is duplicated and the policy is 'reject'
        """
        amounts: Dict[date, float] = {}
        duplicates = 0

        for observation in observations:
            if observation.date in amounts:
                duplicates += 1
                if self.policy is DuplicatePolicy.REJECT:
                    raise ValueError(
                        f"Duplicate rainfall observation for {observation.date.isoformat()}"
                    )
                self.logger.warning(
                    f"Duplicate rainfall observation for {observation.date.isoformat()} "
                    f"(policy: {self.policy.value})"
                )
                if self.policy is DuplicatePolicy.SUM:
                    amounts[observation.date] += observation.amount_mm
                    continue

            amounts[observation.date] = observation.amount_mm

        self.logger.debug(
            f"Built rainfall index with {len(amounts)} dates ({duplicates} duplicates)"
        )
        return RainfallIndex(amounts)

    def build_from_rows(self, rows: List[Dict[str, Any]]) -> RainfallIndex:
        """Parse raw daily_rainfall rows and build an index."""
        return self.build(self.validator.parse_rainfall_rows(rows))
