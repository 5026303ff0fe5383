"""
Comparison engine module.

Compares actual harvest or planting dates against recommendations and
relates the deviation to rainfall over the same period.
"""

import logging
from typing import Iterable, List, Optional

from ..core import DateUtils
from ..models import AgriculturalLog, ComparisonResult
from .classifier import classify_rainfall_relevance, classify_weather_impact
from .rainfall_index import RainfallIndex


class ComparisonEngine:
    """Enrich agricultural logs with timing and rainfall analysis."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize comparison engine.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def compare(self, log: AgriculturalLog, index: RainfallIndex) -> ComparisonResult:
        """
        Compare one log against its recommendation.

        Without a recommended date the result carries the sentinel values
        (0 days, 0 mm, Low, minimal impact) and no rainfall is summed.

        Args:
            log: Harvest or planting log
            index: Daily rainfall index

        Returns:
            ComparisonResult

        Raises:
            ValueError: If one of the log's dates cannot be parsed
            ArithmeticError: If the date range cannot be represented
        """
        if not log.has_recommendation:
            return ComparisonResult(log=log)

        actual = DateUtils.parse_date(log.actual_date)
        recommended = DateUtils.parse_date(log.recommended_date)

        days_difference = DateUtils.days_between(recommended, actual)
        rainfall = index.total_between(recommended, actual)

        return ComparisonResult(
            log=log,
            days_difference=days_difference,
            rainfall_during_period=rainfall,
            rainfall_relevance=classify_rainfall_relevance(rainfall),
            weather_impact=classify_weather_impact(days_difference, rainfall),
        )

    def compare_all(
        self,
        logs: Iterable[AgriculturalLog],
        index: RainfallIndex
    ) -> List[ComparisonResult]:
        """
        Compare every log independently.

        A log that cannot be analysed yields a result with ``error`` set so
        the rest of the batch is still returned.

        Args:
            logs: Harvest or planting logs
            index: Daily rainfall index

        Returns:
            One ComparisonResult per log, in input order
        """
        results = []
        for log in logs:
            try:
                results.append(self.compare(log, index))
            except (ValueError, ArithmeticError) as e:
                self.logger.warning(f"Comparison unavailable for {log.kind.value} log {log.id}: {e}")
                results.append(ComparisonResult(log=log, error=str(e)))

        failed = sum(1 for result in results if not result.available)
        self.logger.info(f"Compared {len(results)} logs ({failed} unavailable)")
        return results
