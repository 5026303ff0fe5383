"""
Data processing module for the SmartRice comparison library.

Provides record validation, the rainfall index, the comparison engine and
summary statistics.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models import AgriculturalLog, ComparisonResult, ComparisonSummary, RainfallObservation
from .validator import RecordValidator
from .rainfall_index import DuplicatePolicy, RainfallIndex, RainfallIndexBuilder
from .classifier import classify_rainfall_relevance, classify_weather_impact
from .comparison import ComparisonEngine
from .statistics import summarize, round_half_up


class ComparisonProcessor:
    """
    Unified processor combining index building, comparison and statistics.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(
        self,
        duplicate_policy: Union[DuplicatePolicy, str] = DuplicatePolicy.LAST,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize comparison processor.

        Args:
            duplicate_policy: Policy for duplicated rainfall dates
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.validator = RecordValidator(logger)
        self.index_builder = RainfallIndexBuilder(duplicate_policy, logger)
        self.engine = ComparisonEngine(logger)

    def build_index(self, observations: List[RainfallObservation]) -> RainfallIndex:
        """Build the rainfall index for a comparison run."""
        return self.index_builder.build(observations)

    def compare(
        self,
        logs: List[AgriculturalLog],
        observations: List[RainfallObservation]
    ) -> Tuple[List[ComparisonResult], ComparisonSummary]:
        """
        Run a full comparison over already loaded logs and rainfall.

        Args:
            logs: Harvest or planting logs
            observations: Daily rainfall observations

        Returns:
            Tuple of (results, summary)
        """
        index = self.build_index(observations)
        results = self.engine.compare_all(logs, index)
        return results, summarize(results)

    def compare_rows(
        self,
        log_rows: List[Dict[str, Any]],
        rainfall_rows: List[Dict[str, Any]],
        **kwargs: Any
    ) -> Tuple[List[ComparisonResult], ComparisonSummary]:
        """
        Run a comparison over raw table rows.

        Keyword arguments are passed to ``RecordValidator.parse_log_rows``.
        """
        logs = self.validator.parse_log_rows(log_rows, **kwargs)
        observations = self.validator.parse_rainfall_rows(rainfall_rows)
        return self.compare(logs, observations)


__all__ = [
    "RecordValidator",
    "DuplicatePolicy",
    "RainfallIndex",
    "RainfallIndexBuilder",
    "classify_rainfall_relevance",
    "classify_weather_impact",
    "ComparisonEngine",
    "summarize",
    "round_half_up",
    "ComparisonProcessor",
]
