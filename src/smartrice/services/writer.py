"""
Comparison writer service.

Writes analysed comparisons back to the harvest_comparisons table.
"""

import logging
from typing import Dict, List, Optional

from ..api import SmartRiceAPI
from ..models import ComparisonResult, ComparisonSummary


class ComparisonWriter:
    """Write comparison results to the backend."""

    def __init__(self, api_client: SmartRiceAPI, logger: Optional[logging.Logger] = None):
        """
        Initialize comparison writer.

        Args:
            api_client: API client instance
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)

    def write_results(self, results: List[ComparisonResult]) -> Dict[str, int]:
        """
        Write comparison rows for every analysed result.

        Results that could not be analysed or have no log id are skipped.

        Args:
            results: Comparison results

        Returns:
            Status dictionary with 'written' and 'skipped' counts
        """
        rows = []
        skipped = 0
        for result in results:
            if not result.available or not result.log.id:
                skipped += 1
                continue
            rows.append(result.to_comparison_row())

        if not rows:
            self.logger.warning("No comparison rows to write")
            return {"written": 0, "skipped": skipped}

        self.api_client.insert_comparisons(rows)
        return {"written": len(rows), "skipped": skipped}

    def log_write_summary(self, status: Dict[str, int], summary: ComparisonSummary) -> None:
        """Log the write status and the dashboard figures."""
        self.logger.info("=" * 60)
        self.logger.info("Comparison Summary")
        self.logger.info("=" * 60)
        self.logger.info(f"Total logs: {summary.total_count}")
        self.logger.info(f"With recommendation: {summary.with_recommendation_count}")
        self.logger.info(
            f"Average timing difference: {summary.average_absolute_timing_difference} days"
        )
        self.logger.info(f"High rainfall impact: {summary.high_impact_count}")
        if summary.unavailable_count:
            self.logger.warning(f"Unavailable: {summary.unavailable_count}")
        self.logger.info(f"Rows written: {status.get('written', 0)}, skipped: {status.get('skipped', 0)}")
        self.logger.info("=" * 60)
