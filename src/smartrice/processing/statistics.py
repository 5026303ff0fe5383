"""
Aggregate statistics for comparison results.
"""

import math
from typing import List

from ..models import ComparisonResult, ComparisonSummary, RainfallRelevance


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def summarize(results: List[ComparisonResult]) -> ComparisonSummary:
    """
    Compute dashboard figures for a batch of comparisons.

    The average timing difference only covers results that have a
    recommendation and were analysed; sentinel zeros are left out.

    Args:
        results: Comparison results

    Returns:
        ComparisonSummary
    """
    qualifying = [
        abs(result.days_difference)
        for result in results
        if result.has_recommendation and result.available
    ]

    average = round_half_up(sum(qualifying) / len(qualifying)) if qualifying else 0

    return ComparisonSummary(
        total_count=len(results),
        average_absolute_timing_difference=average,
        high_impact_count=sum(
            1 for result in results if result.rainfall_relevance is RainfallRelevance.HIGH
        ),
        with_recommendation_count=sum(1 for result in results if result.has_recommendation),
        unavailable_count=sum(1 for result in results if not result.available),
    )
