"""
Recommendation calendar helpers.
"""

from typing import Iterable, Set, Tuple

from ..core import constants
from ..models import PlantingRecommendation


def _in_month(value: str, year: int, month: int) -> bool:
    parts = value.split("-")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return False
    return int(parts[0]) == year and int(parts[1]) == month


def recommendation_dates_in_month(
    recommendations: Iterable[PlantingRecommendation],
    year: int,
    month: int
) -> Tuple[Set[str], Set[str]]:
    """
    Recommended planting and harvesting dates falling in a calendar month.

    Dates are truncated to YYYY-MM-DD so stored timestamps land on the day
    they were entered for.

    Args:
        recommendations: Administrator recommendations
        year: Calendar year
        month: Month number (1-12)

    Returns:
        Tuple of (planting_dates, harvesting_dates) as YYYY-MM-DD strings
    """
    planting: Set[str] = set()
    harvesting: Set[str] = set()

    for recommendation in recommendations:
        if recommendation.planting_date:
            day = recommendation.planting_date[:constants.DATE_LENGTH]
            if _in_month(day, year, month):
                planting.add(day)
        if recommendation.harvesting_date:
            day = recommendation.harvesting_date[:constants.DATE_LENGTH]
            if _in_month(day, year, month):
                harvesting.add(day)

    return planting, harvesting
