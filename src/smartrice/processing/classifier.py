"""
Classification rules for comparison results.
"""

from ..core import constants
from ..models import RainfallRelevance


def classify_rainfall_relevance(rainfall_mm: float) -> RainfallRelevance:
    """
    Classify rainfall accumulated over a comparison period.

    High above 100 mm, Medium above 30 mm up to 100 mm, Low otherwise.
    """
    if rainfall_mm > constants.RELEVANCE_HIGH_MM:
        return RainfallRelevance.HIGH
    if rainfall_mm > constants.RELEVANCE_MEDIUM_MM:
        return RainfallRelevance.MEDIUM
    return RainfallRelevance.LOW


def classify_weather_impact(days_difference: int, rainfall_mm: float) -> str:
    """
    Judge whether weather plausibly explains a timing deviation.

    Args:
        days_difference: Signed day offset (actual - recommended)
        rainfall_mm: Rainfall over the comparison period

    Returns:
        Weather impact narrative
    """
    deviation = abs(days_difference)

    if deviation > constants.HIGH_IMPACT_DAYS and rainfall_mm > constants.HIGH_IMPACT_RAINFALL_MM:
        return constants.IMPACT_HIGH
    if deviation > constants.MODERATE_IMPACT_DAYS and rainfall_mm > constants.MODERATE_IMPACT_RAINFALL_MM:
        return constants.IMPACT_MODERATE
    return constants.IMPACT_MINIMAL
