"""
Field advisory.

Combines the current crop phase with recent rainfall to produce a short
recommendation for the farmer.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from ..core import constants
from .cropping_calendar import Phase


@dataclass(frozen=True)
class Advice:
    """Recommendation text with its severity level ('warning', 'success' or 'info')."""

    text: str
    level: str


def categorize_daily_rainfall(amount_mm: float) -> str:
    """
    Categorize a daily rainfall amount.

    Heavy above 50 mm, Normal from 10 mm, Dry below.
    """
    if amount_mm > constants.HEAVY_RAINFALL_MM:
        return "Heavy"
    if amount_mm >= constants.NORMAL_RAINFALL_MM:
        return "Normal"
    return "Dry"


# Advice per phase for (Heavy, Normal, Dry) rainfall
ADVICE: Dict[Phase, Tuple[Advice, Advice, Advice]] = {
    Phase.LAND_PREPARATION: (
        Advice("Delay land preparation due to heavy rainfall expected. Wait for drier conditions.", "warning"),
        Advice("Good conditions for land preparation. Moderate rainfall will help soften soil.", "success"),
        Advice("Good time for land preparation. Dry conditions allow proper soil cultivation.", "success"),
    ),
    Phase.PLANTING: (
        Advice("Delay planting/transplanting until rainfall subsides. Heavy rain can damage seedlings.", "warning"),
        Advice("Excellent time to plant. Normal rainfall supports growth and establishment.", "success"),
        Advice("Ensure adequate irrigation before planting. Low rainfall requires water management.", "info"),
    ),
    Phase.GROWTH: (
        Advice("Monitor drainage systems. Heavy rainfall may cause waterlogging.", "warning"),
        Advice("Optimal growing conditions. Normal rainfall promotes healthy crop development.", "success"),
        Advice("Irrigation required. Insufficient rainfall for proper crop growth.", "info"),
    ),
    Phase.FLOWERING: (
        Advice("Heavy rain may affect pollination. Monitor crop health closely.", "warning"),
        Advice("Good conditions for flowering stage. Adequate moisture supports grain formation.", "success"),
        Advice("Ensure consistent irrigation during flowering for optimal grain development.", "info"),
    ),
    Phase.HARVEST: (
        Advice("Harvest early to avoid losses. Heavy rain can damage mature crops.", "warning"),
        Advice("Plan harvest carefully. Monitor weather for dry windows.", "info"),
        Advice("Excellent harvest conditions. Dry weather ideal for harvesting and drying.", "success"),
    ),
    Phase.POST_HARVEST: (
        Advice("Ensure proper storage facilities. Heavy rain may affect drying process.", "warning"),
        Advice("Good conditions for post-harvest activities. Continue drying and storage.", "success"),
        Advice("Good conditions for post-harvest activities. Continue drying and storage.", "success"),
    ),
}

DEFAULT_ADVICE = Advice("Monitor conditions and prepare for upcoming season.", "info")

CATEGORY_POSITION = {"Heavy": 0, "Normal": 1, "Dry": 2}


def field_advice(phase: Phase, rainfall_mm: float) -> Advice:
    """
    Recommendation for a crop phase given the latest rainfall.

    Args:
        phase: Current crop phase
        rainfall_mm: Latest daily rainfall amount

    Returns:
        Advice
    """
    options = ADVICE.get(phase)
    if options is None:
        return DEFAULT_ADVICE
    return options[CATEGORY_POSITION[categorize_daily_rainfall(rainfall_mm)]]
