"""
Cropping calendar and advisory algorithms.

Provides season/phase lookup, the field advisory and recommendation calendar filtering.
"""

from .cropping_calendar import CroppingCalendar, CycleStage, Season, Phase
from .advisory import Advice, categorize_daily_rainfall, field_advice
from .recommendations import recommendation_dates_in_month

__all__ = [
    "CroppingCalendar",
    "CycleStage",
    "Season",
    "Phase",
    "Advice",
    "categorize_daily_rainfall",
    "field_advice",
    "recommendation_dates_in_month",
]
