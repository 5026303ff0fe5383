"""
Data models for the SmartRice comparison library.

Contains DTOs for rainfall observations, agricultural logs and comparison results.
"""

from .rainfall import RainfallObservation, MonthlyRainfall
from .logs import LogKind, AgriculturalLog, PlantingRecommendation
from .comparison import RainfallRelevance, ComparisonResult, ComparisonSummary

__all__ = [
    "RainfallObservation",
    "MonthlyRainfall",
    "LogKind",
    "AgriculturalLog",
    "PlantingRecommendation",
    "RainfallRelevance",
    "ComparisonResult",
    "ComparisonSummary",
]
