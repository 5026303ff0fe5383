"""
Comparison data models.

Contains DTOs for the recommended-versus-actual comparison results and the
dashboard summary computed from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any

from ..core import constants
from .logs import AgriculturalLog, LogKind


class RainfallRelevance(str, Enum):
    """Three-tier classification of rainfall over the comparison period."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @property
    def score(self) -> int:
        """Numeric score stored in the harvest_comparisons table."""
        return {"Low": 1, "Medium": 2, "High": 3}[self.value]


@dataclass
class ComparisonResult:
    """Log enriched with timing and rainfall analysis."""

    log: AgriculturalLog
    days_difference: int = 0  # actual - recommended; positive means late
    rainfall_during_period: float = 0.0  # mm
    rainfall_relevance: RainfallRelevance = RainfallRelevance.LOW
    weather_impact: str = constants.IMPACT_MINIMAL
    error: Optional[str] = None  # Set when the record could not be analysed

    @property
    def has_recommendation(self) -> bool:
        return self.log.has_recommendation

    @property
    def available(self) -> bool:
        return self.error is None

    @property
    def timing_label(self) -> str:
        """Human readable timing difference."""
        if not self.has_recommendation or not self.available:
            return "-"
        if self.days_difference == 0:
            return "On time"
        if self.days_difference > 0:
            return f"{self.days_difference} days late"
        return f"{abs(self.days_difference)} days early"

    @property
    def timing_severity(self) -> str:
        """'on_time', 'minor' or 'major' deviation from the recommendation."""
        if self.days_difference == 0:
            return "on_time"
        if abs(self.days_difference) <= constants.MINOR_TIMING_DAYS:
            return "minor"
        return "major"

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the log row and analysis fields into one dictionary."""
        data = self.log.to_row()
        data.update({
            "kind": self.log.kind.value,
            "days_difference": self.days_difference,
            "rainfall_during_period": self.rainfall_during_period,
            "rainfall_relevance": self.rainfall_relevance.value,
            "weather_impact": self.weather_impact,
            "error": self.error,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComparisonResult":
        """Rebuild a result produced by ``to_dict``."""
        row = dict(data)
        kind = LogKind(row.pop("kind", LogKind.HARVEST.value))
        days_difference = row.pop("days_difference", 0)
        rainfall = row.pop("rainfall_during_period", 0.0)
        relevance = RainfallRelevance(row.pop("rainfall_relevance", RainfallRelevance.LOW.value))
        impact = row.pop("weather_impact", constants.IMPACT_MINIMAL)
        error = row.pop("error", None)

        return cls(
            log=AgriculturalLog.from_row(row, kind),
            days_difference=days_difference,
            rainfall_during_period=rainfall,
            rainfall_relevance=relevance,
            weather_impact=impact,
            error=error,
        )

    def to_comparison_row(self) -> Dict[str, Any]:
        """Row for the harvest_comparisons table."""
        return {
            "harvest_log_id": self.log.id,
            "timing_difference_days": self.days_difference if self.has_recommendation else None,
            "rainfall_during_period": self.rainfall_during_period,
            "rainfall_relevance_score": self.rainfall_relevance.score,
            "weather_impact_factor": self.weather_impact,
            "accuracy_notes": self.timing_label,
        }


@dataclass
class ComparisonSummary:
    """Dashboard figures for a batch of comparisons."""

    total_count: int = 0
    average_absolute_timing_difference: int = 0  # days
    high_impact_count: int = 0
    with_recommendation_count: int = 0
    unavailable_count: int = 0
