"""
Rainfall data models.

Contains DTOs for rainfall observations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class RainfallObservation:
    """Daily rainfall observation entered by an administrator."""

    date: date
    amount_mm: float  # Non-negative, millimeters
    id: Optional[str] = None


@dataclass(frozen=True)
class MonthlyRainfall:
    """Rainfall total for one calendar month."""

    year: int
    month: int  # 1-12
    amount_mm: float
