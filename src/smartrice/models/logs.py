"""
Agricultural log models.

Contains DTOs for harvest and planting logs and for administrator
recommendations. Harvest and planting logs share one structure and differ
only in the field names used by the backend tables.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any


class LogKind(str, Enum):
    """Agricultural event recorded by a log."""

    HARVEST = "harvest"
    PLANTING = "planting"

    @property
    def actual_date_field(self) -> str:
        return f"actual_{self.value}_date"

    @property
    def actual_time_field(self) -> str:
        return f"actual_{self.value}_time"

    @property
    def recommended_date_field(self) -> str:
        return f"recommended_{self.value}_date"


BASE_FIELDS = ("id", "crop_type", "notes", "created_at")


@dataclass
class AgriculturalLog:
    """Harvest or planting event logged by a farmer."""

    crop_type: str
    actual_date: str  # YYYY-MM-DD, parsed by the comparison engine
    kind: LogKind = LogKind.HARVEST
    id: Optional[str] = None
    actual_time: Optional[str] = None  # Display only
    recommended_date: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)  # Other table columns, passed through

    @property
    def has_recommendation(self) -> bool:
        return bool(self.recommended_date)

    @classmethod
    def from_row(cls, row: Dict[str, Any], kind: LogKind = LogKind.HARVEST) -> "AgriculturalLog":
        """
        Build a log from a backend table row.

        Args:
            row: Row from the harvest_logs or planting_logs table
            kind: Which table the row comes from

        Returns:
            AgriculturalLog instance

        Raises:
            ValueError: If the actual date is missing
        """
        actual_date = row.get(kind.actual_date_field)
        if not actual_date:
            raise ValueError(f"Missing required field: {kind.actual_date_field}")

        known = set(BASE_FIELDS) | {
            kind.actual_date_field,
            kind.actual_time_field,
            kind.recommended_date_field,
        }

        return cls(
            crop_type=row.get("crop_type") or "",
            actual_date=actual_date,
            kind=kind,
            id=row.get("id"),
            actual_time=row.get(kind.actual_time_field),
            recommended_date=row.get(kind.recommended_date_field) or None,
            notes=row.get("notes"),
            created_at=row.get("created_at"),
            extra={k: v for k, v in row.items() if k not in known},
        )

    def to_row(self) -> Dict[str, Any]:
        """Convert back to a table row using the kind-specific field names."""
        row = dict(self.extra)
        row.update({
            "id": self.id,
            "crop_type": self.crop_type,
            self.kind.actual_date_field: self.actual_date,
            self.kind.actual_time_field: self.actual_time,
            self.kind.recommended_date_field: self.recommended_date,
            "notes": self.notes,
            "created_at": self.created_at,
        })
        return row


@dataclass
class PlantingRecommendation:
    """Administrator recommendation shown on the recommendation calendar."""

    id: Optional[str] = None
    planting_date: Optional[str] = None
    harvesting_date: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "PlantingRecommendation":
        return cls(
            id=row.get("id"),
            planting_date=row.get("planting_date") or None,
            harvesting_date=row.get("harvesting_date") or None,
            created_by=row.get("created_by"),
            created_at=row.get("created_at"),
        )
