"""
Record validation module.

Turns raw backend rows into models and checks them for quality.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from ..core import DateUtils
from ..models import AgriculturalLog, LogKind, RainfallObservation


class RecordValidator:
    """Validate and parse raw rainfall and log rows."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize record validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def parse_rainfall_row(self, row: Dict[str, Any]) -> Optional[RainfallObservation]:
        """
        Parse one daily_rainfall row.

        A missing amount counts as 0 mm and a negative amount is clamped to 0.
        Rows with an unparsable date or a non-numeric or non-finite amount
        are dropped.

        Args:
            row: Row with 'date' and 'rainfall_amount' (or 'amount') keys

        Returns:
            RainfallObservation or None if the row is unusable
        """
        try:
            day = DateUtils.parse_date(row.get("date"))
        except ValueError as e:
            self.logger.warning(f"Skipping rainfall row: {e}")
            return None

        raw_amount = row.get("rainfall_amount", row.get("amount"))
        if raw_amount is None:
            amount = 0.0
        else:
            try:
                amount = float(raw_amount)
            except (TypeError, ValueError):
                self.logger.warning(
                    f"Skipping rainfall row for {day}: non-numeric amount {raw_amount!r}"
                )
                return None

        if not math.isfinite(amount):
            self.logger.warning(f"Skipping rainfall row for {day}: non-finite amount {raw_amount!r}")
            return None

        if amount < 0:
            self.logger.warning(f"Negative rainfall {amount} mm on {day} clamped to 0")
            amount = 0.0

        return RainfallObservation(date=day, amount_mm=amount, id=row.get("id"))

    def parse_rainfall_rows(self, rows: List[Dict[str, Any]]) -> List[RainfallObservation]:
        """Parse daily_rainfall rows, keeping input order."""
        observations = []
        for row in rows:
            observation = self.parse_rainfall_row(row)
            if observation is not None:
                observations.append(observation)

        skipped = len(rows) - len(observations)
        if skipped:
            self.logger.warning(f"Skipped {skipped} of {len(rows)} rainfall rows")
        return observations

    def parse_log_rows(
        self,
        rows: List[Dict[str, Any]],
        kind: LogKind = LogKind.HARVEST
    ) -> List[AgriculturalLog]:
        """
        Parse harvest_logs or planting_logs rows.

        Rows without the required actual date are dropped. Date values are not
        parsed here so that a malformed date surfaces as a per-record
        comparison failure.

        Args:
            rows: Raw table rows
            kind: Log kind the rows belong to

        Returns:
            List of AgriculturalLog
        """
        logs = []
        for row in rows:
            try:
                logs.append(AgriculturalLog.from_row(row, kind))
            except ValueError as e:
                self.logger.error(f"Skipping {kind.value} log {row.get('id')}: {e}")
        return logs

    def validate_log(self, log: AgriculturalLog) -> Tuple[bool, List[str]]:
        """
        Validate that a log's dates can be compared.

        Args:
            log: Agricultural log

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        if not log.crop_type:
            errors.append("Missing crop type")

        try:
            DateUtils.parse_date(log.actual_date)
        except ValueError as e:
            errors.append(f"{log.kind.actual_date_field}: {e}")

        if log.recommended_date:
            try:
                DateUtils.parse_date(log.recommended_date)
            except ValueError as e:
                errors.append(f"{log.kind.recommended_date_field}: {e}")

        is_valid = len(errors) == 0
        return is_valid, errors
