"""
Data fetcher service.

Loads logs, rainfall and recommendations either from the backend API or
from JSON exports of the same tables.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..api import SmartRiceAPI
from ..models import AgriculturalLog, LogKind, PlantingRecommendation, RainfallObservation
from ..processing import RecordValidator


class DataFetcher:
    """Load raw records and turn them into models."""

    def __init__(
        self,
        api_client: Optional[SmartRiceAPI] = None,
        files: Optional[Dict[str, Optional[str]]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize data fetcher.

        Exactly one of ``api_client`` and ``files`` must be given.

        Args:
            api_client: Backend API client
            files: JSON export paths keyed by 'harvest_logs', 'planting_logs',
                   'rainfall' and 'recommendations'
            logger: Logger instance
        """
        if (api_client is None) == (files is None):
            raise ValueError("Provide either an API client or a file mapping")

        self.api_client = api_client
        self.files = files or {}
        self.logger = logger or logging.getLogger(__name__)
        self.validator = RecordValidator(logger)

    @staticmethod
    def load_json_rows(path: str) -> List[Dict[str, Any]]:
        """
        Read table rows from a JSON export.

        Accepts either a list of rows or an object with a 'rows' list.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file does not contain a list of rows
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Data file not found: {path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("rows")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of rows in {path}")
        return data

    def _file_rows(self, key: str) -> List[Dict[str, Any]]:
        path = self.files.get(key)
        if not path:
            self.logger.warning(f"No file configured for {key}")
            return []
        rows = self.load_json_rows(path)
        self.logger.info(f"Loaded {len(rows)} {key} rows from {path}")
        return rows

    def fetch_log_rows(self, kind: LogKind = LogKind.HARVEST) -> List[Dict[str, Any]]:
        """Raw harvest or planting log rows."""
        if self.api_client is None:
            return self._file_rows(f"{kind.value}_logs")
        if kind is LogKind.PLANTING:
            return self.api_client.fetch_planting_logs()
        return self.api_client.fetch_harvest_logs()

    def fetch_logs(self, kind: LogKind = LogKind.HARVEST) -> List[AgriculturalLog]:
        """Harvest or planting logs."""
        return self.validator.parse_log_rows(self.fetch_log_rows(kind), kind)

    def fetch_rainfall(self, since: Optional[date] = None) -> List[RainfallObservation]:
        """
        Daily rainfall observations.

        Args:
            since: Only observations on or after this date

        Returns:
            List of RainfallObservation
        """
        if self.api_client is None:
            observations = self.validator.parse_rainfall_rows(self._file_rows("rainfall"))
            if since is not None:
                observations = [o for o in observations if o.date >= since]
            return observations
        return self.validator.parse_rainfall_rows(self.api_client.fetch_daily_rainfall(since=since))

    def fetch_recommendations(self) -> List[PlantingRecommendation]:
        """Administrator planting recommendations."""
        if self.api_client is None:
            rows = self._file_rows("recommendations")
        else:
            rows = self.api_client.fetch_recommendations()
        return [PlantingRecommendation.from_row(row) for row in rows]
