"""
Table operations for the SmartRice backend.

Handles retrieval of logs, rainfall and recommendations and storage of
comparison results.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from ..core import constants


class TablesAPI:
    """Table-related API operations."""

    # Type hints for attributes provided by APIClient base class
    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def post(self, endpoint: str, data: Any, return_representation: bool = True) -> Any:
        """Method provided by APIClient base class."""
        ...

    def select(
        self,
        table: str,
        columns: str = "*",
        order: Optional[str] = None,
        limit: Optional[int] = None,
        **filters: str
    ) -> List[Dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name
            columns: Comma separated column list
            order: Ordering, e.g. 'created_at.desc'
            limit: Maximum number of rows
            **filters: Column filters in REST syntax, e.g. date='gte.2025-06-01'

        Returns:
            List of rows
        """
        params: Dict[str, Any] = {"select": columns}
        if order:
            params["order"] = order
        if limit is not None:
            params["limit"] = limit
        params.update(filters)

        result = self.get(f"/{table}", params=params)
        if isinstance(result, list):
            return result
        return []

    def fetch_harvest_logs(self) -> List[Dict[str, Any]]:
        """Harvest logs visible to the current user, newest first."""
        self.logger.info("Fetching harvest logs")
        return self.select(constants.TABLE_HARVEST_LOGS, order="created_at.desc")

    def fetch_planting_logs(self) -> List[Dict[str, Any]]:
        """Planting logs visible to the current user, newest first."""
        self.logger.info("Fetching planting logs")
        return self.select(constants.TABLE_PLANTING_LOGS, order="created_at.desc")

    def fetch_daily_rainfall(
        self,
        since: Optional[date] = None,
        limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        Daily rainfall observations, most recent first.

        Args:
            since: Only observations on or after this date
            limit: Maximum number of rows

        Returns:
            List of {date, rainfall_amount} rows
        """
        self.logger.info(f"Fetching daily rainfall{f' since {since.isoformat()}' if since else ''}")
        filters = {}
        if since is not None:
            filters["date"] = f"gte.{since.isoformat()}"
        return self.select(
            constants.TABLE_DAILY_RAINFALL,
            columns="date,rainfall_amount",
            order="date.desc",
            limit=limit,
            **filters
        )

    def fetch_recommendations(self) -> List[Dict[str, Any]]:
        """Planting recommendations, newest first."""
        self.logger.info("Fetching planting recommendations")
        return self.select(constants.TABLE_RECOMMENDATIONS, order="created_at.desc")

    def insert_comparisons(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Store comparison rows in the harvest_comparisons table.

        Args:
            rows: Rows produced by ComparisonResult.to_comparison_row

        Returns:
            Stored rows as returned by the backend
        """
        if not rows:
            return []
        self.logger.info(f"Writing {len(rows)} comparison rows")
        result = self.post(f"/{constants.TABLE_HARVEST_COMPARISONS}", rows)
        return result if isinstance(result, list) else []
