"""
API layer for the SmartRice backend.

Provides the REST client for the hosted tables.
"""

from .client import APIClient
from .tables import TablesAPI


class SmartRiceAPI(APIClient, TablesAPI):
    """
    Unified API client for the SmartRice backend.

    Combines the HTTP session handling with the table operations.
    """


__all__ = [
    "APIClient",
    "TablesAPI",
    "SmartRiceAPI",
]
