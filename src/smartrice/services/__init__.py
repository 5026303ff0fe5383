"""
Business logic services for the SmartRice comparison library.

Services orchestrate API operations and provide higher-level functionality.
"""

from .data_fetcher import DataFetcher
from .writer import ComparisonWriter

__all__ = [
    "DataFetcher",
    "ComparisonWriter",
]
