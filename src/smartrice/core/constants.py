"""
Application-wide constants for the SmartRice comparison library.

This module defines thresholds and default values used throughout the application.
"""

# Date format used by the backend for calendar dates
DATE_FORMAT = "%Y-%m-%d"
DATE_LENGTH = 10  # len("YYYY-MM-DD")

# Rainfall relevance thresholds (mm accumulated over the comparison period)
RELEVANCE_HIGH_MM = 100.0  # strictly above -> High
RELEVANCE_MEDIUM_MM = 30.0  # strictly above -> Medium

# Weather impact thresholds
HIGH_IMPACT_DAYS = 7  # |days| strictly above
HIGH_IMPACT_RAINFALL_MM = 50.0  # rainfall strictly above
MODERATE_IMPACT_DAYS = 3
MODERATE_IMPACT_RAINFALL_MM = 20.0

# Weather impact narratives
IMPACT_HIGH = "High rainfall likely influenced timing"
IMPACT_MODERATE = "Moderate weather influence possible"
IMPACT_MINIMAL = "Minimal impact"

# Timing severity: |days| up to this value is a minor deviation
MINOR_TIMING_DAYS = 3

# Daily rainfall categories (mm/day)
HEAVY_RAINFALL_MM = 50.0  # strictly above
NORMAL_RAINFALL_MM = 10.0  # at or above

# Rainfall history window used by the field advisory
ADVISORY_WINDOW_DAYS = 7

# Defaults
DEFAULT_TIMEZONE = "Asia/Manila"
DEFAULT_DUPLICATE_POLICY = "last"

# Backend table names
TABLE_HARVEST_LOGS = "harvest_logs"
TABLE_PLANTING_LOGS = "planting_logs"
TABLE_DAILY_RAINFALL = "daily_rainfall"
TABLE_RECOMMENDATIONS = "planting_recommendations"
TABLE_HARVEST_COMPARISONS = "harvest_comparisons"
