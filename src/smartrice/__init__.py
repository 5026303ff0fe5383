"""
SmartRice Harvest Comparison

This package compares actual rice planting and harvest dates against
recommendations and relates the deviations to recorded rainfall.
"""

__version__ = "0.1.0"
__description__ = "Recommended versus actual planting and harvest comparison with rainfall analysis"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "SmartRiceApp":
        from .main import SmartRiceApp
        return SmartRiceApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "SmartRiceApp",
]
