"""Generate platform icon sets from a single square reference PNG."""

__version__ = "1.0.0"
