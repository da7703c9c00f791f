"""searchwords — search-engine keyword reports from web access logs."""

__version__ = "0.1.0"
