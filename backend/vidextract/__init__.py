"""Product page video extraction and download proxy."""

__version__ = "1.0.0"
