"""Task scheduler with recurring dates and an HTTP API."""

__version__ = "0.1.0"
