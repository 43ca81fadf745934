"""Media inputs and file downloads for bot API clients."""

__version__ = "0.1.0"
