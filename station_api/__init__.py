"""REST API over an in-memory list of gas stations synced from the Cologne geoportal."""

__version__ = "0.1.0"
