from __future__ import annotations


class StationApiError(Exception):
    """Base class for errors surfaced to API clients as a 500."""


class FetchError(StationApiError):
    """The geoportal could not be reached or returned an unusable payload."""


class StoreError(StationApiError):
    """A statement against the station table failed."""
