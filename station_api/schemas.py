from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from station_api.models import StationSource


class StationResponse(BaseModel):
    id: int
    address: str | None
    # SQLite keeps values that do not look numeric as text in REAL columns.
    latitude: float | str | None
    longitude: float | str | None
    source: StationSource

    model_config = ConfigDict(from_attributes=True)


class StationPayload(BaseModel):
    """Body of POST and PUT requests.

    Fields are passed to the table untouched; SQLite column affinity does
    the type coercion. Missing fields are stored as null.
    """

    address: Any = None
    latitude: Any = None
    longitude: Any = None


class StationCreated(BaseModel):
    id: int


class ImportResponse(BaseModel):
    message: str
    added: int
