from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from station_api.config import Settings
from station_api.importer import parse_features
from station_api.main import create_app

GEOPORTAL_PAYLOAD: dict[str, Any] = {
    "displayFieldName": "adresse",
    "features": [
        {
            "attributes": {"objectid": 1, "adresse": "Aachener Str. 1"},
            "geometry": {"x": 6.9167, "y": 50.9375},
        },
        {
            "attributes": {"objectid": 2, "adresse": "Bonner Str. 22"},
            "geometry": {"x": 6.9602, "y": 50.9102},
        },
        {
            "attributes": {"objectid": 3, "adresse": None},
            "geometry": {"x": 7.0011, "y": 50.9523},
        },
    ],
}


@pytest.fixture
def geoportal_stations() -> list[dict[str, Any]]:
    return parse_features(GEOPORTAL_PAYLOAD)


@pytest.fixture
def fetch_mock(geoportal_stations: list[dict[str, Any]]) -> Iterator[AsyncMock]:
    mock = AsyncMock(return_value=geoportal_stations)
    with patch("station_api.importer.fetch_external_stations", new=mock):
        yield mock


@pytest.fixture
def client(fetch_mock: AsyncMock) -> Iterator[TestClient]:
    app = create_app(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    with TestClient(app) as test_client:
        yield test_client
