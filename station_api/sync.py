from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from station_api import importer
from station_api.config import Settings, settings as default_settings
from station_api.models import StationSource
from station_api.store import StationStore

logger = logging.getLogger(__name__)


class SyncStatus(str, Enum):
    NOT_FETCHED = "not_fetched"
    FETCHED = "fetched"


@dataclass(frozen=True)
class ImportResult:
    added: int

    @property
    def message(self) -> str:
        return f"{self.added} new gas stations added."


class StationSynchronizer:
    """Imports geoportal stations into the store, skipping known addresses.

    The lazy path (``ensure_initial_fetch``) runs once per process, the first
    time the station list is read. ``refresh`` imports unconditionally.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.status = SyncStatus.NOT_FETCHED
        self._lock = asyncio.Lock()

    async def ensure_initial_fetch(self, store: StationStore) -> ImportResult | None:
        if self.status is SyncStatus.FETCHED:
            return None
        async with self._lock:
            # Another request may have finished the import while we waited.
            if self.status is SyncStatus.FETCHED:
                return None
            result = await self._import(store)
            self.status = SyncStatus.FETCHED
            return result

    async def refresh(self, store: StationStore) -> ImportResult:
        async with self._lock:
            return await self._import(store)

    async def _import(self, store: StationStore) -> ImportResult:
        stations = await importer.fetch_external_stations(self.settings)
        added = 0
        for station in stations:
            if await store.count_by_address(station["address"]) > 0:
                continue
            await store.insert(
                station["address"],
                station["latitude"],
                station["longitude"],
                StationSource.API,
            )
            added += 1
        result = ImportResult(added=added)
        logger.info(result.message)
        return result
