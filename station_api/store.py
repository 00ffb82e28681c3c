from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from station_api.errors import StoreError
from station_api.models import GasStation, StationSource

logger = logging.getLogger(__name__)


class StationStore:
    """Statements against the ``gas_stations`` table.

    Every mutating call commits on its own; there is no grouping of several
    calls into one transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _rollback(self, exc: SQLAlchemyError, action: str) -> StoreError:
        await self.session.rollback()
        logger.error(f"Failed to {action}: {exc}")
        return StoreError(str(exc))

    async def insert(
        self,
        address: Any,
        latitude: Any,
        longitude: Any,
        source: StationSource,
        station_id: int | None = None,
    ) -> int:
        station = GasStation(
            id=station_id,
            address=address,
            latitude=latitude,
            longitude=longitude,
            source=StationSource(source).value,
        )
        try:
            self.session.add(station)
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, "insert station") from exc
        return station.id

    async def list_all(self) -> list[GasStation]:
        try:
            result = await self.session.execute(select(GasStation).order_by(GasStation.id))
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, "list stations") from exc
        return list(result.scalars().all())

    async def count_by_address(self, address: Any) -> int:
        try:
            count = await self.session.scalar(
                select(func.count(GasStation.id)).where(GasStation.address == address)
            )
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, "count stations by address") from exc
        return int(count or 0)

    async def max_id(self) -> int | None:
        try:
            return await self.session.scalar(select(func.max(GasStation.id)))
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, "read highest station id") from exc

    # Ids may arrive as raw path strings; one that is not numeric matches no row.
    async def update(
        self,
        station_id: int | str,
        address: Any,
        latitude: Any,
        longitude: Any,
    ) -> bool:
        stmt = (
            update(GasStation)
            .where(GasStation.id == station_id)
            .values(address=address, latitude=latitude, longitude=longitude)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, f"update station {station_id}") from exc
        return result.rowcount > 0

    async def delete_by_id(self, station_id: int | str) -> bool:
        stmt = (
            delete(GasStation)
            .where(GasStation.id == station_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, f"delete station {station_id}") from exc
        return result.rowcount > 0

    async def delete_all(self) -> int:
        try:
            result = await self.session.execute(delete(GasStation))
            await self.session.commit()
        except SQLAlchemyError as exc:
            raise await self._rollback(exc, "delete all stations") from exc
        return result.rowcount
