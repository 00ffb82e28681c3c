from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from station_api.database import get_session
from station_api.models import StationSource
from station_api.schemas import ImportResponse, StationCreated, StationPayload, StationResponse
from station_api.store import StationStore
from station_api.sync import StationSynchronizer

router = APIRouter(prefix="/api")


def get_store(session: AsyncSession = Depends(get_session)) -> StationStore:
    return StationStore(session)


def get_synchronizer(request: Request) -> StationSynchronizer:
    return request.app.state.synchronizer


@router.get("/gas-stations", response_model=list[StationResponse])
async def list_stations(
    store: StationStore = Depends(get_store),
    synchronizer: StationSynchronizer = Depends(get_synchronizer),
) -> list[StationResponse]:
    await synchronizer.ensure_initial_fetch(store)
    stations = await store.list_all()
    return [StationResponse.model_validate(station) for station in stations]


@router.get("/external-gas-stations", response_model=ImportResponse)
async def import_external_stations(
    store: StationStore = Depends(get_store),
    synchronizer: StationSynchronizer = Depends(get_synchronizer),
) -> ImportResponse:
    result = await synchronizer.refresh(store)
    return ImportResponse(message=result.message, added=result.added)


# A missing body is treated as a body with every field null.
@router.post("/gas-stations", response_model=StationCreated)
async def create_station(
    payload: StationPayload | None = Body(None),
    store: StationStore = Depends(get_store),
) -> StationCreated:
    payload = payload or StationPayload()
    next_id = (await store.max_id() or 0) + 1
    station_id = await store.insert(
        payload.address,
        payload.latitude,
        payload.longitude,
        StationSource.USER,
        station_id=next_id,
    )
    return StationCreated(id=station_id)


# Unknown ids are not an error: update and delete answer 200 either way.
# Ids stay strings here so that a non-numeric id simply matches no row.
@router.put("/gas-stations/{station_id}")
async def update_station(
    station_id: str,
    payload: StationPayload | None = Body(None),
    store: StationStore = Depends(get_store),
) -> Response:
    payload = payload or StationPayload()
    await store.update(station_id, payload.address, payload.latitude, payload.longitude)
    return Response(status_code=200)


@router.delete("/gas-stations/{station_id}")
async def delete_station(station_id: str, store: StationStore = Depends(get_store)) -> Response:
    await store.delete_by_id(station_id)
    return Response(status_code=200)


@router.delete("/gas-stations")
async def delete_all_stations(store: StationStore = Depends(get_store)) -> Response:
    await store.delete_all()
    return Response(status_code=200)
