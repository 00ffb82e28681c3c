from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests
import urllib3

from station_api.config import Settings, settings as default_settings
from station_api.errors import FetchError
from station_api.models import StationSource

logger = logging.getLogger(__name__)

MISSING_ADDRESS = "N/A"

# All features with geometry, reprojected to WGS84.
QUERY_PARAMS = {
    "where": "objectid is not null",
    "text": "",
    "objectIds": "",
    "time": "",
    "geometry": "",
    "geometryType": "esriGeometryEnvelope",
    "inSR": "",
    "spatialRel": "esriSpatialRelIntersects",
    "distance": "",
    "units": "esriSRUnit_Foot",
    "relationParam": "",
    "outFields": "*",
    "returnGeometry": "true",
    "returnTrueCurves": "false",
    "maxAllowableOffset": "",
    "geometryPrecision": "",
    "outSR": "4326",
    "havingClause": "",
    "returnIdsOnly": "false",
    "returnCountOnly": "false",
    "orderByFields": "",
    "groupByFieldsForStatistics": "",
    "outStatistics": "",
    "returnZ": "false",
    "returnM": "false",
    "gdbVersion": "",
    "historicMoment": "",
    "returnDistinctValues": "false",
    "resultOffset": "",
    "resultRecordCount": "",
    "returnExtentOnly": "false",
    "datumTransformation": "",
    "parameterValues": "",
    "rangeValues": "",
    "quantizationParameters": "",
    "featureEncoding": "esriDefault",
    "f": "pjson",
}


def _download_features(settings: Settings) -> dict[str, Any]:
    if not settings.source_verify_tls:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    try:
        response = requests.get(
            settings.source_url,
            params=QUERY_PARAMS,
            verify=settings.source_verify_tls,
            timeout=settings.source_timeout,
        )
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        # JSON decode errors are RequestExceptions too in requests >= 2.27
        raise FetchError(str(exc)) from exc
    except ValueError as exc:
        raise FetchError(f"Invalid JSON from geoportal: {exc}") from exc


def station_from_feature(feature: dict[str, Any]) -> dict[str, Any]:
    attributes = feature.get("attributes") or {}
    geometry = feature["geometry"]
    return {
        "address": attributes.get("adresse") or MISSING_ADDRESS,
        "latitude": geometry["y"],
        "longitude": geometry["x"],
        "source": StationSource.API,
    }


def parse_features(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Map an ArcGIS feature collection to station rows.

    Raises FetchError if the payload is not a feature collection or a feature
    has no point geometry.
    """
    try:
        features = payload["features"]
        return [station_from_feature(feature) for feature in features]
    except (KeyError, TypeError, AttributeError) as exc:
        raise FetchError(f"Unexpected feature shape from geoportal: {exc!r}") from exc


async def fetch_external_stations(settings: Settings | None = None) -> list[dict[str, Any]]:
    settings = settings or default_settings
    logger.info("Downloading gas stations from %s", settings.source_url)
    payload = await asyncio.to_thread(_download_features, settings)
    stations = parse_features(payload)
    logger.info("Received %d features", len(stations))
    return stations
