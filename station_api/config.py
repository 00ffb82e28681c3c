from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

SOURCE_URL = (
    "https://geoportal.stadt-koeln.de/arcgis/rest/services/"
    "verkehr/gefahrgutstrecken/MapServer/0/query"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STATION_API_")

    database_url: str = "sqlite+aiosqlite:///:memory:"
    source_url: str = SOURCE_URL
    # The geoportal certificate chain does not validate.
    source_verify_tls: bool = False
    source_timeout: float | None = None
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


settings = Settings()
