from __future__ import annotations

from enum import Enum as PyEnum

from sqlalchemy import Column, Float, Integer, String

from station_api.database import Base


class StationSource(str, PyEnum):
    API = "api"
    USER = "user"


class GasStation(Base):
    __tablename__ = "gas_stations"
    # AUTOINCREMENT keeps ids from being reused after deletes.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)
    source = Column(String, nullable=False)
