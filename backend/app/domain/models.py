from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_RADIUS_KM = 10.0


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    description: str
    city: str
    lat: float
    lon: float
    date: str
    tags: str
    url: str


@dataclass(frozen=True)
class EventQuery:
    lat: Optional[float] = None
    lon: Optional[float] = None
    radius_km: float = DEFAULT_RADIUS_KM
    text: Optional[str] = None

    @property
    def has_location(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass(frozen=True)
class CityLocation:
    city: str
    lat: float
    lon: float
