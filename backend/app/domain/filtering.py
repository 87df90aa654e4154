from __future__ import annotations

from typing import Iterable, List, Optional
import math

from .models import DEFAULT_RADIUS_KM, CityLocation, Event, EventQuery

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_to(event: Event, lat: float, lon: float) -> float:
    return haversine_km(lat, lon, event.lat, event.lon)


def filter_by_radius(
    events: Iterable[Event],
    lat: float,
    lon: float,
    radius_km: float = DEFAULT_RADIUS_KM,
) -> List[Event]:
    """Keep events within ``radius_km`` of (``lat``, ``lon``), boundary included."""
    return [event for event in events if distance_to(event, lat, lon) <= radius_km]


def searchable_text(event: Event) -> str:
    return " ".join((event.title, event.tags, event.description, event.city)).lower()


def filter_by_text(events: Iterable[Event], text: Optional[str]) -> List[Event]:
    """Case-insensitive substring match over title, tags, description and city."""
    if not text:
        return list(events)
    needle = text.lower()
    return [event for event in events if needle in searchable_text(event)]


def filter_events(events: Iterable[Event], query: EventQuery) -> List[Event]:
    result = list(events)
    if query.has_location:
        result = filter_by_radius(result, query.lat, query.lon, query.radius_km)
    if query.text:
        result = filter_by_text(result, query.text)
    return result


def locate_city(events: Iterable[Event], name: Optional[str]) -> Optional[CityLocation]:
    """Reference point of the first event whose city contains ``name``.

    Lets clients without geolocation search around a city or postcode that
    appears in the catalog.
    """
    needle = (name or "").strip().lower()
    if not needle:
        return None
    for event in events:
        if event.city and needle in event.city.lower():
            return CityLocation(city=event.city, lat=event.lat, lon=event.lon)
    return None
