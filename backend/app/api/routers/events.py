from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_catalog
from app.domain.filtering import filter_events, locate_city
from app.domain.models import DEFAULT_RADIUS_KM, EventQuery
from app.infra.catalog import EventCatalog, event_to_dict

router = APIRouter(tags=["events"])


@router.get("/events")
def list_events(
    lat: Optional[float] = Query(None, ge=-90, le=90, description="Reference latitude"),
    lon: Optional[float] = Query(None, ge=-180, le=180, description="Reference longitude"),
    radius: float = Query(DEFAULT_RADIUS_KM, ge=0, description="Search radius in km"),
    q: Optional[str] = Query(None, description="Free-text search"),
    catalog: EventCatalog = Depends(get_catalog),
):
    query = EventQuery(lat=lat, lon=lon, radius_km=radius, text=q)
    return [event_to_dict(event) for event in filter_events(catalog, query)]


@router.get("/locate")
def locate(
    city: str = Query(..., min_length=1, description="City name or postcode"),
    catalog: EventCatalog = Depends(get_catalog),
):
    """
    Reference point of the first catalog city containing ``city``.
    """
    location = locate_city(catalog, city)
    if location is None:
        raise HTTPException(status_code=404, detail=f"No events found for city '{city}'")
    return {"city": location.city, "lat": location.lat, "lon": location.lon}
