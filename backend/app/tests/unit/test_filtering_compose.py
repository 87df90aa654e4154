from __future__ import annotations

from app.domain.filtering import (
    filter_by_radius,
    filter_by_text,
    filter_events,
    locate_city,
)
from app.domain.models import CityLocation, Event, EventQuery


def make_event(event_id, title, city, lat, lon, tags=""):
    return Event(
        id=event_id,
        title=title,
        description="",
        city=city,
        lat=lat,
        lon=lon,
        date="2026-04-02",
        tags=tags,
        url="",
    )


EVENTS = [
    make_event("1", "Jazz Night", "Paris", 48.8566, 2.3522, tags="music,live"),
    make_event("2", "Marché du Louvre", "Paris", 48.8606, 2.3376, tags="food"),
    make_event("3", "Proms in the Park", "London", 51.5074, -0.1278, tags="music"),
    make_event("4", "Jazz am See", "Potsdam", 52.4043, 13.0386, tags="music"),
]


def test_no_filters_returns_full_collection_in_order():
    assert filter_events(EVENTS, EventQuery()) == EVENTS


def test_single_coordinate_does_not_apply_geo_filter():
    assert filter_events(EVENTS, EventQuery(lat=48.8566)) == EVENTS
    assert filter_events(EVENTS, EventQuery(lon=2.3522)) == EVENTS


def test_geo_query_uses_default_radius():
    query = EventQuery(lat=48.8566, lon=2.3522)
    assert query.radius_km == 10.0
    assert [e.id for e in filter_events(EVENTS, query)] == ["1", "2"]


def test_composition_is_intersection_of_filters():
    query = EventQuery(lat=48.8566, lon=2.3522, radius_km=5, text="music")
    geo = filter_by_radius(EVENTS, 48.8566, 2.3522, 5)
    text = filter_by_text(EVENTS, "music")
    expected = [e for e in EVENTS if e in geo and e in text]
    assert filter_events(EVENTS, query) == expected
    assert [e.id for e in expected] == ["1"]


def test_text_only_query():
    assert [e.id for e in filter_events(EVENTS, EventQuery(text="jazz"))] == ["1", "4"]


def test_filters_return_same_objects():
    result = filter_events(EVENTS, EventQuery(text="paris"))
    assert result[0] is EVENTS[0]
    assert result[1] is EVENTS[1]


def test_locate_city_returns_first_match():
    assert locate_city(EVENTS, "  PAR ") == CityLocation(city="Paris", lat=48.8566, lon=2.3522)
    assert locate_city(EVENTS, "dam") == CityLocation(city="Potsdam", lat=52.4043, lon=13.0386)


def test_locate_city_without_match_or_name():
    assert locate_city(EVENTS, "Hamburg") is None
    assert locate_city(EVENTS, "   ") is None
    assert locate_city(EVENTS, None) is None
