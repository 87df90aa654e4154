from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.api.main import create_app
from app.infra.catalog import EventCatalog

SAMPLE_EVENTS = [
    {
        "id": "paris-jazz",
        "title": "Jazz Night",
        "description": "",
        "city": "Paris",
        "lat": 48.8566,
        "lon": 2.3522,
        "date": "2026-04-02T21:00:00",
        "tags": "music,live",
        "url": "https://example.com/jazz-night",
    },
    {
        "id": "paris-market",
        "title": "Marché du Louvre",
        "description": "Street food market",
        "city": "Paris",
        "lat": 48.8606,
        "lon": 2.3376,
        "date": "2026-04-03",
        "tags": "food,market",
        "url": "https://example.com/market",
    },
    {
        "id": "london-proms",
        "title": "Proms",
        "description": "Classical evening",
        "city": "London",
        "lat": 51.5074,
        "lon": -0.1278,
        "date": "2026-09-12",
        "tags": "music,classical",
        "url": "https://example.com/proms",
    },
    {
        "id": "berlin-jazz",
        "title": "Jazz im Hof",
        "description": "Open-Air-Konzert",
        "city": "Berlin",
        "lat": 52.52,
        "lon": 13.405,
        "date": "2026-06-12",
        "tags": "musik,jazz",
        "url": "",
    },
]


@pytest.fixture()
def sample_events():
    return [dict(item) for item in SAMPLE_EVENTS]


@pytest.fixture()
def api_client():
    app = create_app(catalog=EventCatalog.from_records(SAMPLE_EVENTS))
    with TestClient(app) as client:
        yield client
