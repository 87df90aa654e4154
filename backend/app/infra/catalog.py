from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict
from pathlib import Path
from typing import Iterator, Optional, Sequence

from app.domain.models import Event

logger = logging.getLogger("regional_events.catalog")

DEFAULT_EVENTS_PATH = Path(__file__).resolve().parents[2] / "data" / "events.json"

TEXT_FIELDS = ("id", "title", "description", "city", "date", "tags", "url")
COORDINATE_BOUNDS = {"lat": (-90.0, 90.0), "lon": (-180.0, 180.0)}


class CatalogError(RuntimeError):
    """Raised when the events dataset is missing or invalid."""


class EventCatalog:
    """Immutable, process-wide collection of events loaded once at startup."""

    def __init__(self, events: Sequence[Event]) -> None:
        self._events = tuple(events)

    @classmethod
    def from_path(cls, path: str | Path) -> "EventCatalog":
        path = Path(path)
        if not path.is_file():
            raise CatalogError(f"Events file not found: {path}")
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read events file {path}: {exc}") from exc
        try:
            payload = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CatalogError(f"Invalid events file {path}: {exc}") from exc
        catalog = cls.from_records(payload)
        logger.info("Loaded %d events from %s", len(catalog), path)
        return catalog

    @classmethod
    def from_records(cls, payload) -> "EventCatalog":
        if not isinstance(payload, list):
            raise CatalogError("Events dataset must be a JSON array")
        events = []
        seen_ids = set()
        for index, item in enumerate(payload):
            try:
                event = event_from_dict(item)
            except ValueError as exc:
                raise CatalogError(f"Invalid event at index {index}: {exc}") from exc
            if event.id in seen_ids:
                raise CatalogError(f"Duplicate event id at index {index}: {event.id!r}")
            seen_ids.add(event.id)
            events.append(event)
        return cls(events)

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)


def event_from_dict(item) -> Event:
    if not isinstance(item, dict):
        raise ValueError("record must be a JSON object")
    missing = [name for name in (*TEXT_FIELDS, "lat", "lon") if name not in item]
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")
    for name in TEXT_FIELDS:
        if not isinstance(item[name], str):
            raise ValueError(f"field '{name}' must be a string")
    coords = {}
    for name, (low, high) in COORDINATE_BOUNDS.items():
        value = item[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"field '{name}' must be a number")
        try:
            value = float(value)
        except OverflowError as exc:
            raise ValueError(f"field '{name}' out of range [{low}, {high}]") from exc
        if not low <= value <= high:
            raise ValueError(f"field '{name}' out of range [{low}, {high}]: {value}")
        coords[name] = value
    return Event(
        id=item["id"],
        title=item["title"],
        description=item["description"],
        city=item["city"],
        lat=coords["lat"],
        lon=coords["lon"],
        date=item["date"],
        tags=item["tags"],
        url=item["url"],
    )


def event_to_dict(event: Event) -> dict:
    return asdict(event)


def resolve_events_path(path: Optional[str | Path] = None) -> Path:
    if path is not None:
        return Path(path)
    return Path(os.getenv("EVENTS_PATH", DEFAULT_EVENTS_PATH))
