from __future__ import annotations

from fastapi import HTTPException, Request

from app.infra.catalog import EventCatalog


def get_catalog(request: Request) -> EventCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise HTTPException(status_code=500, detail="Event catalog not configured")
    return catalog
