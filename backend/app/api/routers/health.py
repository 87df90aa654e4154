from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_catalog
from app.infra.catalog import EventCatalog

router = APIRouter(tags=["health"])


@router.get("/health")
def health(catalog: EventCatalog = Depends(get_catalog)):
    return {"status": "ok", "events": len(catalog)}
