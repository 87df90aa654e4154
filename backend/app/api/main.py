from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import events, health
from app.infra.catalog import EventCatalog, resolve_events_path

logger = logging.getLogger("regional_events.api")


def create_app(catalog: EventCatalog | None = None) -> FastAPI:
    app = FastAPI(title="Regional Events API", version="0.1.0")
    if catalog is None:
        catalog = EventCatalog.from_path(resolve_events_path())
    app.state.catalog = catalog
    logger.info("Serving %d events", len(catalog))

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    if not origins:
        origins = ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(events.router, prefix="/api")
    app.include_router(health.router, prefix="/api")
    return app


app = create_app()
