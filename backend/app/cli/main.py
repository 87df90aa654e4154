import logging
import os
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from app.domain.filtering import distance_to, filter_events, locate_city
from app.domain.models import DEFAULT_RADIUS_KM, EventQuery
from app.infra.catalog import CatalogError, EventCatalog, resolve_events_path

app = typer.Typer(help="CLI for searching the regional events catalog")


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _load_catalog(events_file: Optional[Path]) -> EventCatalog:
    try:
        return EventCatalog.from_path(resolve_events_path(events_file))
    except CatalogError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


@app.command("search")
def cli_search(
    lat: Optional[float] = typer.Option(None, help="Reference latitude"),
    lon: Optional[float] = typer.Option(None, help="Reference longitude"),
    radius: float = typer.Option(DEFAULT_RADIUS_KM, help="Radius in km"),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Free-text search"),
    events_file: Optional[Path] = typer.Option(None, help="Path to events.json"),
):
    catalog = _load_catalog(events_file)
    search = EventQuery(lat=lat, lon=lon, radius_km=radius, text=query)
    results = filter_events(catalog, search)
    if not results:
        typer.echo("No events found")
        raise typer.Exit(code=0)
    for event in results:
        row = [event.id, event.title, event.city, event.date]
        if search.has_location:
            row.append(f"{distance_to(event, lat, lon):.1f}")
        typer.echo("\t".join(row))


@app.command("locate")
def cli_locate(
    city: str = typer.Argument(..., help="City name or postcode"),
    events_file: Optional[Path] = typer.Option(None, help="Path to events.json"),
):
    location = locate_city(_load_catalog(events_file), city)
    if location is None:
        typer.echo(f"No coordinates found for '{city}'", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{location.city}\t{location.lat:.5f}\t{location.lon:.5f}")


@app.command("serve")
def cli_serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8080, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    configure_logging()
    uvicorn.run("app.api.main:app", host=host, port=port, reload=reload, log_level="info")


if __name__ == "__main__":
    app()
