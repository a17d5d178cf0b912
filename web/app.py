"""
FastAPI web application for the chess tournament map.

Serves the Leaflet page and a small JSON API behind it:

    GET  /api/years     selectable years and the default selection
    POST /api/render    markers, list entries and view for a filter state
    GET  /api/geocode   coordinate for a free-text place name

The browser keeps the filter state (selected year and search location) and
sends it with every render request; the server keeps nothing per user.

Architecture notes:
- Sync endpoints (not async): FastAPI runs them in a thread pool, which suits
  the blocking requests call made by the geocoder.
- The store is loaded once when the app is created. If that load fails the
  app still serves the page, but every data endpoint answers 503 with the
  load error so the page can show it.
- Static files mounted LAST: route registration is first-match, so API routes
  must be registered before the StaticFiles catch-all.

Run with:
    uvicorn web.app:app
"""

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field, field_validator

from tournaments.errors import GeocodeNotFound, GeocodeUnavailable, LoadError
from tournaments.geocoder import Geocoder
from tournaments.models import Coordinate, FilterState, RenderOutput
from tournaments.render import render
from tournaments.store import TournamentStore
from tournaments.years import default_year, distinct_years

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

# Absolute path, independent of the working directory.
_STATIC_DIR = Path(__file__).parent / "static"
_DEFAULT_DATA = _STATIC_DIR / "assets" / "tournaments_with_coords.json"


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class LocationModel(BaseModel):
    """A coordinate in decimal degrees."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class RenderRequest(BaseModel):
    """
    Filter state sent by the page.

    Fields:
        year: Selected year string (exact match against the data file).
        location: Active search location, or null for year-only filtering.
    """

    year: str = ""
    location: LocationModel | None = None

    @field_validator("year")
    @classmethod
    def strip_year(cls, v: str) -> str:
        """Ignore stray whitespace from the select control."""
        return v.strip()


class MarkerModel(BaseModel):
    latitude: float
    longitude: float
    popup: str


class ListItemModel(BaseModel):
    name: str
    location: str
    year: str
    on_map: bool
    placeholder: bool


class ViewModel(BaseModel):
    latitude: float
    longitude: float
    zoom: int


class RenderResponse(BaseModel):
    """
    What the page draws.

    Fields:
        markers: Map pins (records with coordinates only).
        list_items: List entries, or one placeholder when nothing matches.
        view: View to set, or null to leave the map where it is.
    """

    markers: list[MarkerModel]
    list_items: list[ListItemModel]
    view: ViewModel | None

    @classmethod
    def from_output(cls, output: RenderOutput) -> "RenderResponse":
        return cls(
            markers=[MarkerModel(**vars(m)) for m in output.markers],
            list_items=[ListItemModel(**vars(i)) for i in output.list_items],
            view=ViewModel(**vars(output.view)) if output.view else None,
        )


class YearsResponse(BaseModel):
    years: list[str]
    default_year: str


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    data_source: str | os.PathLike | None = None,
    geocoder: Geocoder | None = None,
) -> FastAPI:
    """
    Build the application and load the tournament data once.

    Args:
        data_source: Data file path or URL. Defaults to the TOURNAMENTS_DATA
                     environment variable, then the bundled data file.
        geocoder:    Geocoder used by /api/geocode. Defaults to Nominatim.

    Returns:
        The configured FastAPI application.
    """
    source = data_source or os.environ.get("TOURNAMENTS_DATA") or _DEFAULT_DATA
    store = TournamentStore()
    try:
        store.load(source)
    except LoadError:
        # Surfaced through every data endpoint as a 503.
        _log.warning("Serving the map page without tournament data")

    geocoder = geocoder or Geocoder()
    years = distinct_years(store)

    app = FastAPI(title="Chess Tournament Map", version="1.0.0")
    app.state.store = store
    app.state.geocoder = geocoder

    def _require_store() -> TournamentStore:
        if not store.loaded:
            raise HTTPException(
                status_code=503,
                detail=f"Error: Could not load tournament data. {store.load_error}",
            )
        return store

    # -----------------------------------------------------------------------
    # API routes (registered BEFORE StaticFiles mount)
    # -----------------------------------------------------------------------

    @app.get("/api/years", response_model=YearsResponse)
    def api_years() -> YearsResponse:
        """
        Years for the year selector.

        Returns:
            YearsResponse with the sorted years and the initial selection.

        Raises:
            HTTPException 503: The tournament data failed to load.
        """
        _require_store()
        return YearsResponse(years=years, default_year=default_year(years))

    @app.post("/api/render", response_model=RenderResponse)
    def api_render(request: RenderRequest) -> RenderResponse:
        """
        Run the render pipeline for the page's filter state.

        Raises:
            HTTPException 503: The tournament data failed to load.
        """
        records = _require_store().records
        location = (
            Coordinate(request.location.latitude, request.location.longitude)
            if request.location
            else None
        )
        output = render(records, FilterState(request.year, location))
        return RenderResponse.from_output(output)

    @app.get("/api/geocode", response_model=LocationModel)
    def api_geocode(q: str = Query("", description="Place name to look up")) -> LocationModel:
        """
        Resolve a place name to a coordinate.

        A blank query is rejected: the page clears its location filter
        itself without calling this endpoint.

        Raises:
            HTTPException 400: Blank query.
            HTTPException 404: No match.
            HTTPException 502: Geocoding service unavailable.
        """
        if not q.strip():
            raise HTTPException(status_code=400, detail="Query must not be empty")
        try:
            coordinate = geocoder.resolve(q)
        except GeocodeNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except GeocodeUnavailable as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return LocationModel(latitude=coordinate.latitude, longitude=coordinate.longitude)

    @app.get("/", include_in_schema=False)
    def serve_root() -> FileResponse:
        """Serve the map page."""
        return FileResponse(_STATIC_DIR / "index.html")

    # -----------------------------------------------------------------------
    # Static file mount, registered last (catch-all for /static/* assets)
    # -----------------------------------------------------------------------

    app.mount("/static", StaticFiles(directory=_STATIC_DIR), name="static")
    return app


app = create_app()
