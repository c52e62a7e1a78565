"""
FastAPI web interface for the Addis Taxi Route Finder.

Bilingual page with station pickers and results, plus a JSON API.
"""

import logging
from pathlib import Path
from typing import Literal

from fastapi import FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from src.advisory import ADVISORY_KINDS, AdvisoryService
from src.config import settings
from src.network import StationCatalog, default_network
from src.routing import RouteFinder

from .map_view import MapView
from .translations import strings_for

logger = logging.getLogger(__name__)

Language = Literal["en", "am"]

# Paths
BASE_DIR = Path(__file__).parent
TEMPLATES_DIR = BASE_DIR / "templates"

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Minibus taxi routes between Addis Ababa stations",
    version=settings.VERSION,
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


# Global instances (loaded on startup)
catalog: StationCatalog | None = None
finder: RouteFinder | None = None
map_view: MapView | None = None
advisor: AdvisoryService | None = None


def _map_ready(view: MapView) -> None:
    logger.info("Stations map ready (%d markers)", len(view.markers))


@app.on_event("startup")
async def startup_event():
    """Build the network, map and advisory client."""
    global catalog, finder, map_view, advisor

    logging.basicConfig(level=settings.LOG_LEVEL)

    network = default_network()
    catalog = StationCatalog(network)
    finder = RouteFinder(network)
    logger.info(
        "Loaded taxi network: %d stations, %d routes", len(network), len(network.routes)
    )

    map_view = MapView(catalog, language=settings.DEFAULT_LANGUAGE)
    map_view.mount(on_ready=_map_ready)
    map_view.start(settings.MAP_TICK_SECONDS)

    advisor = AdvisoryService.from_settings(settings)
    if not advisor.configured:
        logger.warning("GEMINI_API_KEY not set; advisories are disabled")


@app.on_event("shutdown")
async def shutdown_event():
    if map_view is not None:
        map_view.unmount()
    if advisor is not None:
        await advisor.aclose()


class RouteResponse(BaseModel):
    """Response model for route search."""

    origin: str | None = None
    destination: str | None = None
    language: str
    options: list[dict]  # JourneyOption.to_dict() items


class StationOption(BaseModel):
    id: str
    name: str


class SearchResult(BaseModel):
    id: str
    name: str
    score: int


class AdvisoryRequest(BaseModel):
    """Request model for advisories: the journey is recomputed from the stations."""

    origin: str
    destination: str
    lang: Language = "en"
    option_index: int = Field(default=0, ge=0)


class AdvisoryResponse(BaseModel):
    kind: str
    text: str


class SpeechRequest(BaseModel):
    text: str = Field(min_length=1, max_length=500)


def _require_loaded() -> tuple[StationCatalog, RouteFinder]:
    if catalog is None or finder is None:
        raise HTTPException(status_code=503, detail="Network not loaded")
    return catalog, finder


def search_routes(origin: str | None, destination: str | None, language: str) -> RouteResponse:
    """Run the route finder and shape the result for rendering."""
    _catalog, route_finder = _require_loaded()
    options = route_finder.find_route(origin, destination, language)
    return RouteResponse(
        origin=origin or None,
        destination=destination or None,
        language=language,
        options=[option.to_dict() for option in options],
    )


def render_page(
    request: Request,
    language: str,
    origin: str | None = None,
    destination: str | None = None,
):
    station_catalog, _finder = _require_loaded()
    result = search_routes(origin, destination, language) if origin and destination else None
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "t": strings_for(language),
            "lang": language,
            "other_lang": "en" if language == "am" else "am",
            "stations": station_catalog.options(language),
            "origin": origin,
            "destination": destination,
            "result": result,
            "advisory_enabled": advisor is not None and advisor.configured,
        },
    )


@app.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    lang: Language = Query(default="en"),
    origin: str | None = None,
    destination: str | None = None,
):
    """Render main page (optionally with results)."""
    return render_page(request, lang, origin, destination)


@app.post("/", response_class=HTMLResponse)
async def process_form(
    request: Request,
    origin: str = Form(""),
    destination: str = Form(""),
    lang: Language = Form("en"),
):
    """Process form submission and return results."""
    return render_page(request, lang, origin, destination)


@app.get("/api/stations", response_model=list[StationOption])
async def api_stations(lang: Language = Query(default="en")) -> list[StationOption]:
    """Station picker options, sorted by id."""
    station_catalog, _finder = _require_loaded()
    return [StationOption(id=i, name=name) for i, name in station_catalog.options(lang)]


@app.get("/api/stations/search", response_model=list[SearchResult])
async def api_station_search(
    q: str = Query(min_length=1),
    lang: Language = Query(default="en"),
    limit: int = Query(default=5, ge=1, le=20),
) -> list[SearchResult]:
    """Fuzzy station search by name in either language."""
    station_catalog, _finder = _require_loaded()
    return [
        SearchResult(id=m.station_id, name=m.name, score=m.score)
        for m in station_catalog.search(q, language=lang, limit=limit)
    ]


@app.get("/api/route", response_model=RouteResponse)
async def api_route(
    origin: str | None = None,
    destination: str | None = None,
    lang: Language = Query(default="en"),
) -> RouteResponse:
    """Journey options between two stations."""
    return search_routes(origin, destination, lang)


@app.get("/api/map")
async def api_map(lang: Language = Query(default="en")) -> dict:
    """Station markers and the simulated rider position."""
    if map_view is None or not map_view.mounted:
        raise HTTPException(status_code=503, detail="Map not mounted")
    if lang != map_view.language:
        map_view.set_language(lang)
    return map_view.snapshot()


def _require_advisor() -> AdvisoryService:
    if advisor is None or not advisor.configured:
        raise HTTPException(status_code=503, detail="Advisory service is not configured")
    return advisor


@app.post("/api/advisory/{kind}", response_model=AdvisoryResponse)
async def api_advisory(kind: str, body: AdvisoryRequest) -> AdvisoryResponse:
    """Fare, phrases, status or alternatives advice for a computed journey."""
    if kind not in ADVISORY_KINDS:
        raise HTTPException(status_code=404, detail=f"Unknown advisory: {kind}")
    service = _require_advisor()
    _catalog, route_finder = _require_loaded()

    options = route_finder.find_route(body.origin, body.destination, body.lang)
    if body.option_index >= len(options):
        raise HTTPException(status_code=404, detail="No such journey option")

    result = await service.advise(kind, options[body.option_index], body.lang)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    return AdvisoryResponse(kind=kind, text=result.text)


@app.post("/api/speech")
async def api_speech(body: SpeechRequest) -> Response:
    """Spoken phrase as WAV audio."""
    service = _require_advisor()
    result = await service.speak(body.text)
    if not result.ok:
        raise HTTPException(status_code=502, detail=result.error)
    return Response(content=result.wav, media_type="audio/wav")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "network_loaded": finder is not None,
        "stations": len(catalog) if catalog is not None else 0,
        "map_mounted": map_view is not None and map_view.mounted,
        "advisory_enabled": advisor is not None and advisor.configured,
    }
