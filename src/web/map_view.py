"""Map state for the stations map: markers and a simulated rider position."""

import asyncio
import logging
import random
from dataclasses import asdict, dataclass
from typing import Callable

from src.geo import NearestStationFinder
from src.network import ADDIS_CENTER, StationCatalog

logger = logging.getLogger(__name__)

DEFAULT_ZOOM = 13
# Largest drift per tick on each axis, in degrees
MAX_DRIFT = 0.000025


class MapViewError(RuntimeError):
    """Raised when a MapView is used outside its mounted lifetime."""


@dataclass
class Marker:
    """Station marker."""

    station_id: str
    title: str
    lat: float
    lng: float


class MapView:
    """
    Stations map owned by the presentation layer.

    mount() builds the station markers and places the rider at the city
    centre; start() drifts the rider position in the background until
    stop() or unmount(). Each view owns its own markers, position and task.
    """

    def __init__(
        self,
        catalog: StationCatalog,
        language: str = "en",
        rng: random.Random | None = None,
    ):
        self.catalog = catalog
        self.language = language
        self.rng = rng or random.Random()
        self.markers: list[Marker] = []
        self.position: dict[str, float] = dict(ADDIS_CENTER)
        self._mounted = False
        self._task: asyncio.Task | None = None
        self._nearest = NearestStationFinder(list(catalog.network.stations.values()))

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def mount(self, on_ready: Callable[["MapView"], None] | None = None) -> None:
        """Create markers and the rider position, then hand the view to on_ready."""
        self.unmount()
        for station_id in self.catalog.station_ids():
            lat, lng = self.catalog.coordinates(station_id)
            self.markers.append(
                Marker(
                    station_id=station_id,
                    title=self.catalog.lookup_display_name(station_id, self.language),
                    lat=lat,
                    lng=lng,
                )
            )
        self.position = dict(ADDIS_CENTER)
        self._mounted = True
        logger.debug("Map mounted with %d station markers", len(self.markers))

        if on_ready is not None:
            on_ready(self)

    def unmount(self) -> None:
        """Stop the simulation and drop all markers."""
        self.stop()
        self.markers = []
        self._mounted = False

    def _require_mounted(self) -> None:
        if not self._mounted:
            raise MapViewError("Map view is not mounted")

    def set_language(self, language: str) -> None:
        """Retitle the station markers."""
        self.language = language
        for marker in self.markers:
            marker.title = self.catalog.lookup_display_name(marker.station_id, language)

    def step(self) -> dict[str, float]:
        """Drift the simulated rider position by a small random offset."""
        self._require_mounted()
        self.position["lat"] += self.rng.uniform(-MAX_DRIFT, MAX_DRIFT)
        self.position["lng"] += self.rng.uniform(-MAX_DRIFT, MAX_DRIFT)
        return dict(self.position)

    async def _run(self, interval: float) -> None:
        while True:
            await asyncio.sleep(interval)
            self.step()

    def start(self, interval: float) -> None:
        """Start drifting the rider position every `interval` seconds (needs a running loop)."""
        self._require_mounted()
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(interval))

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def nearest_station(self) -> dict | None:
        """Station closest to the rider, with distance in km."""
        results = self._nearest.find_nearest(self.position["lat"], self.position["lng"])
        if not results:
            return None
        nearest = results[0]
        return {
            "id": nearest.station_id,
            "name": self.catalog.lookup_display_name(nearest.station_id, self.language),
            "distanceKm": nearest.distance_km,
        }

    def snapshot(self) -> dict:
        """JSON-ready map state."""
        self._require_mounted()
        return {
            "center": dict(ADDIS_CENTER),
            "zoom": DEFAULT_ZOOM,
            "language": self.language,
            "markers": [asdict(marker) for marker in self.markers],
            "rider": dict(self.position),
            "nearestStation": self.nearest_station(),
        }
