"""Find nearest taxi station using KD-Tree for efficient lookup."""

from dataclasses import dataclass
from typing import Protocol, Sequence

import numpy as np
from scipy.spatial import cKDTree

from .distance import haversine


class Located(Protocol):
    """Anything with an id and a coordinate."""

    id: str
    lat: float
    lng: float


@dataclass
class NearestResult:
    """Result of nearest station search."""

    station_id: str
    distance_km: float


class NearestStationFinder:
    """
    Find nearest stations using a KD-Tree.

    The tree is built on coordinates in radians; the reported distance is
    the haversine distance to the matched station.
    """

    def __init__(self, stations: Sequence[Located] = ()):
        self.stations: list[Located] = []
        self.tree: cKDTree | None = None
        if stations:
            self.load_stations(stations)

    def load_stations(self, stations: Sequence[Located]) -> None:
        """Index the given stations."""
        self.stations = list(stations)
        if not self.stations:
            self.tree = None
            return

        coords = np.array([[s.lat, s.lng] for s in self.stations])
        self.tree = cKDTree(np.radians(coords))

    def find_nearest(self, lat: float, lng: float, k: int = 1) -> list[NearestResult]:
        """
        Find the k nearest stations to a given point.

        Args:
            lat: Latitude of the query point (degrees)
            lng: Longitude of the query point (degrees)
            k: Number of nearest stations to return

        Returns:
            List of NearestResult, closest first (empty if no stations)
        """
        if self.tree is None:
            return []

        k = min(k, len(self.stations))
        _distances, indices = self.tree.query(np.radians([lat, lng]), k=k)

        results = []
        for idx in np.atleast_1d(indices):
            station = self.stations[int(idx)]
            distance = haversine(lat, lng, station.lat, station.lng)
            results.append(NearestResult(station_id=station.id, distance_km=round(distance, 2)))
        return results
