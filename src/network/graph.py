"""Taxi network construction from the static station and route tables."""

from dataclasses import dataclass
from functools import lru_cache

import networkx as nx

from src.geo.distance import haversine

from .data import INTERCHANGE_STATION_IDS, ROUTES_DATA, STATIONS_DATA

LANGUAGES = ("en", "am")
DEFAULT_LANGUAGE = "en"


class NetworkError(ValueError):
    """Raised when the station/route tables break a network invariant."""


@dataclass(frozen=True)
class Station:
    """Taxi station (a named stop)."""

    id: str
    name_en: str
    name_am: str
    lat: float
    lng: float

    def name(self, language: str = DEFAULT_LANGUAGE) -> str:
        """Display name in the given language (English for anything but 'am')."""
        return self.name_am if language == "am" else self.name_en


@dataclass(frozen=True)
class Route:
    """A minibus line: the ordered stations it drives through."""

    id: int
    name_en: str
    name_am: str
    stations: tuple[str, ...]

    def name(self, language: str = DEFAULT_LANGUAGE) -> str:
        return self.name_am if language == "am" else self.name_en

    def __contains__(self, station_id: object) -> bool:
        return station_id in self.stations

    def index(self, station_id: str) -> int:
        return self.stations.index(station_id)


class TaxiNetwork:
    """
    Immutable view of the taxi network.

    Holds the stations, the routes (in table order) and the interchange
    stations (in declared order). A networkx graph is built alongside:
    nodes are stations, edges join consecutive stops of a route and carry
    the route ids serving them and the straight-line distance in km.
    """

    def __init__(
        self,
        stations: list[Station] | tuple[Station, ...],
        routes: list[Route] | tuple[Route, ...],
        interchanges: list[str] | tuple[str, ...],
    ):
        self.stations: dict[str, Station] = {}
        for station in stations:
            if station.id in self.stations:
                raise NetworkError(f"Duplicate station id: {station.id}")
            self.stations[station.id] = station

        self.routes: tuple[Route, ...] = tuple(routes)
        self.interchanges: tuple[str, ...] = tuple(interchanges)

        self._validate()
        self.graph = self._build_graph()

    @classmethod
    def from_tables(
        cls,
        stations_data: list[dict],
        routes_data: list[dict],
        interchange_ids: list[str],
    ) -> "TaxiNetwork":
        """
        Build a network from plain table rows.

        Expected station keys: id, en, am, lat, lng
        Expected route keys: id, name_en, name_am, stations
        """
        stations = [
            Station(
                id=row["id"],
                name_en=row["en"],
                name_am=row["am"],
                lat=float(row["lat"]),
                lng=float(row["lng"]),
            )
            for row in stations_data
        ]
        routes = [
            Route(
                id=row["id"],
                name_en=row["name_en"],
                name_am=row["name_am"],
                stations=tuple(row["stations"]),
            )
            for row in routes_data
        ]
        return cls(stations, routes, interchange_ids)

    def _validate(self) -> None:
        """Check that every referenced station exists and no route repeats a stop."""
        route_ids = set()
        for route in self.routes:
            if route.id in route_ids:
                raise NetworkError(f"Duplicate route id: {route.id}")
            route_ids.add(route.id)

            seen = set()
            for station_id in route.stations:
                if station_id not in self.stations:
                    raise NetworkError(
                        f"Route {route.id} references unknown station: {station_id}"
                    )
                if station_id in seen:
                    raise NetworkError(
                        f"Route {route.id} visits {station_id} more than once"
                    )
                seen.add(station_id)

        for station_id in self.interchanges:
            if station_id not in self.stations:
                raise NetworkError(f"Unknown interchange station: {station_id}")
        if len(set(self.interchanges)) != len(self.interchanges):
            raise NetworkError("Interchange list contains duplicates")

    def _build_graph(self) -> nx.Graph:
        graph = nx.Graph()
        for station in self.stations.values():
            graph.add_node(
                station.id,
                lat=station.lat,
                lng=station.lng,
                interchange=station.id in self.interchanges,
            )

        for route in self.routes:
            for a, b in zip(route.stations, route.stations[1:]):
                if graph.has_edge(a, b):
                    graph[a][b]["routes"].append(route.id)
                    continue
                s1, s2 = self.stations[a], self.stations[b]
                graph.add_edge(
                    a,
                    b,
                    routes=[route.id],
                    distance_km=haversine(s1.lat, s1.lng, s2.lat, s2.lng),
                )
        return graph

    def has_station(self, station_id: str) -> bool:
        """Check if a station exists in the network."""
        return station_id in self.stations

    def station(self, station_id: str) -> Station:
        """Get a station by id (KeyError if unknown)."""
        return self.stations[station_id]

    def route(self, route_id: int) -> Route:
        """Get a route by id (KeyError if unknown)."""
        for route in self.routes:
            if route.id == route_id:
                return route
        raise KeyError(route_id)

    def routes_containing(self, *station_ids: str) -> list[Route]:
        """Routes serving all of the given stations, in table order."""
        return [
            route
            for route in self.routes
            if all(station_id in route for station_id in station_ids)
        ]

    def is_interchange(self, station_id: str) -> bool:
        return station_id in self.interchanges

    def neighbors(self, station_id: str) -> list[str]:
        """Stations adjacent to this one on any route."""
        if station_id not in self.graph:
            return []
        return sorted(self.graph.neighbors(station_id))

    def is_reachable(self, origin_id: str, destination_id: str) -> bool:
        """Whether any chain of rides links the two stations (ignores transfer limits)."""
        if origin_id not in self.graph or destination_id not in self.graph:
            return False
        return nx.has_path(self.graph, origin_id, destination_id)

    def __len__(self) -> int:
        """Return number of stations."""
        return len(self.stations)


@lru_cache(maxsize=1)
def default_network() -> TaxiNetwork:
    """The Addis Ababa network, built once from the static tables."""
    return TaxiNetwork.from_tables(STATIONS_DATA, ROUTES_DATA, INTERCHANGE_STATION_IDS)
