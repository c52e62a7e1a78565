"""Shared fixtures."""

import pytest

from src.network import Route, Station, StationCatalog, TaxiNetwork, default_network


def _make_network(routes: dict[int, list[str]], interchanges: list[str]) -> TaxiNetwork:
    """
    Small network for tests.

    Station names are the upper-cased ids in English and "am-<id>" in Amharic.
    Coordinates are spread along a line so distances are non-zero.
    """
    ids: list[str] = []
    for stations in routes.values():
        for station_id in stations:
            if station_id not in ids:
                ids.append(station_id)
    for station_id in interchanges:
        if station_id not in ids:
            ids.append(station_id)

    stations = [
        Station(id=s, name_en=s.upper(), name_am=f"am-{s}", lat=9.0 + i * 0.01, lng=38.7)
        for i, s in enumerate(ids)
    ]
    route_objs = [
        Route(id=route_id, name_en=f"Route {route_id}", name_am=f"መስመር {route_id}", stations=tuple(s))
        for route_id, s in routes.items()
    ]
    return TaxiNetwork(stations, route_objs, interchanges)


@pytest.fixture
def network():
    return default_network()


@pytest.fixture
def catalog(network):
    return StationCatalog(network)


@pytest.fixture
def build_network():
    """Factory for small test networks: build_network(routes, interchanges)."""
    return _make_network
