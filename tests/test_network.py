"""Tests for the taxi network and station catalog."""

import pytest

from src.network import NetworkError, Route, Station, StationCatalog, TaxiNetwork
from src.network.data import INTERCHANGE_STATION_IDS, ROUTES_DATA, STATIONS_DATA


def _station(station_id: str) -> Station:
    return Station(id=station_id, name_en=station_id, name_am=station_id, lat=9.0, lng=38.7)


class TestTaxiNetwork:
    """Tests for TaxiNetwork."""

    def test_default_network_sizes(self, network):
        assert len(network) == len(STATIONS_DATA) == 26
        assert len(network.routes) == len(ROUTES_DATA) == 11
        assert network.interchanges == tuple(INTERCHANGE_STATION_IDS)

    def test_every_referenced_station_exists(self, network):
        for route in network.routes:
            for station_id in route.stations:
                assert network.has_station(station_id)
        for station_id in network.interchanges:
            assert network.has_station(station_id)

    def test_routes_containing(self, network):
        assert [r.id for r in network.routes_containing("stadium")] == [4, 5, 6]
        assert [r.id for r in network.routes_containing("summit")] == [2, 9]
        assert network.routes_containing("stadium", "summit") == []
        assert [r.id for r in network.routes_containing("piazza", "arba_kilo")] == [1, 7]

    def test_route_lookup(self, network):
        assert network.route(5).name("en") == "Bole - Stadium"
        with pytest.raises(KeyError):
            network.route(99)

    def test_is_interchange(self, network):
        assert network.is_interchange("kazanchis")
        assert not network.is_interchange("asco")

    def test_graph_edges_follow_routes(self, network):
        graph = network.graph
        assert graph.has_edge("piazza", "arba_kilo")
        assert not graph.has_edge("piazza", "ayer_tena")
        # megnagna-arba_kilo is driven by routes 1 and 4
        assert sorted(graph["megnagna"]["arba_kilo"]["routes"]) == [1, 4]
        assert graph["piazza"]["arba_kilo"]["distance_km"] > 0

    def test_neighbors(self, network):
        assert network.neighbors("stadium") == ["arba_kilo", "gotera", "megnagna", "mexico"]
        assert network.neighbors("nowhere") == []

    def test_is_reachable(self, network):
        assert network.is_reachable("asco", "cmc")
        assert not network.is_reachable("asco", "nowhere")


class TestNetworkValidation:
    """Invariant checks at construction."""

    def test_unknown_route_station(self):
        with pytest.raises(NetworkError, match="unknown station"):
            TaxiNetwork([_station("a")], [Route(1, "r", "r", ("a", "b"))], [])

    def test_duplicate_stop_in_route(self):
        with pytest.raises(NetworkError, match="more than once"):
            TaxiNetwork(
                [_station("a"), _station("b")],
                [Route(1, "r", "r", ("a", "b", "a"))],
                [],
            )

    def test_unknown_interchange(self):
        with pytest.raises(NetworkError, match="interchange"):
            TaxiNetwork([_station("a")], [], ["b"])

    def test_duplicate_station(self):
        with pytest.raises(NetworkError, match="Duplicate station"):
            TaxiNetwork([_station("a"), _station("a")], [], [])

    def test_duplicate_route_id(self):
        with pytest.raises(NetworkError, match="Duplicate route"):
            TaxiNetwork(
                [_station("a"), _station("b")],
                [Route(1, "r", "r", ("a", "b")), Route(1, "s", "s", ("b", "a"))],
                [],
            )

    def test_network_error_is_value_error(self):
        assert issubclass(NetworkError, ValueError)


class TestStationCatalog:
    """Tests for StationCatalog."""

    def test_lookup_display_name(self, catalog):
        assert catalog.lookup_display_name("arba_kilo", "en") == "Arat Kilo"
        assert catalog.lookup_display_name("arba_kilo", "am") == "አራት ኪሎ"
        assert catalog.lookup_display_name("michele", "fr") == "Michel"

    def test_lookup_is_total_over_network(self, catalog, network):
        for route in network.routes:
            for station_id in route.stations:
                for language in ("en", "am"):
                    assert catalog.lookup_display_name(station_id, language)

    def test_unknown_station_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.lookup_display_name("nowhere")

    def test_station_ids_sorted(self, catalog):
        ids = catalog.station_ids()
        assert ids == sorted(ids)
        assert ids[0] == "22_mazoria"

    def test_options(self, catalog):
        options = dict(catalog.options("am"))
        assert options["bole"] == "ቦሌ"
        assert len(options) == 26

    def test_coordinates(self, catalog):
        assert catalog.coordinates("piazza") == (9.0375, 38.7495)

    def test_resolve(self, catalog):
        assert catalog.resolve("piazza") == "piazza"
        assert catalog.resolve("Arat Kilo") == "arba_kilo"
        assert catalog.resolve("ayer-tena") == "ayer_tena"
        assert catalog.resolve("መገናኛ") == "megnagna"
        assert catalog.resolve("Paris") is None

    def test_search_exact(self, catalog):
        matches = catalog.search("kazanchis")
        assert [(m.station_id, m.score) for m in matches] == [("kazanchis", 100)]

    def test_search_typo(self, catalog):
        matches = catalog.search("Kazanchiz")
        assert matches[0].station_id == "kazanchis"

    def test_search_returns_requested_language(self, catalog):
        matches = catalog.search("Megnagna", language="am")
        assert matches[0].name == "መገናኛ"

    def test_search_one_match_per_station(self, catalog):
        matches = catalog.search("mazoria", limit=5)
        ids = [m.station_id for m in matches]
        assert len(ids) == len(set(ids))

    def test_search_empty(self, catalog):
        assert catalog.search("") == []
        assert catalog.search("   ") == []

    def test_contains(self, catalog):
        assert "bole" in catalog
        assert "nowhere" not in catalog

    def test_custom_network(self, build_network):
        catalog = StationCatalog(build_network({1: ["a", "b"]}, []))
        assert catalog.lookup_display_name("a", "am") == "am-a"
        assert len(catalog) == 2
