"""Station catalog: display names, coordinates and name search."""

from dataclasses import dataclass

from src.nlp.preprocessing import fuzzy_match_station, normalize_station_name

from .graph import DEFAULT_LANGUAGE, LANGUAGES, Route, Station, TaxiNetwork, default_network


@dataclass
class SearchMatch:
    """A station matched by a free-text query."""

    station_id: str
    name: str  # Name in the requested language
    score: int  # 100 for an exact (normalized) match


class StationCatalog:
    """
    Lookup of station display data for the presentation layer.

    Names are total over the network: every id referenced by a route or
    the interchange list resolves in both languages.
    """

    def __init__(self, network: TaxiNetwork | None = None):
        self.network = network or default_network()
        # Normalized name (either language) or id -> station id
        self._by_normalized: dict[str, str] = {}
        for station in self.network.stations.values():
            for key in (station.id, station.name_en, station.name_am):
                self._by_normalized.setdefault(normalize_station_name(key), station.id)

    def _station(self, station_id: str) -> Station:
        return self.network.station(station_id)

    def lookup_display_name(self, station_id: str, language: str = DEFAULT_LANGUAGE) -> str:
        """Display name of a station (KeyError for unknown ids)."""
        return self._station(station_id).name(language)

    def route_name(self, route: Route, language: str = DEFAULT_LANGUAGE) -> str:
        return route.name(language)

    def coordinates(self, station_id: str) -> tuple[float, float]:
        """(lat, lng) of a station."""
        station = self._station(station_id)
        return station.lat, station.lng

    def station_ids(self) -> list[str]:
        """All station ids, sorted (picker order)."""
        return sorted(self.network.stations)

    def options(self, language: str = DEFAULT_LANGUAGE) -> list[tuple[str, str]]:
        """(id, display name) pairs for a station picker."""
        return [
            (station_id, self.lookup_display_name(station_id, language))
            for station_id in self.station_ids()
        ]

    def resolve(self, text: str) -> str | None:
        """Station id for an id or exact name in either language."""
        if text in self.network.stations:
            return text
        return self._by_normalized.get(normalize_station_name(text))

    def search(
        self, query: str, language: str | None = None, limit: int = 5, threshold: int = 70
    ) -> list[SearchMatch]:
        """
        Find stations by (possibly misspelled) name.

        Args:
            query: Free text, in English or Amharic
            language: Language of the returned names (default English)
            limit: Maximum number of matches
            threshold: Minimum similarity score (0-100)

        Returns:
            Matches sorted by score descending, one per station
        """
        language = language if language in LANGUAGES else DEFAULT_LANGUAGE
        if not query or not query.strip():
            return []

        exact = self.resolve(query)
        if exact:
            return [SearchMatch(exact, self.lookup_display_name(exact, language), 100)]

        candidates = list(self._by_normalized)
        matches = fuzzy_match_station(query, candidates, threshold=threshold, limit=limit * 3)

        results = []
        seen = set()
        for candidate, score in matches:
            station_id = self._by_normalized[candidate]
            if station_id in seen:
                continue
            seen.add(station_id)
            results.append(
                SearchMatch(station_id, self.lookup_display_name(station_id, language), score)
            )
            if len(results) >= limit:
                break
        return results

    def __contains__(self, station_id: object) -> bool:
        return station_id in self.network.stations

    def __len__(self) -> int:
        return len(self.network)
