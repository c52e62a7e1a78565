"""Direct and single-transfer route search over the taxi network."""

from dataclasses import dataclass, field
from typing import ClassVar, Union

from src.network.graph import Route, TaxiNetwork, default_network

# Transfer options are capped, not ranked
MAX_TRANSFER_OPTIONS = 3


@dataclass(frozen=True)
class DirectOption:
    """Ride a single route from origin to destination."""

    kind: ClassVar[str] = "direct"

    route_name: str
    stops: list[str] = field(default_factory=list)  # Origin first, destination last

    def to_dict(self) -> dict:
        return {"kind": self.kind, "routeName": self.route_name, "stops": list(self.stops)}


@dataclass(frozen=True)
class TransferLeg:
    """One ride of a transfer journey."""

    route_name: str
    from_station: str
    to_station: str

    def to_dict(self) -> dict:
        return {"routeName": self.route_name, "from": self.from_station, "to": self.to_station}


@dataclass(frozen=True)
class TransferOption:
    """Two rides joined at an interchange station."""

    kind: ClassVar[str] = "transfer"

    transfer_station_name: str
    leg1: TransferLeg
    leg2: TransferLeg

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "transferStationName": self.transfer_station_name,
            "leg1": self.leg1.to_dict(),
            "leg2": self.leg2.to_dict(),
        }


@dataclass(frozen=True)
class NotFound:
    """Neither a direct nor a single-transfer journey exists."""

    kind: ClassVar[str] = "not_found"

    def to_dict(self) -> dict:
        return {"kind": self.kind}


JourneyOption = Union[DirectOption, TransferOption, NotFound]


class RouteFinder:
    """
    Find taxi journeys between two stations.

    Direct rides always win: every route serving both stations is returned
    in table order and the transfer search is skipped. Otherwise interchanges
    are tried in declared order, each contributing at most one option built
    from the first route of each leg, until three options are collected.
    Nothing is ranked by distance, time or stop count.
    """

    def __init__(self, network: TaxiNetwork | None = None):
        self.network = network or default_network()

    def _name(self, station_id: str, language: str) -> str:
        station = self.network.stations.get(station_id)
        return station.name(language) if station else station_id

    def find_direct(self, origin_id: str, destination_id: str, language: str) -> list[DirectOption]:
        """All routes serving both stations, stops read origin -> destination."""
        options = []
        for route in self.network.routes_containing(origin_id, destination_id):
            origin_idx = route.index(origin_id)
            destination_idx = route.index(destination_id)
            low, high = min(origin_idx, destination_idx), max(origin_idx, destination_idx)

            stops = list(route.stations[low : high + 1])
            # Route driven against its declared order
            if origin_idx > destination_idx:
                stops.reverse()

            options.append(
                DirectOption(
                    route_name=route.name(language),
                    stops=[self._name(station_id, language) for station_id in stops],
                )
            )
        return options

    def find_transfers(
        self, origin_id: str, destination_id: str, language: str
    ) -> list[TransferOption]:
        """Up to MAX_TRANSFER_OPTIONS journeys changing once at an interchange."""
        options: list[TransferOption] = []
        for interchange_id in self.network.interchanges:
            if len(options) >= MAX_TRANSFER_OPTIONS:
                break
            if interchange_id in (origin_id, destination_id):
                continue

            first_legs = self.network.routes_containing(origin_id, interchange_id)
            second_legs = self.network.routes_containing(interchange_id, destination_id)
            if not first_legs or not second_legs:
                continue

            options.append(
                self._transfer_option(
                    origin_id, interchange_id, destination_id, first_legs[0], second_legs[0], language
                )
            )
        return options

    def _transfer_option(
        self,
        origin_id: str,
        interchange_id: str,
        destination_id: str,
        first: Route,
        second: Route,
        language: str,
    ) -> TransferOption:
        interchange_name = self._name(interchange_id, language)
        return TransferOption(
            transfer_station_name=interchange_name,
            leg1=TransferLeg(
                route_name=first.name(language),
                from_station=self._name(origin_id, language),
                to_station=interchange_name,
            ),
            leg2=TransferLeg(
                route_name=second.name(language),
                from_station=interchange_name,
                to_station=self._name(destination_id, language),
            ),
        )

    def find_route(
        self, origin_id: str | None, destination_id: str | None, language: str = "en"
    ) -> list[JourneyOption]:
        """
        Find journeys from origin to destination.

        Args:
            origin_id: Departure station id
            destination_id: Destination station id
            language: "en" or "am" (anything else falls back to English)

        Returns:
            Direct options, else transfer options, else [NotFound()].
            Empty list when either station is not selected.
        """
        if not origin_id or not destination_id:
            return []

        language = "am" if language == "am" else "en"

        direct = self.find_direct(origin_id, destination_id, language)
        if direct:
            return list(direct)

        transfers = self.find_transfers(origin_id, destination_id, language)
        if transfers:
            return list(transfers)

        return [NotFound()]


def find_route(
    origin_id: str | None, destination_id: str | None, language: str = "en"
) -> list[JourneyOption]:
    """Find journeys on the default Addis Ababa network."""
    return RouteFinder().find_route(origin_id, destination_id, language)
