"""
Addis Taxi Route Finder - command-line entry point.

Usage:
    python -m src.main piazza ayer_tena
    python -m src.main stadium summit --lang am
    cat queries.csv | python -m src.main --batch -
    python -m src.main --list
"""

import argparse
import csv
import json
import logging
import sys

from src.config import settings
from src.network import LANGUAGES, StationCatalog, default_network
from src.routing import DirectOption, JourneyOption, RouteFinder, TransferOption
from src.web.translations import translate

logger = logging.getLogger(__name__)


def format_option(option: JourneyOption, language: str = "en") -> str:
    """Human readable rendering of one journey option."""
    if isinstance(option, DirectOption):
        return (
            f"{translate('directRoute', language)} | {option.route_name}: "
            + " → ".join(option.stops)
        )
    if isinstance(option, TransferOption):
        return (
            f"{translate('transferRoute', language)} | "
            f"{translate('transferStation', language)}: {option.transfer_station_name} | "
            f"{translate('firstTrip', language)} {option.leg1.route_name} "
            f"({option.leg1.from_station} → {option.leg1.to_station}) | "
            f"{translate('secondTrip', language)} {option.leg2.route_name} "
            f"({option.leg2.from_station} → {option.leg2.to_station})"
        )
    return translate("noRouteFound", language)


def format_batch_line(query_id: str, options: list[JourneyOption]) -> str:
    """
    One CSV line per query: id, kind, then a compact route.

    Examples:
        1,direct,"Piazza→Arat Kilo→Megnagna"
        2,transfer,"Kirkos - Arat Kilo@Megnagna|CMC - Michel"
        3,not_found,
    """
    if not options:
        return f"{query_id},EMPTY,"
    first = options[0]
    if isinstance(first, DirectOption):
        return f'{query_id},{first.kind},"{"→".join(first.stops)}"'
    if isinstance(first, TransferOption):
        return (
            f'{query_id},{first.kind},'
            f'"{first.leg1.route_name}@{first.transfer_station_name}|{first.leg2.route_name}"'
        )
    return f"{query_id},{first.kind},"


def resolve_station(catalog: StationCatalog, text: str) -> str | None:
    """Station id for an id or name; prints a suggestion to stderr when unknown."""
    station_id = catalog.resolve(text)
    if station_id:
        return station_id

    matches = catalog.search(text, limit=3)
    hint = ", ".join(f"{m.station_id} ({m.name})" for m in matches)
    print(f"Error: Unknown station: {text}", file=sys.stderr)
    if hint:
        print(f"  Did you mean: {hint}", file=sys.stderr)
    return None


def run_batch(input_file, finder: RouteFinder, catalog: StationCatalog, language: str) -> None:
    """Process `id,origin,destination` rows and print one line each."""
    reader = csv.reader(input_file)
    for row in reader:
        if len(row) < 3:
            continue

        query_id = row[0].strip()
        # Skip header
        if query_id.lower() in ("id", "queryid"):
            continue

        origin = catalog.resolve(row[1].strip()) or row[1].strip()
        destination = catalog.resolve(row[2].strip()) or row[2].strip()
        print(format_batch_line(query_id, finder.find_route(origin, destination, language)))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Addis Taxi Route Finder - minibus routes between stations"
    )
    parser.add_argument("origin", nargs="?", help="Departure station id or name")
    parser.add_argument("destination", nargs="?", help="Destination station id or name")
    parser.add_argument(
        "--lang",
        choices=LANGUAGES,
        default=settings.DEFAULT_LANGUAGE if settings.DEFAULT_LANGUAGE in LANGUAGES else "en",
        help="Display language (default: en)",
    )
    parser.add_argument("--json", action="store_true", help="Print options as JSON")
    parser.add_argument(
        "--batch",
        metavar="FILE",
        help="CSV file of id,origin,destination rows ('-' for stdin)",
    )
    parser.add_argument("--list", action="store_true", help="List station ids and names")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, stream=sys.stderr)

    network = default_network()
    catalog = StationCatalog(network)
    finder = RouteFinder(network)

    if args.list:
        for station_id, name in catalog.options(args.lang):
            print(f"{station_id}\t{name}")
        return 0

    if args.batch:
        if args.batch == "-":
            run_batch(sys.stdin, finder, catalog, args.lang)
        else:
            with open(args.batch, encoding="utf-8") as f:
                run_batch(f, finder, catalog, args.lang)
        return 0

    if not args.origin or not args.destination:
        parser.error("origin and destination are required (or use --batch / --list)")

    origin = resolve_station(catalog, args.origin)
    destination = resolve_station(catalog, args.destination)
    if origin is None or destination is None:
        return 1

    options = finder.find_route(origin, destination, args.lang)
    logger.debug("%s -> %s: %d option(s)", origin, destination, len(options))

    if args.json:
        print(json.dumps([o.to_dict() for o in options], ensure_ascii=False, indent=2))
    else:
        for option in options:
            print(format_option(option, args.lang))
    return 0


if __name__ == "__main__":
    sys.exit(main())
