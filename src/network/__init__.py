"""Static taxi network: stations, routes and interchanges."""

from .catalog import SearchMatch, StationCatalog
from .data import ADDIS_CENTER
from .graph import (
    DEFAULT_LANGUAGE,
    LANGUAGES,
    NetworkError,
    Route,
    Station,
    TaxiNetwork,
    default_network,
)

__all__ = [
    "ADDIS_CENTER",
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "NetworkError",
    "Route",
    "SearchMatch",
    "Station",
    "StationCatalog",
    "TaxiNetwork",
    "default_network",
]
