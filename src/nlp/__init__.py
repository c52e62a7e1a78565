"""Text utilities for matching station names."""

from .preprocessing import fuzzy_match_station, normalize_station_name, remove_accents

__all__ = [
    "fuzzy_match_station",
    "normalize_station_name",
    "remove_accents",
]
