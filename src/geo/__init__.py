"""Geolocation helpers: distances and nearest station lookup."""

from .distance import haversine
from .nearest_station import NearestResult, NearestStationFinder

__all__ = ["haversine", "NearestResult", "NearestStationFinder"]
