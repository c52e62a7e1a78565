"""Route finding between taxi stations."""

from .finder import (
    MAX_TRANSFER_OPTIONS,
    DirectOption,
    JourneyOption,
    NotFound,
    RouteFinder,
    TransferLeg,
    TransferOption,
    find_route,
)

__all__ = [
    "MAX_TRANSFER_OPTIONS",
    "DirectOption",
    "JourneyOption",
    "NotFound",
    "RouteFinder",
    "TransferLeg",
    "TransferOption",
    "find_route",
]
