"""Built-in Washington State road network.

Weights are real-world mileage. ``NO_EDGE`` marks city pairs without a
direct road. The graph is undirected, which creates slight differences
to real-world route distances in some cases.
"""

from __future__ import annotations

from typing import Dict

from ..domain.models import GeoLocation, RoadEdge
from .store import NO_EDGE, GraphStore

_X = NO_EDGE

WEIGHTS = (
    (0, 17, 12, _X, _X, 16),
    (17, 0, 10, 15, _X, _X),
    (12, 10, 0, 17, _X, _X),
    (_X, 15, 17, 0, 22, _X),
    (_X, _X, _X, 22, 0, _X),
    (16, _X, _X, _X, _X, 0),
)

LOCATIONS: Dict[int, str] = {
    0: "Bothell",
    1: "Seattle",
    2: "Bellevue",
    3: "Seatac",
    4: "Tacoma",
    5: "Monroe",
}

COORDINATES: Dict[int, GeoLocation] = {
    0: GeoLocation(47.7623, -122.2054),
    1: GeoLocation(47.6062, -122.3321),
    2: GeoLocation(47.6101, -122.2015),
    3: GeoLocation(47.4435, -122.2961),
    4: GeoLocation(47.2529, -122.4443),
    5: GeoLocation(47.8554, -121.9710),
}

ROADS: Dict[RoadEdge, str] = {
    RoadEdge(0, 1): "SR 522 West",
    RoadEdge(1, 0): "SR 522 East",
    RoadEdge(1, 2): "SR 520 East",
    RoadEdge(2, 1): "SR 520 West",
    RoadEdge(2, 3): "I-405 South",
    RoadEdge(3, 2): "I-405 North",
    RoadEdge(3, 4): "I-5 South",
    RoadEdge(4, 3): "I-5 North",
    RoadEdge(0, 5): "SR 522 East",
    RoadEdge(5, 0): "SR 522 West",
    RoadEdge(0, 2): "I-405 South",
    RoadEdge(2, 0): "I-405 North",
    RoadEdge(1, 3): "I-5 South",
    RoadEdge(3, 1): "I-5 North",
}


def build_default_store() -> GraphStore:
    """Build the store for the built-in six-city network."""
    return GraphStore(WEIGHTS, LOCATIONS, ROADS, COORDINATES)
