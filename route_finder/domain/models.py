"""Immutable domain models for the route finder.

All models are frozen dataclasses with slots. They carry no behaviour
beyond validation and a few convenience properties.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

Distance = Union[int, float]

# Distance reported for a target that cannot be reached.
INFINITY: float = float("inf")


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Location:
    """A named node of the road network.

    Attributes:
        node_id: Dense integer id used by the weight matrix
        name: Display name (e.g. 'Bothell')
        location: GPS coordinates, only needed for map rendering
    """

    node_id: int
    name: str
    location: Optional[GeoLocation] = None


@dataclass(frozen=True, slots=True)
class RoadEdge:
    """A directed road between two nodes.

    Direction matters: ``RoadEdge(0, 1)`` and ``RoadEdge(1, 0)`` are
    different keys and usually carry different road names
    ('SR 522 West' versus 'SR 522 East').
    """

    start: int
    destination: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        start: Start node id
        end: End node id
        path: Ordered node ids from start to end inclusive. For an
            unreachable target this is the degenerate ``(end,)``.
        distance: Total distance in graph units, ``INFINITY`` if unreachable
    """

    start: int
    end: int
    path: tuple[int, ...]
    distance: Distance

    @property
    def is_reachable(self) -> bool:
        """Check whether the end node was reached."""
        return not math.isinf(self.distance)

    @property
    def num_stops(self) -> int:
        """Return the number of nodes on the route."""
        return len(self.path)

    @property
    def edges(self) -> tuple[RoadEdge, ...]:
        """Directed edges traversed along the path."""
        return tuple(
            RoadEdge(a, b) for a, b in zip(self.path, self.path[1:])
        )
