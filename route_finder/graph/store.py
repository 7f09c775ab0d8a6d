"""Immutable road network store.

The store keeps two separate lookup structures: an undirected weight
matrix used for traversal, and a directed road-name mapping used only
for presentation.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from ..domain.errors import GraphError, NodeNotFoundError
from ..domain.models import Distance, GeoLocation, Location, RoadEdge

logger = logging.getLogger(__name__)

# Weight meaning "no direct road". Must exceed every real edge weight.
NO_EDGE = 10000

WeightMatrix = Tuple[Tuple[Distance, ...], ...]


class GraphStore:
    """Weighted undirected graph with node names and directed road names.

    Parameters
    ----------
    weights:
        Square matrix, ``weights[i][j]`` is the mileage between ``i`` and
        ``j`` or ``sentinel`` when there is no direct road.
    names:
        Mapping of every node id in ``[0, N)`` to its display name.
    roads:
        Mapping of directed edges to road names. May be incomplete.
    coordinates:
        Optional GPS coordinates per node id.
    sentinel:
        The "no edge" marker, ``NO_EDGE`` by default.

    Raises
    ------
    GraphError
        If the matrix is not square, not symmetric, has a non-zero
        diagonal, negative weights, weights not below the sentinel, or if
        names/roads reference unknown nodes.
    """

    __slots__ = ("_weights", "_names", "_roads", "_coordinates", "_sentinel")

    def __init__(
        self,
        weights: Sequence[Sequence[Distance]],
        names: Mapping[int, str],
        roads: Optional[Mapping[RoadEdge, str]] = None,
        coordinates: Optional[Mapping[int, GeoLocation]] = None,
        sentinel: Distance = NO_EDGE,
    ) -> None:
        matrix = tuple(tuple(row) for row in weights)
        _validate_matrix(matrix, sentinel)

        size = len(matrix)
        if set(names) != set(range(size)):
            raise GraphError(
                f"Node names must cover ids 0..{size - 1} exactly, got {sorted(names)}"
            )

        roads = dict(roads or {})
        for edge in roads:
            if not (0 <= edge.start < size and 0 <= edge.destination < size):
                raise GraphError(f"Road {edge} references an unknown node")

        coordinates = dict(coordinates or {})
        for node_id in coordinates:
            if node_id not in names:
                raise GraphError(f"Coordinates given for unknown node {node_id}")

        self._weights: WeightMatrix = matrix
        self._names: Mapping[int, str] = MappingProxyType(dict(names))
        self._roads: Mapping[RoadEdge, str] = MappingProxyType(roads)
        self._coordinates: Mapping[int, GeoLocation] = MappingProxyType(coordinates)
        self._sentinel = sentinel

        logger.debug(
            "Graph store built",
            extra={"nodes": size, "roads": len(roads)},
        )

    # -- core lookups -------------------------------------------------

    def weight(self, i: int, j: int) -> Distance:
        """Return the matrix entry between ``i`` and ``j``."""
        self._check_node(i)
        self._check_node(j)
        return self._weights[i][j]

    def name(self, node_id: int) -> str:
        """Return the display name of a node."""
        try:
            return self._names[node_id]
        except KeyError:
            raise NodeNotFoundError(
                f"Unknown location id: {node_id}", node_id=node_id
            ) from None

    def road_name(self, start: int, destination: int) -> Optional[str]:
        """Return the road name for the directed edge, or None if unregistered.

        A missing name does not imply a missing edge; road data may be
        incomplete while the weight is finite.
        """
        return self._roads.get(RoadEdge(start, destination))

    # -- helpers --------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, int) and 0 <= node_id < len(self._weights)

    def node_ids(self) -> range:
        return range(len(self._weights))

    def has_edge(self, i: int, j: int) -> bool:
        """True if a direct road of finite weight joins two distinct nodes."""
        return i != j and self.weight(i, j) < self._sentinel

    def neighbors(self, node_id: int) -> Iterator[Tuple[int, Distance]]:
        """Yield ``(neighbor, weight)`` for every direct road from ``node_id``."""
        self._check_node(node_id)
        for j, w in enumerate(self._weights[node_id]):
            if j != node_id and w < self._sentinel:
                yield j, w

    def location(self, node_id: int) -> Location:
        return Location(
            node_id=node_id,
            name=self.name(node_id),
            location=self._coordinates.get(node_id),
        )

    def locations(self) -> Tuple[Location, ...]:
        """All locations ordered by node id."""
        return tuple(self.location(i) for i in self.node_ids())

    def _check_node(self, node_id: int) -> None:
        if node_id not in self:
            raise NodeNotFoundError(
                f"Unknown location id: {node_id}", node_id=node_id
            )

    def __repr__(self) -> str:
        return f"GraphStore(nodes={self.size}, roads={len(self._roads)})"


def _validate_matrix(matrix: WeightMatrix, sentinel: Distance) -> None:
    size = len(matrix)
    if size == 0:
        raise GraphError("Weight matrix is empty")

    for i, row in enumerate(matrix):
        if len(row) != size:
            raise GraphError(
                f"Weight matrix must be square: row {i} has {len(row)} entries, expected {size}"
            )

    for i in range(size):
        if matrix[i][i] != 0:
            raise GraphError(f"Weight from node {i} to itself must be 0")
        for j in range(i + 1, size):
            w = matrix[i][j]
            if w != matrix[j][i]:
                raise GraphError(
                    f"Weight matrix must be symmetric: [{i}][{j}]={w} but [{j}][{i}]={matrix[j][i]}"
                )
            if w < 0:
                raise GraphError(f"Negative weight between {i} and {j}: {w}")
            if w > sentinel:
                raise GraphError(
                    f"Weight between {i} and {j} ({w}) exceeds the no-edge sentinel {sentinel}"
                )
