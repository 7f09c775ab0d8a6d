"""Graph ports - Abstractions for the road network and routing.

These protocols define the contracts for graph lookups and for
computing shortest routes over them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import Distance, Location, RouteResult


class GraphStorePort(Protocol):
    """Port for read-only road network lookups.

    Implementation: graph/store.py (GraphStore)
    """

    @property
    def size(self) -> int:
        """Number of nodes in the network."""
        ...

    def weight(self, i: int, j: int) -> Distance:
        """Return the weight between two nodes (sentinel if no road)."""
        ...

    def name(self, node_id: int) -> str:
        """Return the display name of a node.

        Raises:
            NodeNotFoundError: If the id is unknown.
        """
        ...

    def road_name(self, start: int, destination: int) -> Optional[str]:
        """Return the directed road name, or None if unregistered."""
        ...

    def neighbors(self, node_id: int) -> Iterator[Tuple[int, Distance]]:
        """Yield ``(neighbor, weight)`` for every direct road."""
        ...

    def location(self, node_id: int) -> Location:
        """Return the location details of a node."""
        ...

    def locations(self) -> Tuple[Location, ...]:
        """Return all locations ordered by id."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, store: GraphStorePort, start: int, end: int) -> RouteResult:
        """Find the shortest route between two nodes.

        Raises:
            InvalidInputError: If either id is outside the network.
            NoRouteFoundError: If no path exists.
        """
        ...

    def solve_safe(self, store: GraphStorePort, start: int, end: int) -> RouteResult:
        """Like solve(), but return the degenerate result when unreachable."""
        ...
