"""Dijkstra Route Solver adapter.

This adapter wraps the path-finding functions in graph/dijkstra.py and
adds:
- Domain model output (RouteResult)
- Strategy selection from configuration
- Input validation and typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import RoutingConfig, get_config
from ...domain.errors import ConfigurationError, InvalidInputError, NoRouteFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import PATH_FINDER_STRATEGIES, PathFinder
from ...ports.graph import GraphStorePort


@dataclass
class DijkstraRouteSolver:
    """Route solver over the weight matrix.

    This adapter implements RouteSolverPort. The algorithm is picked by
    name from ``PATH_FINDER_STRATEGIES`` ('dijkstra' or 'fifo').

    Attributes:
        config: Routing configuration (algorithm name)
    """

    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    _logger: logging.Logger = field(init=False, repr=False)
    _path_finder: PathFinder = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        path_finder = PATH_FINDER_STRATEGIES.get(self.config.algorithm)
        if path_finder is None:
            raise ConfigurationError(
                f"Unknown path-finding strategy: {self.config.algorithm!r}",
                setting_name="algorithm",
                expected_type=" | ".join(sorted(PATH_FINDER_STRATEGIES)),
            )
        self._path_finder = path_finder

    @property
    def algorithm(self) -> str:
        return self.config.algorithm

    def solve(self, store: GraphStorePort, start: int, end: int) -> RouteResult:
        """Find the shortest route between two nodes.

        Args:
            store: The road network.
            start: Start node id.
            end: End node id.

        Returns:
            RouteResult with path and distance.

        Raises:
            InvalidInputError: If start or end is not in the network.
            NoRouteFoundError: If no path exists.
        """
        result = self.solve_safe(store, start, end)

        if not result.is_reachable:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            raise NoRouteFoundError(
                f"No path from {store.name(start)} to {store.name(end)}",
                start=start,
                end=end,
            )

        return result

    def solve_safe(self, store: GraphStorePort, start: int, end: int) -> RouteResult:
        """Find the shortest route, returning the degenerate result on failure.

        Like solve(), but an unreachable target yields a RouteResult with
        an infinite distance and ``path == (end,)`` instead of raising.
        Out-of-range ids still raise InvalidInputError.
        """
        self._check_in_range(store, start, "start")
        self._check_in_range(store, end, "end")

        self._logger.debug(
            "Solving route",
            extra={"start": start, "end": end, "algorithm": self.algorithm},
        )

        distance, path = self._path_finder(store, start, end)  # type: ignore[arg-type]
        result = RouteResult(start=start, end=end, path=tuple(path), distance=distance)

        self._logger.info(
            "Route computed",
            extra={
                "start": start,
                "end": end,
                "stops": result.num_stops,
                "distance": distance,
                "reachable": result.is_reachable,
            },
        )
        return result

    @staticmethod
    def _check_in_range(store: GraphStorePort, node_id: int, role: str) -> None:
        if not 0 <= node_id < store.size:
            raise InvalidInputError(
                f"Invalid {role} location: {node_id} (expected 0 to {store.size - 1})",
                raw_value=str(node_id),
            )
