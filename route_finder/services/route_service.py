"""Route service - Main orchestrator.

Ties the graph store, the route solver, the text formatter and the
optional map renderer together for a single query.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..config import RoutingConfig, get_config
from ..domain.errors import RenderingError
from ..domain.models import RouteResult
from ..io.formatting import format_route
from ..ports.graph import GraphStorePort, RouteSolverPort
from ..ports.rendering import MapRendererPort


@dataclass
class RouteService:
    """Main service for answering route queries.

    This service orchestrates:
    1. Route computation
    2. Text rendering
    3. Optional map rendering

    Attributes:
        store: Road network lookups
        route_solver: Computes shortest routes
        config: Routing configuration (missing road policy, unit)
        map_renderer: Optional map rendering
        map_output: Where to write the map, if any
    """

    store: GraphStorePort
    route_solver: RouteSolverPort
    config: RoutingConfig = field(default_factory=lambda: get_config().routing)
    map_renderer: Optional[MapRendererPort] = None
    map_output: Optional[Path] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route(self, start: int, end: int) -> RouteResult:
        """Compute the shortest route.

        Raises:
            InvalidInputError: If start or end is not in the network.
            NoRouteFoundError: If no path exists.
        """
        self._logger.info(
            "Starting route query",
            extra={"start": start, "end": end},
        )
        return self.route_solver.solve(self.store, start, end)

    def describe_route(self, start: int, end: int) -> str:
        """Return the printable route description.

        The map, when configured, is only written once the text has been
        rendered, so a failed description leaves no map behind.

        Raises:
            InvalidInputError: If start or end is not in the network.
            NoRouteFoundError: If no path exists.
            MissingRoadNameError: If a road is unnamed and the policy is 'error'.
        """
        route = self.find_route(start, end)
        text = self.format_result(route)
        self.render_map(route)
        return text

    def render_map(self, route: RouteResult) -> None:
        """Draw the route when a renderer and output path are configured.

        Rendering failures are logged; the text answer stands without the map.
        """
        if self.map_renderer is None or self.map_output is None:
            return

        try:
            self.map_renderer.render(
                [self.store.location(node) for node in route.path],
                self.map_output,
            )
        except RenderingError as e:
            self._logger.warning(
                "Map generation failed",
                extra={"error": str(e)},
            )

    def format_result(self, route: RouteResult) -> str:
        """Format a reachable route as human-readable text."""
        placeholder = (
            self.config.missing_road_placeholder
            if self.config.missing_road_policy == "placeholder"
            else None
        )
        return format_route(
            route,
            self.store,
            missing_road=placeholder,
            unit=self.config.distance_unit,
        )
