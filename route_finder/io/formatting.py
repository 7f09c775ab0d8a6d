"""Text rendering of computed routes."""

from __future__ import annotations

from typing import Optional

from ..domain.errors import MissingRoadNameError
from ..domain.models import Distance, RouteResult
from ..ports.graph import GraphStorePort


def format_distance(distance: Distance) -> str:
    """Integral distances print without decimals ("51", not "51.0")."""
    if float(distance).is_integer():
        return str(int(distance))
    return f"{distance:.1f}"


def format_route(
    result: RouteResult,
    store: GraphStorePort,
    missing_road: Optional[str] = None,
    unit: str = "miles",
) -> str:
    """Render the distance line and the turn-by-turn route.

    Args:
        result: A reachable route.
        store: Store used for node and road names.
        missing_road: Text printed for edges without a road name. When
            None, an unnamed edge raises MissingRoadNameError.
        unit: Distance unit label.

    Returns:
        Two newline-terminated lines::

            The route from Bothell to Tacoma is approximately 51 miles long
            The Route: Bothell; through I-405 South -> Bellevue; ... -> Tacoma
    """
    header = (
        f"The route from {store.name(result.start)} to {store.name(result.end)} "
        f"is approximately {format_distance(result.distance)} {unit} long"
    )

    steps = []
    for edge in result.edges:
        road = store.road_name(edge.start, edge.destination)
        if road is None:
            if missing_road is None:
                raise MissingRoadNameError(
                    f"No road name between {store.name(edge.start)} "
                    f"and {store.name(edge.destination)}",
                    start=edge.start,
                    destination=edge.destination,
                )
            road = missing_road
        steps.append(f"{store.name(edge.start)}; through {road} -> ")
    steps.append(store.name(result.path[-1]))

    return f"{header}\nThe Route: {''.join(steps)}\n"


def format_no_route(start: int, end: int, store: GraphStorePort) -> str:
    return f"No route found from {store.name(start)} to {store.name(end)}\n"
