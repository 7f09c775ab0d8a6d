"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidInputError,
    MissingRoadNameError,
    NodeNotFoundError,
    NoRouteFoundError,
    RenderingError,
    RouteFinderError,
)
from .models import INFINITY, GeoLocation, Location, RoadEdge, RouteResult

__all__ = [
    # Models
    "INFINITY",
    "GeoLocation",
    "Location",
    "RoadEdge",
    "RouteResult",
    # Errors
    "RouteFinderError",
    "InvalidInputError",
    "NodeNotFoundError",
    "NoRouteFoundError",
    "MissingRoadNameError",
    "GraphError",
    "ConfigurationError",
    "RenderingError",
]
