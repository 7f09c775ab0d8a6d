"""Typed domain errors for the route finder.

Every failure the application can report is one of these types, so the
CLI can map them to messages and exit codes instead of terminating from
deep inside the call stack.

All errors inherit from RouteFinderError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RouteFinderError(Exception):
    """Base error for the route finder domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(RouteFinderError):
    """User supplied a location number that is not usable.

    Attributes:
        raw_value: The value as typed by the user
    """

    raw_value: str = ""


@dataclass
class NodeNotFoundError(RouteFinderError):
    """Node id not present in the graph store.

    Attributes:
        node_id: The id that was looked up
    """

    node_id: Optional[int] = None


@dataclass
class NoRouteFoundError(RouteFinderError):
    """No path exists between the requested locations.

    Attributes:
        start: Start node id
        end: End node id
    """

    start: int = -1
    end: int = -1


@dataclass
class MissingRoadNameError(RouteFinderError):
    """A traversed edge has no registered road name."""

    start: int = -1
    destination: int = -1


@dataclass
class GraphError(RouteFinderError):
    """Weight matrix or lookup tables violate the graph invariants."""


@dataclass
class ConfigurationError(RouteFinderError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(RouteFinderError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
