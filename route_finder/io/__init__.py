"""Input/output collaborators for the route finder.

Console prompting and validation of the two location numbers, and text
rendering of computed routes.
"""

from .console import list_locations, parse_node_id, prompt_route
from .formatting import format_distance, format_no_route, format_route

__all__ = [
    "list_locations",
    "parse_node_id",
    "prompt_route",
    "format_distance",
    "format_route",
    "format_no_route",
]
