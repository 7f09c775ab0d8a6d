"""Console input for choosing the start and destination locations.

The prompt functions take ``input_fn``/``output_fn`` callables so the
interactive flow can be driven from tests without a terminal.
"""

from typing import Callable, Tuple

from ..domain.errors import InvalidInputError
from ..ports.graph import GraphStorePort

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def list_locations(store: GraphStorePort) -> str:
    """Return the numbered list of locations shown before prompting."""
    lines = ["Available locations: "]
    lines.extend(f"{loc.node_id}. {loc.name}" for loc in store.locations())
    return "\n".join(lines)


def parse_node_id(raw: str, store: GraphStorePort) -> int:
    """Parse a location number typed by the user.

    Raises
    ------
    InvalidInputError
        If ``raw`` is not an integer or is outside ``[0, N)``.
    """
    text = raw.strip()
    try:
        node_id = int(text)
    except ValueError:
        raise InvalidInputError(
            f"Not a location number: {text!r}", raw_value=text
        ) from None

    if not 0 <= node_id < store.size:
        raise InvalidInputError(
            f"Location number must be between 0 and {store.size - 1}, got {node_id}",
            raw_value=text,
        )
    return node_id


def prompt_route(
    store: GraphStorePort,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Tuple[int, int]:
    """Ask for the start and destination location numbers.

    Both answers are read before either is validated, then both are
    checked, so nothing is computed for a half-valid request.
    """
    output_fn(list_locations(store))
    output_fn("Enter the starting location number: ")
    raw_start = input_fn("")
    output_fn("Enter the destination location number: ")
    raw_end = input_fn("")

    return parse_node_id(raw_start, store), parse_node_id(raw_end, store)
