"""Interactive command-line entry point.

Lists the locations, asks for a start and a destination number and
prints the distance and turn-by-turn route.

Exit codes: 0 on success, 1 for invalid input, 2 when no route exists,
3 when a road on the route has no name and the policy is 'error',
4 when the configuration is invalid.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .config import AppConfig, get_config
from .container import Container, get_container
from .domain.errors import (
    ConfigurationError,
    InvalidInputError,
    MissingRoadNameError,
    NoRouteFoundError,
)
from .io.console import InputFn, OutputFn, prompt_route
from .io.formatting import format_no_route
from .logging_setup import configure_logging
from .services import RouteService

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_NO_ROUTE = 2
EXIT_MISSING_ROAD = 3
EXIT_CONFIG = 4

logger = logging.getLogger(__name__)


def load_config() -> AppConfig:
    """Load the settings, reporting rejected values as ConfigurationError."""
    try:
        return get_config()
    except ValidationError as e:
        first = e.errors()[0]
        setting = ".".join(str(part) for part in first["loc"]) or e.title
        raise ConfigurationError(
            f"Invalid configuration for {setting}: {first['msg']}",
            setting_name=setting,
            cause=e,
        ) from e


def main(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    container: Optional[Container] = None,
) -> int:
    try:
        config = load_config()
        configure_logging(config.observability)
        container = container or get_container()
        service: RouteService = container.resolve(RouteService)
    except ConfigurationError as e:
        output_fn(f"Error: {e.message}")
        return EXIT_CONFIG

    try:
        start, end = prompt_route(service.store, input_fn, output_fn)
    except (InvalidInputError, EOFError) as e:
        logger.info("Rejected input", extra={"error": str(e)})
        output_fn("Invalid input")
        return EXIT_INVALID_INPUT

    try:
        text = service.describe_route(start, end)
    except NoRouteFoundError:
        output_fn("")
        output_fn(format_no_route(start, end, service.store).rstrip("\n"))
        return EXIT_NO_ROUTE
    except MissingRoadNameError as e:
        output_fn(f"Error: {e.message}")
        return EXIT_MISSING_ROAD

    output_fn("")
    output_fn(text.rstrip("\n"))
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
