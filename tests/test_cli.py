"""End-to-end tests for the interactive entry point."""

from unittest.mock import MagicMock

import pytest

from route_finder.adapters.graph import DijkstraRouteSolver
from route_finder.cli import (
    EXIT_CONFIG,
    EXIT_INVALID_INPUT,
    EXIT_MISSING_ROAD,
    EXIT_NO_ROUTE,
    EXIT_OK,
    load_config,
    main,
)
from route_finder.config import AppConfig, RoutingConfig, reset_config
from route_finder.container import Container, get_container, reset_container
from route_finder.domain.errors import ConfigurationError
from route_finder.graph.store import NO_EDGE, GraphStore
from route_finder.ports.graph import GraphStorePort, RouteSolverPort
from route_finder.services import RouteService


@pytest.fixture(autouse=True)
def fresh_state():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


def _run(answers, container=None):
    answers = iter(answers)
    printed = []
    code = main(
        input_fn=lambda _: next(answers),
        output_fn=printed.append,
        container=container or Container.create_default(AppConfig()),
    )
    return code, printed


def test_prints_route():
    code, printed = _run(["0", "4"])

    assert code == EXIT_OK
    assert printed[-1] == (
        "The route from Bothell to Tacoma is approximately 51 miles long\n"
        "The Route: Bothell; through I-405 South -> Bellevue; "
        "through I-405 South -> Seatac; through I-5 South -> Tacoma"
    )


def test_fifo_algorithm_gives_same_answer():
    config = AppConfig(routing=RoutingConfig(algorithm="fifo"))

    code, printed = _run(["3", "5"], Container.create_default(config))

    assert code == EXIT_OK
    assert "Seatac to Monroe is approximately 45 miles long" in printed[-1]


@pytest.mark.parametrize("answers", [["-1", "4"], ["0", "6"], ["abc", "1"]])
def test_invalid_input_exits_without_route(answers):
    code, printed = _run(answers)

    assert code == EXIT_INVALID_INPUT
    assert printed[-1] == "Invalid input"
    assert not any("The route from" in line for line in printed)


def test_end_of_input_is_invalid():
    def no_more_input(_):
        raise EOFError

    printed = []
    code = main(
        input_fn=no_more_input,
        output_fn=printed.append,
        container=Container.create_default(AppConfig()),
    )

    assert code == EXIT_INVALID_INPUT


def _container_with(store, routing=None):
    container = Container.create_default(AppConfig(routing=routing or RoutingConfig()))
    container.register(GraphStorePort, lambda: store)
    return container


def test_unreachable_destination():
    store = GraphStore(
        [[0, 1, NO_EDGE], [1, 0, NO_EDGE], [NO_EDGE, NO_EDGE, 0]],
        {0: "Port", 1: "Town", 2: "Lighthouse"},
    )

    code, printed = _run(["0", "2"], _container_with(store))

    assert code == EXIT_NO_ROUTE
    assert printed[-1] == "No route found from Port to Lighthouse"


def test_missing_road_name_under_error_policy():
    store = GraphStore([[0, 4], [4, 0]], {0: "Here", 1: "There"})

    code, printed = _run(
        ["0", "1"],
        _container_with(store, RoutingConfig(missing_road_policy="error")),
    )

    assert code == EXIT_MISSING_ROAD
    assert printed[-1].startswith("Error: No road name between Here and There")


def test_container_resolves_singletons():
    container = Container.create_default(AppConfig())

    assert container.resolve(RouteService) is container.resolve(RouteService)
    assert isinstance(container.resolve(RouteSolverPort), DijkstraRouteSolver)
    assert container.resolve(RouteService).map_renderer is None


def test_container_wires_renderer_when_map_output_set(tmp_path):
    container = Container.create_default(AppConfig(map_output=tmp_path / "r.html"))

    service = container.resolve(RouteService)

    assert service.map_renderer is not None
    assert service.map_output == tmp_path / "r.html"


def test_container_resolve_unregistered_raises():
    with pytest.raises(KeyError):
        Container(config=AppConfig()).resolve(RouteService)


def test_container_non_singleton_creates_new_instances():
    container = Container(config=AppConfig())
    container.register(MagicMock, MagicMock, singleton=False)

    assert container.resolve(MagicMock) is not container.resolve(MagicMock)


def test_get_container_is_shared_until_reset():
    first = get_container()

    assert get_container() is first
    reset_container()
    assert get_container() is not first


def test_unknown_algorithm_in_environment(monkeypatch):
    monkeypatch.setenv("ROUTE_ROUTING_ALGORITHM", "astar")
    answers = iter(["0", "4"])
    printed = []

    code = main(input_fn=lambda _: next(answers), output_fn=printed.append)

    assert code == EXIT_CONFIG
    assert len(printed) == 1
    assert printed[0].startswith("Error: Invalid configuration for ")
    assert "algorithm" in printed[0]


def test_load_config_wraps_validation_error(monkeypatch):
    monkeypatch.setenv("ROUTE_ROUTING_MISSING_ROAD_POLICY", "ignore")

    with pytest.raises(ConfigurationError) as exc_info:
        load_config()

    assert exc_info.value.setting_name.endswith("missing_road_policy")
    assert exc_info.value.cause is not None


def test_unknown_algorithm_reaching_the_solver():
    container = Container.create_default(AppConfig())
    container.register(
        RouteSolverPort,
        lambda: DijkstraRouteSolver(RoutingConfig.model_construct(algorithm="astar")),
    )
    printed = []

    code = main(input_fn=lambda _: "0", output_fn=printed.append, container=container)

    assert code == EXIT_CONFIG
    assert printed == ["Error: Unknown path-finding strategy: 'astar'"]
