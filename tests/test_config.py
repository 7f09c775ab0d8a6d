from pathlib import Path

import pytest
from pydantic import ValidationError

from route_finder.config import AppConfig, RoutingConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults(monkeypatch):
    for name in (
        "ROUTE_ROUTING_ALGORITHM",
        "ROUTE_ROUTING_MISSING_ROAD_POLICY",
        "ROUTE_MAP_OUTPUT",
        "ROUTE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = get_config()

    assert config.routing.algorithm == "dijkstra"
    assert config.routing.missing_road_policy == "placeholder"
    assert config.routing.distance_unit == "miles"
    assert config.observability.level == "WARNING"
    assert config.map_output is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("ROUTE_ROUTING_ALGORITHM", "fifo")
    monkeypatch.setenv("ROUTE_ROUTING_MISSING_ROAD_POLICY", "error")
    monkeypatch.setenv("ROUTE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ROUTE_MAP_OUTPUT", str(tmp_path / "route.html"))

    config = get_config()

    assert config.routing.algorithm == "fifo"
    assert config.routing.missing_road_policy == "error"
    assert config.observability.level == "DEBUG"
    assert config.map_output == Path(tmp_path / "route.html")


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_unknown_algorithm_rejected():
    with pytest.raises(ValidationError):
        RoutingConfig(algorithm="bellman-ford")


def test_app_config_accepts_nested_overrides():
    config = AppConfig(routing=RoutingConfig(algorithm="fifo"))

    assert config.routing.algorithm == "fifo"
