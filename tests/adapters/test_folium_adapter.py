"""Tests for the Folium map renderer adapter."""

from unittest.mock import patch

import pytest

from route_finder.adapters.rendering import FoliumMapRenderer
from route_finder.domain.errors import RenderingError
from route_finder.domain.models import Location
from route_finder.graph.network import build_default_store


def test_render_writes_html(tmp_path):
    store = build_default_store()
    locations = [store.location(node) for node in (0, 2, 3, 4)]
    output = tmp_path / "maps" / "route.html"

    result = FoliumMapRenderer().render(locations, output)

    assert result == output
    assert output.exists()
    html = output.read_text(encoding="utf-8")
    assert "Bothell" in html
    assert "Tacoma" in html


def test_render_single_location(tmp_path):
    store = build_default_store()
    output = tmp_path / "single.html"

    FoliumMapRenderer().render([store.location(5)], output)

    assert output.exists()


def test_render_empty_route_raises(tmp_path):
    with pytest.raises(RenderingError) as exc_info:
        FoliumMapRenderer().render([], tmp_path / "empty.html")

    assert exc_info.value.renderer_type == "folium"


def test_render_without_coordinates_raises(tmp_path):
    locations = [Location(0, "Nowhere"), Location(1, "Elsewhere")]

    with pytest.raises(RenderingError) as exc_info:
        FoliumMapRenderer().render(locations, tmp_path / "route.html")

    assert "Nowhere" in exc_info.value.message


def test_render_wraps_folium_failure(tmp_path):
    store = build_default_store()

    with patch(
        "route_finder.adapters.rendering.folium_adapter.folium.Map",
        side_effect=RuntimeError("boom"),
    ):
        with pytest.raises(RenderingError) as exc_info:
            FoliumMapRenderer().render([store.location(0)], tmp_path / "x.html")

    assert isinstance(exc_info.value.cause, RuntimeError)
    assert "boom" in str(exc_info.value)
