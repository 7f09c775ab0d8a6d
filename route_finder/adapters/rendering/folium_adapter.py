"""Folium map renderer adapter.

Draws a computed route as an interactive HTML map: one marker per
location (green start, red end, blue in between) joined by a polyline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import folium

from ...domain.errors import RenderingError
from ...domain.models import Location


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort.
    """

    zoom_start: int = 10
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        locations: Sequence[Location],
        output_path: Path,
    ) -> Path:
        """Render a route on a map and save to file.

        Args:
            locations: Locations along the route, in travel order.
            output_path: Where to save the rendered map.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If the route is empty, a location has no
                coordinates, or folium fails.
        """
        if not locations:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        missing = [loc.name for loc in locations if loc.location is None]
        if missing:
            raise RenderingError(
                f"Missing coordinates for: {', '.join(missing)}",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={
                "locations": len(locations),
                "output_path": str(output_path),
            },
        )

        coordinates = [
            (loc.location.latitude, loc.location.longitude)  # type: ignore[union-attr]
            for loc in locations
        ]

        try:
            m = folium.Map(location=coordinates[0], zoom_start=self.zoom_start)

            last = len(locations) - 1
            for i, (loc, point) in enumerate(zip(locations, coordinates)):
                icon_color = "green" if i == 0 else "red" if i == last else "blue"
                folium.Marker(
                    location=point,
                    popup=f"{i + 1}. {loc.name}",
                    tooltip=loc.name,
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            if len(coordinates) >= 2:
                folium.PolyLine(
                    coordinates,
                    weight=3,
                    color="blue",
                    opacity=0.8,
                ).add_to(m)
                m.fit_bounds(coordinates)

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                f"Map rendering failed: {e}",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path
