"""Folium map renderer adapter.

Draws a metro route as an interactive HTML map:
- one marker per station, departure green and arrival red
- the track split into segments colored after the line they run on
- a star icon where the route changes line
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Station

# Marker colors folium.Icon accepts; line labels outside this set are drawn gray.
_ICON_COLORS = frozenset(
    {
        "red", "blue", "green", "purple", "orange", "darkred", "lightred",
        "beige", "darkblue", "darkgreen", "cadetblue", "darkpurple", "white",
        "pink", "lightblue", "lightgreen", "gray", "black", "lightgray",
    }
)


def line_color(line: str) -> str:
    color = line.strip().lower()
    return color if color in _ICON_COLORS else "gray"


def _line_segments(route: Sequence[Station]) -> List[List[Station]]:
    """Split a route into runs of consecutive stations on the same line.

    Neighboring runs share their boundary station so the drawn track has
    no gaps.
    """
    segments: List[List[Station]] = [[route[0]]]
    for previous, station in zip(route, route[1:]):
        if station.line != previous.line:
            segments.append([previous])
        segments[-1].append(station)
    return segments


@dataclass
class FoliumMapRenderer:
    """Route maps rendered with Folium.

    This adapter implements MapRendererPort.

    Attributes:
        config: Zoom level and default output file name
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, route: Sequence[Station], output_path: Path) -> Path:
        """Draw ``route`` and save the map as HTML.

        Raises:
            RenderingError: If the route is empty, folium is missing or
                the map cannot be written.
        """
        if not route:
            raise RenderingError(
                "Cannot render empty route",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={"stations": len(route), "output_path": str(output_path)},
        )

        try:
            import folium
        except ImportError as e:
            raise RenderingError(
                "Folium not installed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            )

        try:
            route_map = self._build_map(folium, route)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            route_map.save(str(output_path))
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

        self._logger.info("Map rendered", extra={"output_path": str(output_path)})
        return output_path

    def _build_map(self, folium: Any, route: Sequence[Station]) -> Any:
        coords = [[s.latitude, s.longitude] for s in route]
        center = [
            sum(lat for lat, _ in coords) / len(coords),
            sum(lon for _, lon in coords) / len(coords),
        ]
        route_map = folium.Map(location=center, zoom_start=self.config.zoom_start)

        last = len(route) - 1
        for i, station in enumerate(route):
            transfer = 0 < i < last and station.line != route[i - 1].line
            if i == 0:
                icon = folium.Icon(color="green", icon="play")
            elif i == last:
                icon = folium.Icon(color="red", icon="stop")
            elif transfer:
                icon = folium.Icon(color=line_color(station.line), icon="star")
            else:
                icon = folium.Icon(color=line_color(station.line))
            folium.Marker(
                location=[station.latitude, station.longitude],
                popup=f"{station.name} ({station.line}, zone {station.zone})",
                tooltip=station.name,
                icon=icon,
            ).add_to(route_map)

        if len(route) >= 2:
            for segment in _line_segments(route):
                folium.PolyLine(
                    [[s.latitude, s.longitude] for s in segment],
                    weight=5,
                    color=line_color(segment[-1].line),
                    opacity=0.8,
                    tooltip=segment[-1].line,
                ).add_to(route_map)
            route_map.fit_bounds(coords)

        return route_map
