"""Rendering port - Drawing a planned route on a map.

The service hands over the stations of a route in travel order and a
destination file; how the map looks is up to the renderer.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station


class MapRendererPort(Protocol):
    """Port for route maps.

    Implementation: adapters/rendering/folium_adapter.py
    """

    def render(self, route: Sequence[Station], output_path: Path) -> Path:
        """Draw ``route`` and write the map to ``output_path``.

        The first station is the departure and the last the arrival.

        Returns:
            The path of the written file.

        Raises:
            RenderingError: If the route is empty or the map cannot be written.
        """
        ...
