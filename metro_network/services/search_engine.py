"""Read-only station lookups over a Network.

The search engine keeps a reference to the network, never a copy of its
stations, so every query sees the network's current state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from ..graph.network import Network


@dataclass(frozen=True)
class SearchEngine:
    """Station filters: name, line, zone, prefix and nearest coordinate.

    All list results are sorted by station name.
    """

    network: Network

    def search_by_name(self, keyword: str) -> List[str]:
        """Stations whose name contains ``keyword``, ignoring case."""
        needle = keyword.casefold()
        return sorted(
            name for name in self.network.stations if needle in name.casefold()
        )

    def search_by_line(self, line: str) -> List[str]:
        """Stations whose line label equals ``line``, ignoring case."""
        wanted = line.casefold()
        return sorted(
            name
            for name, station in self.network.stations.items()
            if station.line.casefold() == wanted
        )

    def search_by_zone(self, zone: int) -> List[str]:
        return sorted(
            name
            for name, station in self.network.stations.items()
            if station.zone == zone
        )

    def autocomplete(self, prefix: str) -> List[str]:
        """Stations whose name starts with ``prefix``, ignoring case."""
        start = prefix.casefold()
        return sorted(
            name for name in self.network.stations if name.casefold().startswith(start)
        )

    def nearest_station(self, latitude: float, longitude: float) -> Optional[str]:
        """Closest station by straight-line distance in (lat, lon) space.

        This is a flat-plane approximation, fine for a city-sized network.
        Ties go to the station inserted first. Returns None for an empty
        network.
        """
        nearest: Optional[str] = None
        best = math.inf
        for name, station in self.network.stations.items():
            distance = math.hypot(
                station.latitude - latitude, station.longitude - longitude
            )
            if distance < best:
                best = distance
                nearest = name
        return nearest
