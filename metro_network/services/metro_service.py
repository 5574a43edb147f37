"""Metro service - Main orchestrator.

This service ties the network repository, the graph engine, the fare
policy and the optional map renderer together for front-ends such as
the command-line interface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.errors import NoRouteFoundError, RenderingError, StationNotFoundError
from ..domain.models import PathResult
from ..graph.engine import GraphEngine
from ..graph.network import Network
from ..io.formatting import format_route
from ..ports.fare import FarePolicyPort
from ..ports.graph import NetworkRepositoryPort
from ..ports.rendering import MapRendererPort
from .search_engine import SearchEngine


@dataclass
class MetroService:
    """Main service for querying the metro network.

    The network is loaded lazily from the repository. ``engine`` and
    ``search`` are always bound to the current network, so after
    ``reload()`` they never see stale data.

    Attributes:
        repository: Loads the metro network
        fare_policy: Prices routes
        map_renderer: Optional map rendering
    """

    repository: NetworkRepositoryPort
    fare_policy: Optional[FarePolicyPort] = None
    map_renderer: Optional[MapRendererPort] = None

    _network: Optional[Network] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def network(self) -> Network:
        if self._network is None:
            self._network = self.repository.load()
        return self._network

    @property
    def engine(self) -> GraphEngine:
        return GraphEngine(self.network, self.fare_policy)

    @property
    def search(self) -> SearchEngine:
        return SearchEngine(self.network)

    def reload(self) -> Network:
        """Re-read the network from the repository and swap it in."""
        self.repository.clear_cache()
        self._network = self.repository.load()
        self._logger.info(
            "Network reloaded",
            extra={
                "stations": self._network.station_count,
                "edges": self._network.edge_count,
            },
        )
        return self._network

    def plan_route(
        self,
        source: str,
        destination: str,
        generate_map: bool = False,
        map_output_path: Optional[Path] = None,
    ) -> PathResult:
        """Find the shortest route between two stations.

        Args:
            source: Departure station name.
            destination: Arrival station name.
            generate_map: Whether to generate a map visualization.
            map_output_path: Path for the map file (required if generate_map=True).

        Returns:
            PathResult with the computed route.

        Raises:
            StationNotFoundError: If either station is unknown.
            NoRouteFoundError: If the stations are not connected.
            RenderingError: If map generation fails.
        """
        for name in (source, destination):
            if not self.network.has_station(name):
                raise StationNotFoundError(
                    f"Station not found: {name}",
                    station_name=name,
                )

        route = self.engine.find_shortest_path(source, destination)
        if not route.is_found:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        self._logger.info(
            "Route computed",
            extra={
                "stops": route.num_stops,
                "distance_km": route.total_distance_km,
                "transfers": route.transfer_count,
            },
        )

        if generate_map and map_output_path and self.map_renderer:
            stations = tuple(
                station
                for station in (self.network.get_station(name) for name in route.path)
                if station is not None
            )
            self.map_renderer.render(stations, map_output_path)
            self._logger.info("Map generated", extra={"path": str(map_output_path)})

        return route

    def plan_route_safe(
        self,
        source: str,
        destination: str,
        generate_map: bool = False,
        map_output_path: Optional[Path] = None,
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            result = self.plan_route(source, destination, generate_map, map_output_path)
            return result, None
        except StationNotFoundError as e:
            return None, f"Error: {e.message}"
        except NoRouteFoundError as e:
            return None, f"No path found between {e.source} and {e.destination}"
        except RenderingError as e:
            return None, f"Map generation failed: {e}"

    def format_result(self, route: PathResult, map_path: Optional[Path] = None) -> str:
        """Format a route as a human-readable report.

        Args:
            route: The computed route.
            map_path: Optional path to generated map.

        Returns:
            Formatted result string.
        """
        result = format_route(route, self.network)
        if map_path:
            result += f"\nMap saved to: {map_path}"
        return result
