"""GraphEngine - routing and analysis façade over a Network."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import PathResult, SpanningTree
from ..ports.fare import FarePolicyPort
from . import dijkstra, spanning_tree, traversal
from .network import Network


@dataclass
class GraphEngine:
    """Routing and structural queries bound to one network.

    The engine holds no state of its own: every call reads the network
    as it is at call time.

    Attributes:
        network: The network to query
        fare_policy: Optional fare collaborator used by shortest-path queries
    """

    network: Network
    fare_policy: Optional[FarePolicyPort] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_shortest_path(self, source: str, destination: str) -> PathResult:
        """Shortest route, or ``PathResult.no_path()`` if there is none."""
        result = dijkstra.shortest_path(
            self.network, source, destination, self.fare_policy
        )
        self._logger.debug(
            "Shortest path computed",
            extra={
                "source": source,
                "destination": destination,
                "found": result.is_found,
                "distance_km": result.total_distance_km,
            },
        )
        return result

    def bfs(self, start: str) -> List[str]:
        return traversal.bfs(self.network, start)

    def dfs(self, start: str) -> List[str]:
        return traversal.dfs(self.network, start)

    def find_all_paths(
        self, source: str, destination: str, limit: Optional[int] = None
    ) -> List[List[str]]:
        return traversal.find_all_paths(self.network, source, destination, limit)

    def has_cycle(self) -> bool:
        return traversal.has_cycle(self.network)

    def connected_components(self) -> List[List[str]]:
        return traversal.connected_components(self.network)

    def minimum_spanning_tree(self) -> SpanningTree:
        return spanning_tree.minimum_spanning_tree(self.network)
