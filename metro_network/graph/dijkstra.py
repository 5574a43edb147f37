"""Shortest-path computation using Dijkstra's algorithm.

This module computes the shortest path between two stations of a
Network and enriches it with the lines touched, the number of line
transfers, the highest zone crossed and a fare estimate.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from ..domain.models import PathResult
from .network import Network

if TYPE_CHECKING:
    from ..ports.fare import FarePolicyPort


def dijkstra(network: Network, start: str, end: str) -> Tuple[List[str], float]:
    """Compute the shortest path between two stations using Dijkstra.

    Parameters
    ----------
    network:
        Metro network to search.
    start:
        Name of the departure station.
    end:
        Name of the arrival station.

    Returns
    -------
    list[str], float
        The sequence of station names from ``start`` to ``end``
        (inclusive) and the total distance. If either station is unknown
        or no path exists, returns ``([], float("inf"))``.
    """
    if start not in network or end not in network:
        return [], float("inf")

    adjacency = network.adjacency
    distances: Dict[str, float] = {station: float("inf") for station in network}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, str]] = [(0.0, start)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, weight in adjacency.get(u, ()):
            if v in visited:
                continue
            new_distance = current_distance + weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if distances[end] == float("inf"):
        return [], float("inf")

    path: List[str] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return path, distances[end]


def count_transfers(network: Network, path: Sequence[str]) -> int:
    """Count positions where consecutive stations carry different line labels."""
    lines = [network.get_station(name).line for name in path]  # type: ignore[union-attr]
    return sum(1 for prev, nxt in zip(lines, lines[1:]) if prev != nxt)


def max_zone(network: Network, path: Sequence[str]) -> int:
    """Highest zone among the stations of a path, 0 for an empty path."""
    return max(
        (network.get_station(name).zone for name in path),  # type: ignore[union-attr]
        default=0,
    )


def shortest_path(
    network: Network,
    source: str,
    destination: str,
    fare_policy: Optional[FarePolicyPort] = None,
) -> PathResult:
    """Find the shortest route and summarize it.

    Unknown stations and unreachable destinations yield
    ``PathResult.no_path()`` (empty path, negative distance) instead of
    raising; callers check ``is_found`` before using the result.

    Parameters
    ----------
    network:
        Metro network to search.
    source, destination:
        Station names.
    fare_policy:
        Optional fare collaborator; the estimated fare is 0 without one.
    """
    path, distance = dijkstra(network, source, destination)
    if not path:
        return PathResult.no_path()

    lines = frozenset(
        network.get_station(name).line for name in path  # type: ignore[union-attr]
    )
    zone = max_zone(network, path)
    fare = fare_policy.calculate_fare(distance, zone) if fare_policy else 0

    return PathResult(
        path=tuple(path),
        lines=lines,
        total_distance_km=distance,
        max_zone=zone,
        estimated_fare=fare,
        transfer_count=count_transfers(network, path),
    )
