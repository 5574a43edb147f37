"""Minimum spanning tree using Prim's algorithm."""

from __future__ import annotations

import heapq
import logging
from typing import List, Set, Tuple

from ..domain.models import SpanningTree, SpanningTreeEdge
from .network import Network

logger = logging.getLogger(__name__)


def minimum_spanning_tree(network: Network) -> SpanningTree:
    """Grow a minimum spanning tree from the first station of the network.

    The frontier holds (weight, from_station, to_station) candidates; the
    lightest edge leaving the tree is committed each round. On a
    disconnected network the result only covers the start station's
    component and ``is_spanning`` is False.
    """
    if len(network) == 0:
        return SpanningTree()

    adjacency = network.adjacency
    start = next(iter(network))
    in_tree: Set[str] = {start}
    frontier: List[Tuple[float, str, str]] = [
        (weight, start, neighbor) for neighbor, weight in adjacency[start]
    ]
    heapq.heapify(frontier)
    edges: List[SpanningTreeEdge] = []

    while frontier and len(in_tree) < len(network):
        weight, u, v = heapq.heappop(frontier)
        if v in in_tree:
            continue
        in_tree.add(v)
        edges.append(SpanningTreeEdge(u, v, weight))
        for neighbor, w in adjacency[v]:
            if neighbor not in in_tree:
                heapq.heappush(frontier, (w, v, neighbor))

    is_spanning = len(in_tree) == len(network)
    if not is_spanning:
        logger.warning(
            "Network is disconnected, spanning tree is partial",
            extra={
                "start": start,
                "covered": len(in_tree),
                "stations": len(network),
            },
        )
    return SpanningTree(edges=tuple(edges), is_spanning=is_spanning)
