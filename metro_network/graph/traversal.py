"""Reachability and structural analysis over a Network.

Traversals return station names in the order they were visited.
Backtracking searches (path enumeration, cycle detection) keep an
explicit stack of neighbor iterators, so deep networks never hit the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .network import Connection, Network


def bfs(network: Network, start: str) -> List[str]:
    """Breadth-first visit order from ``start``; empty if the station is unknown.

    Stations are marked when enqueued, so none is queued twice.
    """
    if start not in network:
        return []

    adjacency = network.adjacency
    order: List[str] = []
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for neighbor, _ in adjacency[current]:
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def dfs(network: Network, start: str) -> List[str]:
    """Depth-first visit order from ``start``; empty if the station is unknown.

    Uses a LIFO stack and marks stations when popped: a station may be
    pushed several times but is recorded once, in pop order.
    """
    if start not in network:
        return []

    adjacency = network.adjacency
    order: List[str] = []
    visited: Set[str] = set()
    stack = [start]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        order.append(current)
        for neighbor, _ in adjacency[current]:
            if neighbor not in visited:
                stack.append(neighbor)
    return order


def find_all_paths(
    network: Network,
    source: str,
    destination: str,
    limit: Optional[int] = None,
) -> List[List[str]]:
    """Enumerate every simple path from ``source`` to ``destination``.

    The cost grows with the number of paths, which is exponential in
    general; meant for small or sparse networks. ``limit`` stops the
    search after that many paths. Parallel edges yield a path once.

    Returns:
        Paths in depth-first discovery order, empty if an endpoint is unknown.
    """
    if limit is not None and limit <= 0:
        return []
    if source not in network or destination not in network:
        return []
    if source == destination:
        return [[source]]

    adjacency = network.adjacency
    paths: List[List[str]] = []
    path = [source]
    on_path = {source}
    # One frame per station on the current path: its neighbor iterator and
    # the neighbors already expanded from it.
    stack: List[Tuple[Iterator[Connection], Set[str]]] = [
        (iter(adjacency[source]), set())
    ]

    while stack:
        neighbors, tried = stack[-1]
        step = next(neighbors, None)
        if step is None:
            stack.pop()
            on_path.discard(path.pop())
            continue

        neighbor = step[0]
        if neighbor in on_path or neighbor in tried:
            continue
        tried.add(neighbor)

        if neighbor == destination:
            paths.append(path + [neighbor])
            if limit is not None and len(paths) >= limit:
                break
            continue

        path.append(neighbor)
        on_path.add(neighbor)
        stack.append((iter(adjacency[neighbor]), set()))

    return paths


def has_cycle(network: Network) -> bool:
    """Check whether any connected component contains a cycle.

    A visited neighbor other than the station we came from closes a
    cycle. Two parallel edges between the same stations therefore count
    as a cycle, and so does a self-loop.
    """
    adjacency = network.adjacency
    parents: Dict[str, Optional[str]] = {}

    for root in adjacency:
        if root in parents:
            continue
        parents[root] = None
        stack: List[Tuple[str, Iterator[Connection]]] = [(root, iter(adjacency[root]))]
        while stack:
            current, neighbors = stack[-1]
            step = next(neighbors, None)
            if step is None:
                stack.pop()
                continue
            neighbor = step[0]
            if neighbor not in parents:
                parents[neighbor] = current
                stack.append((neighbor, iter(adjacency[neighbor])))
            elif neighbor != parents[current]:
                return True
    return False


def connected_components(network: Network) -> List[List[str]]:
    """Group stations into connected components, one BFS per component."""
    adjacency = network.adjacency
    components: List[List[str]] = []
    visited: Set[str] = set()

    for root in adjacency:
        if root in visited:
            continue
        component: List[str] = []
        visited.add(root)
        queue = deque([root])
        while queue:
            current = queue.popleft()
            component.append(current)
            for neighbor, _ in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        components.append(component)
    return components
