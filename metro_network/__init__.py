"""Top-level package for the metro network project.

The package models a metro system as a weighted undirected graph and
answers routing and structural queries over it: shortest path with fare
and transfer estimation, traversals, path enumeration, cycle detection,
connected components and minimum spanning tree.
"""

from .domain.models import PathResult, SpanningTree, Station
from .graph import GraphEngine, Network
from .services import SearchEngine

__all__ = ["Network", "GraphEngine", "SearchEngine", "Station", "PathResult", "SpanningTree"]
