"""Graph core of the metro network.

This subpackage contains the in-memory Network store and the routing
and analysis algorithms that run on top of it.
"""

from .engine import GraphEngine
from .network import Connection, Graph, Network

__all__ = ["Network", "Graph", "Connection", "GraphEngine"]
