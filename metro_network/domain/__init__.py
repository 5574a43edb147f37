"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    MetroNetworkError,
    NetworkLoadError,
    NoRouteFoundError,
    RenderingError,
    StationNotFoundError,
)
from .models import (
    NO_PATH_DISTANCE,
    FareBreakdown,
    GeoLocation,
    MutationOutcome,
    NetworkStats,
    PathResult,
    SpanningTree,
    SpanningTreeEdge,
    Station,
)

__all__ = [
    # Models
    "NO_PATH_DISTANCE",
    "GeoLocation",
    "Station",
    "MutationOutcome",
    "PathResult",
    "SpanningTreeEdge",
    "SpanningTree",
    "NetworkStats",
    "FareBreakdown",
    # Errors
    "MetroNetworkError",
    "GraphError",
    "NetworkLoadError",
    "StationNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
    "RenderingError",
]
