"""Typed domain errors for the metro network.

Core graph queries never raise for unknown stations: they return empty
or sentinel results. These errors are raised by the collaborators around
the core (loading, strict route planning, rendering, configuration) and
by integrity checks on the adjacency relation.

All errors inherit from MetroNetworkError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MetroNetworkError(Exception):
    """Base error for the metro network domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(MetroNetworkError):
    """Graph data integrity error.

    Raised when the adjacency relation is found in a state that the
    network mutations can never produce, e.g. an edge stored on one
    side only.

    Attributes:
        stations: Station names involved in the inconsistency
    """

    stations: tuple[str, ...] = ()


@dataclass
class NetworkLoadError(GraphError):
    """Station or connection data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class StationNotFoundError(MetroNetworkError):
    """Station name not present in the network.

    Attributes:
        station_name: The station name that was not found
    """

    station_name: str = ""


@dataclass
class NoRouteFoundError(MetroNetworkError):
    """No path exists between the requested stations.

    Attributes:
        source: Departure station name
        destination: Arrival station name
    """

    source: str = ""
    destination: str = ""


@dataclass
class ConfigurationError(MetroNetworkError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(MetroNetworkError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
