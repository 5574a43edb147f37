"""Immutable domain models for the metro network.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts shared by the graph
engine, the search layer and the presentation collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, NamedTuple

# Distance reported by a PathResult when no route exists.
NO_PATH_DISTANCE = -1.0


class MutationOutcome(Enum):
    """Result of a network mutation.

    The network applies a lenient policy (duplicate stations are ignored,
    edges touching unknown stations are dropped). The outcome says which
    branch was taken; it is truthy only when the network changed.
    """

    ADDED = auto()
    ALREADY_EXISTS = auto()
    UNKNOWN_STATION = auto()
    REMOVED = auto()
    NOT_FOUND = auto()

    def __bool__(self) -> bool:
        return self in (MutationOutcome.ADDED, MutationOutcome.REMOVED)


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """Coordinates of a station."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Station:
    """A metro station.

    Attributes:
        name: Unique station name (the station's identity)
        line: Label of the line serving the station
        zone: Fare zone, a positive integer
        location: Coordinates used for nearest-station queries
    """

    name: str
    line: str
    zone: int = 1
    location: GeoLocation = field(default_factory=lambda: GeoLocation(0.0, 0.0))

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Station name must not be empty")
        if self.zone < 1:
            raise ValueError(f"Zone must be a positive integer, got {self.zone}")

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query.

    Attributes:
        path: Station names from source to destination (inclusive)
        lines: Distinct line labels touched by the path
        total_distance_km: Summed edge distance, NO_PATH_DISTANCE if unreachable
        max_zone: Highest zone along the path (0 when no path)
        estimated_fare: Fare computed by the attached fare policy
        transfer_count: Number of line changes between consecutive stations
    """

    path: tuple[str, ...] = ()
    lines: frozenset[str] = frozenset()
    total_distance_km: float = NO_PATH_DISTANCE
    max_zone: int = 0
    estimated_fare: int = 0
    transfer_count: int = 0

    @classmethod
    def no_path(cls) -> PathResult:
        """Return the sentinel used for unknown stations and unreachable targets."""
        return cls()

    @property
    def is_found(self) -> bool:
        """Check if a route was found."""
        return len(self.path) > 0 and self.total_distance_km >= 0

    @property
    def num_stops(self) -> int:
        """Return the number of stations in the route."""
        return len(self.path)


class SpanningTreeEdge(NamedTuple):
    """An edge committed to a minimum spanning tree."""

    from_station: str
    to_station: str
    weight: float


@dataclass(frozen=True, slots=True)
class SpanningTree:
    """Minimum spanning tree (or forest fragment) of a network.

    Attributes:
        edges: Tree edges in the order Prim's algorithm committed them
        is_spanning: False when the network is disconnected and the tree
            only covers the component of the start station
    """

    edges: tuple[SpanningTreeEdge, ...] = ()
    is_spanning: bool = True

    @property
    def total_weight(self) -> float:
        return sum(edge.weight for edge in self.edges)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[SpanningTreeEdge]:
        return iter(self.edges)


@dataclass(frozen=True, slots=True)
class NetworkStats:
    """Structural summary of a network.

    Attributes:
        station_count: Number of stations
        edge_count: Number of undirected connections
        lines: Sorted distinct line labels
        density: 2E / (V (V - 1)), 0.0 for fewer than two stations
    """

    station_count: int
    edge_count: int
    lines: tuple[str, ...] = ()
    density: float = 0.0


@dataclass(frozen=True, slots=True)
class FareBreakdown:
    """Components of a fare computed from distance and zone."""

    base_fare: float
    distance_km: float
    distance_charge: float
    max_zone: int
    zone_charge: float
    total_fare: int
