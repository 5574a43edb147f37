"""In-memory metro network: stations plus a symmetric adjacency relation.

This module defines the Graph type used throughout the project and the
Network store that owns it. Every undirected edge is stored twice, once
in each endpoint's neighbor list, and both sides are always updated
together.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..domain.errors import GraphError
from ..domain.models import GeoLocation, MutationOutcome, NetworkStats, Station

Connection = Tuple[str, float]
Graph = Dict[str, List[Connection]]

logger = logging.getLogger(__name__)


class Network:
    """Stations and the undirected, weighted connections between them.

    Station names are unique keys. Iteration follows insertion order, so
    traversal, component and spanning-tree outputs are deterministic for
    a given build sequence.
    """

    def __init__(self) -> None:
        self._stations: Dict[str, Station] = {}
        self._adjacency: Graph = {}

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, name: object) -> bool:
        return name in self._stations

    def __iter__(self) -> Iterator[str]:
        return iter(self._stations)

    def __repr__(self) -> str:
        return f"Network(stations={self.station_count}, edges={self.edge_count})"

    # Mutations

    def add_station(
        self,
        name: str,
        line: str,
        zone: int = 1,
        lat: float = 0.0,
        lon: float = 0.0,
    ) -> MutationOutcome:
        """Add a station; the first write wins.

        Re-adding an existing name leaves its attributes untouched.

        Returns:
            ADDED, or ALREADY_EXISTS when the name was present.
        """
        if name in self._stations:
            logger.debug("Station already exists", extra={"station": name})
            return MutationOutcome.ALREADY_EXISTS

        self._stations[name] = Station(
            name=name,
            line=line,
            zone=zone,
            location=GeoLocation(latitude=lat, longitude=lon),
        )
        self._adjacency.setdefault(name, [])
        return MutationOutcome.ADDED

    def add_edge(self, station1: str, station2: str, distance: float) -> MutationOutcome:
        """Connect two existing stations in both directions.

        Edges touching an unknown station are dropped without raising.
        Parallel edges are kept.

        Returns:
            ADDED, or UNKNOWN_STATION when the edge was dropped.

        Raises:
            ValueError: If the distance is negative.
        """
        if distance < 0:
            raise ValueError(f"Distance must be non-negative, got {distance}")

        if station1 not in self._stations or station2 not in self._stations:
            logger.debug(
                "Edge dropped, unknown station",
                extra={"from_station": station1, "to_station": station2},
            )
            return MutationOutcome.UNKNOWN_STATION

        self._adjacency[station1].append((station2, distance))
        self._adjacency[station2].append((station1, distance))
        return MutationOutcome.ADDED

    def remove_station(self, name: str) -> MutationOutcome:
        """Remove a station and every edge that touches it.

        Returns:
            REMOVED, or NOT_FOUND when the station did not exist.
        """
        if name not in self._stations:
            return MutationOutcome.NOT_FOUND

        del self._stations[name]
        del self._adjacency[name]
        for neighbors in self._adjacency.values():
            neighbors[:] = [conn for conn in neighbors if conn[0] != name]
        return MutationOutcome.REMOVED

    def remove_edge(self, station1: str, station2: str) -> MutationOutcome:
        """Remove every edge between two stations, on both sides or neither.

        Returns:
            REMOVED, or NOT_FOUND when no such edge exists.

        Raises:
            GraphError: If the edge is stored on one side only.
        """
        forward = any(n == station2 for n, _ in self._adjacency.get(station1, ()))
        backward = any(n == station1 for n, _ in self._adjacency.get(station2, ()))

        if forward != backward:
            logger.error(
                "Asymmetric adjacency detected",
                extra={"from_station": station1, "to_station": station2},
            )
            raise GraphError(
                f"Edge {station1!r} - {station2!r} is stored on one side only",
                stations=(station1, station2),
            )
        if not forward:
            return MutationOutcome.NOT_FOUND

        self._adjacency[station1][:] = [
            conn for conn in self._adjacency[station1] if conn[0] != station2
        ]
        self._adjacency[station2][:] = [
            conn for conn in self._adjacency[station2] if conn[0] != station1
        ]
        return MutationOutcome.REMOVED

    # Queries

    def has_station(self, name: str) -> bool:
        return name in self._stations

    def get_station(self, name: str) -> Optional[Station]:
        """Return the stored station, or None if unknown."""
        return self._stations.get(name)

    @property
    def stations(self) -> Mapping[str, Station]:
        """Live read-only view of the station mapping."""
        return MappingProxyType(self._stations)

    @property
    def adjacency(self) -> Mapping[str, Sequence[Connection]]:
        """Live read-only view of the adjacency relation."""
        return MappingProxyType(self._adjacency)

    def neighbors(self, name: str) -> tuple[Connection, ...]:
        """Return the (neighbor, distance) pairs of a station, empty if unknown."""
        return tuple(self._adjacency.get(name, ()))

    @property
    def station_count(self) -> int:
        return len(self._stations)

    @property
    def edge_count(self) -> int:
        """Number of undirected edges (each is stored twice)."""
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def edges(self) -> List[Tuple[str, str, float]]:
        """List every undirected edge once, as (station1, station2, distance)."""
        result: List[Tuple[str, str, float]] = []
        for station, neighbors in self._adjacency.items():
            self_loops = 0
            for neighbor, distance in neighbors:
                if station < neighbor:
                    result.append((station, neighbor, distance))
                elif station == neighbor:
                    # A self-loop is appended twice to the same list.
                    self_loops += 1
                    if self_loops % 2 == 1:
                        result.append((station, neighbor, distance))
        return result

    def lines(self) -> List[str]:
        """Sorted distinct line labels."""
        return sorted({station.line for station in self._stations.values()})

    def stations_by_line(self, line: str) -> List[str]:
        """Sorted names of the stations tagged with exactly this line label."""
        return sorted(
            name for name, station in self._stations.items() if station.line == line
        )

    def statistics(self) -> NetworkStats:
        """Summarize station/edge counts, lines and density."""
        stations = self.station_count
        edges = self.edge_count
        density = 0.0
        if stations > 1:
            density = (2.0 * edges) / (stations * (stations - 1))
        return NetworkStats(
            station_count=stations,
            edge_count=edges,
            lines=tuple(self.lines()),
            density=density,
        )
