"""CSV Network Repository adapter.

Loads the metro network from two CSV files:

- stations: ``name,line,zone,lat,lon``
- connections: ``from_station,to_station,distance_km``

Blank lines and lines starting with ``#`` are ignored. Malformed rows
are logged and skipped; duplicate stations and connections to unknown
stations follow the network's lenient policies.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO

from ...config import NetworkConfig, get_config
from ...domain.errors import NetworkLoadError
from ...domain.models import MutationOutcome, Station
from ...graph.network import Network


def _data_lines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            yield line


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Network configuration (paths, file names)
    """

    config: NetworkConfig = field(default_factory=lambda: get_config().network)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _network: Optional[Network] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Network:
        """Load the metro network from CSV files.

        Returns:
            The populated network.

        Raises:
            NetworkLoadError: If a data file is missing or not valid UTF-8.
        """
        if self._network is not None:
            return self._network

        self._logger.debug(
            "Loading network",
            extra={
                "stations_path": str(self.config.stations_path),
                "connections_path": str(self.config.connections_path),
            },
        )

        network = Network()
        self._load_stations(network, self.config.stations_path)
        self._load_connections(network, self.config.connections_path)

        self._network = network
        self._logger.info(
            "Network loaded",
            extra={"stations": network.station_count, "edges": network.edge_count},
        )
        return network

    def _load_stations(self, network: Network, path: Path) -> None:
        loaded = 0
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(_data_lines(f))
                for row in reader:
                    try:
                        name = (row.get("name") or "").strip()
                        if not name:
                            raise ValueError("missing station name")
                        outcome = network.add_station(
                            name,
                            (row.get("line") or "").strip(),
                            int(row.get("zone") or 1),
                            float(row.get("lat") or 0.0),
                            float(row.get("lon") or 0.0),
                        )
                    except (TypeError, ValueError) as e:
                        self._logger.warning(
                            "Skipping malformed station row",
                            extra={"row": reader.line_num, "error": str(e)},
                        )
                        continue
                    if outcome is MutationOutcome.ADDED:
                        loaded += 1
        except (OSError, ValueError) as e:
            raise NetworkLoadError(
                f"Failed to load stations: {e}",
                file_path=str(path),
                cause=e,
            )
        self._logger.debug("Stations loaded", extra={"count": loaded})

    def _load_connections(self, network: Network, path: Path) -> None:
        loaded = 0
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(_data_lines(f))
                for row in reader:
                    from_id = (row.get("from_station") or "").strip()
                    to_id = (row.get("to_station") or "").strip()
                    try:
                        outcome = network.add_edge(
                            from_id, to_id, float(row.get("distance_km") or "")
                        )
                    except (TypeError, ValueError) as e:
                        self._logger.warning(
                            "Skipping malformed connection row",
                            extra={"row": reader.line_num, "error": str(e)},
                        )
                        continue
                    if outcome is MutationOutcome.UNKNOWN_STATION:
                        self._logger.warning(
                            "Connection references unknown station",
                            extra={"from_station": from_id, "to_station": to_id},
                        )
                    else:
                        loaded += 1
        except (OSError, ValueError) as e:
            raise NetworkLoadError(
                f"Failed to load connections: {e}",
                file_path=str(path),
                cause=e,
            )
        self._logger.debug("Connections loaded", extra={"count": loaded})

    def get_station(self, name: str) -> Optional[Station]:
        """Get station details by name.

        Args:
            name: The station name to look up.

        Returns:
            Station with full details, or None if not found.
        """
        return self.load().get_station(name)

    def list_stations(self) -> Sequence[Station]:
        """List all stations.

        Returns:
            Sequence of all stations with their details.
        """
        return list(self.load().stations.values())

    def clear_cache(self) -> None:
        """Clear the cached network."""
        self._network = None
        self._logger.debug("Network cache cleared")
