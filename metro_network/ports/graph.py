"""Graph ports - Abstractions for loading the metro network.

These protocols define the contract between the application core and
the bulk loaders that populate a Network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Station
    from ..graph.network import Network


class NetworkRepositoryPort(Protocol):
    """Port for loading network data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the metro
    network from persistent storage. It feeds the Network through
    ``add_station`` / ``add_edge`` only, so the network's lenient
    policies apply to whatever the storage contains.
    """

    def load(self) -> Network:
        """Load the metro network.

        Returns:
            The populated network.
        """
        ...

    def clear_cache(self) -> None:
        """Forget the cached network so the next load re-reads storage."""
        ...

    def get_station(self, name: str) -> Optional[Station]:
        """Get station details by name.

        Args:
            name: The station name to look up.

        Returns:
            Station with full details, or None if not found.
        """
        ...

    def list_stations(self) -> Sequence[Station]:
        """List all stations in the network.

        Returns:
            Sequence of all stations with their details.
        """
        ...
