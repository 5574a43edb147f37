"""Fare port - Abstraction for fare pricing.

The graph engine resolves the distance and highest zone of a route;
pricing them is left to the fare collaborator behind this protocol.
"""

from __future__ import annotations

from typing import Protocol


class FarePolicyPort(Protocol):
    """Port for fare computation.

    Implementation: adapters/fare/zone_fare.py
    """

    def calculate_fare(self, distance_km: float, max_zone: int) -> int:
        """Compute the fare of a single journey.

        Args:
            distance_km: Total route distance in kilometers.
            max_zone: Highest zone touched by the route.

        Returns:
            The fare, rounded to a whole currency unit.
        """
        ...
