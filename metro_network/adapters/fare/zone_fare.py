"""Zone/distance fare calculator adapter.

Prices a journey as a base fare plus a per-kilometer charge plus a
surcharge per zone of the highest zone reached, rounded half up to a
whole currency unit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ...config import FareConfig, get_config
from ...domain.models import FareBreakdown


@dataclass
class ZoneFareCalculator:
    """Fare policy driven by distance and highest zone.

    This adapter implements FarePolicyPort.

    Attributes:
        config: Fare rules (rates, round-trip discount, category bounds)
    """

    config: FareConfig = field(default_factory=lambda: get_config().fare)

    def fare_breakdown(self, distance_km: float, max_zone: int) -> FareBreakdown:
        """Split a fare into its base, distance and zone components."""
        distance_charge = distance_km * self.config.cost_per_km
        zone_charge = max_zone * self.config.zone_surcharge
        total = self.config.base_fare + distance_charge + zone_charge
        return FareBreakdown(
            base_fare=self.config.base_fare,
            distance_km=distance_km,
            distance_charge=distance_charge,
            max_zone=max_zone,
            zone_charge=zone_charge,
            total_fare=math.floor(total + 0.5),
        )

    def calculate_fare(self, distance_km: float, max_zone: int) -> int:
        """One-way fare for a route."""
        return self.fare_breakdown(distance_km, max_zone).total_fare

    def round_trip_fare(self, distance_km: float, max_zone: int) -> int:
        """Twice the one-way fare, minus the flat round-trip discount."""
        return 2 * self.calculate_fare(distance_km, max_zone) - self.config.round_trip_discount

    def fare_category(self, fare: int) -> str:
        if fare <= self.config.economy_max:
            return "Economy"
        if fare <= self.config.standard_max:
            return "Standard"
        if fare <= self.config.premium_max:
            return "Premium"
        return "Long Distance"
