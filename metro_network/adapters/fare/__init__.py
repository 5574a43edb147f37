"""Fare adapters - Implementations of FarePolicyPort.

Available implementations:
- ZoneFareCalculator: base fare + per-km charge + zone surcharge
"""

from .zone_fare import ZoneFareCalculator

__all__ = ["ZoneFareCalculator"]
