"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the collaborators
around it (loaders, fare rules, renderers). They enable dependency
injection and make the system testable.
"""

from .fare import FarePolicyPort
from .graph import NetworkRepositoryPort
from .rendering import MapRendererPort

__all__ = [
    "NetworkRepositoryPort",
    "FarePolicyPort",
    "MapRendererPort",
]
