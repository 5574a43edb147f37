"""Services layer - Application orchestration.

Available services:
- MetroService: Route planning, reload and analysis over the loaded network
- SearchEngine: Read-only station lookups
"""

from .metro_service import MetroService
from .search_engine import SearchEngine

__all__ = ["MetroService", "SearchEngine"]
