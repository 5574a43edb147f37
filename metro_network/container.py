"""Dependency injection container.

Front-ends resolve a ready-to-use MetroService from here instead of
wiring the repository, fare policy and map renderer by hand. Tests
rebind any port to a fake before resolving.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, NamedTuple, Optional

from .config import AppConfig, get_config


class _Binding(NamedTuple):
    factory: Callable[[], Any]
    singleton: bool


@dataclass
class Container:
    """Maps port types to factories and caches singleton instances.

    Usage:
        container = Container.create_default()
        service = container.resolve(MetroService)

        container.register(NetworkRepositoryPort, lambda: InMemoryRepository())

    Attributes:
        config: Configuration handed to the default adapters
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        A singleton already built for the old binding is discarded.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            if not binding.singleton:
                return binding.factory()
            if port_type not in self._instances:
                self._instances[port_type] = binding.factory()
            return self._instances[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._bindings

    def clear(self) -> None:
        """Drop every binding and cached instance."""
        with self._lock:
            self._bindings.clear()
            self._instances.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Bind the CSV repository, zone fares, folium maps and MetroService."""
        from .adapters.fare import ZoneFareCalculator
        from .adapters.graph import CSVNetworkRepository
        from .adapters.rendering import FoliumMapRenderer
        from .ports.fare import FarePolicyPort
        from .ports.graph import NetworkRepositoryPort
        from .ports.rendering import MapRendererPort
        from .services import MetroService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            NetworkRepositoryPort, lambda: CSVNetworkRepository(config.network)
        )
        container.register(FarePolicyPort, lambda: ZoneFareCalculator(config.fare))
        container.register(
            MapRendererPort, lambda: FoliumMapRenderer(config.rendering)
        )
        container.register(
            MetroService,
            lambda: MetroService(
                repository=container.resolve(NetworkRepositoryPort),
                fare_policy=container.resolve(FarePolicyPort),
                map_renderer=container.resolve(MapRendererPort),
            ),
        )
        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Forget the process-wide container (used by tests)."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear()
        _default_container = None
