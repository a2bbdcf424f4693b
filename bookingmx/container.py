"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(ProximityService)

        # Testing
        container = Container()
        container.register(ReservationStorePort, lambda: FakeStore())
        store = container.resolve(ReservationStorePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[Any, Callable[[], Any]] = field(default_factory=dict, repr=False)
    _singletons: Dict[Any, Any] = field(default_factory=dict, repr=False)
    _singleton_types: set = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: Any,
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: Any) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: Any) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Raises:
            ConfigurationError: If the graph source is not supported.
        """
        from .adapters.graph import CSVGraphDataRepository, SampleGraphDataRepository
        from .adapters.reservations import HTTPReservationClient
        from .ports.graph import GraphDataRepositoryPort
        from .ports.reservations import ReservationStorePort
        from .services import ProximityService, ReservationService

        config = config or get_config()
        container = cls(config=config)

        # Graph dataset based on config
        def create_repository() -> GraphDataRepositoryPort:
            source = config.graph.source
            if source == "sample":
                return SampleGraphDataRepository()
            if source == "csv":
                return CSVGraphDataRepository(config.graph)
            raise ConfigurationError(
                f"Unknown graph source: {source!r}",
                setting_name="graph.source",
                expected_type="'sample' or 'csv'",
            )

        container.register(GraphDataRepositoryPort, create_repository)
        container.register(
            ReservationStorePort,
            lambda: HTTPReservationClient(config.api),
        )

        container.register(
            ProximityService,
            lambda: ProximityService(
                repository=container.resolve(GraphDataRepositoryPort),
                default_max_distance_km=config.graph.default_max_distance_km,
            ),
        )
        container.register(
            ReservationService,
            lambda: ReservationService(store=container.resolve(ReservationStorePort)),
        )

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        _default_container = None
