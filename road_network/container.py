"""Dependency injection container.

Explicit registration and resolution without external frameworks, so
tests can swap the console or the repository:

    container = Container.create_default(config)
    container.register(ConsolePort, lambda: ScriptedConsole(["9"]))
    service = container.resolve(NetworkService)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Re-registering a type replaces its factory and drops any cached
        instance.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        self._factories[port_type] = factory
        self._singletons.pop(port_type, None)
        if singleton:
            self._singleton_types.add(port_type)
        else:
            self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type in self._singleton_types:
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

        return self._factories[port_type]()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        Args:
            config: Optional configuration override.
        """
        from .adapters.console import TerminalConsole
        from .adapters.storage import FixedWidthTableRepository
        from .network.model import RoadNetwork
        from .ports.console import ConsolePort
        from .ports.storage import NetworkRepositoryPort
        from .services import NetworkService

        config = config or get_config()
        container = cls(config=config)

        container.register(ConsolePort, lambda: TerminalConsole())
        container.register(
            NetworkRepositoryPort,
            lambda: FixedWidthTableRepository(config.storage),
        )
        container.register(
            RoadNetwork,
            lambda: RoadNetwork.with_capacity(config.network.max_cities),
        )

        def create_service() -> NetworkService:
            return NetworkService(
                network=container.resolve(RoadNetwork),
                repository=container.resolve(NetworkRepositoryPort),
                console=container.resolve(ConsolePort),
                config=config.network,
            )

        container.register(NetworkService, create_service)

        return container
