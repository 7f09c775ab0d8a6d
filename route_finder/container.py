"""Dependency injection container.

Each port type is bound to a factory. Shared bindings build their
instance on first resolution and hand the same object out afterwards,
so tests can swap the graph store or the solver without patching.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class _Binding:
    factory: Callable[[], Any]
    shared: bool
    instance: Optional[Any] = None

    def get(self) -> Any:
        if not self.shared:
            return self.factory()
        if self.instance is None:
            self.instance = self.factory()
        return self.instance


@dataclass
class Container:
    """Maps port types to the adapters that implement them.

        container = Container.create_default()
        service = container.resolve(RouteService)

    Attributes:
        config: Application configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        With ``singleton=False`` every resolve() calls the factory again.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            return binding.get()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production bindings.

        The map renderer is only wired into the service when
        ``config.map_output`` is set.
        """
        from .adapters.graph import DijkstraRouteSolver
        from .adapters.rendering import FoliumMapRenderer
        from .graph.network import build_default_store
        from .ports.graph import GraphStorePort, RouteSolverPort
        from .ports.rendering import MapRendererPort
        from .services import RouteService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphStorePort, build_default_store)
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(config.routing),
        )
        container.register(MapRendererPort, FoliumMapRenderer)

        def create_route_service() -> RouteService:
            renderer = (
                container.resolve(MapRendererPort)
                if config.map_output is not None
                else None
            )
            return RouteService(
                store=container.resolve(GraphStorePort),
                route_solver=container.resolve(RouteSolverPort),
                config=config.routing,
                map_renderer=renderer,
                map_output=config.map_output,
            )

        container.register(RouteService, create_route_service)

        return container


@lru_cache(maxsize=1)
def get_container() -> Container:
    """Get the default application container (created on first use)."""
    return Container.create_default()


def reset_container() -> None:
    """Drop the default container so the next call rebuilds it."""
    get_container.cache_clear()
