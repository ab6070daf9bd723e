"""
Dependency Injection Container

Holds the services the app factory builds so the API layer can resolve
them by type. Tests swap implementations with ``override``.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DependencyNotFoundError(Exception):
    """Raised when attempting to resolve an unregistered dependency."""

    pass


@dataclass
class _Registration:
    factory: Callable[[], Any]
    cached: bool
    instance: Any = None
    built: bool = False


class DependencyContainer:
    """
    Type-keyed service container.

    Three lifetimes are supported:
    - instance: an already built object (``register_singleton``)
    - lazy singleton: built by a factory on first resolution and cached
    - transient: built by a factory on every resolution

    Factories run outside the container lock so they may resolve their
    own dependencies.
    """

    def __init__(self):
        self._registrations: Dict[Type, _Registration] = {}
        self._overrides: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """Register an already built instance."""
        with self._lock:
            self._registrations[interface] = _Registration(
                factory=lambda: implementation,
                cached=True,
                instance=implementation,
                built=True,
            )
        logger.debug(f"Registered instance for {interface.__name__}")

    def register_factory(
        self, interface: Type[T], factory: Callable[[], T], singleton: bool = True
    ) -> None:
        """
        Register a factory.

        Args:
            interface: Type the service is resolved by
            factory: Zero-argument callable building the service
            singleton: Cache the first built instance when True
        """
        with self._lock:
            self._registrations[interface] = _Registration(factory=factory, cached=singleton)
        logger.debug(
            f"Registered {'lazy singleton' if singleton else 'transient'} "
            f"for {interface.__name__}"
        )

    def register_transient(self, interface: Type[T], factory: Callable[[], T]) -> None:
        self.register_factory(interface, factory, singleton=False)

    def resolve(self, interface: Type[T]) -> T:
        """
        Resolve a registered service.

        Raises:
            DependencyNotFoundError: If the type is neither registered nor overridden
        """
        with self._lock:
            if interface in self._overrides:
                return self._overrides[interface]
            registration: Optional[_Registration] = self._registrations.get(interface)
            if registration is None:
                raise DependencyNotFoundError(
                    f"No registration found for type: {interface.__name__}"
                )
            if registration.built:
                return registration.instance

        instance = registration.factory()
        if not registration.cached:
            return instance

        with self._lock:
            # Another thread may have finished building first
            if not registration.built:
                registration.instance = instance
                registration.built = True
            return registration.instance

    def override(self, interface: Type[T], implementation: T) -> None:
        """Replace a registration until ``clear_overrides`` is called."""
        with self._lock:
            self._overrides[interface] = implementation

    def clear_overrides(self) -> None:
        with self._lock:
            self._overrides.clear()

    def is_registered(self, interface: Type) -> bool:
        with self._lock:
            return interface in self._registrations or interface in self._overrides
