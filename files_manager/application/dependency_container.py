"""
Dependency Container

Holds the service instances built by the app factory so that API
resources can look them up per request.
"""

import logging
import threading
from typing import Any, Dict, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DependencyNotFoundError(Exception):
    """Raised when a type was never registered."""
    pass


class DependencyContainer:
    """
    Registry of shared service instances keyed by type.

    build_container() registers one instance per service at startup.
    override() replaces an instance without rebuilding the app, which is
    how the API tests swap in failing or degraded services.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._overrides: Dict[Type, Any] = {}
        self._lock = threading.Lock()

    def register_singleton(self, interface: Type[T], implementation: T) -> None:
        """
        Register the instance returned for interface.

        Example:
            container.register_singleton(FileService, file_service)
        """
        with self._lock:
            self._instances[interface] = implementation
        logger.debug(f"Registered {interface.__name__}")

    def override(self, interface: Type[T], implementation: T) -> None:
        """Resolve interface to implementation until clear_overrides()."""
        with self._lock:
            self._overrides[interface] = implementation
        logger.debug(f"Overrode {interface.__name__}")

    def clear_overrides(self) -> None:
        with self._lock:
            self._overrides.clear()

    def resolve(self, interface: Type[T]) -> T:
        """
        Return the instance for interface, preferring an override.

        Raises:
            DependencyNotFoundError: If interface was never registered
        """
        with self._lock:
            if interface in self._overrides:
                return self._overrides[interface]
            if interface in self._instances:
                return self._instances[interface]
        raise DependencyNotFoundError(f"No registration found for type: {interface.__name__}")
