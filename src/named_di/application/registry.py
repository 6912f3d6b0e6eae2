import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from named_di.domain import (
    LOGGER,
    CircularDependencyError,
    FactoryClassDescriptor,
    InvalidArgumentError,
)


def validate_name(name: Any) -> str:
    """Return ``name`` if it is a usable service identifier.

    Raises:
        InvalidArgumentError: If ``name`` is not a non-empty string.
    """
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(f"Service names must be non-empty strings; {name!r} provided")
    return name


class ServiceRegistry:
    """Registration store holding services, factories, factory classes and aliases.

    The four mappings are independent; a name may appear in several of them.
    All access goes through one re-entrant lock.

    Attributes:
        _services: Built services, keyed by name.
        _factories: Factory callables, keyed by name.
        _factory_classes: Factory delegate descriptors, keyed by name.
        _aliases: Alias to target name.
    """

    def __init__(self) -> None:
        self._services: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[..., Any]] = {}
        self._factory_classes: Dict[str, FactoryClassDescriptor] = {}
        self._aliases: Dict[str, str] = {}
        self._lock = threading.RLock()

    def set_service(self, name: str, service: Any) -> None:
        with self._lock:
            self._services[name] = service

    def set_factory(self, name: str, factory: Callable[..., Any]) -> None:
        with self._lock:
            self._factories[name] = factory
        LOGGER.debug("Registered factory for service '%s'", name)

    def set_factory_class(self, name: str, descriptor: FactoryClassDescriptor) -> None:
        with self._lock:
            self._factory_classes[name] = descriptor
        LOGGER.debug("Registered factory class '%s' for service '%s'", descriptor.factory_class, name)

    def set_alias(self, alias: str, name: str) -> None:
        """Point ``alias`` at ``name``.

        Raises:
            InvalidArgumentError: If ``name`` has no service, factory or factory class,
                or if ``alias`` equals ``name``.
        """
        with self._lock:
            if not self.is_registered(name):
                raise InvalidArgumentError(
                    f"Unable to configure alias '{alias}' for unknown service '{name}'",
                    service_name=name,
                )
            if alias == name:
                raise InvalidArgumentError(
                    f"Unable to configure alias '{alias}' with identical service name '{name}'",
                    service_name=name,
                )
            self._aliases[alias] = name
        LOGGER.debug("Registered alias '%s' for service '%s'", alias, name)

    def is_registered(self, name: str) -> bool:
        """Return whether ``name`` has a service, factory or factory class (aliases excluded)."""
        with self._lock:
            return name in self._services or name in self._factories or name in self._factory_classes

    def has(self, name: str) -> bool:
        with self._lock:
            return self.is_registered(name) or name in self._aliases

    def resolve_alias(self, name: str) -> str:
        """Follow the alias chain starting at ``name`` and return the final target.

        Returns ``name`` unchanged when it is not an alias.

        Raises:
            CircularDependencyError: If the alias chain loops back on itself.
        """
        chain: List[str] = [name]
        with self._lock:
            while chain[-1] in self._aliases:
                target = self._aliases[chain[-1]]
                if target in chain:
                    raise CircularDependencyError(target, chain)
                chain.append(target)
        return chain[-1]

    def find_service(self, name: str) -> Tuple[bool, Any]:
        """Return ``(True, service)`` if a service is set for ``name``, else ``(False, None)``."""
        with self._lock:
            if name in self._services:
                return True, self._services[name]
        return False, None

    def get_factory(self, name: str) -> Optional[Callable[..., Any]]:
        with self._lock:
            return self._factories.get(name)

    def get_factory_class(self, name: str) -> Optional[FactoryClassDescriptor]:
        with self._lock:
            return self._factory_classes.get(name)

    def copy(self) -> "ServiceRegistry":
        """Return an independent registry with the same entries.

        Services are shared by reference; the mappings themselves are copied.
        """
        clone = ServiceRegistry()
        with self._lock:
            clone._services = dict(self._services)
            clone._factories = dict(self._factories)
            clone._factory_classes = dict(self._factory_classes)
            clone._aliases = dict(self._aliases)
        return clone

    def discard_service(self, name: str) -> None:
        """Forget the built service for ``name`` so its factory runs again on the next ``get``."""
        with self._lock:
            self._services.pop(name, None)
