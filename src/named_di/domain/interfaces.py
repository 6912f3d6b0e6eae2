from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

Options = Any
"""Factory options: None, a sequence of positional arguments or a mapping of keyword arguments."""


class IContainer(ABC):
    """Abstract interface for a string-keyed dependency injection container."""

    @abstractmethod
    def get(self, name: str) -> Any:
        """Return the cached or newly built service registered as ``name``.

        Args:
            name: The service identifier.
        """

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return whether ``name`` has any registration (service, factory, delegate or alias).

        Args:
            name: The service identifier.
        """

    @abstractmethod
    def build(self, name: str, options: Options = None) -> Any:
        """Create a new instance of ``name`` without touching the instance cache.

        Args:
            name: The service identifier.
            options: Arguments forwarded to the factory.
        """

    @abstractmethod
    def set(self, name: str, service: Any) -> "IContainer":
        """Register an already built service."""

    @abstractmethod
    def set_factory(self, name: str, factory: Union[Callable[..., Any], str]) -> "IContainer":
        """Register a factory callable, or a factory class name."""

    @abstractmethod
    def set_factory_class(self, name: str, factory_class: str, method: Optional[str] = None) -> "IContainer":
        """Register a container-resolved factory delegate for ``name``."""

    @abstractmethod
    def set_alias(self, alias: str, name: str) -> "IContainer":
        """Register ``alias`` as another name for the registered service ``name``."""

    @abstractmethod
    def configure(self, provider: "IServiceProvider") -> None:
        """Register services using ``provider``."""


class IServiceFactory(ABC):
    """A factory strategy: produces a service given the container, its name and options."""

    @abstractmethod
    def __call__(self, container: IContainer, name: str, options: Options = None) -> Any:
        """Create the service.

        Args:
            container: The container requesting the service.
            name: The requested service identifier.
            options: Arguments supplied to ``build``, None for ``get``.

        Raises:
            ServiceFactoryError: If the service cannot be produced.
        """


class IServiceProvider(ABC):
    """Registers a batch of services with a container."""

    @abstractmethod
    def register_services(self, container: IContainer) -> None:
        """Register services with ``container``.

        Raises:
            ServiceProviderError: If any registration fails.
        """


class IClassLoader(ABC):
    """Maps service identifiers to constructible classes."""

    @abstractmethod
    def load(self, identifier: str) -> Optional[type]:
        """Return the class for ``identifier`` or None when it cannot be loaded.

        Raises:
            ServiceFactoryError: If loading fails for a reason other than absence.
        """

    def is_loadable(self, identifier: str) -> bool:
        """Return whether ``identifier`` resolves to a class."""
        return self.load(identifier) is not None
