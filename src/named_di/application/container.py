from typing import Any, Callable, Optional, Union

from named_di.application.circular_detector import CircularDependencyDetector
from named_di.application.class_loader import ImportClassLoader
from named_di.application.factory_resolver import FactoryResolver
from named_di.application.object_factory import ObjectFactory
from named_di.application.registry import ServiceRegistry, validate_name
from named_di.domain import (
    LOGGER,
    ConstructionError,
    ContainerSettings,
    DIException,
    FactoryClassDescriptor,
    IClassLoader,
    IContainer,
    InvalidArgumentError,
    IServiceProvider,
    NotFoundError,
    Options,
    ServiceProviderError,
)


class Container(IContainer):
    """Main dependency injection container.

    Maps string service names to built services, factories, factory classes
    and aliases, and resolves them on demand. Services obtained with ``get``
    are cached; ``build`` always creates a fresh instance.

    Attributes:
        _settings: Container-wide settings.
        _class_loader: Resolves names to classes for reflection-based construction.
        _registry: Registration store.
        _factory_resolver: Component selecting the factory strategy for a name.
        _circular_detector: Component detecting circular dependencies.
    """

    def __init__(
        self,
        provider: Optional[IServiceProvider] = None,
        settings: Optional[ContainerSettings] = None,
        class_loader: Optional[IClassLoader] = None,
    ) -> None:
        """Initialize the container, optionally configuring it from ``provider``.

        Args:
            provider: Service provider to register services with.
            settings: Container settings; defaults apply when omitted.
            class_loader: Class loader for reflection-based construction.

        Raises:
            ConstructionError: If ``provider`` fails to register its services.
        """
        self._settings = settings or ContainerSettings()
        self._class_loader = class_loader or ImportClassLoader()
        self._registry = ServiceRegistry()
        self._factory_resolver = FactoryResolver(
            self._class_loader,
            self._settings,
            ObjectFactory(self._class_loader),
        )
        self._circular_detector = CircularDependencyDetector()

        if provider is not None:
            self.configure(provider)

    @property
    def settings(self) -> ContainerSettings:
        return self._settings

    def get(self, name: str) -> Any:
        """Return the service registered as ``name``, creating and caching it if needed.

        Resolution order: aliases are followed first, then a set service is
        returned as-is, otherwise the factory strategy is invoked once and its
        result cached for later calls.

        Args:
            name: The service name.

        Returns:
            The service.

        Raises:
            NotFoundError: If nothing can provide ``name``.
            CircularDependencyError: If ``name`` is already being constructed.
            ConstructionError: If the factory fails or is not callable.

        Example:
            >>> container.set_factory("db", lambda c, name, options: Database(c.get("config")))
            >>> container.get("db") is container.get("db")
            True
        """
        validate_name(name)

        target = self._registry.resolve_alias(name)
        if target != name:
            return self.get(target)

        found, service = self._registry.find_service(name)
        if found:
            return service

        self._circular_detector.check(name)

        factory = self._factory_resolver.resolve(self, self._registry, name)
        if factory is None:
            raise NotFoundError(
                f"Service '{name}' could not be found registered with the container",
                service_name=name,
            )

        self._circular_detector.push(name)
        try:
            service = self._invoke_factory(factory, name, None)
        finally:
            self._circular_detector.pop()

        self.set(name, service)
        LOGGER.debug("Created and cached service '%s'", name)
        return service

    def build(self, name: str, options: Options = None) -> Any:
        """Create a new instance of ``name`` using its factory.

        The instance cache is neither read nor written for ``name``; only
        services with a factory strategy can be built.

        Args:
            name: The service name.
            options: Arguments forwarded to the factory.

        Returns:
            A newly created service.

        Raises:
            NotFoundError: If ``name`` has no factory strategy.
            ConstructionError: If the factory fails or is not callable.

        Example:
            >>> container.build("datetime.date", [2024, 1, 31])
            datetime.date(2024, 1, 31)
        """
        validate_name(name)

        target = self._registry.resolve_alias(name)
        if target != name:
            return self.build(target, options)

        factory = self._factory_resolver.resolve(self, self._registry, name)
        if factory is None:
            raise NotFoundError(
                f"Unable to build service '{name}': No valid factory could be found",
                service_name=name,
            )

        return self._invoke_factory(factory, name, options)

    def has(self, name: str) -> bool:
        """Return whether ``name`` is registered as a service, factory, factory class or alias.

        Registrations are not checked for resolvability.
        """
        return self._registry.has(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def set(self, name: str, service: Any) -> "Container":
        """Register an already built service, replacing any previous one.

        Args:
            name: The service name.
            service: The service value; None is a valid value.

        Returns:
            The container, for chaining.
        """
        self._registry.set_service(validate_name(name), service)
        return self

    def set_factory(self, name: str, factory: Union[Callable[..., Any], str]) -> "Container":
        """Register the factory responsible for creating ``name``.

        Factories are called as ``factory(container, name, options)``. A string
        is treated as the name of a factory class (see ``set_factory_class``).

        Args:
            name: The service name.
            factory: Factory callable, or the name of a factory class.

        Returns:
            The container, for chaining.

        Raises:
            InvalidArgumentError: If ``factory`` is neither a string nor callable.
        """
        validate_name(name)

        if isinstance(factory, str):
            return self.set_factory_class(name, factory)

        if not callable(factory):
            raise InvalidArgumentError(
                "The 'factory' argument must be of type 'str' or 'callable'; "
                f"'{type(factory).__name__}' provided for service '{name}'",
                service_name=name,
            )

        self._registry.set_factory(name, factory)
        return self

    def set_factory_class(self, name: str, factory_class: str, method: Optional[str] = None) -> "Container":
        """Register a factory class that will create ``name``.

        The factory class is itself resolved from the container (and
        auto-registered when it loads as a class), then ``method`` is called on
        it as ``method(container, name, options)``.

        Args:
            name: The service name.
            factory_class: Service name or class path of the factory.
            method: Factory method; defaults to ``settings.default_factory_method``.

        Returns:
            The container, for chaining.
        """
        validate_name(name)
        validate_name(factory_class)
        self._registry.set_factory_class(
            name,
            FactoryClassDescriptor(factory_class=factory_class, method=method),
        )
        return self

    def set_alias(self, alias: str, name: str) -> "Container":
        """Register ``alias`` as another name for ``name``.

        Args:
            alias: The alias to create.
            name: An already registered service, factory or factory class name.

        Returns:
            The container, for chaining.

        Raises:
            InvalidArgumentError: If ``name`` is unknown or equal to ``alias``.
        """
        self._registry.set_alias(validate_name(alias), validate_name(name))
        return self

    def configure(self, provider: IServiceProvider) -> None:
        """Register services using ``provider``.

        Args:
            provider: The service provider.

        Raises:
            ConstructionError: If the provider fails to register its services.
        """
        try:
            provider.register_services(self)
        except ServiceProviderError as e:
            raise ConstructionError(
                f"Failed to register services using provider '{type(provider).__name__}': {e}",
                cause=e,
            ) from e

    def get_registry_copy(self) -> ServiceRegistry:
        """Get an independent copy of the registration store.

        Returns:
            Copy of the current registry; built services are shared by reference.
        """
        return self._registry.copy()

    def _invoke_factory(self, factory: Callable[..., Any], name: str, options: Options) -> Any:
        """Call ``factory`` for ``name``, wrapping unrelated errors.

        Raises:
            ConstructionError: If the factory raises anything but a container error.
        """
        try:
            return factory(self, name, options)
        except DIException:
            raise
        except Exception as e:
            raise ConstructionError(
                f"The service '{name}' could not be created: {e}",
                service_name=name,
                cause=e,
            ) from e
