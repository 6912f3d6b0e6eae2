from typing import Any, Callable, Optional

from named_di.application.object_factory import ObjectFactory
from named_di.application.registry import ServiceRegistry
from named_di.domain import (
    LOGGER,
    ConstructionError,
    ContainerSettings,
    FactoryClassDescriptor,
    IClassLoader,
    IContainer,
)


class FactoryResolver:
    """Selects the factory strategy for a service name.

    Strategies are tried in strict priority order:
    1. A factory callable registered for the name.
    2. A factory class registered for the name, resolved from the container
       and bound to its factory method.
    3. The reflection-based ObjectFactory, if the name loads as a class.

    Attributes:
        _class_loader: Decides which names load as classes.
        _settings: Container settings (default factory method, auto-construction).
        _object_factory: Shared reflection-based factory.
    """

    def __init__(
        self,
        class_loader: IClassLoader,
        settings: ContainerSettings,
        object_factory: Optional[ObjectFactory] = None,
    ) -> None:
        self._class_loader = class_loader
        self._settings = settings
        self._object_factory = object_factory or ObjectFactory(class_loader)

    def resolve(
        self,
        container: IContainer,
        registry: ServiceRegistry,
        name: str,
    ) -> Optional[Callable[..., Any]]:
        """Return the factory strategy for ``name``, or None if there is none.

        Args:
            container: Container used to resolve factory delegates.
            registry: Registration store to read factories from.
            name: Alias-free service name.

        Raises:
            ConstructionError: If a factory class is misconfigured.
        """
        factory: Optional[Callable[..., Any]] = registry.get_factory(name)
        if factory is None:
            descriptor = registry.get_factory_class(name)
            if descriptor is not None:
                factory = self._resolve_factory_class(container, name, descriptor)
            elif self._settings.auto_construct and self._class_loader.is_loadable(name):
                LOGGER.debug("Service '%s' resolves to a class; using object factory", name)
                factory = self._object_factory

        return factory

    def _resolve_factory_class(
        self,
        container: IContainer,
        name: str,
        descriptor: FactoryClassDescriptor,
    ) -> Callable[..., Any]:
        """Resolve a factory delegate and bind its factory method.

        Raises:
            ConstructionError: If the delegate names the service itself, is not a
                registered service or loadable class, or lacks a callable factory method.
        """
        factory_class = descriptor.factory_class

        if factory_class == name:
            raise ConstructionError(
                f"A circular configuration dependency was detected for service '{name}'",
                service_name=name,
            )

        if not container.has(factory_class) and self._class_loader.is_loadable(factory_class):
            container.set_factory(factory_class, self._object_factory)

        if not container.has(factory_class):
            raise ConstructionError(
                f"The factory service '{factory_class}', registered for service '{name}', "
                "is not a valid service or class name",
                service_name=name,
            )

        delegate = container.get(factory_class)
        method_name = descriptor.method or self._settings.default_factory_method
        method = getattr(delegate, method_name, None)
        if method is None or not callable(method):
            raise ConstructionError(
                f"Factory '{factory_class}' registered for service '{name}', "
                f"must be callable via method '{method_name}'",
                service_name=name,
            )

        LOGGER.debug("Using factory '%s.%s' for service '%s'", factory_class, method_name, name)
        return method
