from typing import Any, Callable, Mapping, Optional, Sequence

from pydantic import ValidationError

from named_di.domain import (
    ALIASES_SECTION,
    DEFAULT_FACTORY_METHOD,
    FACTORIES_SECTION,
    LOGGER,
    SERVICES_SECTION,
    ContainerSettings,
    IContainer,
    IServiceProvider,
    ServiceConfig,
    ServiceProviderError,
)


class ConfigServiceProvider(IServiceProvider):
    """Registers services, factories and aliases from a configuration mapping.

    Sections are applied in order: ``services``, ``factories``, ``aliases``.

    Factory entries may be:
    - a string: the name of a factory class;
    - a ``[factory, method]`` pair, where ``factory`` is a factory class name
      or an object whose ``method`` is the factory;
    - a callable;
    - an object whose default factory method is the factory.

    Alias entries map a registered service name to one alias or a list of aliases.

    When ``default_factory_method`` is omitted, the container's
    ``settings.default_factory_method`` is used.

    Example:
        >>> provider = ConfigServiceProvider({
        ...     "services": {"config": {"dsn": "sqlite://"}},
        ...     "factories": {
        ...         "db": lambda c, name, options: Database(c.get("config")),
        ...         "mailer": ["app.factories.MailerFactory", "create"],
        ...     },
        ...     "aliases": {"db": ["database", "connection"]},
        ... })
        >>> container = Container(provider)
    """

    def __init__(self, config: Mapping[str, Any], default_factory_method: Optional[str] = None) -> None:
        self._config = config
        self._default_factory_method = default_factory_method

    def register_services(self, container: IContainer) -> None:
        """Register every configured entry with ``container``.

        Raises:
            ServiceProviderError: If the configuration is invalid or any registration fails.
        """
        try:
            config = ServiceConfig.model_validate(dict(self._config))
        except (TypeError, ValueError, ValidationError) as e:
            raise ServiceProviderError(
                f"Failed to register services with the container: Invalid configuration: {e}",
                cause=e,
            ) from e

        for name, service in config.services.items():
            self._apply(SERVICES_SECTION, name, lambda: container.set(name, service))

        default_method = self._resolve_default_method(container)
        for name, factory in config.factories.items():
            self._apply(
                FACTORIES_SECTION,
                name,
                lambda: self._register_factory_entry(container, name, factory, default_method),
            )

        for name, aliases in config.aliases.items():
            for alias in [aliases] if isinstance(aliases, str) else aliases:
                self._apply(ALIASES_SECTION, alias, lambda: container.set_alias(alias, name))

        LOGGER.debug(
            "Registered %d services, %d factories and %d alias entries",
            len(config.services),
            len(config.factories),
            len(config.aliases),
        )

    def _apply(self, section: str, name: str, register: Callable[[], Any]) -> None:
        """Run one registration, wrapping failures with the section and name."""
        try:
            register()
        except ServiceProviderError:
            raise
        except Exception as e:
            raise ServiceProviderError(
                f"Failed to register {section} entry '{name}' with the container: {e}",
                service_name=name,
                cause=e,
            ) from e

    def _resolve_default_method(self, container: IContainer) -> str:
        if self._default_factory_method is not None:
            return self._default_factory_method
        settings = getattr(container, "settings", None)
        if isinstance(settings, ContainerSettings):
            return settings.default_factory_method
        return DEFAULT_FACTORY_METHOD

    def _register_factory_entry(self, container: IContainer, name: str, factory: Any, default_method: str) -> None:
        if isinstance(factory, str):
            container.set_factory_class(name, factory)
        elif isinstance(factory, (list, tuple)):
            self._register_pair_factory(container, name, factory, default_method)
        else:
            self._register_factory(container, name, factory, default_method)

    def _register_pair_factory(
        self,
        container: IContainer,
        name: str,
        factory_config: Sequence[Any],
        default_method: str,
    ) -> None:
        """Register a factory given as ``[factory, method]``.

        Raises:
            ServiceProviderError: If the pair has no usable factory.
        """
        factory = factory_config[0] if len(factory_config) > 0 else None
        method = factory_config[1] if len(factory_config) > 1 else None

        if factory is None or (method is not None and not isinstance(method, str)):
            raise ServiceProviderError(
                f"Failed to register service '{name}': The provided array configuration is invalid",
                service_name=name,
            )

        if isinstance(factory, str):
            container.set_factory_class(name, factory, method)
            return

        self._register_factory(container, name, factory, default_method, method)

    def _register_factory(
        self,
        container: IContainer,
        name: str,
        factory: Any,
        default_method: str,
        method: Optional[str] = None,
    ) -> None:
        """Register ``factory``, binding ``method`` on it when given or when it is not callable.

        Raises:
            ServiceProviderError: If no callable factory can be obtained.
        """
        if method is not None:
            factory = getattr(factory, method, None)
        elif not callable(factory):
            factory = getattr(factory, default_method, None)

        if factory is None or not callable(factory):
            raise ServiceProviderError(
                f"Failed to register service '{name}': The factory provided is not callable",
                service_name=name,
            )

        container.set_factory(name, factory)
