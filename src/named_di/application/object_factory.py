from collections.abc import Mapping
from typing import Any, Optional

from named_di.application.class_loader import ImportClassLoader
from named_di.domain import (
    LOGGER,
    IClassLoader,
    IContainer,
    InvalidArgumentError,
    IServiceFactory,
    Options,
    ServiceFactoryError,
)


class ObjectFactory(IServiceFactory):
    """Creates a new instance of the class that the requested service name resolves to.

    Used by the container as the lowest-priority factory strategy, and to
    auto-register factory delegate classes.

    Options decide the constructor call:
    - None: ``cls()``
    - a mapping: ``cls(**options)``
    - any other sequence: ``cls(*options)``

    Strings and bytes are rejected rather than unpacked character by character.

    Attributes:
        _class_loader: Resolves service names to classes.
    """

    def __init__(self, class_loader: Optional[IClassLoader] = None) -> None:
        self._class_loader = class_loader or ImportClassLoader()

    def __call__(self, container: IContainer, name: str, options: Options = None) -> Any:
        """Instantiate the class named ``name``.

        Args:
            container: The requesting container (unused).
            name: Service name resolving to a class.
            options: Constructor arguments.

        Returns:
            The new instance.

        Raises:
            ServiceFactoryError: If ``name`` does not resolve to a class.
            InvalidArgumentError: If ``options`` is a string or bytes.

        Example:
            >>> factory = ObjectFactory()
            >>> factory(container, "datetime.date", [2024, 1, 31])
            datetime.date(2024, 1, 31)
        """
        cls = self._class_loader.load(name)
        if cls is None:
            raise ServiceFactoryError(
                f"Unable to create a new object from requested service '{name}': "
                "The service does not resolve to a valid class name",
                service_name=name,
            )

        LOGGER.debug("Constructing service '%s' from class %s", name, cls.__qualname__)

        if options is None:
            return cls()
        if isinstance(options, (str, bytes)):
            raise InvalidArgumentError(
                f"Options for service '{name}' must be a mapping or a sequence of arguments; "
                f"'{type(options).__name__}' provided",
                service_name=name,
            )
        if isinstance(options, Mapping):
            return cls(**options)
        return cls(*options)
