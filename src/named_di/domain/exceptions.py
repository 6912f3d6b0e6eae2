from typing import List, Optional

from named_di.domain.enums import ErrorKind


class DIException(Exception):
    """Base exception for container errors.

    Every container error is tagged with an :class:`ErrorKind`, so callers may
    either catch a subclass or branch on ``error.kind``.

    Attributes:
        kind: The failure category.
        service_name: The service that failed, when one applies.
        cause: The underlying exception, when one exists.
    """

    kind: ErrorKind = ErrorKind.CONSTRUCTION_FAILED

    def __init__(
        self,
        message: str = "",
        service_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        self.service_name = service_name
        self.cause = cause
        super().__init__(message)


class NotFoundError(DIException):
    """Raised when no instance, factory, delegate or loadable class exists for a name."""

    kind = ErrorKind.NOT_FOUND


class CircularDependencyError(DIException):
    """Raised when a service is requested while it is already being constructed.

    Attributes:
        dependency_chain: Names currently under construction, first-requested first.
    """

    kind = ErrorKind.CIRCULAR_DEPENDENCY

    def __init__(self, service_name: str, dependency_chain: List[str]) -> None:
        self.dependency_chain = list(dependency_chain)
        message = (
            f"A circular dependency has been detected for service '{service_name}'. "
            f"The dependency graph includes {' -> '.join(self.dependency_chain)}"
        )
        super().__init__(message, service_name=service_name)


class ConstructionError(DIException):
    """Raised when a service cannot be created.

    This occurs when:
    - A registered factory raises an unrelated exception.
    - A resolved factory or factory delegate is not callable.
    - A factory class descriptor names the service itself.
    - A service provider fails while configuring the container.
    """

    kind = ErrorKind.CONSTRUCTION_FAILED


class ServiceFactoryError(ConstructionError):
    """Raised by a service factory that cannot produce the requested service."""


class InvalidArgumentError(DIException):
    """Raised for invalid registrations.

    This occurs when:
    - A factory is neither callable nor a class name.
    - An alias targets an unknown service or itself.
    - A service identifier is empty or not a string.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class ServiceProviderError(DIException):
    """Raised when a service provider fails to register its services."""

    kind = ErrorKind.PROVIDER_FAILED
