"""
Domain layer - Core rules and models.

This layer contains the error taxonomy, contracts and value objects of the container.
It has no dependencies on other layers.
"""

from .constants import (
    ALIASES_SECTION,
    DEFAULT_FACTORY_METHOD,
    FACTORIES_SECTION,
    LOGGER,
    LOGGER_NAME,
    SERVICES_SECTION,
)
from .enums import ErrorKind
from .exceptions import (
    CircularDependencyError,
    ConstructionError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
    ServiceFactoryError,
    ServiceProviderError,
)
from .interfaces import IClassLoader, IContainer, IServiceFactory, IServiceProvider, Options
from .models import ContainerSettings, FactoryClassDescriptor, ServiceConfig

__all__ = [
    # Constants
    "LOGGER",
    "LOGGER_NAME",
    "DEFAULT_FACTORY_METHOD",
    "SERVICES_SECTION",
    "FACTORIES_SECTION",
    "ALIASES_SECTION",
    # Enums
    "ErrorKind",
    # Exceptions
    "DIException",
    "NotFoundError",
    "CircularDependencyError",
    "ConstructionError",
    "ServiceFactoryError",
    "InvalidArgumentError",
    "ServiceProviderError",
    # Interfaces
    "IContainer",
    "IServiceFactory",
    "IServiceProvider",
    "IClassLoader",
    "Options",
    # Models
    "ContainerSettings",
    "FactoryClassDescriptor",
    "ServiceConfig",
]
