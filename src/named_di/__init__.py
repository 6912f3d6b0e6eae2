"""
named-di: Dependency injection container keyed by service name.

Public API exports for the named-di package.
"""

# Application exports
from named_di.application.class_loader import ImportClassLoader, RegistryClassLoader
from named_di.application.container import Container
from named_di.application.object_factory import ObjectFactory
from named_di.application.provider import ConfigServiceProvider

# Domain exports
from named_di.domain.enums import ErrorKind
from named_di.domain.exceptions import (
    CircularDependencyError,
    ConstructionError,
    DIException,
    InvalidArgumentError,
    NotFoundError,
    ServiceFactoryError,
    ServiceProviderError,
)
from named_di.domain.interfaces import IClassLoader, IContainer, IServiceFactory, IServiceProvider
from named_di.domain.models import ContainerSettings

__version__ = "0.1.0"

__all__ = [
    # Container
    "Container",
    "ContainerSettings",
    # Factories and providers
    "ObjectFactory",
    "ConfigServiceProvider",
    "ImportClassLoader",
    "RegistryClassLoader",
    # Interfaces
    "IContainer",
    "IServiceFactory",
    "IServiceProvider",
    "IClassLoader",
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
]
