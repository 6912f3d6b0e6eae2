"""
Application layer - Registration and resolution.

This layer contains the registration store and the resolution engine that orchestrate domain objects.
It depends only on the Domain layer.
"""

from .circular_detector import CircularDependencyDetector
from .class_loader import ImportClassLoader, RegistryClassLoader
from .container import Container
from .factory_resolver import FactoryResolver
from .object_factory import ObjectFactory
from .provider import ConfigServiceProvider
from .registry import ServiceRegistry

__all__ = [
    "Container",
    "ServiceRegistry",
    "FactoryResolver",
    "ObjectFactory",
    "ImportClassLoader",
    "RegistryClassLoader",
    "CircularDependencyDetector",
    "ConfigServiceProvider",
]
