"""
FastAPI integration module.

Provides helpers and utilities for integrating named-di with FastAPI.
"""

from .integration import (
    ContainerMiddleware,
    create_build_dependency,
    create_fastapi_dependency,
    create_request_dependency,
)

__all__ = [
    "create_fastapi_dependency",
    "create_build_dependency",
    "create_request_dependency",
    "ContainerMiddleware",
]
