from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from named_di.domain import IContainer, Options


def create_fastapi_dependency(container: IContainer, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that gets a service from the container.

    The service is obtained with ``get``, so it is created once and then
    served from the container cache.

    Args:
        container: The DI container to resolve services from.
        name: The service name to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.set_factory("users", lambda c, name, options: UserRepository(c.get("db")))
        >>>
        >>> get_users = create_fastapi_dependency(container, "users")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_users)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Get the service from the container."""
        return container.get(name)

    return dependency


def create_build_dependency(container: IContainer, name: str, options: Options = None) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that builds a new service on every call.

    Args:
        container: The DI container to build services with.
        name: The service name to build.
        options: Options forwarded to the factory on each build.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> get_unit_of_work = create_build_dependency(container, "unit_of_work")
        >>>
        >>> @app.post("/orders")
        >>> async def create_order(uow: UnitOfWork = Depends(get_unit_of_work)):
        ...     ...
    """

    def dependency() -> Any:
        """Build a new service instance."""
        return container.build(name, options)

    return dependency


def create_request_dependency(name: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that resolves from the container attached to the request.

    Requires the ContainerMiddleware to be installed.

    Args:
        name: The service name to resolve.

    Returns:
        A callable that resolves from ``request.state.di_container``.

    Example:
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> get_clock = create_request_dependency("clock")
        >>>
        >>> @app.get("/now")
        >>> async def now(clock: Clock = Depends(get_clock)):
        ...     return {"now": clock.now()}
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the request's container."""
        if not hasattr(request.state, "di_container"):
            raise RuntimeError(
                "Request does not have a DI container. Did you forget to add ContainerMiddleware?"
            )
        container: IContainer = request.state.di_container
        return container.get(name)

    return request_dependency


class ContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes the DI container on every request.

    The container is accessible via ``request.state.di_container``.

    Attributes:
        container: The DI container to expose.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(ContainerMiddleware, container=container)
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     settings = request.state.di_container.get("settings")
        ...     return {"debug": settings.debug}
    """

    def __init__(self, app: FastAPI, container: IContainer):
        """Initialize the middleware with a container.

        Args:
            app: The FastAPI/Starlette application.
            container: The DI container to expose.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.di_container = self.container
        return await call_next(request)
