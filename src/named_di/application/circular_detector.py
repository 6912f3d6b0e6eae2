"""Application layer - Circular dependency detection."""

import threading
from typing import List

from named_di.domain import CircularDependencyError


class CircularDependencyDetector:
    """Detects circular dependencies during resolution.

    Uses thread-local storage to track the names currently being constructed,
    so concurrent resolutions on different threads never interfere.
    When a name is requested while already in flight, a circular dependency is detected.

    Attributes:
        _local: Thread-local storage for resolution stacks.
    """

    def __init__(self) -> None:
        """Initialize the circular dependency detector with thread-local storage."""
        self._local = threading.local()

    def _get_stack(self) -> List[str]:
        """Get the current thread's resolution stack.

        Returns:
            The resolution stack for the current thread.
        """
        if not hasattr(self._local, "stack"):
            self._local.stack = []
        return self._local.stack

    def is_resolving(self, name: str) -> bool:
        """Return whether ``name`` is currently being constructed on this thread."""
        return name in self._get_stack()

    def get_chain(self) -> List[str]:
        """Return a copy of the in-flight names, first-requested first."""
        return list(self._get_stack())

    def check(self, name: str) -> None:
        """Fail if ``name`` is already being constructed.

        Args:
            name: The service being requested.

        Raises:
            CircularDependencyError: If ``name`` is in flight. The error carries
                every name currently in flight, in request order.
        """
        stack = self._get_stack()
        if name in stack:
            raise CircularDependencyError(name, stack)

    def push(self, name: str) -> None:
        """Add a service name to the resolution stack.

        Args:
            name: The service being constructed.

        Raises:
            CircularDependencyError: If the name is already in the stack.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> detector.push("ServiceA")
            >>> detector.push("ServiceB")
            >>> detector.push("ServiceA")  # Raises CircularDependencyError
        """
        self.check(name)
        self._get_stack().append(name)

    def pop(self) -> None:
        """Remove the most recent name from the resolution stack.

        Called once construction of that name finished, successfully or not.
        """
        stack = self._get_stack()
        if stack:
            stack.pop()

    def clear(self) -> None:
        """Clear the current thread's resolution stack."""
        if hasattr(self._local, "stack"):
            self._local.stack.clear()
