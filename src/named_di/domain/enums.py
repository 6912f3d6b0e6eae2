from enum import Enum


class ErrorKind(str, Enum):
    """Classifies container failures so callers can branch without isinstance checks.

    Attributes:
        NOT_FOUND: Nothing is registered or loadable under the requested name.
        CIRCULAR_DEPENDENCY: The name is already under construction on the current call stack.
        CONSTRUCTION_FAILED: A factory raised, or a factory/delegate is not invocable.
        INVALID_ARGUMENT: A registration call received an invalid value.
        PROVIDER_FAILED: A service provider could not register its services.
    """

    NOT_FOUND = "not_found"
    CIRCULAR_DEPENDENCY = "circular_dependency"
    CONSTRUCTION_FAILED = "construction_failed"
    INVALID_ARGUMENT = "invalid_argument"
    PROVIDER_FAILED = "provider_failed"

    def __str__(self) -> str:
        return self.value
