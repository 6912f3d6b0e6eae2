import importlib
import inspect
import threading
from typing import Dict, Optional

from named_di.domain import LOGGER, IClassLoader, InvalidArgumentError, ServiceFactoryError


class ImportClassLoader(IClassLoader):
    """Loads classes from dotted import paths.

    Accepts ``"package.module.ClassName"`` and ``"package.module:Outer.Inner"``.
    Identifiers that do not import, or that name something other than a class,
    are reported as not loadable. Relative module paths are never imported.
    """

    def load(self, identifier: str) -> Optional[type]:
        """Import ``identifier`` and return the class it names.

        Raises:
            ServiceFactoryError: If the module raises while importing.
        """
        if not isinstance(identifier, str) or not identifier:
            return None

        if ":" in identifier:
            module_name, _, attribute_path = identifier.partition(":")
        else:
            module_name, _, attribute_path = identifier.rpartition(".")

        if not module_name or not attribute_path or module_name.startswith("."):
            return None

        try:
            target = importlib.import_module(module_name)
        except (ImportError, ValueError) as e:
            LOGGER.debug("Identifier '%s' is not importable: %s", identifier, e)
            return None
        except Exception as e:
            raise ServiceFactoryError(
                f"Unable to load class '{identifier}': Module '{module_name}' failed to import: {e}",
                service_name=identifier,
                cause=e,
            ) from e

        for attribute in attribute_path.split("."):
            target = getattr(target, attribute, None)
            if target is None:
                return None

        return target if inspect.isclass(target) else None


class RegistryClassLoader(IClassLoader):
    """Loads classes from an explicit identifier-to-class mapping.

    Useful when services should only be auto-constructed from a known set of
    classes, or when identifiers are not import paths.

    Example:
        >>> loader = RegistryClassLoader({"mailer": SmtpMailer})
        >>> container = Container(class_loader=loader)
        >>> container.get("mailer")  # SmtpMailer()
    """

    def __init__(self, classes: Optional[Dict[str, type]] = None) -> None:
        self._classes: Dict[str, type] = {}
        self._lock = threading.Lock()
        for identifier, cls in (classes or {}).items():
            self.register(identifier, cls)

    def register(self, identifier: str, cls: type) -> "RegistryClassLoader":
        """Make ``cls`` constructible under ``identifier``.

        Raises:
            InvalidArgumentError: If ``cls`` is not a class.
        """
        if not inspect.isclass(cls):
            raise InvalidArgumentError(
                f"The class registered for identifier '{identifier}' must be a class; "
                f"'{type(cls).__name__}' provided",
                service_name=identifier,
            )
        with self._lock:
            self._classes[identifier] = cls
        return self

    def load(self, identifier: str) -> Optional[type]:
        with self._lock:
            return self._classes.get(identifier)
