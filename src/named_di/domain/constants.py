"""Constants shared across the named-di package."""

import logging

LOGGER_NAME: str = "named_di"
"""Logger name used by every named-di module."""

LOGGER: logging.Logger = logging.getLogger(LOGGER_NAME)
"""Package logger; named-di never installs handlers on it."""

DEFAULT_FACTORY_METHOD: str = "__call__"
"""Method invoked on a factory delegate when no method name is configured."""

SERVICES_SECTION: str = "services"
FACTORIES_SECTION: str = "factories"
ALIASES_SECTION: str = "aliases"
