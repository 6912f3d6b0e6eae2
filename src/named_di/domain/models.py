from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from named_di.domain.constants import DEFAULT_FACTORY_METHOD


class FactoryClassDescriptor(BaseModel):
    """Value object describing a factory delegate registration.

    The factory of the service is itself a container-resolved service, invoked
    through ``method``.

    Attributes:
        factory_class: Service name (usually a dotted class path) of the factory.
        method: Method to call on the resolved factory, or None for the default.
    """

    model_config = ConfigDict(frozen=True)

    factory_class: str = Field(..., min_length=1, description="Service name of the factory delegate.")
    method: Optional[str] = Field(default=None, description="Factory method name, None for the default.")


class ContainerSettings(BaseModel):
    """Container-wide configuration.

    Attributes:
        default_factory_method: Method invoked on factory delegates when none is configured.
        auto_construct: Whether unregistered names that load as classes are constructed on demand.
    """

    model_config = ConfigDict(frozen=True)

    default_factory_method: str = Field(
        default=DEFAULT_FACTORY_METHOD,
        min_length=1,
        description="Method invoked on factory delegates when none is configured.",
    )
    auto_construct: bool = Field(
        default=True,
        description="Construct unregistered names that resolve to loadable classes.",
    )


class ServiceConfig(BaseModel):
    """Declarative service configuration consumed by ConfigServiceProvider.

    Attributes:
        services: Service name to already-built value.
        factories: Service name to factory definition.
        aliases: Target service name to one alias or a list of aliases.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    services: Dict[str, Any] = Field(default_factory=dict, description="Eagerly registered services.")
    factories: Dict[str, Any] = Field(default_factory=dict, description="Factory definitions.")
    aliases: Dict[str, Union[str, List[str]]] = Field(
        default_factory=dict,
        description="Aliases keyed by the service they point to.",
    )

    @field_validator("services", "factories", "aliases", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value
