"""Service descriptor value object persisted by the provider registry."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from service_registry.errors import ProviderValidationError
from service_registry.handlers import handler_identifier
from service_registry.service import ServiceInterface


class ServiceDescriptor(BaseModel):
    """Registration record for a service provider.

    Attributes:
        name: Unique service name, the registry key
        handler: Identifier of the class constructed for the service
        title: Optional human-readable title
        description: Optional description
        include: Names of services bound and injected before construction

    """

    model_config = ConfigDict(
        # Immutable - re-registration replaces the descriptor
        frozen=True,
        extra="forbid",
    )

    name: str = Field(min_length=1)
    handler: str = Field(min_length=1)
    title: str | None = None
    description: str | None = None
    include: list[str] = Field(default_factory=list)

    @classmethod
    def from_service(cls, service: ServiceInterface) -> Self:
        """Build a descriptor from a provider instance.

        Raises:
            ProviderValidationError: If the provider metadata is invalid

        """
        return cls.from_properties(
            {
                "handler": handler_identifier(type(service)),
                "name": service.service_name,
                "title": service.service_title,
                "description": service.service_description,
                "include": service.include_services,
            }
        )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create a descriptor from a raw mapping with validation.

        `title` and `description` default to None, `include` to an empty list;
        a None `include` is treated as empty.

        Raises:
            ProviderValidationError: If `name` or `handler` is missing or any
                field is invalid

        """
        if not properties.get("name") or not properties.get("handler"):
            raise ProviderValidationError("Service name or handler not valid.")

        data = dict(properties)
        if data.get("include") is None:
            data["include"] = []

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ProviderValidationError(
                f"Invalid service descriptor for '{properties['name']}': {e}"
            ) from e

    def to_properties(self) -> dict[str, Any]:
        """Return the mapping stored in the providers configuration file."""
        return self.model_dump()
