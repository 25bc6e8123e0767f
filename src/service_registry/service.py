"""Service contract and reusable base class for service providers.

This module provides:
- ServiceInterface: Abstract contract every provider handler must implement
- Service: Base class holding the service metadata and included services
"""

import abc
from collections.abc import Mapping
from typing import Any, ClassVar

from service_registry.errors import ProviderValidationError


class ServiceInterface(abc.ABC):
    """Describes a service provider.

    A provider carries a unique service name, optional human-readable title
    and description, and the names of other services that must be bound and
    injected before it is constructed.
    """

    @property
    @abc.abstractmethod
    def service_name(self) -> str:
        """Return the service name."""

    @service_name.setter
    @abc.abstractmethod
    def service_name(self, name: str) -> None:
        """Set the service name."""

    @property
    @abc.abstractmethod
    def service_title(self) -> str | None:
        """Return the service title."""

    @service_title.setter
    @abc.abstractmethod
    def service_title(self, title: str | None) -> None:
        """Set the service title."""

    @property
    @abc.abstractmethod
    def service_description(self) -> str | None:
        """Return the service description."""

    @service_description.setter
    @abc.abstractmethod
    def service_description(self, description: str | None) -> None:
        """Set the service description."""

    @property
    @abc.abstractmethod
    def include_services(self) -> list[str]:
        """Return the names of services to include."""


class Service(ServiceInterface):
    """Base class for service providers.

    Subclasses declare their metadata as class attributes:

        class SmtpMailer(Service):
            name = "mailer"
            title = "SMTP mailer"
            includes = ["settings"]

    The container constructs a provider with a mapping of the already
    resolved included services, available through `get_included_service()`.
    Providers may also be constructed with no arguments, as happens when a
    provider class is registered directly.
    """

    name: str = ""
    title: str | None = None
    description: str | None = None
    includes: ClassVar[list[str]] = []

    def __init__(self, services: Mapping[str, Any] | None = None) -> None:
        """Initialise the provider.

        Args:
            services: Included service instances keyed by service name

        Raises:
            ProviderValidationError: If the subclass does not declare a name

        """
        if not self.name:
            raise ProviderValidationError(
                f"Service provider {type(self).__name__} does not declare a service name."
            )
        self._service_name = self.name
        self._service_title = self.title
        self._service_description = self.description
        self._include_services = list(self.includes)
        self._services: dict[str, Any] = dict(services or {})

    @property
    def service_name(self) -> str:
        """Return the service name."""
        return self._service_name

    @service_name.setter
    def service_name(self, name: str) -> None:
        if not name:
            raise ProviderValidationError("Service name must not be empty.")
        self._service_name = name

    @property
    def service_title(self) -> str | None:
        """Return the service title."""
        return self._service_title

    @service_title.setter
    def service_title(self, title: str | None) -> None:
        self._service_title = title

    @property
    def service_description(self) -> str | None:
        """Return the service description."""
        return self._service_description

    @service_description.setter
    def service_description(self, description: str | None) -> None:
        self._service_description = description

    @property
    def include_services(self) -> list[str]:
        """Return the names of services to include."""
        return list(self._include_services)

    @property
    def included_services(self) -> Mapping[str, Any]:
        """Included service instances injected at construction."""
        return dict(self._services)

    def get_included_service(self, name: str) -> Any | None:  # noqa: ANN401
        """Get an injected service instance by name, or None if not included."""
        return self._services.get(name)
