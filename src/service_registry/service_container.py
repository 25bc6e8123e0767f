"""Service container resolving registered providers into lazy instances.

The ServiceContainer combines the persisted ProviderRegistry with the
memoizing Container. Asking for a service binds its provider on first
request, binding any included services first, and the instance is then
fixed for the lifetime of the container, whatever happens to the registry
afterwards.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Self

from service_registry.configuration import RegistryConfiguration
from service_registry.container import Container
from service_registry.descriptor import ServiceDescriptor
from service_registry.errors import CycleDetectedError
from service_registry.handlers import resolve_service_class
from service_registry.registry import ProviderDetails, ProviderRegistry

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Entry point for registering providers and retrieving services.

    Example:
        >>> services = ServiceContainer(Path("config/service-providers.yaml"))
        >>> services.register(SmtpMailer)
        True
        >>> mailer = services.get("mailer")
        >>> mailer is services.get("mailer")
        True

    """

    def __init__(
        self, config_file: Path | str, container: Container | None = None
    ) -> None:
        """Initialise the service container.

        Args:
            config_file: Path of the YAML file persisting the providers
            container: Binding store to use, a new Container by default

        """
        self._registry = ProviderRegistry(config_file)
        self._container = container if container is not None else Container()
        self._binding: list[str] = []
        logger.debug("ServiceContainer initialized for %s", self._registry.config_file)

    @classmethod
    def from_configuration(cls, config: RegistryConfiguration) -> Self:
        """Create a service container from registry configuration."""
        return cls(config.config_file)

    @property
    def registry(self) -> ProviderRegistry:
        """Get the underlying provider registry."""
        return self._registry

    @property
    def container(self) -> Container:
        """Get the underlying binding store."""
        return self._container

    # ========================================================================
    # Service Resolution
    # ========================================================================

    def get(self, name: str) -> Any | None:  # noqa: ANN401
        """Get a service instance, binding its provider on first request.

        Args:
            name: Service name

        Returns:
            The memoized service instance, or None if no provider is
            registered for the service or one of its included services.

        Raises:
            CycleDetectedError: If the included services form a cycle

        """
        if not self._container.contains(name):
            if not self.bind_provider(name):
                return None
        return self._container.resolve(name)

    def has(self, name: str) -> bool:
        """Check if a service is bound in the container.

        This does not consult the registry: a registered provider is only
        reported once `get()` has bound it.
        """
        return self._container.contains(name)

    def bind_provider(self, name: str, provider: ServiceDescriptor | None = None) -> bool:
        """Bind a provider and its included services into the container.

        Included services are bound depth-first in declaration order, unless
        already present. When the service is first requested, the included
        instances are resolved and passed to the provider's handler as its
        single mapping argument.

        Args:
            name: Service name to bind
            provider: Descriptor to bind, looked up in the registry if omitted

        Returns:
            True if the provider was bound, False if it or one of its
            included services is not registered.

        Raises:
            CycleDetectedError: If the included services form a cycle

        """
        if name in self._binding:
            cycle = " -> ".join([*self._binding[self._binding.index(name) :], name])
            raise CycleDetectedError(f"Cycle detected in included services: {cycle}")

        if provider is None:
            provider = self._registry.get_provider(name)
            if provider is None:
                logger.debug("No provider registered for service: %s", name)
                return False

        self._binding.append(name)
        try:
            for include in provider.include:
                if self._container.contains(include):
                    continue
                if not self.bind_provider(include):
                    logger.warning(
                        "Cannot bind service %s: included service %s is not registered",
                        name,
                        include,
                    )
                    return False
        finally:
            self._binding.pop()

        handler = resolve_service_class(provider.handler)
        include = list(provider.include)

        def factory() -> Any:  # noqa: ANN401
            logger.debug("Constructing service %s with %s", name, provider.handler)
            return handler(self._container.clone(include))

        self._container.bind(name, factory)
        logger.debug("Bound service provider: %s", name)
        return True

    # ========================================================================
    # Provider Registry
    # ========================================================================

    def load(self, force_reload: bool = False) -> None:
        """Load the providers mapping from the configuration file."""
        self._registry.load(force_reload)

    def get_providers(self) -> dict[str, ServiceDescriptor]:
        """Get all registered providers keyed by service name."""
        return self._registry.get_providers()

    def get_provider(self, name: str) -> ServiceDescriptor | None:
        """Get the provider registered for a service name, or None."""
        return self._registry.get_provider(name)

    def has_provider(self, name: str) -> bool:
        """Check if a provider is registered for a service name."""
        return self._registry.has_provider(name)

    def register(self, details: ProviderDetails) -> bool:
        """Register a service provider. See ProviderRegistry.register()."""
        return self._registry.register(details)

    def unregister(self, name: str) -> bool:
        """Remove a service provider. See ProviderRegistry.unregister()."""
        return self._registry.unregister(name)
