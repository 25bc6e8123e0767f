"""Provider registry persisted to the providers configuration file.

The ProviderRegistry owns the mapping from service name to ServiceDescriptor.
The configuration file is the durable source of truth: the mapping is loaded
lazily on first access, cached in memory, and written through on every
mutation. No locking is done around the read-modify-write cycle, so separate
processes writing the same file may overwrite each other's changes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeAlias

from service_registry import config_file
from service_registry.descriptor import ServiceDescriptor
from service_registry.errors import (
    ConfigFileError,
    HandlerResolutionError,
    ProviderValidationError,
)
from service_registry.handlers import (
    handler_identifier,
    resolve_handler,
    resolve_service_class,
)
from service_registry.service import ServiceInterface

logger = logging.getLogger(__name__)

ProviderDetails: TypeAlias = (
    ServiceDescriptor | ServiceInterface | type[ServiceInterface] | Mapping[str, Any] | str
)


class ProviderRegistry:
    """Registers, looks up and removes service providers.

    Example:
        >>> registry = ProviderRegistry(Path("config/service-providers.yaml"))
        >>> registry.register({"name": "mailer", "handler": "app.mail:SmtpMailer"})
        True
        >>> registry.get_provider("mailer").handler
        'app.mail:SmtpMailer'

    """

    def __init__(self, config_file_path: Path | str) -> None:
        """Initialise registry for a providers configuration file.

        Args:
            config_file_path: Path of the YAML file persisting the providers

        """
        self._config_file = Path(config_file_path)
        self._providers: dict[str, ServiceDescriptor] | None = None

    @property
    def config_file(self) -> Path:
        """Path of the providers configuration file."""
        return self._config_file

    def load(self, force_reload: bool = False) -> None:
        """Load the providers mapping from the configuration file.

        The file is read once; later calls are no-ops unless `force_reload`
        is set or no load has succeeded yet.

        Raises:
            ConfigFileError: If the file is malformed or holds invalid records

        """
        if self._providers is not None and not force_reload:
            return

        data = config_file.include(self._config_file)
        providers: dict[str, ServiceDescriptor] = {}
        for name, details in data.items():
            if not isinstance(details, dict):
                raise ConfigFileError(
                    f"Invalid provider record '{name}' in {self._config_file}: "
                    "expected a mapping."
                )
            try:
                providers[str(name)] = ServiceDescriptor.from_properties(details)
            except ProviderValidationError as e:
                raise ConfigFileError(
                    f"Invalid provider record '{name}' in {self._config_file}: {e}"
                ) from e

        self._providers = providers
        logger.debug("Loaded %d providers from %s", len(providers), self._config_file)

    @property
    def _mapping(self) -> dict[str, ServiceDescriptor]:
        self.load()
        return self._providers  # type: ignore[return-value]

    def get_providers(self) -> dict[str, ServiceDescriptor]:
        """Get all registered providers keyed by service name."""
        return dict(self._mapping)

    def get_provider(self, name: str) -> ServiceDescriptor | None:
        """Get the provider registered for a service name, or None."""
        return self._mapping.get(name)

    def has_provider(self, name: str) -> bool:
        """Check if a provider is registered for a service name."""
        return self.get_provider(name) is not None

    def register(self, details: ProviderDetails) -> bool:
        """Register a service provider, replacing any provider of the same name.

        The mapping is reloaded from the configuration file before the
        change so that edits made outside this registry are not discarded.

        Args:
            details: A ServiceDescriptor, a provider instance, a provider
                class or its handler identifier, or a raw mapping carrying
                at least `name` and `handler`

        Returns:
            True if the configuration file was written, False otherwise.
            The in-memory mapping keeps the change either way.

        Raises:
            ProviderValidationError: If the details are invalid or the handler
                does not implement ServiceInterface

        """
        descriptor = self._resolve_service_details(details)

        self.load(force_reload=True)
        self._mapping[descriptor.name] = descriptor
        logger.info(
            "Registered service provider: %s (%s)", descriptor.name, descriptor.handler
        )

        return self._save()

    def unregister(self, name: str) -> bool:
        """Remove a service provider.

        Args:
            name: Service name or handler identifier of the provider

        Returns:
            True if the provider was removed and the configuration file
            written, or if no such provider exists. False if the write failed.

        """
        if not self.has_provider(name):
            found = self._find_by_handler(name)
            if found is None:
                logger.debug("No provider registered for %s - nothing to remove", name)
                return True
            name = found

        del self._mapping[name]
        logger.info("Unregistered service provider: %s", name)

        return self._save()

    def _find_by_handler(self, handler: str) -> str | None:
        target = _canonical_handler(handler)
        for name, descriptor in self.get_providers().items():
            if descriptor.handler == handler or (
                _canonical_handler(descriptor.handler) == target
            ):
                return name
        return None

    def _save(self) -> bool:
        data = {
            name: descriptor.to_properties()
            for name, descriptor in self._mapping.items()
        }
        return config_file.save_config_file(self._config_file, data)

    def _resolve_service_details(self, details: ProviderDetails) -> ServiceDescriptor:
        """Normalise registration details into a ServiceDescriptor.

        The handler of the resulting descriptor is always checked to import
        as a ServiceInterface class, so nothing unresolvable is persisted.

        Raises:
            ProviderValidationError: If the details cannot be normalised

        """
        descriptor = self._build_descriptor(details)
        resolve_service_class(descriptor.handler)
        return descriptor

    def _build_descriptor(self, details: ProviderDetails) -> ServiceDescriptor:
        if isinstance(details, ServiceDescriptor):
            return details

        if isinstance(details, ServiceInterface):
            return ServiceDescriptor.from_service(details)

        if isinstance(details, str):
            details = resolve_service_class(details)

        if isinstance(details, type):
            if not issubclass(details, ServiceInterface):
                raise ProviderValidationError(
                    f"Service provider {details.__name__} not valid service class."
                )
            try:
                provider = details()
            except TypeError as e:
                raise ProviderValidationError(
                    f"Service provider {details.__name__} cannot be instantiated: {e}"
                ) from e
            return ServiceDescriptor.from_service(provider)

        if isinstance(details, Mapping):
            return ServiceDescriptor.from_properties(dict(details))

        raise ProviderValidationError(
            f"Unsupported service provider details: {type(details).__name__}."
        )


def _canonical_handler(identifier: str) -> str:
    """Return the "module:Class" form of a handler, or the identifier as given."""
    try:
        return handler_identifier(resolve_handler(identifier))
    except HandlerResolutionError:
        return identifier
