"""Service registry - lazily bound services with persisted providers.

This package maps service names to lazily constructed instances, persists the
name to provider mapping in a YAML configuration file, and binds the services
a provider includes before the provider itself is constructed.
"""

__version__ = "0.1.0"

from service_registry.config_file import include, save_config_file
from service_registry.configuration import RegistryConfiguration
from service_registry.container import Container
from service_registry.descriptor import ServiceDescriptor
from service_registry.errors import (
    ConfigFileError,
    CycleDetectedError,
    HandlerResolutionError,
    ProviderValidationError,
    ServiceRegistryError,
)
from service_registry.handlers import handler_identifier, resolve_handler
from service_registry.registry import ProviderRegistry
from service_registry.service import Service, ServiceInterface
from service_registry.service_container import ServiceContainer

__all__ = [
    # Version
    "__version__",
    # Service contract
    "Service",
    "ServiceInterface",
    "ServiceDescriptor",
    # Registry and container
    "Container",
    "ProviderRegistry",
    "RegistryConfiguration",
    "ServiceContainer",
    # Persistence
    "include",
    "save_config_file",
    # Utilities
    "handler_identifier",
    "resolve_handler",
    # Errors
    "ServiceRegistryError",
    "ConfigFileError",
    "CycleDetectedError",
    "HandlerResolutionError",
    "ProviderValidationError",
]
