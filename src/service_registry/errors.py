"""Error classes for the service registry.

This module provides:
- ServiceRegistryError: Base exception class for all registry errors
- ProviderValidationError, HandlerResolutionError: Registration exceptions
- ConfigFileError: Persisted configuration exception
- CycleDetectedError: Include graph exception
"""


class ServiceRegistryError(Exception):
    """Base exception for all service registry errors."""

    pass


class ProviderValidationError(ServiceRegistryError):
    """Raised when a provider registration payload is invalid."""

    pass


class HandlerResolutionError(ProviderValidationError):
    """Raised when a handler identifier cannot be resolved to a class."""

    pass


class ConfigFileError(ServiceRegistryError):
    """Raised when the providers configuration file cannot be loaded."""

    pass


class CycleDetectedError(ServiceRegistryError):
    """Raised when a cycle is detected in the included services graph."""

    pass
