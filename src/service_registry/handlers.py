"""Conversion between provider handler identifiers and classes.

A handler identifier names an importable class, either in entry point form
("package.module:ClassName") or in dotted form ("package.module.ClassName").
"""

import importlib
import logging

from service_registry.errors import HandlerResolutionError, ProviderValidationError
from service_registry.service import ServiceInterface

logger = logging.getLogger(__name__)


def handler_identifier(cls: type) -> str:
    """Return the entry point style identifier of a class."""
    return f"{cls.__module__}:{cls.__qualname__}"


def resolve_handler(identifier: str) -> type:
    """Import the class named by a handler identifier.

    Args:
        identifier: Handler identifier in "module:Class" or "module.Class" form

    Returns:
        The referenced class

    Raises:
        HandlerResolutionError: If the module or attribute cannot be loaded,
            or the attribute is not a class

    """
    if ":" in identifier:
        module_name, _, attribute_path = identifier.partition(":")
    else:
        module_name, _, attribute_path = identifier.rpartition(".")

    if not module_name or not attribute_path:
        raise HandlerResolutionError(f"Invalid handler identifier '{identifier}'.")

    try:
        target: object = importlib.import_module(module_name)
    except ImportError as e:
        raise HandlerResolutionError(
            f"Cannot import module '{module_name}' for handler '{identifier}': {e}"
        ) from e

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as e:
            raise HandlerResolutionError(
                f"Handler '{identifier}' not found in module '{module_name}'."
            ) from e

    if not isinstance(target, type):
        raise HandlerResolutionError(f"Handler '{identifier}' is not a class.")

    logger.debug("Resolved handler %s", identifier)
    return target


def resolve_service_class(identifier: str) -> type[ServiceInterface]:
    """Import a handler class and check that it implements the service contract.

    Raises:
        HandlerResolutionError: If the handler cannot be imported
        ProviderValidationError: If the class is not a ServiceInterface

    """
    cls = resolve_handler(identifier)
    if not issubclass(cls, ServiceInterface):
        raise ProviderValidationError(
            f"Service provider {identifier} not valid service class."
        )
    return cls
