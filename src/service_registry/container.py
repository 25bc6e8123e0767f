"""Memoizing name-keyed container used as the binding store."""

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

logger = logging.getLogger(__name__)

Factory: TypeAlias = Callable[[], Any]


class Container:
    """Name-keyed store of deferred factories and their memoized instances.

    A name is bound by installing a factory. The factory is invoked on the
    first `resolve()` and its result is cached for the lifetime of the
    container; later resolves return the cached instance.
    """

    def __init__(self) -> None:
        """Initialise an empty container."""
        self._factories: dict[str, Factory] = {}
        self._instances: dict[str, Any] = {}
        logger.debug("Container initialized")

    def bind(self, name: str, factory: Factory) -> None:
        """Install a deferred factory for a service name.

        Args:
            name: Service name to bind
            factory: Zero-argument callable producing the service instance

        Raises:
            ValueError: If the name has already been instantiated

        """
        if name in self._instances:
            msg = f"Service '{name}' is already instantiated and cannot be rebound"
            raise ValueError(msg)
        self._factories[name] = factory
        logger.debug("Bound service: %s", name)

    def resolve(self, name: str) -> Any:  # noqa: ANN401
        """Get the instance bound to a name, creating it on first access.

        Args:
            name: Service name to resolve

        Returns:
            Service instance

        Raises:
            KeyError: If nothing is bound under the name
            ValueError: If the factory returns None (service unavailable)

        """
        if name in self._instances:
            logger.debug("Returning cached service: %s", name)
            return self._instances[name]

        factory = self._factories[name]
        logger.debug("Creating service: %s", name)
        instance = factory()
        if instance is None:
            logger.error("Factory for %s returned None - service unavailable", name)
            msg = f"Factory for {name} returned None - service unavailable"
            raise ValueError(msg)
        self._instances[name] = instance
        return instance

    def contains(self, name: str) -> bool:
        """Check whether a name is bound or instantiated."""
        return name in self._factories or name in self._instances

    def is_instantiated(self, name: str) -> bool:
        """Check whether the factory for a name has already been invoked."""
        return name in self._instances

    def clone(self, names: Iterable[str]) -> dict[str, Any]:
        """Resolve several names into a new name -> instance mapping.

        Args:
            names: Service names to resolve, in order

        Returns:
            Snapshot mapping each name to its (memoized) instance

        Raises:
            KeyError: If any name is not bound

        """
        return {name: self.resolve(name) for name in names}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)
