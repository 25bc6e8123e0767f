"""Configuration for the service container with environment fallback."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_FILE = Path("config") / "service-providers.yaml"


class RegistryConfiguration(BaseModel):
    """Configuration for the provider registry.

    Attributes:
        config_file: Path of the YAML file persisting the providers mapping

    Example:
        ```python
        # Explicit configuration
        config = RegistryConfiguration(config_file=Path("/etc/app/providers.yaml"))

        # From properties dict with env fallback
        config = RegistryConfiguration.from_properties({})

        container = ServiceContainer.from_configuration(config)
        ```

    """

    model_config = ConfigDict(
        # Immutable - configuration cannot be modified after creation
        frozen=True,
        # Strict - extra fields not in the model are rejected
        extra="forbid",
    )

    config_file: Path = Field(
        default=DEFAULT_CONFIG_FILE,
        description="Path of the YAML file persisting the providers mapping",
    )

    @classmethod
    def from_properties(cls, properties: dict[str, Any]) -> Self:
        """Create configuration from properties with environment fallback.

        Layering, highest priority first:
        1. Explicit properties
        2. SERVICE_REGISTRY_CONFIG_FILE environment variable
        3. Defaults

        Args:
            properties: Configuration properties dictionary

        Returns:
            Validated configuration instance

        Raises:
            ValidationError: If configuration is invalid

        """
        config_data = properties.copy()

        if "config_file" not in config_data:
            env_path = os.getenv("SERVICE_REGISTRY_CONFIG_FILE")
            if env_path:
                config_data["config_file"] = env_path

        return cls.model_validate(config_data)
