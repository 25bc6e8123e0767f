"""YAML persistence for the service providers configuration file.

The file holds a single mapping from service name to the descriptor record:

    mailer:
      handler: app.mail:SmtpMailer
      name: mailer
      title: SMTP mailer
      description: null
      include:
        - settings
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, cast

import yaml

from service_registry.errors import ConfigFileError

logger = logging.getLogger(__name__)


def include(path: Path) -> dict[str, Any]:
    """Load the providers mapping from a configuration file.

    Args:
        path: Path to the YAML configuration file

    Returns:
        Mapping of service name to raw descriptor record. An empty mapping
        when the file does not exist or is empty.

    Raises:
        ConfigFileError: If the file cannot be read, is not valid YAML, or
            does not contain a mapping

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug("Providers config file %s not found", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigFileError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileError(f"Cannot read providers config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Invalid providers config file {path}: expected a mapping, "
            f"got {type(data).__name__}."
        )
    return cast(dict[str, Any], data)


def save_config_file(path: Path, data: dict[str, Any]) -> bool:
    """Write the providers mapping to a configuration file.

    The content is written to a temporary file in the same directory and
    moved over the target, so readers never observe a partial file.

    Args:
        path: Path to the YAML configuration file
        data: Mapping of service name to descriptor record

    Returns:
        True if the file was written, False otherwise.

    """
    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to write providers config file %s: %s", path, e)
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return False

    logger.debug("Saved %d providers to %s", len(data), path)
    return True


def _target_mode(path: Path) -> int:
    """Mode for the written file: the existing file's, or the umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
