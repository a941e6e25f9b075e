"""Configuration loading utilities."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import ValidationError

from ..constants import DEFAULT_CONF_FILE
from ..errors.internal import ConfigError
from ..logs.logger import logger
from .model import ServerConfig


def resolve_config_path(path: str | os.PathLike[str] | None = None) -> Path:
    """Pick the config file: explicit argument, then IRCD_CONF_FILE, then the default."""
    if path is None:
        path = os.environ.get("IRCD_CONF_FILE", DEFAULT_CONF_FILE)
    return Path(path)


class ConfigLoader:
    """Loads and validates the server configuration from a TOML file."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        """Initialize ConfigLoader.

        Args:
            path: Path to the configuration file. Falls back to the
                IRCD_CONF_FILE environment variable, then ``ircd.toml``.
        """
        self.path = resolve_config_path(path)

    def load_raw(self) -> dict:
        """Read and decode the TOML document.

        Raises:
            ConfigError: If the file cannot be opened or is not valid TOML.
        """
        try:
            with self.path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigError(
                f"Error opening file: {self.path}", data={"path": str(self.path)}
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(
                f"Error deserializing config file: {e}", data={"path": str(self.path)}
            ) from e

    def load(self) -> ServerConfig:
        """Load and validate the configuration.

        Returns:
            The validated ServerConfig.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        raw = self.load_raw()
        try:
            config = ServerConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(
                f"Error deserializing config file: {e}",
                data={"path": str(self.path), "errors": e.error_count()},
            ) from e
        logger.log_event("app", "config_loaded", path=str(self.path))
        return config


def get_configuration(path: str | os.PathLike[str] | None = None) -> ServerConfig:
    """Load the configuration from ``path`` (or the environment default)."""
    return ConfigLoader(path).load()
