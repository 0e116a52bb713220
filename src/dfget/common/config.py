"""Configuration loader with multi-source support."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Generic, Optional, Type, TypeVar

import platformdirs
import toml
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)

# Separates section from key in environment overrides: DFGET_TRANSFER__BUFFER_SIZE
ENV_SECTION_SEPARATOR = "__"


class ConfigLoader(Generic[T]):
    """Loads configuration from multiple sources with priority.

    Lowest to highest: defaults file, system config, user config, environment.
    """

    def __init__(self, app_name: str = "dfget", config_class: Optional[Type[T]] = None) -> None:
        self.app_name = app_name
        self.config_class = config_class
        self._config: Optional[T] = None

    @property
    def env_prefix(self) -> str:
        """Prefix of environment variables that override config values."""
        return f"{self.app_name.upper().replace('-', '_')}_"

    def load(self, defaults_path: Optional[Path] = None) -> T:
        """Load configuration from all sources.

        Args:
            defaults_path: Optional path to defaults.toml file

        Returns:
            Validated configuration object
        """
        config_dict = self._load_defaults(defaults_path)

        system_config = self._load_system_config()
        if system_config:
            config_dict = self._deep_merge(config_dict, system_config)

        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        config_dict = self._apply_env_overrides(config_dict)

        if self.config_class:
            self._config = self.config_class(**config_dict)
        else:
            self._config = config_dict

        return self._config

    def _load_defaults(self, defaults_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load the defaults file, explicit path first."""
        if defaults_path is not None:
            # An explicit path that does not exist is a caller error
            logger.debug(f"Loading defaults from {defaults_path}")
            return toml.load(defaults_path)

        path = Path.cwd() / "config" / "defaults.toml"
        if path.exists():
            logger.debug(f"Loading defaults from {path}")
            return toml.load(path)

        return {}

    def _load_system_config(self) -> Optional[Dict[str, Any]]:
        """Load system-wide configuration."""
        if os.name == "nt":  # Windows
            system_path = (
                Path(os.environ.get("PROGRAMDATA", "C:\\ProgramData"))
                / self.app_name
                / "config.toml"
            )
        else:  # Linux/Mac
            system_path = Path(f"/etc/{self.app_name}/config.toml")

        if system_path.exists():
            logger.debug(f"Loading system config from {system_path}")
            return toml.load(system_path)

        return None

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_path = self.user_config_path()

        if user_config_path.exists():
            logger.debug(f"Loading user config from {user_config_path}")
            return toml.load(user_config_path)

        logger.debug(f"User config not found at {user_config_path}")
        return None

    def user_config_path(self) -> Path:
        """Location of the per-user config.toml."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        return Path(user_config_dir) / "config.toml"

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Override config with environment variables.

        DFGET_FILEUTIL_TRANSFER__BUFFER_SIZE -> transfer.buffer_size
        """
        prefix = self.env_prefix

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(prefix):
                continue

            key_path = env_key[len(prefix):].lower().split(ENV_SECTION_SEPARATOR)
            if not all(key_path):
                logger.debug(f"Ignoring malformed config override: {env_key}")
                continue

            current = config
            for part in key_path[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            current[key_path[-1]] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert string environment variable to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        # List (comma-separated)
        if "," in value:
            return [v.strip() for v in value.split(",")]

        return value

    @property
    def config(self) -> T:
        """Get loaded configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config
