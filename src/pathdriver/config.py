"""Configuration models, loader and driver wiring."""

import os
from pathlib import Path as FilePath
from typing import Any, Dict, Literal, Optional

import platformdirs
import toml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .drivers import PathDriver, create_driver
from .errors import ConfigurationError
from .facade import Path
from .logging import get_logger, setup_logging_from_config
from .logging_config import LoggingConfig

logger = get_logger(__name__)

APP_NAME = "pathdriver"


class DriverConfig(BaseModel):
    """Which path syntax to install and the state it starts with."""

    model_config = ConfigDict(extra='forbid')

    name: Literal["posix", "windows"] = Field(
        default="posix",
        description="Path syntax of the active driver"
    )
    cwd: str = Field(
        default="",
        description="Working directory used by resolve()"
    )
    env: Dict[str, str] = Field(
        default_factory=dict,
        description='Environment mapping; Windows reads "=<DRIVE>:" keys from it'
    )


class PathDriverConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra='forbid')

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    driver: DriverConfig = Field(default_factory=DriverConfig)


class ConfigLoader:
    """Loads configuration from defaults, the user config file and the environment."""

    def __init__(self, app_name: str = APP_NAME, environ: Optional[Dict[str, str]] = None) -> None:
        self.app_name = app_name
        self.environ = os.environ if environ is None else environ
        self._config: Optional[PathDriverConfig] = None

    def load(self, defaults_path: Optional[FilePath] = None) -> PathDriverConfig:
        """Load configuration from all sources.

        Later sources win: defaults file, user config, environment variables.

        Args:
            defaults_path: Optional path to a defaults.toml file

        Returns:
            Validated configuration object

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        config_dict = self._load_defaults(defaults_path)

        user_config = self._load_user_config()
        if user_config:
            config_dict = self._deep_merge(config_dict, user_config)

        config_dict = self._apply_env_overrides(config_dict)

        try:
            self._config = PathDriverConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", errors=e.errors()) from e

        return self._config

    def _read_toml(self, path: FilePath) -> Dict[str, Any]:
        try:
            return toml.load(path)
        except toml.TomlDecodeError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}", path=str(path)) from e

    def _load_defaults(self, defaults_path: Optional[FilePath] = None) -> Dict[str, Any]:
        """Load the defaults file, if any."""
        if defaults_path and defaults_path.exists():
            return self._read_toml(defaults_path)

        path = FilePath.cwd() / "config" / "defaults.toml"
        if path.exists():
            return self._read_toml(path)

        return {}

    def _load_user_config(self) -> Optional[Dict[str, Any]]:
        """Load user-specific configuration."""
        user_config_dir = platformdirs.user_config_dir(appname=self.app_name, appauthor=False)
        user_config_path = FilePath(user_config_dir) / "config.toml"

        if user_config_path.exists():
            logger.debug(f"Loading user config from {user_config_path}")
            return self._read_toml(user_config_path)

        logger.debug(f"User config not found at {user_config_path}")
        return None

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

        PATHDRIVER_DRIVER_NAME=windows sets driver.name. Only the section and
        the first key are split off, so key names may contain underscores.
        """
        prefix = f"{self.app_name.upper().replace('-', '_')}_"

        for env_key, env_value in self.environ.items():
            if not env_key.startswith(prefix):
                continue

            key_path = env_key[len(prefix):].lower().split("_", 1)
            if len(key_path) != 2:
                logger.debug(f"Ignoring environment override without a section: {env_key}")
                continue

            section, key = key_path
            current = config.setdefault(section, {})
            if not isinstance(current, dict):
                raise ConfigurationError(
                    f"Cannot override {env_key}: {section} is not a section",
                    variable=env_key,
                )
            current[key] = env_value

        return config

    @property
    def config(self) -> PathDriverConfig:
        """Get loaded configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config


def configure(config: Optional[PathDriverConfig] = None) -> PathDriver:
    """Apply the logging section, then create and install the configured driver.

    Args:
        config: Configuration to apply; loaded with ConfigLoader when omitted

    Returns:
        The installed driver
    """
    if config is None:
        config = ConfigLoader().load()

    setup_logging_from_config(config.logging)

    driver = create_driver(
        config.driver.name,
        cwd=config.driver.cwd,
        env=config.driver.env,
    )
    return Path.install(driver)
