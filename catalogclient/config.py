"""
load the config from config.yaml and environment variables
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class Config:
    """Configuration loader that reads from config.yaml and environment variables."""

    # Environment variable -> nested config key
    ENV_MAPPINGS = {
        'CATALOG_URL': ('catalog', 'url'),
        'CATALOG_SESSION_ID': ('catalog', 'session_id'),
        'FETCHER_USER_AGENT': ('fetcher', 'user_agent'),
        'FETCHER_TIMEOUT': ('fetcher', 'timeout'),
        'FETCHER_VERIFY_SSL': ('fetcher', 'verify_ssl'),
        'FETCHER_MAX_REDIRECTS': ('fetcher', 'max_redirects'),
        'RESOLVER_MAX_SUBSTITUTIONS': ('resolver', 'max_substitutions'),
        'LOG_LEVEL': ('logging', 'level'),
        'LOG_RENDERER': ('logging', 'renderer'),
    }

    def __init__(self, config_path: str = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to config.yaml file. If None, uses the config.yaml
                        shipped next to this module.
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and override with environment variables."""
        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration file: {e}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must hold a mapping: {self.config_path}")

        return self._apply_env_overrides(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        for env_var, config_path in self.ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue

            current = config
            for key in config_path[:-1]:
                if not isinstance(current.get(key), dict):
                    current[key] = {}
                current = current[key]

            current[config_path[-1]] = self._convert_env_value(env_value)

        return config

    def _convert_env_value(self, value: str):
        """Convert environment variable string to appropriate Python type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, *keys, default=None):
        """Get configuration value by walking nested keys.

        Args:
            *keys: Configuration keys (e.g., 'catalog', 'url')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def catalog(self) -> Dict[str, Any]:
        """Get catalog service configuration."""
        return self.get('catalog', default={}) or {}

    @property
    def fetcher(self) -> Dict[str, Any]:
        """Get HTTP fetcher configuration."""
        return self.get('fetcher', default={}) or {}

    @property
    def resolver(self) -> Dict[str, Any]:
        """Get link resolver configuration."""
        return self.get('resolver', default={}) or {}

    @property
    def logging(self) -> Dict[str, Any]:
        return self.get('logging', default={}) or {}
