"""Configuration loading and validation."""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, fields

from panda_client.domain.exceptions import ConfigurationError
from panda_client.shared.logging import get_logger


@dataclass
class PandaConfig:
    """Connection settings for a Panda cloud."""

    # Credentials
    cloud_id: str
    access_key: str
    secret_key: str

    # Endpoint
    api_host: str = "api.pandastream.com"
    api_port: int = 443
    api_version: int = 2

    # Transport
    timeout: float = 10.0
    max_retries: int = 0

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        for name in ("cloud_id", "access_key", "secret_key"):
            if not getattr(self, name):
                raise ConfigurationError(f"{name} is required")

        if not self.api_host:
            raise ConfigurationError("api_host is required")

        if not 0 < self.api_port <= 65535:
            raise ConfigurationError(f"Invalid api_port: {self.api_port}")

        if self.api_version < 1:
            raise ConfigurationError(f"Invalid api_version: {self.api_version}")

        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got: {self.timeout}")

        if self.max_retries < 0:
            raise ConfigurationError(f"max_retries cannot be negative, got: {self.max_retries}")

    @property
    def base_url(self) -> str:
        """Base URL of the versioned API."""
        if self.api_port == 443:
            return f"https://{self.api_host}/v{self.api_version}"
        return f"https://{self.api_host}:{self.api_port}/v{self.api_version}"


class ConfigLoader:
    """Loads and validates configuration from YAML files and environment variables."""

    _INT_ENV = {
        "PANDA_API_PORT": "api_port",
        "PANDA_API_VERSION": "api_version",
        "PANDA_MAX_RETRIES": "max_retries",
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to YAML config file
        """
        self.config_path = Path(config_path) if config_path else Path("panda.yaml")
        self._logger = get_logger(__name__)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> PandaConfig:
        """
        Load configuration from file and environment.

        Environment variables take precedence over the config file, and
        runtime overrides take precedence over both.

        Returns:
            PandaConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path.exists():
            self._logger.info(f"Loading config from {self.config_path}")
            config_dict.update(self._load_from_file())
        else:
            self._logger.debug(f"Config file not found: {self.config_path}")

        config_dict.update(self._load_from_env())

        if overrides:
            for k, v in overrides.items():
                if v is None:
                    continue
                config_dict[k] = v

        valid_fields = {f.name for f in fields(PandaConfig)}
        unknown = set(config_dict) - valid_fields
        if unknown:
            self._logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}

        for name in ("cloud_id", "access_key", "secret_key"):
            if name not in filtered_config:
                raise ConfigurationError(
                    f"{name} is required (set PANDA_{name.upper()} or add it to {self.config_path})"
                )

        try:
            return PandaConfig(**filtered_config)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from the YAML file."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                yaml_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(yaml_config, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {self.config_path}")

        # Accept both a flat file and one nested under a 'panda' key
        if isinstance(yaml_config.get("panda"), dict):
            yaml_config = yaml_config["panda"]

        return yaml_config

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        if cloud_id := os.getenv("PANDA_CLOUD_ID"):
            env_config["cloud_id"] = cloud_id

        if access_key := os.getenv("PANDA_ACCESS_KEY"):
            env_config["access_key"] = access_key

        if secret_key := os.getenv("PANDA_SECRET_KEY"):
            env_config["secret_key"] = secret_key

        if api_host := os.getenv("PANDA_API_HOST"):
            env_config["api_host"] = api_host

        for env_name, key in self._INT_ENV.items():
            if value := os.getenv(env_name):
                try:
                    env_config[key] = int(value)
                except ValueError:
                    self._logger.warning(f"Invalid {env_name} value: {value}")

        if timeout := os.getenv("PANDA_TIMEOUT"):
            try:
                env_config["timeout"] = float(timeout)
            except ValueError:
                self._logger.warning(f"Invalid PANDA_TIMEOUT value: {timeout}")

        return env_config
