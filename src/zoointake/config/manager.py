"""Configuration loading."""

import logging
from typing import Any

import yaml
from pydantic import ValidationError

from zoointake.config.models import ZooConfig
from zoointake.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the optional zoo.yaml configuration file."""

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize ConfigManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.config_path = self.path_resolver.get_config_path()

    def load(self) -> ZooConfig:
        """Load and validate the configuration.

        Returns:
            ZooConfig: Loaded configuration, or defaults if there is no config file

        Raises:
            ValueError: If the file is not valid YAML or fails validation
        """
        if not self.config_path.exists():
            return ZooConfig()

        raw_config = self._read_yaml()
        return self._create_config_object(raw_config)

    def _read_yaml(self) -> dict[str, Any]:
        """Read YAML config file.

        Returns:
            dict: Raw configuration dictionary
        """
        try:
            config_text = self.config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"Configuration file {self.config_path} cannot be read: {e}") from e

        try:
            raw_config = yaml.safe_load(config_text)
        except yaml.YAMLError as e:
            raise ValueError(f"Configuration file {self.config_path} is not valid YAML: {e}") from e

        if raw_config is None:
            return {}
        if not isinstance(raw_config, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a mapping")
        return raw_config

    def _create_config_object(self, raw_config: dict[str, Any]) -> ZooConfig:
        """Create ZooConfig object from dictionary.

        Args:
            raw_config: Configuration dictionary

        Returns:
            ZooConfig: Typed configuration object
        """
        expected_fields = set(ZooConfig.model_fields.keys())
        filtered_config = {k: v for k, v in raw_config.items() if k in expected_fields}

        unexpected_fields = set(raw_config.keys()) - expected_fields
        if unexpected_fields:
            logger.warning("Ignoring unknown config fields: %s", sorted(unexpected_fields))

        try:
            return ZooConfig(**filtered_config)
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}") from e
