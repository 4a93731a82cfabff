"""
Configuration loading and validation for MySQL Dump Importer.
"""

import os
import re
from typing import Any, Optional

import yaml

from .exceptions import ConfigurationError


class ConfigLoader:
    """Loads and validates configuration from YAML file."""

    ENV_VAR_PATTERN = re.compile(r'\$\{([^}]+)\}')

    DEFAULT_INSTANCE = 'primary'
    DEFAULT_CLIENT = 'mysql'

    def __init__(self, config_path: str):
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from YAML file."""
        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        return self._resolve_env_vars(config or {})

    def _resolve_env_vars(self, obj: Any) -> Any:
        """Recursively resolve environment variables in config."""
        if isinstance(obj, str):
            matches = self.ENV_VAR_PATTERN.findall(obj)
            for match in matches:
                env_value = os.environ.get(match, '')
                obj = obj.replace(f'${{{match}}}', env_value)
            return obj
        elif isinstance(obj, dict):
            return {k: self._resolve_env_vars(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._resolve_env_vars(item) for item in obj]
        return obj

    def get_instance(self, instance_name: str) -> dict[str, Any]:
        """Get database instance configuration."""
        instances = self.config.get('instances', {})
        if instance_name not in instances:
            raise ValueError(f"Instance '{instance_name}' not found in configuration")
        return instances[instance_name]

    def get_import_settings(self) -> dict[str, Any]:
        """Get import settings."""
        return self.config.get('import', {})

    def get_logging_settings(self) -> dict[str, Any]:
        """Get logging settings."""
        return self.config.get('logging', {})

    def resolve_target(
        self,
        instance_override: Optional[str] = None,
        database_override: Optional[str] = None
    ) -> tuple[dict[str, Any], str]:
        """
        Work out which instance and database an import goes to.

        Command-line overrides win over the ``import`` section.
        """
        settings = self.get_import_settings()
        instance_name = instance_override or settings.get('instance', self.DEFAULT_INSTANCE)
        database = database_override or settings.get('database')

        try:
            instance = self.get_instance(instance_name)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        database = database or instance.get('database')
        if not database:
            raise ConfigurationError(
                f"No target database configured for instance '{instance_name}'"
            )
        return instance, database
