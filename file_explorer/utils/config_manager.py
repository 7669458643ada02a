"""
Configuration Manager
Configuration loading, environment overrides and schema validation
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import jsonschema
from jsonschema import ValidationError


CONFIG_ENV_VAR = "FILE_EXPLORER_CONFIG"
ENV_PREFIX = "FILE_EXPLORER_"


class ConfigurationError(ValueError):
    """Raised when configuration cannot be loaded or is invalid"""


class ConfigManager:
    """
    Configuration management with defaults, overrides and validation

    Sources, lowest precedence first:
    - Built-in defaults
    - JSON file named by FILE_EXPLORER_CONFIG (or passed explicitly)
    - FILE_EXPLORER_* environment variables
    """

    DEFAULTS = {
        "preview_max_lines": 200,
        "binary_probe_bytes": 4096,
        "log_dir": str(Path("~") / ".file_explorer" / "logs"),
        "log_level": "INFO",
        "json_logs": False
    }

    SCHEMA = {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "preview_max_lines": {"type": "integer", "minimum": 1},
            "binary_probe_bytes": {"type": "integer", "minimum": 1},
            "log_dir": {"type": "string", "minLength": 1},
            "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
            "json_logs": {"type": "boolean"}
        }
    }

    # env suffix -> (config key, coercion)
    ENV_OVERRIDES = {
        "PREVIEW_MAX_LINES": ("preview_max_lines", "int"),
        "BINARY_PROBE_BYTES": ("binary_probe_bytes", "int"),
        "LOG_DIR": ("log_dir", "str"),
        "LOG_LEVEL": ("log_level", "upper"),
        "JSON_LOGS": ("json_logs", "bool")
    }

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize ConfigManager

        Args:
            environ: Environment mapping (defaults to os.environ)
        """
        self.environ = os.environ if environ is None else environ
        self.logger = logging.getLogger(__name__)
        self.config_path: Optional[Path] = None

    def load_config(
        self,
        config_path: Optional[Union[str, Path]] = None,
        validate: bool = True
    ) -> Dict[str, Any]:
        """
        Build the effective configuration

        Args:
            config_path: JSON config file; falls back to FILE_EXPLORER_CONFIG
            validate: Whether to validate against the schema

        Returns:
            Configuration dictionary with every key populated

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        config = copy.deepcopy(self.DEFAULTS)

        if config_path is None:
            config_path = self.environ.get(CONFIG_ENV_VAR) or None

        if config_path is not None:
            config.update(self._read_file(Path(config_path).expanduser()))

        config = self._apply_env_overrides(config)

        if validate:
            self.validate_config(config)

        config['log_dir'] = str(Path(config['log_dir']).expanduser())
        return config

    def _read_file(self, config_path: Path) -> Dict[str, Any]:
        """Read a JSON object from disk"""
        if not config_path.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a JSON object")

        self.config_path = config_path
        self.logger.info(f"Loaded configuration from {config_path}")
        return data

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration

        Environment variables are prefixed with FILE_EXPLORER_
        Example: FILE_EXPLORER_PREVIEW_MAX_LINES=50

        Args:
            config: Configuration before overrides

        Returns:
            Configuration with overrides applied
        """
        for env_suffix, (config_key, kind) in self.ENV_OVERRIDES.items():
            env_var = f"{ENV_PREFIX}{env_suffix}"
            if env_var not in self.environ:
                continue

            raw = self.environ[env_var]
            if kind == "int":
                try:
                    value = int(raw)
                except ValueError:
                    raise ConfigurationError(f"{env_var} must be an integer, got {raw!r}")
            elif kind == "bool":
                value = raw.strip().lower() in ("1", "true", "yes", "on")
            elif kind == "upper":
                value = raw.strip().upper()
            else:
                value = raw

            config[config_key] = value
            self.logger.debug(f"Applied override {env_var}")

        return config

    def validate_config(self, config: Dict[str, Any]) -> bool:
        """
        Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            True if valid

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            jsonschema.validate(config, self.SCHEMA)
            return True
        except ValidationError as e:
            location = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigurationError(f"Configuration validation failed at {location}: {e.message}") from e
