"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    LoggingParams,
    OutputParams,
    SerialParams,
    SessionParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "serial": SerialParams,
    "session": SessionParams,
    "logging": LoggingParams,
    "output": OutputParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Optional[Path]
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_path is not None:
            config_path = Path(config_path)

        return cls(
            config_path=config_path,
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file, if one was given."""
        if self.config_path is None:
            return {}

        if not self.config_path.is_file():
            raise ConfigurationError(
                f"Configuration file {self.config_path} does not exist",
                context={"path": str(self.config_path)}
            )

        try:
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_path}: {e}",
                context={"path": str(self.config_path)}
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration file {self.config_path} must contain a mapping",
                context={"path": str(self.config_path)}
            )
        return file_config.get("prt7", file_config)  # type: ignore[no-any-return]

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides, e.g. command line flags (highest priority)
        2. YAML configuration file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the typed configuration."""
        merged = self.merge_config(overrides)

        unknown = self._unknown_keys(merged)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}",
                errors=unknown
            )

        errors = ConfigValidator.validate_config(merged)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value!r})" for err in errors]
            raise ConfigurationError(
                "Invalid configuration: " + "; ".join(error_msgs),
                errors=errors
            )

        return DefaultConfig(**{
            section: section_type(**merged[section])
            for section, section_type in _SECTION_TYPES.items()
        })

    def _unknown_keys(self, config: dict[str, Any]) -> list[str]:
        """List dotted keys that do not map onto a configuration field."""
        unknown = []

        for section, values in config.items():
            section_type = _SECTION_TYPES.get(section)
            if section_type is None or not isinstance(values, dict):
                unknown.append(section)
                continue

            known = {f.name for f in fields(section_type)}
            unknown.extend(f"{section}.{key}" for key in values if key not in known)

        return unknown

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
