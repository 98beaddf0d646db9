"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    IndicatorParams,
    MarketParams,
    SimulationConfig,
    ThresholdParams,
    TradeParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "simulation.yaml"

_SECTIONS = {
    "market": MarketParams,
    "indicators": IndicatorParams,
    "thresholds": ThresholdParams,
    "trading": TradeParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: SimulationConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load file-level overrides from simulation.yaml, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"{config_file} must contain a mapping")

        if "simulation" in file_config:
            file_config = file_config["simulation"]
            if file_config is None:
                return {}
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"'simulation' in {config_file} must be a mapping")

        # An empty section (all keys commented out) keeps its defaults
        return {name: values for name, values in file_config.items() if values is not None}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. simulation.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> SimulationConfig:
        """Merge, validate and build a SimulationConfig."""
        return build_config(self.merge_config(overrides))

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


def build_config(config: dict[str, Any]) -> SimulationConfig:
    """
    Validate a merged configuration mapping and build a SimulationConfig.

    Sections missing from the mapping fall back to defaults.

    Raises:
        ConfigurationError: If any parameter violates its contract, or a
            section is unknown, not a mapping or holds unknown keys.
    """
    config = _normalize_sections(config)

    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ConfigurationError(
            "Invalid simulation configuration: " + "; ".join(
                f"{err.field}: {err.message} (got: {err.value!r})" for err in errors
            ),
            errors=errors,
        )

    sections = {}
    for name, params_cls in _SECTIONS.items():
        values = config.get(name, {})
        unknown = set(values) - set(params_cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(
                f"Unknown keys in '{name}' section: {', '.join(sorted(unknown))}"
            )
        sections[name] = params_cls(**values)

    return SimulationConfig(**sections)


def load_config(config_dir: Optional[Path] = None,
                overrides: Optional[dict[str, Any]] = None) -> SimulationConfig:
    """Load the simulation configuration from defaults, file and overrides."""
    return ConfigLoader.create(config_dir).load(overrides)


def _normalize_sections(config: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Map empty sections to {} and reject unknown or non-mapping sections."""
    unknown = set(config) - set(_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    sections = {}
    for name, values in config.items():
        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ConfigurationError(
                f"'{name}' section must be a mapping, got {type(values).__name__}"
            )
        sections[name] = values
    return sections
