"""Configuration loading and validation."""

from __future__ import annotations

import copy
import logging
import os
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from globber.errors import ConfigError, ConfigNotFoundError
from globber.pattern import Pattern, compile_pattern

__all__ = ["MatchSettings", "Config"]

logger = logging.getLogger(__name__)


class MatchSettings(BaseModel):
    """Defaults applied when compiling patterns through a Config.

    Attributes:
        case_sensitive: Match mode baked into compiled patterns.
        strict: Refuse consecutive wildcards instead of collapsing them.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    case_sensitive: bool = True
    strict: bool = False


class Config:
    """Configuration accessor with dot-path key support.

    The ``matching`` section is validated into MatchSettings on
    construction; other sections are kept as-is and reachable via get().
    The source mapping is copied, and get() returns copies of nested
    containers, so a Config never changes after construction.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")
        self._data: dict[str, Any] = copy.deepcopy(data)
        section = self._data.get("matching") or {}
        if not isinstance(section, dict):
            raise ConfigError(
                f"'matching' must be a mapping, got {type(section).__name__}"
            )
        try:
            self._settings = MatchSettings.model_validate(section)
        except ValidationError as e:
            raise ConfigError(f"Invalid 'matching' settings: {e}", cause=e) from e

    @classmethod
    def load(cls, yaml_path: str) -> Config:
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            A new Config. An empty file gives the defaults.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the YAML is malformed or not a mapping.
        """
        if not os.path.isfile(yaml_path):
            raise ConfigNotFoundError(config_path=yaml_path)

        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_path}: {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

        config = cls(data)
        logger.info(
            "Loaded config from %s: case_sensitive=%s strict=%s",
            yaml_path,
            config.settings.case_sensitive,
            config.settings.strict,
        )
        return config

    @property
    def settings(self) -> MatchSettings:
        return self._settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return copy.deepcopy(current)

    def compile(self, pattern: str) -> Pattern:
        """Compile pattern using the configured match mode and strictness."""
        return compile_pattern(
            pattern,
            case_sensitive=self._settings.case_sensitive,
            strict=self._settings.strict,
        )
