"""
Logger Configuration.

Defines LoggerConfig, the configuration object accepted by Registry.new()
and Logger.configure(). Validation performs the same normalization as the
fluent setters on Logger.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from namedlog.exceptions import ConfigError
from namedlog.levels import INHERIT, clamp_instance


DEFAULT_PATH = "logs/"
DEFAULT_TIME_LAYOUT = "%Y-%m-%d %H:%M:%S %Z"


def normalize_path(path: str) -> str:
    """Ensure a log directory path ends with a separator."""
    if not path:
        raise ValueError("log path must not be empty")
    if not path.endswith("/"):
        path += "/"
    return path


# ============================================================================
# Configuration Model
# ============================================================================


class LoggerConfig(BaseModel):
    """Configuration for a single named logger.

    Attributes:
        stdout: Print colored lines to the console
        file: Append lines to per-level log files
        raw: Omit the timestamp prefix in file lines
        path: Directory holding the log files, always ending with "/"
        time_layout: strftime layout for timestamps
        verbosity: Console threshold in [0, 3], or -1 to inherit the global value
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    stdout: bool = Field(default=True, description="Console output enabled")
    file: bool = Field(default=True, description="File output enabled")
    raw: bool = Field(default=False, description="Raw file lines without timestamps")
    path: str = Field(default=DEFAULT_PATH, description="Log directory")
    time_layout: str = Field(default=DEFAULT_TIME_LAYOUT, description="Timestamp layout")
    verbosity: int = Field(default=INHERIT, description="Per-logger verbosity")

    @field_validator("path", mode="before")
    @classmethod
    def _normalize_path(cls, v: Any) -> str:
        return normalize_path(str(v))

    @field_validator("time_layout")
    @classmethod
    def _check_layout(cls, v: str) -> str:
        if not v:
            raise ValueError("time layout must not be empty")
        return v

    @field_validator("verbosity")
    @classmethod
    def _clamp_verbosity(cls, v: int) -> int:
        return clamp_instance(v)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggerConfig":
        """Create a config from a dictionary.

        Raises:
            ConfigError: If the data has unknown keys or invalid values
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid logger configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()

    @classmethod
    def load(cls, config_path: str | Path) -> "LoggerConfig":
        """Load configuration from a JSON file.

        A missing file yields the defaults.

        Args:
            config_path: Path to the JSON file

        Returns:
            LoggerConfig instance
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read {config_path}: {e}", path=str(config_path)) from e

        return cls.from_dict(data)

    def save(self, config_path: str | Path) -> Path:
        """Save configuration to a JSON file.

        Returns:
            Path to the saved file
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)

        return config_path
