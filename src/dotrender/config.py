"""Configuration management for dotrender using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .graph.models import RenderOption

CONFIG_FILE_NAME = ".dotrender.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class RenderConfig(BaseModel):
    """Rendering configuration section."""
    options: list[RenderOption] = Field(default_factory=list)

    @field_validator("options")
    @classmethod
    def dedupe_options(cls, v):
        """Drop repeated options, keeping first occurrence order."""
        return list(dict.fromkeys(v))


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO


class DotRenderConfig(BaseModel):
    """Complete dotrender configuration model."""
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def option_set(self) -> frozenset[RenderOption]:
        """Render options as a set ready for render_opts."""
        return frozenset(self.render.options)


def load_config(config_path: str | Path | None = None) -> DotRenderConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .dotrender.json.
                    A missing file yields the default configuration

    Returns:
        DotRenderConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if not config_path or not config_path.exists():
        return create_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")

    try:
        return DotRenderConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .dotrender.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> DotRenderConfig:
    """Create default configuration: nothing suppressed, INFO logging."""
    return DotRenderConfig()


def configure_logging(config: DotRenderConfig) -> None:
    """Apply the configured level to the dotrender package logger.

    No handlers are installed; that stays with the application.
    """
    logging.getLogger("dotrender").setLevel(_LOG_LEVELS[LogLevel(config.logging.level)])
