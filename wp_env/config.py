"""
Library Configuration for wp-env

Settings controlling how an Environment accessor is built with
Environment.from_settings. load_settings reads them from an optional settings
file and then from environment variables. The global wp_env.env accessor uses
plain Settings() defaults and reads neither; the CLI calls load_settings.

Settings Files (first found in the current directory):
    wp-env.yaml, wp-env.yml, wp-env.json

Environment Variables:
    WP_ENV_DOTENV: Enable the .env source (true/false)
    WP_ENV_DOTENV_PATH: Path to the .env file
    WP_ENV_SENSITIVE_KEYS: Extra sensitive keys, comma-separated
    WP_ENV_LOG_LEVEL: Logging level

Example Usage:
    from wp_env import Environment
    from wp_env.config import load_settings

    env = Environment.from_settings(load_settings("config/wp-env.yaml"))
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

SETTINGS_FILES = ("wp-env.yaml", "wp-env.yml", "wp-env.json")

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Library settings."""

    dotenv_enabled: bool = Field(True, description="Whether to consult a .env file")
    dotenv_path: Optional[Path] = Field(
        None, description="Path to the .env file; searched upwards when unset"
    )
    sensitive_keys: List[str] = Field(
        default_factory=list, description="Keys appended to the built-in sensitive list"
    )
    constants: Dict[str, Any] = Field(
        default_factory=dict, description="Host constants to define"
    )
    sapi: Optional[str] = Field(None, description="Execution interface name")
    log_level: str = Field("WARNING", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level name."""
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return value


def _load_file(path: Path) -> Dict[str, Any]:
    """Load settings file.

    Args:
        path: Path to a YAML or JSON file.

    Returns:
        Settings data.

    Raises:
        InvalidConfigurationError: If the file can't be read or parsed.
    """
    try:
        with open(path) as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            elif path.suffix == ".json":
                data = json.load(f)
            else:
                raise ValueError("Unsupported file format")
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise InvalidConfigurationError(f"Failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(f"Settings in {path} must be a mapping")
    return data


def _find_settings_file(directory: Path) -> Optional[Path]:
    for name in SETTINGS_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Collect settings overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    if "WP_ENV_DOTENV" in environ:
        overrides["dotenv_enabled"] = environ["WP_ENV_DOTENV"].strip().lower() in (
            "1",
            "true",
            "on",
            "yes",
        )
    if environ.get("WP_ENV_DOTENV_PATH"):
        overrides["dotenv_path"] = environ["WP_ENV_DOTENV_PATH"]
    if environ.get("WP_ENV_SENSITIVE_KEYS"):
        overrides["sensitive_keys"] = [
            key.strip()
            for key in environ["WP_ENV_SENSITIVE_KEYS"].split(",")
            if key.strip()
        ]
    if environ.get("WP_ENV_LOG_LEVEL"):
        overrides["log_level"] = environ["WP_ENV_LOG_LEVEL"]

    return overrides


def load_settings(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Load library settings.

    Args:
        path: Settings file. Defaults to the first of wp-env.yaml,
            wp-env.yml or wp-env.json found in the current directory.
        environ: Environment mapping for overrides (defaults to os.environ)

    Returns:
        Loaded settings.

    Raises:
        InvalidConfigurationError: If the settings are invalid.
    """
    environ = os.environ if environ is None else environ

    if path is not None:
        settings_file: Optional[Path] = Path(path)
        if not settings_file.is_file():
            raise InvalidConfigurationError(f"Settings file not found: {settings_file}")
    else:
        settings_file = _find_settings_file(Path.cwd())

    data: Dict[str, Any] = {}
    if settings_file is not None:
        data = _load_file(settings_file)
        logger.debug(f"Loaded settings from {settings_file}")

    overrides = _env_overrides(environ)
    if "sensitive_keys" in overrides:
        overrides["sensitive_keys"] = list(data.get("sensitive_keys", [])) + overrides[
            "sensitive_keys"
        ]
    data.update(overrides)

    try:
        return Settings(**data)
    except ValidationError as e:
        raise InvalidConfigurationError(f"Invalid settings: {e}") from e
