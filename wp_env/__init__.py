"""
wp-env - Priority-Ordered Environment Configuration

This package resolves configuration keys from host constants, a ``.env``
file and the process environment, in that order, and exposes typed getters,
deployment stage detection and container detection on top.

Key Features:
- Host constants > .env file > process environment > default
- Typed getters (bool, int, float, comma-separated list)
- Read-through caching that never stores sensitive values
- Filter and action hooks for overriding resolution
- Development/staging/production detection
- Docker, Kubernetes, Podman and Apptainer detection

Example Usage:
    from wp_env import env

    if env.get_bool("WP_DEBUG"):
        ...

    db_host = env.get_required("DB_HOST")
"""

import logging
from importlib.metadata import version

from .config import Settings, load_settings
from .constants import Stage
from .environment import Environment
from .errors import (
    ConfigurationError,
    InvalidConfigurationError,
    MissingConfigurationError,
    MissingRequiredKey,
    MissingRequiredKeys,
)
from .hooks import HookRegistry, HookType
from .sources import (
    ConstantsSource,
    DotenvSource,
    FileProbe,
    MappingConstants,
    ModuleConstants,
    PlatformInfo,
    ProcessEnvironment,
)

__version__ = version("wp-env")

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Create global instance
env = Environment.from_settings(Settings())

__all__ = [
    "__version__",
    "env",
    "Environment",
    "Settings",
    "load_settings",
    "Stage",
    "HookRegistry",
    "HookType",
    "ConstantsSource",
    "MappingConstants",
    "ModuleConstants",
    "DotenvSource",
    "ProcessEnvironment",
    "FileProbe",
    "PlatformInfo",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "MissingRequiredKey",
    "MissingRequiredKeys",
]
