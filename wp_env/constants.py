"""Constants module for environment resolution."""

from enum import Enum
from typing import Dict, Tuple


class Stage(str, Enum):
    """Deployment stage enumeration."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


# Keys whose values must never be cached or logged
DEFAULT_SENSITIVE_KEYS: Tuple[str, ...] = (
    "DB_PASSWORD",
    "AUTH_KEY",
    "SECURE_AUTH_KEY",
    "LOGGED_IN_KEY",
    "NONCE_KEY",
    "AUTH_SALT",
    "SECURE_AUTH_SALT",
    "LOGGED_IN_SALT",
    "NONCE_SALT",
    "API_KEY",
    "SECRET_KEY",
    "PRIVATE_KEY",
    "PASSWORD",
    "TOKEN",
    "ACCESS_TOKEN",
    "REFRESH_TOKEN",
)

# String values accepted as true by get_bool (after lower/strip)
TRUTHY_VALUES = frozenset({"1", "true", "on", "yes", "enabled"})

# Keys checked in order when resolving the deployment stage
STAGE_KEYS: Tuple[str, ...] = ("WP_ENV", "WP_ENVIRONMENT_TYPE", "ENVIRONMENT", "NODE_ENV")

STAGE_ALIASES: Dict[str, Stage] = {
    "dev": Stage.DEVELOPMENT,
    "develop": Stage.DEVELOPMENT,
    "development": Stage.DEVELOPMENT,
    "local": Stage.DEVELOPMENT,
    "stage": Stage.STAGING,
    "staging": Stage.STAGING,
    "test": Stage.STAGING,
    "testing": Stage.STAGING,
    "prod": Stage.PRODUCTION,
    "production": Stage.PRODUCTION,
    "live": Stage.PRODUCTION,
}

# Host name fragments used when no stage is set explicitly
DEVELOPMENT_HOST_MARKERS: Tuple[str, ...] = ("localhost", ".local", ".test", ".dev")
STAGING_HOST_MARKERS: Tuple[str, ...] = ("staging", "stage", "test")

# Container probes
DOCKERENV_PATH = "/.dockerenv"
CGROUP_PATH = "/proc/1/cgroup"
MOUNTINFO_PATH = "/proc/self/mountinfo"
DOCKER_ENV_VARS: Tuple[str, ...] = ("DOCKER_CONTAINER", "KUBERNETES_SERVICE_HOST")
CONTAINER_ENV_VARS: Tuple[str, ...] = (
    "PODMAN_CONTAINER",
    "SINGULARITY_CONTAINER",
    "APPTAINER_CONTAINER",
)

# Computed cache entries
FACT_ENVIRONMENT = "environment"
FACT_IS_DOCKER = "is_docker"
FACT_IS_CONTAINER = "is_container"

# Server software names reported in short form
KNOWN_SERVER_SOFTWARE: Tuple[str, ...] = ("nginx", "apache", "litespeed", "iis")

CLI_SAPI = "cli"
UNKNOWN = "unknown"
MASK = "********"
