"""Deployment stage, container and execution interface detection.

Every detector combines independent signals with OR: a single positive
signal is conclusive, and only the absence of all signals gives a negative
result. Results are cached in the computed tier until the caches are cleared,
and each result can be overridden through a filter hook.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from .constants import (
    CGROUP_PATH,
    CLI_SAPI,
    CONTAINER_ENV_VARS,
    DEVELOPMENT_HOST_MARKERS,
    DOCKER_ENV_VARS,
    DOCKERENV_PATH,
    FACT_ENVIRONMENT,
    FACT_IS_CONTAINER,
    FACT_IS_DOCKER,
    KNOWN_SERVER_SOFTWARE,
    MOUNTINFO_PATH,
    STAGE_ALIASES,
    STAGE_KEYS,
    STAGING_HOST_MARKERS,
    UNKNOWN,
    Stage,
)
from .hooks import HookType

if TYPE_CHECKING:
    from .environment import Environment

logger = logging.getLogger(__name__)


class EnvironmentDetector:
    """Derives environment facts from an Environment's sources."""

    def __init__(self, env: "Environment"):
        self.env = env

    def _cached(self, fact: str) -> Optional[Any]:
        with self.env.cache.lock:
            return self.env.cache.computed.get(fact)

    def _store(self, fact: str, value: Any) -> Any:
        with self.env.cache.lock:
            self.env.cache.computed.set(fact, value)
        logger.debug(f"Detected {fact}={value}")
        return value

    def _env_var_set(self, name: str) -> bool:
        return bool(self.env.process.lookup(name))

    def _file_contains(self, path: str, needle: str) -> bool:
        files = self.env.files
        return files.exists(path) and needle in files.read(path)

    def get_environment(self) -> str:
        """Get the current deployment stage.

        The first non-empty value among WP_ENV, WP_ENVIRONMENT_TYPE,
        ENVIRONMENT and NODE_ENV is normalized and mapped onto a stage.
        Unrecognized or missing values fall back to host-based indicators.

        Returns:
            One of "development", "staging" or "production"
        """
        cached = self._cached(FACT_ENVIRONMENT)
        if cached is not None:
            return cached

        raw = ""
        for key in STAGE_KEYS:
            value = self.env.get(key, "")
            if value:
                raw = value
                break

        normalized = str(raw).strip().lower()
        stage = STAGE_ALIASES.get(normalized)
        environment = stage.value if stage else self.detect_by_indicators()

        environment = self.env.hooks.apply_filters(
            HookType.STAGE_COMPUTED, environment, normalized
        )
        return self._store(FACT_ENVIRONMENT, environment)

    def detect_by_indicators(self) -> str:
        """Guess the stage from the debug flag and host name.

        Production is never inferred from a signal; it is what remains when
        neither development nor staging indicators are present.
        """
        http_host = str(self.env.get("HTTP_HOST", "") or "")

        if self.env.get_bool("WP_DEBUG", False) and (
            self.env.get("SERVER_NAME") == "localhost"
            or any(marker in http_host for marker in DEVELOPMENT_HOST_MARKERS)
        ):
            return Stage.DEVELOPMENT.value

        if any(marker in http_host for marker in STAGING_HOST_MARKERS):
            return Stage.STAGING.value

        return Stage.PRODUCTION.value

    def is_docker(self) -> bool:
        """Check if we're running inside a Docker container.

        Kubernetes pods count as Docker.
        """
        cached = self._cached(FACT_IS_DOCKER)
        if cached is not None:
            return cached

        is_docker = (
            self.env.files.exists(DOCKERENV_PATH)
            or self._file_contains(CGROUP_PATH, "docker")
            or any(self._env_var_set(name) for name in DOCKER_ENV_VARS)
            or self._file_contains(MOUNTINFO_PATH, "docker")
        )

        is_docker = bool(self.env.hooks.apply_filters(HookType.DOCKER_DETECTED, is_docker))
        return self._store(FACT_IS_DOCKER, is_docker)

    def is_container(self) -> bool:
        """Check if we're running in any container runtime (Docker, Podman, etc.)."""
        cached = self._cached(FACT_IS_CONTAINER)
        if cached is not None:
            return cached

        is_container = self.is_docker() or any(
            self._env_var_set(name) for name in CONTAINER_ENV_VARS
        )

        is_container = bool(
            self.env.hooks.apply_filters(HookType.CONTAINER_DETECTED, is_container)
        )
        return self._store(FACT_IS_CONTAINER, is_container)

    def is_cli(self) -> bool:
        """Check if we're running from the command line."""
        constants = self.env.constants
        if constants.defined("WP_CLI") and constants.value("WP_CLI"):
            return True
        return self.env.platform.sapi == CLI_SAPI

    def get_server_software(self) -> str:
        """Get server software, shortened to a known name where possible."""
        software = str(self.env.platform.server.get("SERVER_SOFTWARE", UNKNOWN))

        software_lower = software.lower()
        for name in KNOWN_SERVER_SOFTWARE:
            if name in software_lower:
                return name

        return software
