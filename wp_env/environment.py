"""
Environment Access for wp-env

This module provides the Environment class, a priority-ordered configuration
accessor. A key is resolved by checking, in order:

1. Host constants (explicit, code-reviewed deployment configuration)
2. The dotenv source, when one is configured
3. The process environment
4. The caller's default

Key Features:
- Typed getters (bool, int, float, comma-separated list)
- Read-through cache for resolved values and computed facts
- Sensitive keys (passwords, tokens, salts) are never cached or logged
- Filter and action hooks to observe or override resolution
- Deployment stage detection (development, staging, production)
- Docker and container runtime detection
- Required key validation and bulk loading

Example Usage:
    from wp_env import Environment, MappingConstants

    env = Environment(constants=MappingConstants({"WP_DEBUG": True}))

    debug = env.get_bool("WP_DEBUG")
    workers = env.get_int("WORKERS", 4)
    hosts = env.get_array("ALLOWED_HOSTS")

    if env.is_production():
        env.validate_required(["DB_HOST", "DB_PASSWORD"])
"""

import logging
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from .cache import ValueCache
from .coercion import ConfigValue, to_bool, to_float, to_int, to_list
from .config import Settings
from .constants import DEFAULT_SENSITIVE_KEYS, UNKNOWN, Stage
from .detection import EnvironmentDetector
from .errors import MissingRequiredKey, MissingRequiredKeys
from .hooks import HookRegistry, HookType
from .sensitive import SensitiveKeyClassifier
from .sources import (
    NOT_FOUND,
    ConstantsSource,
    DotenvSource,
    FileProbe,
    MappingConstants,
    PlatformInfo,
    ProcessEnvironment,
)

logger = logging.getLogger(__name__)

KeyEntry = Union[str, Tuple[str, Any]]


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class Environment:
    """Priority-ordered configuration accessor."""

    def __init__(
        self,
        constants: Optional[ConstantsSource] = None,
        dotenv: Optional[DotenvSource] = None,
        process: Optional[ProcessEnvironment] = None,
        files: Optional[FileProbe] = None,
        platform: Optional[PlatformInfo] = None,
        host_info: Optional[Callable[[], str]] = None,
        hooks: Optional[HookRegistry] = None,
        sensitive_keys: Iterable[str] = DEFAULT_SENSITIVE_KEYS,
    ):
        """Initialize environment accessor.

        Args:
            constants: Host constants, checked first
            dotenv: Optional dotenv resolver; skipped when None
            process: Process environment (defaults to os.environ)
            files: File probe used by container detection
            platform: Execution interface and server metadata
            host_info: Optional callable returning the host application version
            hooks: Filter and action registry
            sensitive_keys: Initial sensitive key list
        """
        self.constants = constants if constants is not None else MappingConstants()
        self.dotenv = dotenv
        self.process = process or ProcessEnvironment()
        self.files = files or FileProbe()
        self.platform = platform or PlatformInfo()
        self.host_info = host_info
        self.hooks = hooks or HookRegistry()
        self.cache = ValueCache(self.hooks)
        self.sensitive = SensitiveKeyClassifier(self.hooks, sensitive_keys)
        self.detector = EnvironmentDetector(self)

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, **kwargs: Any
    ) -> "Environment":
        """Create an accessor from library settings.

        Args:
            settings: Library settings (defaults to Settings())
            **kwargs: Overrides passed to the constructor

        Returns:
            Environment instance
        """
        settings = settings or Settings()
        process = kwargs.pop("process", None) or ProcessEnvironment()

        if "dotenv" not in kwargs and settings.dotenv_enabled:
            kwargs["dotenv"] = DotenvSource(settings.dotenv_path, process.environ)
        if "constants" not in kwargs:
            kwargs["constants"] = MappingConstants(settings.constants)
        if "platform" not in kwargs and settings.sapi:
            kwargs["platform"] = PlatformInfo(sapi=settings.sapi)

        env = cls(process=process, **kwargs)
        env.add_sensitive_keys(settings.sensitive_keys)
        return env

    # Resolution

    def _resolve(self, key: str) -> Any:
        """Resolve a key from the sources, or NOT_FOUND when none has it."""
        if self.constants.defined(key):
            logger.debug(f"Resolved {key} from host constants")
            return self.constants.value(key)

        if self.dotenv is not None:
            logger.debug(f"Resolving {key} through dotenv source")
            return self.dotenv.lookup(key, NOT_FOUND)

        value = self.process.lookup(key)
        if value is not None:
            logger.debug(f"Resolved {key} from process environment")
            return value

        return NOT_FOUND

    def get_raw(self, key: str, default: Any = None) -> ConfigValue:
        """Resolve a key without caching or filters.

        Args:
            key: Configuration key
            default: Value returned when no source has the key

        Returns:
            Resolved value or default
        """
        value = self._resolve(key)
        return default if value is NOT_FOUND else value

    def get(self, key: str, default: Any = None) -> ConfigValue:
        """Get a configuration value.

        Cached values are returned directly. Otherwise the key is resolved,
        passed through the VALUE_RESOLVED filter and cached unless the key is
        sensitive. A key no source has is not cached, so every caller gets
        its own default.

        Args:
            key: Configuration key
            default: Value returned when no source has the key

        Returns:
            Configuration value
        """
        sensitive = self.is_sensitive_key(key)

        if not sensitive:
            with self.cache.lock:
                cached = self.cache.values.get(key, NOT_FOUND)
            if cached is not NOT_FOUND:
                logger.debug(f"Cache hit for {key}")
                return cached

        value = self._resolve(key)
        found = value is not NOT_FOUND
        if not found:
            value = default
        value = self.hooks.apply_filters(HookType.VALUE_RESOLVED, value, key, default)

        if found and not sensitive:
            with self.cache.lock:
                self.cache.values.set(key, value)

        return value

    # Typed getters

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a configuration value as boolean."""
        return to_bool(self.get(key, default), default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get a configuration value as integer."""
        return to_int(self.get(key, default), default)

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get a configuration value as float."""
        return to_float(self.get(key, default), default)

    def get_array(self, key: str, default: Optional[List[Any]] = None) -> List[Any]:
        """Get a configuration value as a list of comma-separated items."""
        if default is None:
            default = []
        return to_list(self.get(key, default), default)

    def get_required(self, key: str) -> ConfigValue:
        """Get a configuration value that must be set.

        Args:
            key: Configuration key

        Returns:
            Configuration value

        Raises:
            MissingRequiredKey: If the value is None or an empty string.
        """
        value = self.get(key)
        if _is_missing(value):
            raise MissingRequiredKey(key)
        return value

    def validate_required(self, keys: Iterable[str]) -> None:
        """Check that every key has a value.

        Args:
            keys: Required configuration keys

        Raises:
            MissingRequiredKeys: Naming every missing key, in input order.
        """
        missing = [key for key in keys if _is_missing(self.get(key))]
        if missing:
            raise MissingRequiredKeys(missing)

    def load(
        self, keys: Union[Mapping[str, Any], Iterable[KeyEntry]]
    ) -> Dict[str, ConfigValue]:
        """Load several configuration values at once.

        Args:
            keys: Either a mapping of key to default, or an iterable whose
                items are bare key names (default None) or (key, default)
                pairs. Bare names and pairs can be mixed.

        Returns:
            Dictionary of key to value, in input order
        """
        if isinstance(keys, Mapping):
            entries: Iterable[KeyEntry] = keys.items()
        else:
            entries = keys

        result: Dict[str, ConfigValue] = {}
        for entry in entries:
            if isinstance(entry, str):
                result[entry] = self.get(entry)
            else:
                key, default = entry
                result[key] = self.get(key, default)
        return result

    # Sensitive keys

    def is_sensitive_key(self, key: str) -> bool:
        """Check if a key's value must not be cached or logged."""
        return self.sensitive.is_sensitive(key)

    def add_sensitive_key(self, key: str) -> None:
        """Add a key to the sensitive list."""
        self.sensitive.add_key(key)

    def add_sensitive_keys(self, keys: Iterable[str]) -> None:
        """Add several keys to the sensitive list."""
        self.sensitive.add_keys(keys)

    # Cache

    def clear_cache(self) -> None:
        """Clear resolved values and computed facts."""
        self.cache.clear()

    # Environment facts

    def get_environment(self) -> str:
        """Get the deployment stage."""
        return self.detector.get_environment()

    def is_development(self) -> bool:
        return self.get_environment() == Stage.DEVELOPMENT.value

    def is_staging(self) -> bool:
        return self.get_environment() == Stage.STAGING.value

    def is_production(self) -> bool:
        return self.get_environment() == Stage.PRODUCTION.value

    def is_debug(self) -> bool:
        """Check if debug mode is enabled."""
        return self.get_bool("WP_DEBUG", False)

    def is_multisite(self) -> bool:
        """Check if the host runs in multisite mode."""
        if self.get_bool("MULTISITE", False):
            return True
        return self.constants.defined("MULTISITE") and bool(
            self.constants.value("MULTISITE")
        )

    def is_docker(self) -> bool:
        return self.detector.is_docker()

    def is_container(self) -> bool:
        return self.detector.is_container()

    def is_cli(self) -> bool:
        return self.detector.is_cli()

    def is_web(self) -> bool:
        return not self.is_cli()

    def get_server_software(self) -> str:
        return self.detector.get_server_software()

    def get_sapi(self) -> str:
        """Get the execution interface name."""
        return self.platform.sapi

    def get_host_version(self) -> str:
        """Get the host application version, or "unknown" without a provider."""
        if self.host_info is None:
            return UNKNOWN
        return str(self.host_info())

    def get_debug_info(self) -> Dict[str, Any]:
        """Get all environment information for debugging.

        Returns:
            Dictionary of environment facts and cache statistics
        """
        info: Dict[str, Any] = {
            "environment": self.get_environment(),
            "is_development": self.is_development(),
            "is_staging": self.is_staging(),
            "is_production": self.is_production(),
            "is_debug": self.is_debug(),
            "is_multisite": self.is_multisite(),
            "is_docker": self.is_docker(),
            "is_container": self.is_container(),
            "is_cli": self.is_cli(),
            "server_software": self.get_server_software(),
            "sapi": self.get_sapi(),
            "python_version": self.platform.version,
            "host_version": self.get_host_version(),
        }
        info.update(self.cache.get_stats())
        info["has_dotenv"] = self.dotenv is not None
        return info
