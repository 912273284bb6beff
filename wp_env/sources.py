"""Value sources consulted by the resolver.

Sources are listed in resolution priority:

1. Host constants: explicit values defined by the surrounding application.
2. Dotenv: values from a ``.env`` file, loaded with python-dotenv.
3. Process environment: ``os.environ`` or an injected mapping.

Also provides the file probe and platform information used by container and
CLI detection.
"""

import logging
import os
import platform
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, Mapping, MutableMapping, Optional, Union

from dotenv import dotenv_values, find_dotenv

from .constants import CLI_SAPI

logger = logging.getLogger(__name__)

# Returned by lookups when no source has the key
NOT_FOUND = object()


class ConstantsSource:
    """Base host constants interface."""

    def defined(self, key: str) -> bool:
        """Check whether a constant with this exact name exists.

        Args:
            key: Constant name

        Returns:
            Whether the constant is defined
        """
        raise NotImplementedError

    def value(self, key: str) -> Any:
        """Get a constant's value, type preserved.

        Args:
            key: Constant name

        Returns:
            Constant value
        """
        raise NotImplementedError


class MappingConstants(ConstantsSource):
    """Host constants backed by a dictionary."""

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def define(self, key: str, value: Any) -> None:
        """Define a constant."""
        self._values[key] = value

    def defined(self, key: str) -> bool:
        return key in self._values

    def value(self, key: str) -> Any:
        return self._values[key]


class ModuleConstants(ConstantsSource):
    """Host constants read from the upper-case attributes of a settings module."""

    def __init__(self, module: ModuleType):
        self.module = module

    def defined(self, key: str) -> bool:
        return key.isupper() and hasattr(self.module, key)

    def value(self, key: str) -> Any:
        return getattr(self.module, key)


class DotenvSource:
    """Resolver backed by a ``.env`` file.

    Mirrors ``load_dotenv(override=False)``: a variable already present in the
    process environment wins over the file entry. The file is read on the
    first lookup, not at construction.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize dotenv source.

        Args:
            path: Path to the ``.env`` file.
                Defaults to searching upwards from the current directory.
            environ: Process environment mapping (defaults to os.environ)
        """
        self.path = Path(path) if path else None
        self._environ = os.environ if environ is None else environ
        self._values: Optional[Dict[str, Optional[str]]] = None

    @property
    def values(self) -> Dict[str, Optional[str]]:
        """Parsed file entries."""
        if self._values is None:
            self._values = self._load()
        return self._values

    def _load(self) -> Dict[str, Optional[str]]:
        path = self.path
        if path is None:
            found = find_dotenv(usecwd=True)
            path = Path(found) if found else None

        if path is None or not path.is_file():
            logger.debug("No .env file found")
            return {}

        values = dict(dotenv_values(path))
        logger.debug(f"Loaded {len(values)} entries from {path}")
        return values

    def reload(self) -> None:
        """Discard parsed entries so the next lookup reads the file again."""
        self._values = None

    def lookup(self, key: str, default: Any = NOT_FOUND) -> Any:
        """Resolve a key.

        Args:
            key: Variable name
            default: Value returned when the key is absent (NOT_FOUND unless given)

        Returns:
            Variable value or default
        """
        value = self._environ.get(key)
        if value is not None:
            return value

        value = self.values.get(key)
        if value is not None:
            return value

        return default


class ProcessEnvironment:
    """Process environment table."""

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def lookup(self, key: str) -> Optional[str]:
        """Get a variable, or None when unset. Empty strings count as set."""
        return self.environ.get(key)


class FileProbe:
    """File existence and content probe."""

    def exists(self, path: str) -> bool:
        """Check whether a file exists."""
        return os.path.exists(path)

    def read(self, path: str) -> str:
        """Read a file as text, or return an empty string if it can't be read."""
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return ""


class PlatformInfo:
    """Execution interface, interpreter version and server metadata."""

    def __init__(
        self,
        sapi: Optional[str] = None,
        version: Optional[str] = None,
        server: Optional[Mapping[str, Any]] = None,
    ):
        """Initialize platform information.

        Args:
            sapi: Execution interface name, e.g. "cli", "wsgi" or "asgi"
            version: Interpreter version string
            server: Request metadata holding SERVER_SOFTWARE and friends
        """
        self.sapi = sapi or CLI_SAPI
        self.version = version or platform.python_version()
        self.server: Mapping[str, Any] = server if server is not None else {}
