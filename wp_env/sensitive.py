"""Sensitive key classification."""

import threading
from typing import Iterable, List, Optional

from .constants import DEFAULT_SENSITIVE_KEYS
from .hooks import HookRegistry, HookType


class SensitiveKeyClassifier:
    """Decides whether a key's value may be cached or logged.

    A key is sensitive when it equals a listed key, when its lower-cased
    name contains a lower-cased listed key, or when a SENSITIVE_KEY_CHECK
    filter says so. The list only grows.
    """

    def __init__(
        self,
        hooks: Optional[HookRegistry] = None,
        keys: Iterable[str] = DEFAULT_SENSITIVE_KEYS,
    ):
        self.hooks = hooks or HookRegistry()
        self._keys: List[str] = []
        self._lock = threading.RLock()
        self.add_keys(keys)

    @property
    def keys(self) -> List[str]:
        """Listed keys in insertion order."""
        with self._lock:
            return list(self._keys)

    def add_key(self, key: str) -> None:
        """Add a key to the list. Adding an existing key is a no-op."""
        with self._lock:
            if key not in self._keys:
                self._keys.append(key)

    def add_keys(self, keys: Iterable[str]) -> None:
        """Add several keys to the list."""
        for key in keys:
            self.add_key(key)

    def is_sensitive(self, key: str) -> bool:
        """Check if a key is considered sensitive.

        Args:
            key: Configuration key

        Returns:
            Whether the key's value must not be cached
        """
        with self._lock:
            keys = list(self._keys)

        if key in keys:
            return True

        key_lower = key.lower()
        for sensitive_key in keys:
            if sensitive_key.lower() in key_lower:
                return True

        return bool(self.hooks.apply_filters(HookType.SENSITIVE_KEY_CHECK, False, key))
