"""In-memory caches for resolved values and computed facts."""

import logging
import threading
from typing import Any, Dict, Optional

from .hooks import HookRegistry, HookType

logger = logging.getLogger(__name__)


class MemoryCache:
    """Dictionary-backed cache without expiry."""

    def __init__(self, namespace: str):
        """Initialize memory cache.

        Args:
            namespace: Cache namespace, used in log messages
        """
        self.namespace = namespace
        self._data: Dict[str, Any] = {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get value from cache.

        Args:
            key: Cache key
            default: Returned when the key is not cached

        Returns:
            Cached value or default
        """
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set value in cache."""
        self._data[key] = value

    def clear(self) -> None:
        """Clear all cached values."""
        self._data.clear()
        logger.debug(f"Cleared {self.namespace} cache")

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class ValueCache:
    """Two-tier cache: raw resolved values and derived environment facts.

    Entries never expire. ``clear`` empties both tiers and fires the
    CACHE_CLEARED action.
    """

    def __init__(self, hooks: Optional[HookRegistry] = None):
        self.hooks = hooks or HookRegistry()
        self.values = MemoryCache("values")
        self.computed = MemoryCache("computed")
        self.lock = threading.RLock()

    def clear(self) -> None:
        """Empty both caches and notify CACHE_CLEARED callbacks."""
        with self.lock:
            self.values.clear()
            self.computed.clear()
        self.hooks.do_action(HookType.CACHE_CLEARED)

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary of entry counts per tier
        """
        with self.lock:
            return {
                "cache_count": len(self.values),
                "computed_cache_count": len(self.computed),
            }
