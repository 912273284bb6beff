"""Filter and action hooks for customizing value resolution."""

import logging
import threading
from enum import Enum, auto
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)


class HookType(Enum):
    """Points where callbacks can observe or override resolution."""

    # Filters
    VALUE_RESOLVED = auto()
    STAGE_COMPUTED = auto()
    DOCKER_DETECTED = auto()
    CONTAINER_DETECTED = auto()
    SENSITIVE_KEY_CHECK = auto()

    # Actions
    CACHE_CLEARED = auto()


FILTER_HOOKS = frozenset(
    {
        HookType.VALUE_RESOLVED,
        HookType.STAGE_COMPUTED,
        HookType.DOCKER_DETECTED,
        HookType.CONTAINER_DETECTED,
        HookType.SENSITIVE_KEY_CHECK,
    }
)
ACTION_HOOKS = frozenset({HookType.CACHE_CLEARED})


class HookRegistry:
    """Registry of filter and action callbacks.

    Filters receive the current value plus hook-specific context and return
    the (possibly overridden) value. Callbacks run in registration order and
    an empty chain returns the value unchanged. Actions are notifications:
    their return value is ignored.
    """

    def __init__(self):
        """Initialize registry."""
        self._callbacks: Dict[HookType, List[Callable]] = {}
        self._lock = threading.RLock()

    def add_filter(self, hook: HookType, callback: Callable[..., Any]) -> None:
        """Register a filter callback.

        Args:
            hook: Filter hook to attach to
            callback: Called as ``callback(value, *args)``
        """
        if hook not in FILTER_HOOKS:
            raise ValueError(f"{hook.name} is not a filter hook")
        self._add(hook, callback)

    def add_action(self, hook: HookType, callback: Callable[[], None]) -> None:
        """Register an action callback.

        Args:
            hook: Action hook to attach to
            callback: Called with no arguments
        """
        if hook not in ACTION_HOOKS:
            raise ValueError(f"{hook.name} is not an action hook")
        self._add(hook, callback)

    def _add(self, hook: HookType, callback: Callable) -> None:
        with self._lock:
            callbacks = self._callbacks.setdefault(hook, [])
            if callback not in callbacks:
                callbacks.append(callback)
                logger.debug(f"Registered callback for {hook.name}")

    def remove(self, hook: HookType, callback: Callable) -> None:
        """Remove a previously registered callback.

        Args:
            hook: Hook the callback was registered for
            callback: Previously registered callback
        """
        with self._lock:
            callbacks = self._callbacks.get(hook, [])
            if callback in callbacks:
                callbacks.remove(callback)
                logger.debug(f"Removed callback for {hook.name}")

    def has(self, hook: HookType) -> bool:
        """Check whether any callback is registered for a hook."""
        with self._lock:
            return bool(self._callbacks.get(hook))

    def apply_filters(self, hook: HookType, value: Any, *args: Any) -> Any:
        """Pass a value through every filter registered for a hook.

        Args:
            hook: Filter hook
            value: Starting value
            *args: Extra context passed to each callback

        Returns:
            Filtered value
        """
        with self._lock:
            callbacks = list(self._callbacks.get(hook, []))

        for callback in callbacks:
            value = callback(value, *args)
        return value

    def do_action(self, hook: HookType) -> None:
        """Notify every action callback registered for a hook."""
        with self._lock:
            callbacks = list(self._callbacks.get(hook, []))

        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logger.error(f"Error in {hook.name} callback: {e}", exc_info=True)
