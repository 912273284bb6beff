"""Configuration error classes."""

from typing import List, Sequence


class ConfigurationError(Exception):
    """Base configuration error."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Invalid configuration error."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Missing configuration error."""
    pass


class MissingRequiredKey(MissingConfigurationError, ValueError):
    """A required key resolved to None or an empty string."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required environment variable '{key}' is not set")


class MissingRequiredKeys(MissingConfigurationError, ValueError):
    """One or more required keys resolved to None or an empty string."""

    def __init__(self, keys: Sequence[str]):
        self.keys: List[str] = list(keys)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.keys)
        )
