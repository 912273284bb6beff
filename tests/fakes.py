"""Fake sources for wp_env tests."""

from typing import Any, Dict, Optional

from wp_env.sources import FileProbe, MappingConstants


class FakeFileProbe(FileProbe):
    """File probe backed by a dict of path -> content."""

    def __init__(self):
        self.files: Dict[str, str] = {}
        self.calls = 0

    def add(self, path: str, content: str = "") -> None:
        self.files[path] = content

    def exists(self, path: str) -> bool:
        self.calls += 1
        return path in self.files

    def read(self, path: str) -> str:
        self.calls += 1
        return self.files.get(path, "")


class CountingConstants(MappingConstants):
    """Host constants that count lookups."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        super().__init__(values)
        self.calls = 0

    def defined(self, key: str) -> bool:
        self.calls += 1
        return super().defined(key)


class CountingDotenv:
    """Dotenv resolver with fixed values that counts lookups."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values = dict(values or {})
        self.calls = 0

    def lookup(self, key: str, default: Any = None) -> Any:
        self.calls += 1
        return self.values.get(key, default)
