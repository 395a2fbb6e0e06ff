"""Key-value persistence interface used by preference storage.

The conversion core never depends on it; it is declared here so UI layers
share one contract. MemoryKeyValueStore is the dict-backed fake for tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value store. Blank keys are ignored."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


def _usable_key(key: object) -> bool:
    return isinstance(key, str) and bool(key.strip())


class MemoryKeyValueStore:
    """Dict-backed KeyValueStore for unit tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        if not _usable_key(key):
            return None
        return self._store.get(key)

    def set(self, key: str, value: str) -> None:
        # Empty values are ignored
        if not _usable_key(key) or not isinstance(value, str) or not value:
            return
        self._store[key] = value

    def remove(self, key: str) -> None:
        if not _usable_key(key):
            return
        self._store.pop(key, None)
