"""InMemoryStore — dict-backed storage keyed by ``(namespace, key)``."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

from modglobal.stores.base import Store


class InMemoryStore(Store):
    """In-memory store using one flat dict.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[tuple[Hashable, Hashable], Any] = {}

    def get(self, namespace: Hashable, key: Hashable, default: Any = None) -> Any:
        composite = (namespace, key)
        if composite in self._data:
            return self._data[composite]
        return default

    def set(self, namespace: Hashable, key: Hashable, value: Any) -> None:
        self._data[(namespace, key)] = value

    def delete(self, namespace: Hashable, key: Hashable) -> Any:
        return self._data.pop((namespace, key), None)

    def has(self, namespace: Hashable, key: Hashable) -> bool:
        return (namespace, key) in self._data

    def list_keys(self, namespace: Hashable) -> list[Any]:
        return [key for ns, key in self._data if ns == namespace]

    def clear_namespace(self, namespace: Hashable) -> None:
        for composite in [c for c in self._data if c[0] == namespace]:
            del self._data[composite]

    def __len__(self) -> int:
        return len(self._data)
