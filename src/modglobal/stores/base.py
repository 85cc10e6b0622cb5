"""Store protocol — the namespaced mapping behind the store server."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class Store(ABC):
    """Abstract base for all mapping backends.

    Every entry is addressed by a *composite key* ``(namespace, key)``.
    The store is agnostic to what is stored: values may be anything,
    including falsey values such as ``0``, ``""`` or ``None``.  Presence
    is always tracked independently of the value.

    Backends are **not** thread-safe.  They are driven exclusively by a
    :class:`~modglobal.server.StoreServer` worker, which is the only
    reader and writer.
    """

    @abstractmethod
    def get(self, namespace: Hashable, key: Hashable, default: Any = None) -> Any:
        """Return the stored value, or *default* if the key is absent."""
        ...

    @abstractmethod
    def set(self, namespace: Hashable, key: Hashable, value: Any) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    def delete(self, namespace: Hashable, key: Hashable) -> Any:
        """Remove a value and return it, or ``None`` if the key was absent."""
        ...

    @abstractmethod
    def has(self, namespace: Hashable, key: Hashable) -> bool:
        """Return ``True`` if the key exists in the namespace."""
        ...

    @abstractmethod
    def list_keys(self, namespace: Hashable) -> list[Any]:
        """Return all keys within a namespace."""
        ...

    @abstractmethod
    def clear_namespace(self, namespace: Hashable) -> None:
        """Delete all keys within a namespace."""
        ...
