"""Mapping backends driven by the store server."""

from modglobal.stores.base import Store
from modglobal.stores.memory import InMemoryStore

__all__ = ["InMemoryStore", "Store"]
