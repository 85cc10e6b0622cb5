"""Request messages sent from callers to the store worker."""

from __future__ import annotations

from collections.abc import Hashable
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modglobal.stores.base import Store


class Op(str, Enum):
    """Operations the store worker understands."""

    GET = "get"
    SET = "set"
    DELETE = "delete"
    HAS = "has"
    LIST_KEYS = "list_keys"
    CLEAR_NAMESPACE = "clear_namespace"


@dataclass
class Request:
    """A single operation plus the future its caller is waiting on.

    Attributes:
        op:        Operation to perform.
        namespace: Caller-supplied namespace token.
        key:       Key within the namespace (unused by namespace-wide ops).
        value:     Value to store (``set`` only).
        default:   Value returned by ``get`` when the key is absent.
        future:    Completed by the worker with the result or exception.
    """

    op: Op
    namespace: Hashable
    key: Hashable = None
    value: Any = None
    default: Any = None
    future: Future[Any] = field(default_factory=Future)

    def apply(self, store: Store) -> Any:
        """Run this request against *store* and return the raw result."""
        if self.op is Op.GET:
            return store.get(self.namespace, self.key, self.default)
        if self.op is Op.SET:
            store.set(self.namespace, self.key, self.value)
            return None
        if self.op is Op.DELETE:
            return store.delete(self.namespace, self.key)
        if self.op is Op.HAS:
            return store.has(self.namespace, self.key)
        if self.op is Op.LIST_KEYS:
            return store.list_keys(self.namespace)
        if self.op is Op.CLEAR_NAMESPACE:
            store.clear_namespace(self.namespace)
            return None
        raise ValueError(f"Unknown store operation: {self.op!r}")


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


#: Marks a ``timeout`` argument the caller did not pass.
UNSET: Any = _Unset()
