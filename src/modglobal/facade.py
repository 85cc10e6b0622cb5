"""Process-wide store lifecycle and the synchronous facade functions.

There is exactly one process-wide :class:`StoreServer`.  Start it once
during process initialization; every facade call forwards to it::

    import modglobal

    modglobal.start()
    modglobal.set(__name__, "hits", 0)
    modglobal.get(__name__, "hits")  # -> 0
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable
from typing import Any

from modglobal._internal.request import Op
from modglobal.config import StoreConfig
from modglobal.exceptions import StoreNotRunningError
from modglobal.server import StoreServer
from modglobal.stores.base import Store

logger = logging.getLogger(__name__)

_server: StoreServer | None = None
_server_lock = threading.Lock()


def start(config: StoreConfig | None = None, *, store: Store | None = None) -> StoreServer:
    """Start the process-wide store and return its server.

    Calling ``start`` while the store is already running returns the
    running server unchanged; *config* and *store* are then ignored.
    After :func:`stop`, ``start`` creates a fresh, empty store.

    Args:
        config: Server settings.
        store:  Mapping backend (mainly for tests).
    """
    global _server

    with _server_lock:
        if _server is not None and _server.running:
            logger.debug("Process-wide store already running")
            return _server
        _server = StoreServer(config, store).start()
        return _server


def stop() -> None:
    """Stop the process-wide store and discard its state.  No-op if not running."""
    global _server

    with _server_lock:
        server, _server = _server, None
    if server is not None:
        server.stop()


def is_running() -> bool:
    """Return ``True`` if the process-wide store is accepting requests."""
    server = _server
    return server is not None and server.running


def get_server(operation: str = "get_server") -> StoreServer:
    """Return the running process-wide server.

    Raises:
        StoreNotRunningError: If :func:`start` has not been called, or the
                              store has been stopped.
    """
    server = _server
    if server is None or not server.running:
        raise StoreNotRunningError(operation)
    return server


# ── facade ───────────────────────────────────────────────────


def get(namespace: Hashable, key: Hashable, default: Any = None) -> Any:
    """For *namespace*, return the value of *key*, or *default* if absent.

    A stored falsey value (``0``, ``""``, ``False``, ``None``) is returned
    as-is; *default* is only used when the key is not present.
    """
    return get_server(Op.GET.value).get(namespace, key, default)


def set(namespace: Hashable, key: Hashable, value: Any) -> None:  # noqa: A001
    """Set *key* to *value* for *namespace*, overwriting if necessary."""
    get_server(Op.SET.value).set(namespace, key, value)


def delete(namespace: Hashable, key: Hashable) -> Any:
    """Delete *key* from *namespace* and return the deleted value.

    If the key was not present, ``None`` is returned.
    """
    return get_server(Op.DELETE.value).delete(namespace, key)


def has(namespace: Hashable, key: Hashable) -> bool:
    """Return ``True`` if *key* is present in *namespace*.

    This only checks presence: falsey values still return ``True``.
    """
    return get_server(Op.HAS.value).has(namespace, key)


def list_keys(namespace: Hashable) -> list[Any]:
    """Return the keys currently set in *namespace*."""
    return get_server(Op.LIST_KEYS.value).list_keys(namespace)


def clear_namespace(namespace: Hashable) -> None:
    """Remove every key of *namespace*."""
    get_server(Op.CLEAR_NAMESPACE.value).clear_namespace(namespace)
