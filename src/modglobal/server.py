"""StoreServer — the single serialization point for the namespaced mapping."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Hashable
from concurrent.futures import Future
from typing import Any

from modglobal._internal.request import UNSET, Op, Request
from modglobal.config import StoreConfig
from modglobal.exceptions import StoreNotRunningError, StoreTimeoutError
from modglobal.stores.base import Store
from modglobal.stores.memory import InMemoryStore

logger = logging.getLogger(__name__)


class StoreServer:
    """Owns one :class:`Store` and serves requests to it from a worker thread.

    Callers never touch the mapping.  Each operation is packaged as a
    :class:`Request`, pushed onto a FIFO inbox and executed by the worker
    strictly one at a time, in arrival order.  The caller blocks on the
    request's future until the worker has answered.

    Every single operation is atomic.  Sequences are not: a caller's
    ``has`` followed by its own ``set`` may interleave with another
    caller's ``set`` on the same key.

    Parameters:
        config: Server settings.  Defaults to :class:`StoreConfig()`.
        store:  Mapping backend.  Defaults to :class:`InMemoryStore`.

    Example:
        with StoreServer() as server:
            server.set("my.module", "hits", 0)
            server.get("my.module", "hits")  # -> 0
    """

    def __init__(self, config: StoreConfig | None = None, store: Store | None = None) -> None:
        self._config = config or StoreConfig()
        self._store: Store | None = store if store is not None else InMemoryStore()
        self._inbox: queue.SimpleQueue[Request | None] = queue.SimpleQueue()
        self._lifecycle_lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._accepting = False

    # ── lifecycle ────────────────────────────────────────────

    def start(self) -> StoreServer:
        """Start the worker thread.  A server can only be started once."""
        with self._lifecycle_lock:
            if self._thread is not None:
                raise RuntimeError("StoreServer can only be started once")
            self._thread = threading.Thread(
                target=self._run,
                args=(self._store,),
                name=self._config.thread_name,
                daemon=True,
            )
            self._accepting = True
            self._thread.start()
        logger.info("Store server '%s' started", self._config.thread_name)
        return self

    def stop(self) -> None:
        """Stop accepting requests, drain the inbox and discard the mapping.

        Requests accepted before the call still complete.  Calling ``stop``
        on a server that is not running is a no-op.
        """
        with self._lifecycle_lock:
            if not self._accepting:
                logger.debug("Store server '%s' is not running", self._config.thread_name)
                return
            self._accepting = False
            self._inbox.put(None)
            thread = self._thread

        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._store = None
        logger.info("Store server '%s' stopped", self._config.thread_name)

    @property
    def running(self) -> bool:
        return self._accepting

    @property
    def config(self) -> StoreConfig:
        return self._config

    def __enter__(self) -> StoreServer:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # ── request plumbing ─────────────────────────────────────

    def submit(self, request: Request) -> Future[Any]:
        """Enqueue *request* and return its future without waiting.

        Raises:
            StoreNotRunningError: If the server is not accepting requests.
        """
        with self._lifecycle_lock:
            if not self._accepting:
                raise StoreNotRunningError(request.op.value)
            self._inbox.put(request)
        return request.future

    def resolve_timeout(self, timeout: float | None = UNSET) -> float | None:
        """Return *timeout*, falling back to ``config.call_timeout`` when unset."""
        return self._config.call_timeout if timeout is UNSET else timeout

    def call(
        self,
        op: Op,
        namespace: Hashable,
        key: Hashable = None,
        *,
        value: Any = None,
        default: Any = None,
        timeout: float | None = UNSET,
    ) -> Any:
        """Run one operation and block until the worker answers.

        Raises:
            StoreNotRunningError: If the server is not running.
            StoreTimeoutError:    If *timeout* (or ``config.call_timeout``)
                                  expires first.  The request is skipped
                                  if the worker has not started it yet.
        """
        request = Request(op, namespace, key, value=value, default=default)
        future = self.submit(request)
        wait = self.resolve_timeout(timeout)
        try:
            return future.result(timeout=wait)
        except TimeoutError as exc:
            if future.done() and not future.cancelled() and future.exception() is exc:
                raise
            future.cancel()
            logger.warning("Store operation '%s' timed out after %ss", op.value, wait)
            raise StoreTimeoutError(op.value, wait) from None

    def _run(self, store: Store) -> None:
        while True:
            request = self._inbox.get()
            if request is None:
                break
            # Skipped when the caller gave up before the worker got here.
            if not request.future.set_running_or_notify_cancel():
                continue
            try:
                result = request.apply(store)
            except BaseException as exc:
                request.future.set_exception(exc)
            else:
                request.future.set_result(result)

    # ── Store operations ─────────────────────────────────────

    def get(self, namespace: Hashable, key: Hashable, default: Any = None) -> Any:
        """Return the value at ``(namespace, key)``, or *default* if absent."""
        return self.call(Op.GET, namespace, key, default=default)

    def set(self, namespace: Hashable, key: Hashable, value: Any) -> None:
        """Insert or overwrite the value at ``(namespace, key)``."""
        self.call(Op.SET, namespace, key, value=value)

    def delete(self, namespace: Hashable, key: Hashable) -> Any:
        """Remove ``(namespace, key)`` and return its value, or ``None``."""
        return self.call(Op.DELETE, namespace, key)

    def has(self, namespace: Hashable, key: Hashable) -> bool:
        """Return ``True`` iff ``(namespace, key)`` currently exists."""
        result: bool = self.call(Op.HAS, namespace, key)
        return result

    def list_keys(self, namespace: Hashable) -> list[Any]:
        result: list[Any] = self.call(Op.LIST_KEYS, namespace)
        return result

    def clear_namespace(self, namespace: Hashable) -> None:
        self.call(Op.CLEAR_NAMESPACE, namespace)
