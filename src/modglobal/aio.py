"""Awaitable facade for asyncio callers.

Same operations, same process-wide store and same ordering as
:mod:`modglobal.facade`, but the caller awaits the worker's answer
instead of blocking the event loop::

    from modglobal import aio

    await aio.set(__name__, "hits", 0)
    await aio.has(__name__, "hits")  # -> True
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Hashable
from typing import Any

from modglobal._internal.request import UNSET, Op, Request
from modglobal.exceptions import StoreTimeoutError
from modglobal.facade import get_server

logger = logging.getLogger(__name__)


async def call(
    op: Op,
    namespace: Hashable,
    key: Hashable = None,
    *,
    value: Any = None,
    default: Any = None,
    timeout: float | None = UNSET,
) -> Any:
    """Submit one operation to the process-wide store and await the result.

    Raises:
        StoreNotRunningError: If the store is not running.
        StoreTimeoutError:    If the bounded wait expires.
    """
    server = get_server(op.value)
    request = Request(op, namespace, key, value=value, default=default)
    wrapped = asyncio.wrap_future(server.submit(request))
    wait = server.resolve_timeout(timeout)
    if wait is None:
        return await wrapped
    try:
        return await asyncio.wait_for(wrapped, wait)
    except TimeoutError as exc:
        future = request.future
        if future.done() and not future.cancelled() and future.exception() is exc:
            raise
        future.cancel()
        logger.warning("Store operation '%s' timed out after %ss", op.value, wait)
        raise StoreTimeoutError(op.value, wait) from None


async def get(namespace: Hashable, key: Hashable, default: Any = None) -> Any:
    return await call(Op.GET, namespace, key, default=default)


async def set(namespace: Hashable, key: Hashable, value: Any) -> None:  # noqa: A001
    await call(Op.SET, namespace, key, value=value)


async def delete(namespace: Hashable, key: Hashable) -> Any:
    return await call(Op.DELETE, namespace, key)


async def has(namespace: Hashable, key: Hashable) -> bool:
    result: bool = await call(Op.HAS, namespace, key)
    return result


async def list_keys(namespace: Hashable) -> list[Any]:
    result: list[Any] = await call(Op.LIST_KEYS, namespace)
    return result


async def clear_namespace(namespace: Hashable) -> None:
    await call(Op.CLEAR_NAMESPACE, namespace)
