"""Configuration model for the store server."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """Settings for a :class:`~modglobal.server.StoreServer`.

    Attributes:
        call_timeout: Seconds a caller waits for its response before
                      :class:`~modglobal.exceptions.StoreTimeoutError` is
                      raised.  ``None`` waits forever.
        thread_name:  Name given to the worker thread.
    """

    call_timeout: float | None = Field(default=None, gt=0)
    thread_name: str = "modglobal-store"
