"""Custom exceptions for the modglobal package."""

from __future__ import annotations


class ModglobalError(Exception):
    """Base exception for all modglobal errors."""


class StoreNotRunningError(ModglobalError):
    """Raised when an operation is issued while the store is not running.

    This covers calls made before :func:`modglobal.start` and calls made
    after :func:`modglobal.stop`.  The store owns the only copy of the
    state, so a request with nowhere to go is never silently dropped.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot run '{operation}': the store is not running. "
            "Call modglobal.start() during process initialization."
        )


class StoreTimeoutError(ModglobalError, TimeoutError):
    """Raised when a bounded wait on the store expires."""

    def __init__(self, operation: str, timeout: float) -> None:
        self.operation = operation
        self.timeout = timeout
        super().__init__(f"Store operation '{operation}' timed out after {timeout}s")
