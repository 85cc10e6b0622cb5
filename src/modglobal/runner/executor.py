# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Executor for running scripted operations against a store.

Orchestrates the full execution flow:
1. Create and start a store server from configuration
2. Run every operation in order
3. Stop the server (if the executor created it)
4. Return structured results
"""

from __future__ import annotations

import logging

from modglobal._internal.request import Op
from modglobal.server import StoreServer

from .schema import OperationResultSchema, OperationSchema, RunnerInput, RunnerOutput

logger = logging.getLogger(__name__)


class ExecutionError(Exception):
    """Raised when an operation in the script fails."""

    def __init__(self, index: int, operation: OperationSchema, cause: BaseException) -> None:
        self.index = index
        self.operation = operation
        super().__init__(
            f"Operation #{index} ('{operation.op}' on '{operation.namespace}') failed: {cause}"
        )


class Executor:
    """Executes an operation script against a store server.

    The executor is designed for dependency injection to support testing.
    Pass a running server to the constructor to reuse it instead of
    creating a fresh one from the input's configuration.

    Example:
        executor = Executor()
        output = executor.execute(input_data)

        # Against an existing server:
        with StoreServer() as server:
            output = Executor(server=server).execute(input_data)
    """

    def __init__(self, server: StoreServer | None = None) -> None:
        self._injected_server = server

    def execute(self, input_data: RunnerInput) -> RunnerOutput:
        """Run the script and translate the outcome to ``RunnerOutput``.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        results: list[OperationResultSchema] = []
        try:
            self._execute_internal(input_data, results)
        except ExecutionError as e:
            logger.debug("Runner script stopped at operation #%d", e.index)
            return RunnerOutput(
                success=False,
                results=results,
                error=str(e),
                error_type="ExecutionError",
            )
        except Exception as e:
            return RunnerOutput(
                success=False,
                results=results,
                error=str(e),
                error_type=type(e).__name__,
            )
        return RunnerOutput(success=True, results=results)

    def _execute_internal(
        self,
        input_data: RunnerInput,
        results: list[OperationResultSchema],
    ) -> None:
        """Internal execution logic.

        Separated from execute() to allow exception propagation
        for testing while execute() catches all errors.
        """
        server = self._injected_server or StoreServer(input_data.config).start()
        owns_server = self._injected_server is None

        try:
            for index, operation in enumerate(input_data.operations):
                results.append(self._run_one(server, index, operation))
        finally:
            if owns_server:
                server.stop()

    def _run_one(
        self,
        server: StoreServer,
        index: int,
        operation: OperationSchema,
    ) -> OperationResultSchema:
        try:
            result = server.call(
                Op(operation.op),
                operation.namespace,
                operation.key,
                value=operation.value,
                default=operation.default,
            )
        except Exception as e:
            raise ExecutionError(index, operation, e) from e

        return OperationResultSchema(
            op=operation.op,
            namespace=operation.namespace,
            key=operation.key,
            result=result,
        )
