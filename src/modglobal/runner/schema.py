# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m modglobal.runner``.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from modglobal.config import StoreConfig

JsonKey = str | int | float | bool | None


class OperationSchema(BaseModel):
    """Single store operation from the input script.

    Attributes:
        op: Operation name
        namespace: Namespace token
        key: Key within the namespace (ignored by namespace-wide ops)
        value: Value to store (``set`` only)
        default: Value returned by ``get`` when the key is absent
    """

    op: Literal["get", "set", "delete", "has", "list_keys", "clear_namespace"]
    namespace: JsonKey
    key: JsonKey = None
    value: Any = None
    default: Any = None


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        config: Store server settings
        operations: Operations to run, in order, against a fresh store
    """

    config: StoreConfig = Field(default_factory=StoreConfig)
    operations: list[OperationSchema] = Field(default_factory=list)


class OperationResultSchema(BaseModel):
    """Outcome of one operation.

    Attributes:
        op: Operation name
        namespace: Namespace token
        key: Key the operation addressed
        result: Value returned by the store
    """

    op: str
    namespace: JsonKey
    key: JsonKey = None
    result: Any = None


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema,
    even on errors.

    Attributes:
        success: Whether every operation completed
        results: Results of the operations that ran, in order
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    results: list[OperationResultSchema] = Field(default_factory=list)
    error: str = ""
    error_type: str = ""
