"""Response Envelope — the single shape every endpoint returns.

Invariants:
    - Shape is always {status, success, message, data}
    - success == (status < 400)
    - Error envelopes (core/errors.py to_response) use the same four keys

Design Decisions:
    - Generic model so OpenAPI documents the concrete data type per route
    - message and data are keyword-only in ok(): call sites can never swap them
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Canonical response envelope."""
    status: int
    success: bool
    message: str
    data: DataT | None = None

    @classmethod
    def ok(
        cls, *, message: str, data: DataT | None = None, status: int = 200,
    ) -> "ApiResponse[DataT]":
        return cls(status=status, success=status < 400, message=message, data=data)
