"""Result envelope shared by the services and the CLI.

Every :class:`~presence.services.evaluate.EvaluateService` operation returns
a :class:`ServiceResult`; commands only decide how to render it.  A failed
evaluation (a raising existence hook, or a ``coalesce`` with no operands)
is reported through :attr:`ServiceResult.error` rather than raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable failure: a stable ``code`` plus human ``message``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when the operation failed; ``error`` is then set.
        op: Operation name (``"check"``, ``"coalesce"`` or ``"hooks"``).
        data: Verdicts or hook listings on success.
        warnings: Non-fatal notes, e.g. plugin loading being disabled.
        error: Failure details when ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result for *op*; keyword arguments become ``error.detail``."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
