"""EvaluateService — existence verdicts for values given on the command line.

Each input string is parsed with :func:`parse_literal` and handed to the
domain layer.  Hook failures become ``EVALUATION_ERROR`` results instead
of tracebacks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from presence.domain.errors import EvaluationError
from presence.domain.evaluator import exists
from presence.domain.literals import describe_value, parse_literal
from presence.domain.operators import fallback
from presence.domain.registry import registered_types
from presence.services.result import ServiceResult

if TYPE_CHECKING:
    from presence.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def _qualname(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _evaluation_failure(op: str, exc: EvaluationError, text: str) -> ServiceResult:
    return ServiceResult.failure(
        op, "EVALUATION_ERROR", str(exc), input=text, type=exc.value_type.__name__
    )


class EvaluateService:
    """Evaluate existence for parsed literal values."""

    def __init__(self, plugins: PluginManager | None = None) -> None:
        self._plugins = plugins

    def check(self, texts: Sequence[str]) -> ServiceResult:
        """Report ``exists`` for each input."""
        results: list[dict[str, Any]] = []
        for text in texts:
            value = parse_literal(text)
            try:
                verdict = exists(value)
            except EvaluationError as exc:
                logger.debug("Existence check failed for %r", text, exc_info=True)
                return _evaluation_failure("check", exc, text)
            results.append({"input": text, **describe_value(value), "exists": verdict})

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "results": results,
                "count": len(results),
                "absent_count": sum(1 for r in results if not r["exists"]),
            },
        )

    def coalesce(self, texts: Sequence[str]) -> ServiceResult:
        """Return the first existing input, as ``a ?else b ?else c`` would.

        Inputs after the first existing one are never parsed; the
        ``evaluated`` count in the payload shows how far evaluation went.
        """
        if not texts:
            return ServiceResult.failure(
                "coalesce", "NO_OPERANDS", "coalesce needs at least one value"
            )

        evaluated = 0
        current = ""

        def operand(text: str) -> Callable[[], Any]:
            def thunk() -> Any:
                nonlocal evaluated, current
                evaluated += 1
                current = text
                return parse_literal(text)

            return thunk

        first, *rest = texts
        try:
            value = fallback(operand(first)(), *(operand(t) for t in rest))
            verdict = exists(value)
        except EvaluationError as exc:
            return _evaluation_failure("coalesce", exc, current)

        return ServiceResult(
            ok=True,
            op="coalesce",
            data={
                **describe_value(value),
                "exists": verdict,
                "index": evaluated - 1,
                "evaluated": evaluated,
            },
        )

    def describe_checks(self) -> ServiceResult:
        """List loaded plugins and every class with a registered check."""
        warnings: list[str] = []
        plugins: list[str] = []
        contributed: dict[str, list[str]] = {}
        if self._plugins is None:
            warnings.append("Plugin loading is disabled")
        else:
            plugins = self._plugins.list_plugin_names()
            contributed = {
                name: [_qualname(cls) for cls in types]
                for name, types in self._plugins.contributed_types().items()
            }

        types = sorted(_qualname(cls) for cls in registered_types())
        return ServiceResult(
            ok=True,
            op="hooks",
            data={
                "plugins": plugins,
                "contributed": contributed,
                "registered": types,
                "count": len(types),
            },
            warnings=warnings,
        )
