"""The existence predicate.

Resolution order for ``exists(value)``:

1. Absence sentinels (``None``, ``NotImplemented``, ``Ellipsis``) → False.
   No hook can change this, including one registered on ``object``.
2. A custom check: a hook registered for the value's type (nearest in the
   MRO, then abstract base classes), else the type's ``__exists__``
   method.  Its result is coerced to ``bool``.
3. NaN-valued numbers → False.
4. Everything else → True, regardless of truthiness.

Verdicts are never cached; mutable values are re-checked on every call.
"""

from __future__ import annotations

from typing import Any

from presence.domain.errors import EvaluationError
from presence.domain.registry import get_existence_check
from presence.domain.sentinels import is_nan, is_sentinel


def _custom_verdict(value: Any) -> bool | None:
    """Run the value's custom check, or return None if it has none."""
    cls = type(value)
    hook = get_existence_check(cls)
    if hook is None:
        method = getattr(cls, "__exists__", None)
        if method is None or not callable(method):
            return None
        hook = method

    try:
        return bool(hook(value))
    except Exception as exc:
        raise EvaluationError(cls, exc) from exc


def exists(value: Any) -> bool:
    """Return True if *value* represents present data."""
    if is_sentinel(value):
        return False
    verdict = _custom_verdict(value)
    if verdict is not None:
        return verdict
    return not is_nan(value)


def is_absent(value: Any) -> bool:
    """Return True if *value* represents absent data."""
    return not exists(value)
