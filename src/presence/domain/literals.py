"""Parse command-line text into Python values.

Accepts Python literals (``0``, ``''``, ``[]``, ``None``, ``...``), the
names ``NotImplemented``, ``Ellipsis``, ``nan`` and ``inf``, and
``Decimal('...')``.  Anything that does not parse is kept as a string, so
``presence check hello`` checks the string ``"hello"``.
"""

from __future__ import annotations

import ast
import re
from decimal import Decimal, InvalidOperation
from typing import Any

_NAMED_VALUES: dict[str, Any] = {
    "None": None,
    "NotImplemented": NotImplemented,
    "Ellipsis": Ellipsis,
    "...": Ellipsis,
}

_FLOAT_NAMES = frozenset(
    {"nan", "-nan", "+nan", "inf", "-inf", "+inf", "infinity", "+infinity", "-infinity"}
)

_DECIMAL_RE = re.compile(r"""^Decimal\((?P<q>['"])(?P<body>[^'"]*)(?P=q)\)$""")


def parse_literal(text: str) -> Any:
    """Return the Python value denoted by *text*."""
    stripped = text.strip()
    if stripped in _NAMED_VALUES:
        return _NAMED_VALUES[stripped]
    if stripped.lower() in _FLOAT_NAMES:
        return float(stripped)

    match = _DECIMAL_RE.match(stripped)
    if match:
        try:
            return Decimal(match.group("body"))
        except InvalidOperation:
            return text

    try:
        return ast.literal_eval(stripped)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError):
        return text


def describe_value(value: Any) -> dict[str, str]:
    """Return a JSON-safe description of *value*."""
    return {"value": repr(value), "type": type(value).__name__}
