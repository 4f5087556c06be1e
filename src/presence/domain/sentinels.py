"""Absence sentinels and NaN detection.

Three process-wide singletons always denote absent data: ``None`` (the
missing value), ``NotImplemented`` and ``Ellipsis``.  Numeric types with a
NaN state report absence while they hold NaN.
"""

from __future__ import annotations

import cmath
import math
import numbers
from decimal import Decimal
from typing import Any

ABSENCE_SENTINELS: tuple[Any, ...] = (None, NotImplemented, Ellipsis)

SENTINEL_TYPES: frozenset[type] = frozenset(type(s) for s in ABSENCE_SENTINELS)


def is_sentinel(value: Any) -> bool:
    """Return True if *value* is one of the absence singletons (by identity)."""
    return any(value is s for s in ABSENCE_SENTINELS)


def is_nan(value: Any) -> bool:
    """Return True if *value* is a numeric NaN marker.

    ``bool``, ``int`` and ``Fraction`` have no NaN state and are skipped
    without conversion.
    """
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, numbers.Rational):
        return False
    if isinstance(value, numbers.Real):
        return math.isnan(value)
    if isinstance(value, numbers.Complex):
        return cmath.isnan(complex(value))
    return False
