"""Deferred operands.

A thunk is a zero-argument callable standing in for an operand that is
only evaluated when its value is needed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def require_thunks(operator: str, thunks: Iterable[Any]) -> None:
    """Raise TypeError unless every deferred operand of *operator* is callable.

    Deferred operands follow the already-evaluated left operand, so they
    are numbered from 2 in the error message.
    """
    for position, thunk in enumerate(thunks, start=2):
        if not callable(thunk):
            msg = (
                f"{operator}() operand {position} must be a zero-argument callable, "
                f"got {type(thunk).__name__}"
            )
            raise TypeError(msg)
