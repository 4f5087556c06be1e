"""Existence-checking operators built on :func:`exists`.

Python has no syntax for these, so deferred operands are passed as
zero-argument callables and only called when their value is needed.

==========================  ==========================================
Operator                    Function
==========================  ==========================================
``a ?else b ?else c``       ``fallback(a, lambda: b, lambda: c)``
``a ?and b``                ``precondition(a, lambda: b)``
``obj?.name``               ``maybe_getattr(obj, "name")``
``obj?[key]``               ``maybe_getitem(obj, key)``
``obj?.a?[k]?.b``           ``maybe_chain(obj, Attr("a"), Item(k), Attr("b"))``
==========================  ==========================================

The left operand (``a``, ``obj``) is an ordinary argument, so it is
evaluated exactly once by the call itself.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from presence.domain.evaluator import exists
from presence.domain.thunks import require_thunks

T = TypeVar("T")
U = TypeVar("U")


def fallback(value: T, *alternatives: Callable[[], Any]) -> Any:
    """Return the first existing operand, evaluating alternatives lazily.

    ``fallback(a, f, g)`` returns *a* if it exists; otherwise ``f()`` if
    that exists; otherwise ``g()``, whatever it is.  Alternatives after
    the first existing result are never called.
    """
    require_thunks("fallback", alternatives)
    result: Any = value
    for alternative in alternatives:
        if exists(result):
            return result
        result = alternative()
    return result


def precondition(value: T, then: Callable[[], U]) -> T | U:
    """Return *value* if it is absent, else the result of ``then()``."""
    require_thunks("precondition", (then,))
    if not exists(value):
        return value
    return then()


def maybe_getattr(obj: Any, name: str) -> Any:
    """``obj?.name``: *obj* itself when absent, else ``getattr(obj, name)``."""
    if not exists(obj):
        return obj
    return getattr(obj, name)


def maybe_getitem(obj: Any, key: Any) -> Any:
    """``obj?[key]``: *obj* itself when absent, else ``obj[key]``."""
    if not exists(obj):
        return obj
    return obj[key]


@dataclass(frozen=True)
class Attr:
    """An attribute step for :func:`maybe_chain`."""

    name: str

    def apply(self, obj: Any) -> Any:
        return getattr(obj, self.name)


@dataclass(frozen=True)
class Item:
    """A subscript step for :func:`maybe_chain`."""

    key: Any

    def apply(self, obj: Any) -> Any:
        return obj[self.key]


def maybe_chain(obj: Any, *steps: Attr | Item) -> Any:
    """Apply existence-checked access steps left to right.

    Stops at the first absent intermediate value and returns it, so
    ``maybe_chain(None, Attr("a"), Item(0))`` is ``None`` and performs no
    lookups.
    """
    for step in steps:
        if not isinstance(step, (Attr, Item)):
            msg = f"maybe_chain() steps must be Attr or Item, got {type(step).__name__}"
            raise TypeError(msg)
    current = obj
    for step in steps:
        if not exists(current):
            return current
        current = step.apply(current)
    return current
